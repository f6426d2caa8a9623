from .exceptions import ValidationError
from .models import (
    Firewall,
    FirewallConfig,
    FirewallResult,
    FirewallRule,
    FirewallRuleConfig,
    SimpleResponse,
    decode,
)
from .transport import Transport, api_call
from .utils import find_one


class FirewallsAPI:
    def __init__(self, transport: Transport, region: str):
        self.transport = transport
        self.region = region

    @api_call('firewall', 'list')
    async def list_firewalls(self) -> list[Firewall]:
        resp = await self.transport.get('/v2/firewalls')
        return decode(list[Firewall], resp)

    async def find_firewall(self, search: str) -> Firewall:
        return find_one(await self.list_firewalls(), search, 'firewall')

    @api_call('firewall', 'create')
    async def new_firewall(self, config: FirewallConfig) -> FirewallResult:
        resp = await self.transport.post('/v2/firewalls/', config.for_region(self.region).to_body())
        return decode(FirewallResult, resp)

    @api_call('firewall', 'delete')
    async def delete_firewall(self, id: str) -> SimpleResponse:
        resp = await self.transport.delete(f'/v2/firewalls/{id}')
        return decode(SimpleResponse, resp)

    @api_call('firewall rule', 'create')
    async def new_firewall_rule(self, config: FirewallRuleConfig) -> FirewallRule:
        if not config.firewall_id:
            raise ValidationError('The firewall ID is empty')

        resp = await self.transport.post(
            f'/v2/firewalls/{config.firewall_id}/rules', config.for_region(self.region).to_body()
        )
        return decode(FirewallRule, resp)

    @api_call('firewall rule', 'list')
    async def list_firewall_rules(self, firewall_id: str) -> list[FirewallRule]:
        resp = await self.transport.get(f'/v2/firewalls/{firewall_id}/rules')
        return decode(list[FirewallRule], resp)

    @api_call('firewall rule', 'delete')
    async def delete_firewall_rule(self, firewall_id: str, rule_id: str) -> SimpleResponse:
        resp = await self.transport.delete(f'/v2/firewalls/{firewall_id}/rules/{rule_id}')
        return decode(SimpleResponse, resp)
