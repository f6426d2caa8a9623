import logging
from typing import Optional

from .config import Config
from .firewalls import FirewallsAPI
from .kubernetes import KubernetesAPI
from .transport import HTTPTransport, Transport
from .volumes import VolumesAPI


log = logging.getLogger(__name__)


class Client:
    """
    entry point: wires config, transport and the resource APIs

        async with Client() as client:
            volumes = await client.volumes.list_dangling_volumes()

    config is read from CIVO_* env variables when not given,
    any object implementing Transport can replace the HTTP one
    """

    def __init__(self, config: Optional[Config] = None, transport: Optional[Transport] = None):
        self.config = config or Config()
        self.transport = transport or HTTPTransport(self.config)
        region = self.config.CIVO_REGION
        self.kubernetes = KubernetesAPI(self.transport)
        self.volumes = VolumesAPI(self.transport, region, self.kubernetes)
        self.firewalls = FirewallsAPI(self.transport, region)

    async def startup(self):
        log.debug(f'startup {self.config.CIVO_API_URL} region={self.config.CIVO_REGION}')
        startup = getattr(self.transport, 'startup', None)
        if startup:
            await startup()

    async def shutdown(self):
        shutdown = getattr(self.transport, 'shutdown', None)
        if shutdown:
            await shutdown()

    async def __aenter__(self) -> 'Client':
        await self.startup()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.shutdown()
