import pytest

from civo_client import Client, Config
from civo_client.exceptions import TransportError


class FakeTransport:
    """
    in-memory Transport: serves canned payloads by (method, path)
    and records every call as (method, path, body)
    """

    def __init__(self):
        self.calls = []
        self.responses = {}

    def add(self, method: str, path: str, payload):
        self.responses[(method, path)] = payload

    async def _call(self, method, path, body=None):
        self.calls.append((method, path, body))
        try:
            payload = self.responses[(method, path)]
        except KeyError:
            raise TransportError(f'{method} {path} returned 404', status=404)
        if isinstance(payload, Exception):
            raise payload
        return payload

    async def get(self, path):
        return await self._call('GET', path)

    async def post(self, path, body):
        return await self._call('POST', path, body)

    async def put(self, path, body):
        return await self._call('PUT', path, body)

    async def delete(self, path):
        return await self._call('DELETE', path)


@pytest.fixture
def config():
    return Config(CIVO_API_KEY='test-key', CIVO_REGION='LON1', CIVO_API_URL='http://civo.test')


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(config, transport):
    return Client(config=config, transport=transport)
