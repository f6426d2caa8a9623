import logging

import pydantic
import pytest

from civo_client import Client, Config
from civo_client.logs import setup_logging
from civo_client.transport import HTTPTransport


class TestConfig:
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('CIVO_API_KEY', 'env-key')
        monkeypatch.setenv('CIVO_REGION', 'FRA1')
        monkeypatch.setenv('CIVO_API_URL', 'https://api.example.com/')
        config = Config()
        assert config.CIVO_API_KEY == 'env-key'
        assert config.CIVO_REGION == 'FRA1'
        assert config.CIVO_API_URL == 'https://api.example.com'

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv('CIVO_REGION', raising=False)
        monkeypatch.delenv('CIVO_API_URL', raising=False)
        monkeypatch.delenv('CIVO_TIMEOUT', raising=False)
        config = Config(CIVO_API_KEY='key')
        assert config.CIVO_REGION == 'LON1'
        assert config.CIVO_API_URL == 'https://api.civo.com'
        assert config.CIVO_TIMEOUT == 60

    def test_api_key_required(self, monkeypatch):
        monkeypatch.delenv('CIVO_API_KEY', raising=False)
        with pytest.raises(pydantic.ValidationError):
            Config()

    def test_read_only(self, config):
        with pytest.raises(pydantic.ValidationError):
            config.CIVO_REGION = 'NYC1'


class TestClient:
    def test_default_transport(self, config):
        client = Client(config=config)
        assert isinstance(client.transport, HTTPTransport)
        assert client.volumes.region == 'LON1'
        assert client.firewalls.transport is client.transport
        assert client.volumes.kubernetes is client.kubernetes

    async def test_context_manager_without_lifecycle(self, client, transport):
        transport.add('GET', '/v2/firewalls', [])
        async with client as c:
            assert await c.firewalls.list_firewalls() == []


@pytest.fixture
def restore_logging():
    names = ['civo_client', 'aiohttp', 'aiohttp.access', 'aiohttp.client']
    loggers = [logging.getLogger(name) for name in names]
    saved = [(logger, logger.level, list(logger.handlers)) for logger in loggers]
    yield
    for logger, level, handlers in saved:
        logger.setLevel(level)
        logger.handlers[:] = handlers


class TestLogging:
    def test_setup_logging(self, restore_logging):
        setup_logging('DEBUG')
        assert logging.getLogger('civo_client').level == logging.DEBUG
        assert logging.getLogger('civo_client.transport').isEnabledFor(logging.DEBUG)
        assert logging.getLogger('aiohttp').level == logging.INFO
