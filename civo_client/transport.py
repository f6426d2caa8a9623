import asyncio
import json
import logging
import time
from functools import wraps
from typing import Any, Awaitable, Callable, Optional, ParamSpec, Protocol, TypeVar

import aiohttp
from prometheus_client import Counter, Histogram

from .config import Config
from .exceptions import DecodeError, TransportError
from .version import __version__


log = logging.getLogger(__name__)
P = ParamSpec('P')
R = TypeVar('R')

REQUESTS = Counter('civo_client_requests', 'Civo API requests', ['method', 'status'])
LATENCY = Histogram('civo_client_request_seconds', 'Civo API request latency', ['method'])


class Transport(Protocol):
    async def get(self, path: str) -> Any:
        ...

    async def post(self, path: str, body: Any) -> Any:
        ...

    async def put(self, path: str, body: Any) -> Any:
        ...

    async def delete(self, path: str) -> Any:
        ...


def api_call(kind: str, operation: str):
    """
    prefix transport errors with the resource kind and operation,
    decode errors pass through as is
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await func(*args, **kwargs)
            except TransportError as e:
                raise e.with_context(f'{kind} {operation}') from e

        return wrapper

    return decorator


class HTTPTransport:
    # region is sent as a query parameter on reads and deletes only
    region_methods = {'GET', 'DELETE'}

    def __init__(self, config: Config):
        self.config = config
        self.session: Optional[aiohttp.ClientSession] = None

    async def startup(self):
        log.debug(f'startup... {self.config.CIVO_API_URL}')
        self.session = aiohttp.ClientSession(
            headers={
                'Authorization': f'bearer {self.config.CIVO_API_KEY}',
                'Accept': 'application/json',
                'User-Agent': f'civo-client/{__version__}',
            },
            timeout=aiohttp.ClientTimeout(total=self.config.CIVO_TIMEOUT),
        )

    async def shutdown(self):
        log.debug('shutting down...')
        if self.session:
            await self.session.close()
            self.session = None

    async def get(self, path: str) -> Any:
        return await self.request('GET', path)

    async def post(self, path: str, body: Any) -> Any:
        return await self.request('POST', path, body)

    async def put(self, path: str, body: Any) -> Any:
        return await self.request('PUT', path, body)

    async def delete(self, path: str) -> Any:
        return await self.request('DELETE', path)

    async def request(self, method: str, path: str, body: Any = None) -> Any:
        if self.session is None:
            raise RuntimeError(f'{self} is not started, call startup() first')

        params = None
        if method in self.region_methods and self.config.CIVO_REGION:
            params = {'region': self.config.CIVO_REGION}

        url = f'{self.config.CIVO_API_URL}{path}'
        status = 'error'
        started = time.monotonic()
        try:
            async with self.session.request(method, url, params=params, json=body) as resp:
                status = str(resp.status)
                text = await resp.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f'{method} {path} failed: {e!r}') from e
        finally:
            REQUESTS.labels(method=method, status=status).inc()
            LATENCY.labels(method=method).observe(time.monotonic() - started)

        log.debug(f'{method} {path} -> {status}')
        if resp.status >= 400:
            raise self.error_from_response(method, path, resp.status, text)

        try:
            return json.loads(text)
        except ValueError as e:
            raise DecodeError(f'{method} {path} returned a non-JSON body: {e}') from e

    @staticmethod
    def error_from_response(method: str, path: str, status: int, text: str) -> TransportError:
        try:
            payload = json.loads(text)
        except ValueError:
            payload = None

        code = reason = ''
        if isinstance(payload, dict):
            # eg. {"code": "database_volume_not_found", "reason": "..."}
            code = str(payload.get('code') or '')
            reason = str(payload.get('reason') or '')
        return TransportError(
            f'{method} {path} returned {status}: {reason or code or text}',
            status=status,
            code=code,
            reason=reason,
        )
