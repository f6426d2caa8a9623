from .client import Client
from .config import Config
from .exceptions import (
    CivoError,
    DecodeError,
    MultipleMatchesError,
    NotFoundError,
    RequestError,
    TransportError,
    ValidationError,
    ZeroMatchesError,
)
from .version import __version__


__all__ = [
    'CivoError',
    'Client',
    'Config',
    'DecodeError',
    'MultipleMatchesError',
    'NotFoundError',
    'RequestError',
    'TransportError',
    'ValidationError',
    'ZeroMatchesError',
    '__version__',
]
