"""scpi-parser — parse and dispatch SCPI-style instrument commands."""

from scpi_parser.config import CacheConfig
from scpi_parser.dispatcher import ScpiParser
from scpi_parser.errors import MissingHandlerError, ScpiError

__all__ = [
    "CacheConfig",
    "MissingHandlerError",
    "ScpiError",
    "ScpiParser",
]
