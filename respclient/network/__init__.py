"""Network module for RESP-Client."""

from .connection import Connection, ConnectionState, new_connection
from .endpoint import Endpoint, parse_url

__all__ = [
    "Connection",
    "ConnectionState",
    "Endpoint",
    "new_connection",
    "parse_url",
]
