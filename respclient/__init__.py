"""
RESP-Client: Minimal Key-Value Store Client

A small, synchronous client for the REdis Serialization Protocol,
talking to the store over a single blocking TCP socket.
"""

from .errors import (
    AuthenticationError,
    ProtocolError,
    RespClientError,
    ResponseError,
    TransportError,
)
from .network.connection import Connection, ConnectionState, new_connection
from .network.endpoint import Endpoint, parse_url
from .protocol.reply import Reply, ReplyKind

__version__ = "1.0.0"

__all__ = [
    "AuthenticationError",
    "Connection",
    "ConnectionState",
    "Endpoint",
    "ProtocolError",
    "Reply",
    "ReplyKind",
    "RespClientError",
    "ResponseError",
    "TransportError",
    "new_connection",
    "parse_url",
]
