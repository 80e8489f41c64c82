"""Protocol module for RESP-Client."""

from .codec import RespCodec
from .reply import Reply, ReplyKind

__all__ = [
    "Reply",
    "ReplyKind",
    "RespCodec",
]
