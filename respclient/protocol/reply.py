"""
Protocol Reply Definitions

This module defines the closed set of reply shapes a server can send.
A Reply is produced fresh for every exchange and never mutated.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple, Union

from ..errors import UnexpectedReplyError

ReplyValue = Union[str, int, bytes, Tuple["Reply", ...], None]


class ReplyKind(Enum):
    """Enumeration of reply shapes."""
    STATUS = auto()
    ERROR = auto()
    INTEGER = auto()
    BULK = auto()
    NULL = auto()
    ARRAY = auto()


@dataclass(frozen=True)
class Reply:
    """
    A decoded protocol reply.

    Attributes:
        kind: Which shape the reply has
        value: str for STATUS and ERROR, int for INTEGER, bytes for BULK,
               a tuple of Reply for ARRAY and None for NULL
    """
    kind: ReplyKind
    value: ReplyValue = None

    @classmethod
    def status(cls, text: str) -> "Reply":
        """Create a status reply (e.g. 'OK')."""
        return cls(kind=ReplyKind.STATUS, value=text)

    @classmethod
    def error(cls, message: str) -> "Reply":
        """Create an error reply."""
        return cls(kind=ReplyKind.ERROR, value=message)

    @classmethod
    def integer(cls, number: int) -> "Reply":
        """Create an integer reply."""
        return cls(kind=ReplyKind.INTEGER, value=number)

    @classmethod
    def bulk(cls, data: bytes) -> "Reply":
        """Create a bulk string reply."""
        return cls(kind=ReplyKind.BULK, value=bytes(data))

    @classmethod
    def null(cls) -> "Reply":
        """Create a null reply (null bulk string or null array)."""
        return cls(kind=ReplyKind.NULL)

    @classmethod
    def array(cls, items: Sequence["Reply"]) -> "Reply":
        """Create an array reply."""
        return cls(kind=ReplyKind.ARRAY, value=tuple(items))

    @property
    def is_error(self) -> bool:
        return self.kind is ReplyKind.ERROR

    @property
    def is_null(self) -> bool:
        return self.kind is ReplyKind.NULL

    def _require(self, *kinds: ReplyKind) -> None:
        if self.kind not in kinds:
            expected = " or ".join(kind.name.lower() for kind in kinds)
            raise UnexpectedReplyError(
                f"expected {expected} reply, got {self.kind.name.lower()}: {self.value!r}"
            )

    @staticmethod
    def _decode(data: bytes, encoding: str) -> str:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as exc:
            raise UnexpectedReplyError(
                f"bulk payload is not valid {encoding}: {data!r}; use do() for binary values"
            ) from exc

    def as_int(self) -> int:
        """Return the value of an INTEGER reply."""
        self._require(ReplyKind.INTEGER)
        return self.value

    def as_status(self) -> str:
        """Return the text of a STATUS reply."""
        self._require(ReplyKind.STATUS)
        return self.value

    def as_bytes(self) -> Optional[bytes]:
        """Return the payload of a BULK reply, or None for NULL."""
        self._require(ReplyKind.BULK, ReplyKind.NULL)
        return self.value

    def as_text(self, encoding: str = "utf-8") -> Optional[str]:
        """
        Decode a BULK reply to text.

        Returns None for a NULL reply, which is distinct from the
        empty string returned for an empty bulk payload.

        Raises:
            UnexpectedReplyError: If the payload is not valid in encoding
        """
        data = self.as_bytes()
        return None if data is None else self._decode(data, encoding)

    def as_array(self) -> Tuple["Reply", ...]:
        """Return the items of an ARRAY reply (a NULL array is empty)."""
        self._require(ReplyKind.ARRAY, ReplyKind.NULL)
        return self.value or ()

    def as_text_list(self, encoding: str = "utf-8") -> List[str]:
        """Decode an ARRAY of BULK replies to a list of strings."""
        items = []
        for item in self.as_array():
            item._require(ReplyKind.BULK)
            items.append(self._decode(item.value, encoding))
        return items
