"""String commands."""

from typing import Optional

from ..errors import UnexpectedReplyError
from ..protocol.codec import Argument


class StringCommands:
    """Commands on string values."""

    def set(self, key: Argument, value: Argument) -> None:
        """
        Set key to hold value.

        Raises:
            UnexpectedReplyError: If the server does not answer 'OK'
        """
        reply = self.do("SET", key, value)
        if reply.is_null or reply.as_status() != "OK":
            raise UnexpectedReplyError(f"SET {key!r} was not applied: {reply.value!r}")

    def get(self, key: Argument) -> Optional[str]:
        """Get the value of key, or None when the key does not exist."""
        return self.do("GET", key).as_text(self.encoding)
