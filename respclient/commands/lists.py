"""List commands."""

from typing import List, Optional

from ..errors import UnexpectedReplyError
from ..protocol.codec import Argument


class ListCommands:
    """Commands on lists, addressed from the head."""

    def lpush(self, key: Argument, value: Argument, *values: Argument) -> int:
        """Prepend one or more values to the list. Returns the new length."""
        return self.do("LPUSH", key, value, *values).as_int()

    def lpop(self, key: Argument) -> Optional[str]:
        """
        Remove and return the first element of the list.

        Returns:
            The element, or None when the list is empty or missing.
            An empty-string element is returned as ''.
        """
        return self.do("LPOP", key).as_text(self.encoding)

    def llen(self, key: Argument) -> int:
        """Return the length of the list (0 for a missing key)."""
        return self.do("LLEN", key).as_int()

    def ltrim(self, key: Argument, start: int, stop: int) -> None:
        """
        Trim the list to the inclusive range [start, stop].

        Negative indices count from the end (-1 is the last element).
        """
        status = self.do("LTRIM", key, int(start), int(stop)).as_status()
        if status != "OK":
            raise UnexpectedReplyError(f"unexpected LTRIM reply: {status!r}")

    def lrange(self, key: Argument, start: int, stop: int) -> List[str]:
        """
        Return the elements in the inclusive range [start, stop], in list order.

        A missing key or an out-of-range window gives an empty list.
        """
        return self.do("LRANGE", key, int(start), int(stop)).as_text_list(self.encoding)
