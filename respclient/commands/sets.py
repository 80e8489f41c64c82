"""
Set commands.

SSCAN is exposed as a pure function of (key, cursor, pattern, count):
the caller carries the cursor between calls. A returned cursor of 0
means the scan is complete. Members may be reported more than once if
the set changes during the scan; they are passed through as received.
"""

from typing import Iterator, List, Tuple

from ..errors import UnexpectedReplyError
from ..protocol.codec import Argument


class SetCommands:
    """Commands on unordered sets of members."""

    def sadd(self, key: Argument, member: Argument, *members: Argument) -> int:
        """Add members to the set. Returns the number actually added."""
        return self.do("SADD", key, member, *members).as_int()

    def smembers(self, key: Argument) -> List[str]:
        """Return all members of the set, in no particular order."""
        return self.do("SMEMBERS", key).as_text_list(self.encoding)

    def smove(self, src: Argument, dst: Argument, member: Argument) -> bool:
        """Move member from src to dst. Returns True if it was moved."""
        return self.do("SMOVE", src, dst, member).as_int() == 1

    def sscan(self, key: Argument, cursor: int = 0, pattern: str = "", count: int = 0) -> Tuple[int, List[str]]:
        """
        Run one SSCAN step.

        Args:
            key: The set to scan
            cursor: 0 to start, otherwise the cursor from the previous call
            pattern: Glob filter; '' sends no MATCH clause at all
            count: Page size hint; 0 or less sends no COUNT clause

        Returns:
            Tuple of (next cursor, members in this page)

        Raises:
            ValueError: If cursor is negative
            UnexpectedReplyError: If the reply is not [cursor, [members...]]
        """
        if cursor < 0:
            raise ValueError(f"cursor must be non-negative, got {cursor}")

        args = [key, cursor]
        if pattern:
            args += ["MATCH", pattern]
        if count > 0:
            args += ["COUNT", count]

        items = self.do("SSCAN", *args).as_array()
        if len(items) != 2:
            raise UnexpectedReplyError(f"SSCAN reply has {len(items)} items, expected 2")

        raw_cursor = items[0].as_bytes()
        try:
            next_cursor = int(raw_cursor)
        except (TypeError, ValueError):
            raise UnexpectedReplyError(f"invalid SSCAN cursor: {raw_cursor!r}") from None

        return next_cursor, items[1].as_text_list(self.encoding)

    def sscan_iter(self, key: Argument, pattern: str = "", count: int = 0) -> Iterator[str]:
        """Yield every member reported by a full SSCAN, starting at cursor 0."""
        cursor = 0
        while True:
            cursor, members = self.sscan(key, cursor, pattern, count)
            yield from members
            if cursor == 0:
                break
