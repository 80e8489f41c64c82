"""
HyperLogLog commands.

The estimates are computed by the store; values are returned exactly as
the server reports them.
"""

from ..errors import UnexpectedReplyError
from ..protocol.codec import Argument


class HyperLogLogCommands:
    """PFADD, PFCOUNT and PFMERGE."""

    def pfadd(self, key: Argument, *elements: Argument) -> int:
        """
        Add elements to the HyperLogLog at key.

        Returns:
            1 if at least one internal register was altered, 0 otherwise.
        """
        return self.do("PFADD", key, *elements).as_int()

    def pfcount(self, key: Argument, *keys: Argument) -> int:
        """Return the approximate cardinality of the union of the given HLLs."""
        return self.do("PFCOUNT", key, *keys).as_int()

    def pfmerge(self, dest: Argument, *sources: Argument) -> bool:
        """Merge sources into dest. Returns True once the server answers 'OK'."""
        status = self.do("PFMERGE", dest, *sources).as_status()
        if status != "OK":
            raise UnexpectedReplyError(f"unexpected PFMERGE reply: {status!r}")
        return True
