"""Key space commands."""

from ..protocol.codec import Argument


class KeyCommands:
    """Commands that act on keys of any type."""

    def delete(self, key: Argument, *keys: Argument) -> int:
        """Delete one or more keys. Returns the number of keys removed."""
        return self.do("DEL", key, *keys).as_int()
