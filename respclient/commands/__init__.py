"""
Typed command layer.

Each mixin projects Connection.do() replies onto plain Python types for
one command family. The mixins hold no state of their own.
"""

from .hyperloglog import HyperLogLogCommands
from .keys import KeyCommands
from .lists import ListCommands
from .sets import SetCommands
from .strings import StringCommands

__all__ = [
    "HyperLogLogCommands",
    "KeyCommands",
    "ListCommands",
    "SetCommands",
    "StringCommands",
]
