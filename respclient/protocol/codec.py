"""
Protocol Codec Module

This module handles encoding of commands into request framing and
decoding of reply framing into Reply objects.

Request format (array of bulk strings):
    *<argc>\r\n
    $<len>\r\n<arg bytes>\r\n   (repeated argc times)

Reply format (one leading marker byte):
    +<status>\r\n
    -<error message>\r\n
    :<integer>\r\n
    $<len>\r\n<payload>\r\n     ($-1\r\n is a null bulk string)
    *<count>\r\n<replies...>    (*-1\r\n is a null array)
"""

from typing import BinaryIO, List, Union

from ..config.settings import settings
from ..errors import ConnectionClosedError, ProtocolError
from .reply import Reply

CRLF = b"\r\n"

# Largest bulk payload a compliant server may send (proto-max-bulk-len).
MAX_BULK_LENGTH = 512 * 1024 * 1024

Argument = Union[bytes, bytearray, memoryview, str, int, float]

STATUS = b"+"
ERROR = b"-"
INTEGER = b":"
BULK = b"$"
ARRAY = b"*"


class RespCodec:
    """
    Encoder and decoder for the REdis Serialization Protocol.

    The codec holds no per-connection state; one instance may be
    shared by any number of connections.

    Attributes:
        encoding: Text encoding used for str arguments
    """

    def __init__(self, encoding: str = None):
        """
        Initialize the codec.

        Args:
            encoding: Encoding for str arguments (default from settings)
        """
        self.encoding = encoding if encoding is not None else settings.ENCODING

    def encode(self, command: Argument, *args: Argument) -> bytes:
        """
        Serialize a command and its arguments into request framing.

        Args:
            command: Command name (e.g. 'SET')
            *args: Arguments; bytes-like values are sent untouched

        Returns:
            The complete request as bytes.

        Raises:
            ValueError: If the command name is empty
            TypeError: If an argument has an unsupported type

        Examples:
            >>> RespCodec().encode("SET", "key", b"value")
            b'*3\\r\\n$3\\r\\nSET\\r\\n$3\\r\\nkey\\r\\n$5\\r\\nvalue\\r\\n'
        """
        name = self.to_bytes(command)
        if not name:
            raise ValueError("command name must not be empty")

        parts = [name] + [self.to_bytes(arg) for arg in args]
        out: List[bytes] = [b"*%d\r\n" % len(parts)]
        for part in parts:
            out.append(b"$%d\r\n" % len(part))
            out.append(part)
            out.append(CRLF)
        return b"".join(out)

    def to_bytes(self, value: Argument) -> bytes:
        """Convert a single argument to its wire bytes."""
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        if isinstance(value, str):
            return value.encode(self.encoding)
        # bool is an int subclass but has no unambiguous wire form
        if isinstance(value, bool):
            raise TypeError("bool arguments are not supported; pass 0/1 or a string")
        if isinstance(value, (int, float)):
            return repr(value).encode("ascii")
        raise TypeError(f"unsupported argument type: {type(value).__name__}")

    def decode(self, stream: BinaryIO) -> Reply:
        """
        Read exactly one reply from a buffered binary stream.

        Blocks until the reply is complete. Nested arrays are decoded
        recursively.

        Args:
            stream: Object with read(n) and readline() (e.g. socket.makefile('rb'))

        Returns:
            The decoded Reply.

        Raises:
            ConnectionClosedError: If the stream ends before a reply starts
            ProtocolError: On an unknown marker, a truncated reply or a
                           length mismatch
        """
        return self._decode(stream, nested=False)

    def _decode(self, stream: BinaryIO, nested: bool) -> Reply:
        marker = stream.read(1)
        if not marker:
            if nested:
                raise ProtocolError("truncated array reply")
            raise ConnectionClosedError("connection closed by server")

        line = self._read_line(stream)

        if marker == STATUS:
            return Reply.status(line.decode(self.encoding, errors="replace"))

        if marker == ERROR:
            return Reply.error(line.decode(self.encoding, errors="replace"))

        if marker == INTEGER:
            return Reply.integer(self._parse_int(line, "integer"))

        if marker == BULK:
            length = self._parse_int(line, "bulk length")
            if length == -1:
                return Reply.null()
            if length < -1 or length > MAX_BULK_LENGTH:
                raise ProtocolError(f"invalid bulk length: {length}")
            return Reply.bulk(self._read_payload(stream, length))

        if marker == ARRAY:
            count = self._parse_int(line, "array length")
            if count == -1:
                return Reply.null()
            if count < -1:
                raise ProtocolError(f"invalid array length: {count}")
            return Reply.array([self._decode(stream, nested=True) for _ in range(count)])

        raise ProtocolError(f"unknown reply marker: {marker!r}")

    def _read_line(self, stream: BinaryIO) -> bytes:
        line = stream.readline()
        if not line.endswith(CRLF):
            raise ProtocolError(f"truncated reply line: {line!r}")
        return line[:-2]

    def _read_payload(self, stream: BinaryIO, length: int) -> bytes:
        data = stream.read(length + 2)
        if len(data) < length + 2:
            raise ProtocolError(f"truncated bulk payload: expected {length} bytes")
        if data[-2:] != CRLF:
            raise ProtocolError("bulk payload does not match its declared length")
        return data[:-2]

    @staticmethod
    def _parse_int(line: bytes, what: str) -> int:
        try:
            return int(line)
        except ValueError:
            raise ProtocolError(f"invalid {what}: {line!r}") from None
