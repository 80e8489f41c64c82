"""
Connection Module

This module owns the single blocking socket used to talk to the store.

Lifecycle:
    UNAUTHENTICATED --(AUTH ok / auth not required / PING ok)--> READY
    UNAUTHENTICATED --(auth required and missing or rejected)--> FAILED
    READY --(close())--> CLOSED

A connection is single-shot: it never re-authenticates and never
reconnects. It is not safe for concurrent use; requests and replies on
one socket are strictly ordered, so each concurrent caller needs its
own Connection.
"""

import logging
import socket
from enum import Enum
from typing import Optional, Union

from ..commands import (
    HyperLogLogCommands,
    KeyCommands,
    ListCommands,
    SetCommands,
    StringCommands,
)
from ..config.settings import settings
from ..errors import (
    AuthenticationError,
    AuthNotRequiredError,
    ConnectionClosedError,
    NoAuthError,
    TransportError,
    UnexpectedReplyError,
    classify_error,
)
from ..protocol.codec import Argument, RespCodec
from ..protocol.reply import Reply
from .endpoint import Endpoint, parse_url

logger = logging.getLogger(__name__)


class ConnectionState(Enum):
    """Lifecycle states of a Connection."""
    UNAUTHENTICATED = "unauthenticated"
    READY = "ready"
    FAILED = "failed"
    CLOSED = "closed"


class Connection(
        KeyCommands,
        StringCommands,
        ListCommands,
        SetCommands,
        HyperLogLogCommands,
):
    """
    A single authenticated connection to the store.

    The transport is opened and the handshake completed inside the
    constructor, so a Connection that was returned is always READY.

    Usage:
        with Connection(parse_url("redis://:secret@localhost:6379")) as conn:
            conn.set("greeting", "hello")
            reply = conn.do("GET", "greeting")

    Attributes:
        endpoint: The Endpoint this connection was opened against
        codec: The RespCodec used for every exchange
        state: Current ConnectionState
    """

    def __init__(
            self,
            endpoint: Endpoint,
            codec: RespCodec = None,
            timeout: Optional[float] = None,
    ):
        """
        Open the transport and run the handshake.

        Args:
            endpoint: Where to connect and which credential to use
            codec: Codec instance (creates a new one if not provided)
            timeout: Socket timeout in seconds (default from settings;
                     None blocks indefinitely)

        Raises:
            TransportError: If the socket cannot be opened or fails mid-handshake
            AuthenticationError: If the store requires a credential that was
                                 not supplied or was rejected
            ResponseError: If selecting the database fails
        """
        self.endpoint = endpoint
        self.codec = codec if codec is not None else RespCodec()
        self.timeout = timeout if timeout is not None else settings.SOCKET_TIMEOUT
        self.state = ConnectionState.UNAUTHENTICATED

        self._sock: Optional[socket.socket] = None
        self._stream = None
        self._open()

        try:
            self._handshake()
        except BaseException:
            self.state = ConnectionState.FAILED
            self._close_transport()
            raise

        self.state = ConnectionState.READY

    @property
    def encoding(self) -> str:
        return self.codec.encoding

    @property
    def closed(self) -> bool:
        return self._sock is None

    def do(self, command: Argument, *args: Argument) -> Reply:
        """
        Send one command and wait for its reply.

        Args:
            command: Command name (any command the server understands)
            *args: Command arguments

        Returns:
            The decoded Reply; never an ERROR reply.

        Raises:
            ResponseError: If the server answered with an error reply
                           (a subclass when the error kind is known)
            TransportError: If the socket fails or was closed
            ProtocolError: If the reply framing is malformed
        """
        reply = self._execute(command, *args)
        if reply.is_error:
            raise classify_error(reply.value)
        return reply

    def ping(self) -> str:
        """Send PING and return the status text ('PONG')."""
        return self.do("PING").as_status()

    def close(self) -> None:
        """Close the transport. Further calls to do() raise ConnectionClosedError."""
        if self._sock is None:
            return
        self._close_transport()
        self.state = ConnectionState.CLOSED

    def _open(self) -> None:
        host, port = self.endpoint.address
        try:
            self._sock = socket.create_connection((host, port), timeout=self.timeout)
        except OSError as exc:
            self.state = ConnectionState.FAILED
            raise TransportError(f"cannot connect to {host}:{port}: {exc}") from exc

        self._stream = self._sock.makefile("rb", buffering=settings.READ_BUFFER_SIZE)
        logger.debug(f"Connected to {host}:{port}")

    def _handshake(self) -> None:
        credential = self.endpoint.credential

        if credential is not None:
            self._authenticate(credential)
        else:
            self._check_auth_not_required()

        if self.endpoint.db:
            logger.debug(f"Selecting database {self.endpoint.db}")
            self.do("SELECT", self.endpoint.db)

    def _authenticate(self, credential: str) -> None:
        logger.debug(f"Authenticating to {self.endpoint.host}:{self.endpoint.port}")
        reply = self._execute("AUTH", credential)

        if reply.is_error:
            error = classify_error(reply.value)
            if isinstance(error, AuthNotRequiredError):
                logger.debug("Server has no password configured; continuing without auth")
                return
            raise AuthenticationError(f"authentication failed: {error.message}") from error

        if reply.as_status() != "OK":
            raise UnexpectedReplyError(f"unexpected AUTH reply: {reply.value!r}")

    def _check_auth_not_required(self) -> None:
        try:
            self.do("PING")
        except NoAuthError as exc:
            raise AuthenticationError(
                "server requires authentication but no credential was supplied"
            ) from exc

    def _execute(self, command: Argument, *args: Argument) -> Reply:
        if self._sock is None:
            raise ConnectionClosedError("connection is closed")

        payload = self.codec.encode(command, *args)
        try:
            self._sock.sendall(payload)
            return self.codec.decode(self._stream)
        except OSError as exc:
            raise TransportError(f"transport failure: {exc}") from exc

    def _close_transport(self) -> None:
        stream, sock = self._stream, self._sock
        self._stream = self._sock = None
        try:
            if stream is not None:
                stream.close()
        finally:
            if sock is not None:
                sock.close()
        logger.debug(f"Closed connection to {self.endpoint.host}:{self.endpoint.port}")

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (f"Connection(host={self.endpoint.host!r}, "
                f"port={self.endpoint.port}, state={self.state.value})")


def new_connection(target: Union[str, Endpoint], **kwargs) -> Connection:
    """
    Open a ready-to-use connection.

    Args:
        target: A redis:// URL or an Endpoint
        **kwargs: Passed to Connection (codec, timeout)

    Returns:
        A READY Connection.

    Example:
        conn = new_connection("redis://:secret@localhost:6379/0")
    """
    endpoint = parse_url(target) if isinstance(target, str) else target
    return Connection(endpoint, **kwargs)
