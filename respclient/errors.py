"""
Client Error Taxonomy

Every failure the client can report is one of four kinds:

    TransportError    - the socket failed (refused, reset, closed, timed out)
    ProtocolError     - the reply framing could not be parsed
    AuthenticationError - the handshake could not authenticate
    ResponseError     - the server answered with a valid error reply

Server error replies are mapped onto ResponseError subclasses by
classify_error(), so callers branch on exception types instead of
comparing reply text.
"""

from typing import Dict, Type


class RespClientError(Exception):
    """Base class for all client errors."""


class TransportError(RespClientError):
    """The underlying socket failed."""


class ConnectionClosedError(TransportError):
    """The stream was closed, either by the peer or locally."""


class ProtocolError(RespClientError):
    """The server sent framing that does not follow the protocol."""


class UnexpectedReplyError(ProtocolError):
    """A well-formed reply did not have the shape a command requires."""


class AuthenticationError(RespClientError):
    """The connection could not be authenticated."""


class ResponseError(RespClientError):
    """
    An error reply reported by the server.

    Attributes:
        message: The full error line without the leading '-' marker
        prefix: The first word of the message (e.g. 'ERR', 'WRONGTYPE')
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.prefix = message.split(" ", 1)[0] if message else ""


class WrongTypeError(ResponseError):
    """The key holds a value of a type the command cannot operate on."""


class NoAuthError(ResponseError):
    """The server requires authentication before running commands."""


class WrongPassError(ResponseError):
    """The supplied credential was rejected."""


class AuthNotRequiredError(ResponseError):
    """AUTH was sent to a server that has no password configured."""


_PREFIX_ERRORS: Dict[str, Type[ResponseError]] = {
    "WRONGTYPE": WrongTypeError,
    "NOAUTH": NoAuthError,
    "WRONGPASS": WrongPassError,
}

# Server wordings for AUTH against an instance without a password,
# before and after the 6.0 ACL rework.
AUTH_NOT_REQUIRED_MESSAGES = (
    "client sent auth, but no password is set",
    "called without any password configured",
)


def classify_error(message: str) -> ResponseError:
    """
    Map a server error message onto the matching ResponseError subclass.

    Args:
        message: Error line as sent by the server, without the '-' marker

    Returns:
        A ResponseError instance (not raised)

    Examples:
        >>> type(classify_error("WRONGTYPE Operation against a key"))
        <class 'respclient.errors.WrongTypeError'>
        >>> type(classify_error("ERR unknown command 'FOO'"))
        <class 'respclient.errors.ResponseError'>
    """
    prefix = message.split(" ", 1)[0]
    if prefix in _PREFIX_ERRORS:
        return _PREFIX_ERRORS[prefix](message)

    lowered = message.lower()
    if prefix == "ERR" and any(text in lowered for text in AUTH_NOT_REQUIRED_MESSAGES):
        return AuthNotRequiredError(message)

    return ResponseError(message)
