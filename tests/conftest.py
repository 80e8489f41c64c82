"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import io
import socket
import pytest
from contextlib import closing
from typing import Callable, Generator

from respclient.network.connection import Connection, new_connection
from respclient.protocol.codec import RespCodec
from tests.fake_server import FakeRedisServer, ServerThread


def find_free_port() -> int:
    """Find an available port for testing."""
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind(('', 0))
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        return s.getsockname()[1]


# ============================================================================
# Codec Fixtures
# ============================================================================

@pytest.fixture
def codec() -> RespCodec:
    """Create a RespCodec with the default encoding."""
    return RespCodec()


@pytest.fixture
def stream() -> Callable[[bytes], io.BufferedReader]:
    """
    Factory turning raw reply bytes into a buffered binary stream.

    Usage:
        def test_something(codec, stream):
            reply = codec.decode(stream(b"+OK\\r\\n"))
    """
    def factory(data: bytes) -> io.BufferedReader:
        return io.BufferedReader(io.BytesIO(data))
    return factory


# ============================================================================
# Server Fixtures
# ============================================================================

@pytest.fixture
def server_port() -> int:
    """Get a free port for server testing."""
    return find_free_port()


@pytest.fixture
def server(server_port: int) -> Generator[FakeRedisServer, None, None]:
    """
    Start an auth-less fake server for the duration of a test.

    The server runs on its own event loop in a background thread,
    so tests drive the blocking client directly.
    """
    with ServerThread(FakeRedisServer(port=server_port)) as srv:
        yield srv


@pytest.fixture
def protected_server(server_port: int) -> Generator[FakeRedisServer, None, None]:
    """Start a fake server that requires the password 'testpass'."""
    with ServerThread(FakeRedisServer(port=server_port, requirepass="testpass")) as srv:
        yield srv


@pytest.fixture
def url_for(server_port: int) -> Callable[[str], str]:
    """
    Factory building connection URLs for the test server.

    Usage:
        url_for()              -> 'redis://127.0.0.1:<port>'
        url_for(":secret@")    -> 'redis://:secret@127.0.0.1:<port>'
        url_for(path="/2")     -> 'redis://127.0.0.1:<port>/2'
    """
    def factory(userinfo: str = "", path: str = "") -> str:
        return f"redis://{userinfo}127.0.0.1:{server_port}{path}"
    return factory


# ============================================================================
# Client Fixtures
# ============================================================================

@pytest.fixture
def conn(server: FakeRedisServer, url_for) -> Generator[Connection, None, None]:
    """
    A ready connection to the auth-less fake server.

    Uses an arbitrary password, which must fall back to no auth.
    """
    connection = new_connection(url_for(":foopass@"), timeout=5)
    yield connection
    connection.close()


@pytest.fixture
def socket_pair(monkeypatch) -> Generator[socket.socket, None, None]:
    """
    Route the next Connection through a socketpair.

    Yields the server end; whatever a test writes to it becomes the
    reply stream the Connection reads, so malformed framing can be
    scripted byte for byte.
    """
    client_end, server_end = socket.socketpair()
    client_end.settimeout(5)
    monkeypatch.setattr(
        "respclient.network.connection.socket.create_connection",
        lambda address, timeout=None: client_end,
    )
    yield server_end
    server_end.close()
    client_end.close()


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests that need a real server (set RESP_CLIENT_TEST_URL)"
    )
