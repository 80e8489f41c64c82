#!/usr/bin/env python3
"""
Interactive Shell for RESP-Client

A small read-eval-print loop for manually exercising a server through
a single Connection.

Usage:
    python scripts/client.py                                  # redis://localhost:6379
    python scripts/client.py --url redis://:secret@host:6380  # Custom endpoint

Commands:
    <COMMAND> [ARGS...]   - Sent to the server as-is (quotes group arguments)
    help                  - Show this help
    reconnect             - Open a fresh connection
    status                - Show connection status
    exit                  - Exit the shell
"""

import argparse
import shlex
import sys

# Enable command history with arrow keys (works on Unix systems)
try:
    import readline  # noqa: F401
except ImportError:
    pass  # readline not available on Windows by default

from respclient.cli import format_reply, setup_logging
from respclient.config.settings import settings
from respclient.errors import ResponseError, RespClientError
from respclient.network.connection import Connection, new_connection


def print_help():
    """Print help message."""
    print("""
Server Commands:
----------------
  Any command the server understands, e.g.
    PING
    SET greeting "hello world"
    LRANGE mylist 0 -1
    SSCAN myset 0 MATCH a* COUNT 10

Shell Commands:
---------------
  help                      Show this help message
  exit                      Exit the shell
  reconnect                 Reconnect to the server
  status                    Show connection status
""")


def connect(url: str, timeout: float = None):
    """Open a connection, reporting failures instead of raising."""
    try:
        return new_connection(url, timeout=timeout)
    except (RespClientError, ValueError) as e:
        print(f"Connection error: {e}")
        return None


def main():
    parser = argparse.ArgumentParser(
        description="Interactive shell for RESP-Client"
    )
    parser.add_argument(
        "--url",
        type=str,
        default=settings.URL,
        help=f"Connection URL (default: {settings.URL})"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.SOCKET_TIMEOUT,
        help="Socket timeout in seconds (default: none)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()
    setup_logging(debug=args.debug)

    print("RESP-Client Shell")
    print("=================")
    print(f"Connecting to {args.url}...")

    conn: Connection = connect(args.url, args.timeout)
    if conn is None:
        print("Failed to connect. Is the server running?")
        sys.exit(1)

    print("Connected! Type 'help' for commands.\n")

    try:
        while True:
            try:
                line = input(">>> ").strip()

                if not line:
                    continue

                lower_cmd = line.lower()

                if lower_cmd == "help":
                    print_help()
                    continue

                if lower_cmd in ("exit", "quit"):
                    print("Goodbye!")
                    break

                if lower_cmd == "reconnect":
                    if conn is not None:
                        conn.close()
                    conn = connect(args.url, args.timeout)
                    print("Reconnected!" if conn is not None else "Reconnection failed.")
                    continue

                if lower_cmd == "status":
                    state = conn.state.value if conn is not None else "disconnected"
                    print(f"Status: {state}")
                    print(f"Server: {args.url}")
                    continue

                if conn is None or conn.closed:
                    print("Not connected. Type 'reconnect' to try again.")
                    continue

                try:
                    parts = shlex.split(line)
                except ValueError as e:
                    print(f"Parse error: {e}")
                    continue

                try:
                    print(format_reply(conn.do(*parts)))
                except ResponseError as e:
                    print(f"(error) {e}")
                except RespClientError as e:
                    print(f"Connection error: {e}")
                    print("Type 'reconnect' to open a new connection.")
                    conn.close()

            except EOFError:
                print("\nGoodbye!")
                break

    except KeyboardInterrupt:
        print("\n\nInterrupted. Goodbye!")
    finally:
        if conn is not None:
            conn.close()


if __name__ == "__main__":
    main()
