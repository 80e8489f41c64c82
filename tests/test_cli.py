"""
Tests for the Command Line Tool

Run with: python -m pytest tests/test_cli.py -v
"""

from respclient.cli import format_reply, main, parse_args
from respclient.protocol.reply import Reply


class TestFormatReply:
    """Test redis-cli style rendering."""

    def test_scalars(self):
        assert format_reply(Reply.status("OK")) == "OK"
        assert format_reply(Reply.integer(5)) == "(integer) 5"
        assert format_reply(Reply.bulk(b"hi")) == '"hi"'
        assert format_reply(Reply.null()) == "(nil)"
        assert format_reply(Reply.error("ERR boom")) == "(error) ERR boom"

    def test_empty_array(self):
        assert format_reply(Reply.array([])) == "(empty array)"

    def test_nested_array(self):
        reply = Reply.array([
            Reply.bulk(b"0"),
            Reply.array([Reply.bulk(b"a"), Reply.bulk(b"b")]),
        ])
        assert format_reply(reply) == '1) "0"\n2) 1) "a"\n   2) "b"'


class TestParseArgs:

    def test_command_and_arguments(self):
        args = parse_args(["--url", "redis://h:1", "SET", "k", "v"])
        assert args.url == "redis://h:1"
        assert args.command == ["SET", "k", "v"]


class TestMain:
    """Test end-to-end runs against the in-process server."""

    def test_runs_command(self, server, url_for, capsys):
        assert main(["--url", url_for(), "PING"]) == 0
        assert capsys.readouterr().out == "PONG\n"

    def test_server_error_exit_status(self, server, url_for, capsys):
        assert main(["--url", url_for(), "NOSUCHCOMMAND"]) == 1
        assert "unknown command" in capsys.readouterr().err

    def test_connection_failure_exit_status(self, server_port, capsys):
        assert main(["--url", f"redis://127.0.0.1:{server_port}", "PING"]) == 1
        assert "cannot connect" in capsys.readouterr().err

    def test_bad_url_exit_status(self, capsys):
        assert main(["--url", "http://nowhere", "PING"]) == 2
        assert "scheme" in capsys.readouterr().err
