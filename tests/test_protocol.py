import pytest

from miniredis.protocol import (
    CommandResult,
    LineBuffer,
    bulk_string,
    execute_command,
    tokenize,
)
from miniredis.store import KeyValueStore


@pytest.fixture
def store(tmp_path):
    return KeyValueStore(tmp_path / "miniredis.dump")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("SET a b", ["SET", "a", "b"]),
        ("a  b", ["a", "", "b"]),
        ("a ", ["a"]),
        ("", []),
        ("single", ["single"]),
    ],
)
def test_tokenize(line, expected):
    assert tokenize(line) == expected


def test_tokenize_custom_delimiter():
    assert tokenize("x,y,z", ",") == ["x", "y", "z"]


def test_bulk_string_format():
    assert bulk_string("mini-redis") == b"$10\r\nmini-redis\r\n"


def test_bulk_string_counts_bytes_not_characters():
    encoded = bulk_string("é")
    header, body, tail = encoded.split(b"\r\n")
    assert int(header[1:]) == len("é".encode("utf-8"))
    assert body.decode("utf-8") == "é"
    assert tail == b""


def test_line_buffer_joins_partial_chunks():
    buf = LineBuffer()
    assert buf.feed(b"PI") == []
    assert buf.feed(b"NG\r\nGET a\n") == ["PING", "GET a"]
    assert buf.feed(b"\n") == [""]


def test_line_buffer_strips_only_one_carriage_return():
    buf = LineBuffer()
    assert buf.feed(b"x\r\r\n") == ["x\r"]


def test_ping_variants(store):
    assert execute_command(store, "PING").reply == b"+PONG\r\n"
    assert execute_command(store, "ping hello").reply == bulk_string("hello")
    assert execute_command(store, "PING a b").reply.startswith(b"-ERR")


def test_set_get_del(store):
    assert execute_command(store, "SET name mini-redis").reply == b"+OK\r\n"
    assert store.get("name") == "mini-redis"
    assert execute_command(store, "get name").reply == bulk_string("mini-redis")
    assert execute_command(store, "DEL name").reply == b":1\r\n"
    assert execute_command(store, "DEL name").reply == b":0\r\n"
    assert execute_command(store, "GET name").reply == b"$-1\r\n"


def test_wrong_argument_count_is_an_error(store):
    reply = execute_command(store, "SET onlykey").reply
    assert reply == b"-ERR Wrong command or wrong number of arguments\r\n"
    assert "onlykey" not in store


def test_unknown_command(store):
    assert execute_command(store, "FLY").reply == (
        b"-ERR Wrong command or wrong number of arguments\r\n"
    )


def test_empty_line_has_no_reply(store):
    assert execute_command(store, "") == CommandResult()


def test_quit_closes(store):
    result = execute_command(store, "QUIT")
    assert result == CommandResult(b"+OK\r\n", close=True)


def test_save_writes_dump(store):
    execute_command(store, "SET k v")
    assert execute_command(store, "SAVE").reply == b"+OK\r\n"
    fresh = KeyValueStore(store.dump_path)
    fresh.load()
    assert fresh.get("k") == "v"


def test_save_failure_sends_nothing(tmp_path):
    store = KeyValueStore(tmp_path)
    result = execute_command(store, "SAVE")
    assert result.reply is None
    assert result.close is False