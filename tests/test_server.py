import socket
import threading

import pytest

from miniredis.protocol import bulk_string
from miniredis.server import create_listener, handle_client
from miniredis.store import KeyValueStore


@pytest.fixture
def store(tmp_path):
    return KeyValueStore(tmp_path / "miniredis.dump")


def _run(store):
    server_side, client_side = socket.socketpair()
    thread = threading.Thread(target=handle_client, args=(server_side, store), daemon=True)
    thread.start()
    return server_side, client_side, thread


def _read_all(sock):
    chunks = []
    while True:
        data = sock.recv(4096)
        if not data:
            return b"".join(chunks)
        chunks.append(data)


def test_session_until_quit(store):
    server_side, client, thread = _run(store)
    with client:
        client.sendall(b"SET k v\r\nGET k\r\nQUIT\r\n")
        received = _read_all(client)
    thread.join(timeout=5)
    assert received == b"+OK\r\n" + bulk_string("v") + b"+OK\r\n"
    assert not thread.is_alive()
    assert server_side.fileno() == -1


def test_commands_split_across_sends(store):
    server_side, client, thread = _run(store)
    with client:
        client.sendall(b"SE")
        client.sendall(b"T a 1\nQU")
        client.sendall(b"IT\n")
        received = _read_all(client)
    thread.join(timeout=5)
    assert received == b"+OK\r\n+OK\r\n"
    assert store.get("a") == "1"


def test_disconnect_ends_handler(store):
    server_side, client, thread = _run(store)
    client.sendall(b"SET x y\n")
    client.close()
    thread.join(timeout=5)
    assert not thread.is_alive()
    assert store.get("x") == "y"


def test_create_listener_accepts_connections():
    with create_listener("127.0.0.1", 0, 1) as listener:
        host, port = listener.getsockname()
        assert port > 0
        with socket.create_connection((host, port), timeout=5):
            conn, _ = listener.accept()
            with conn:
                assert conn.getsockname()[1] == port


def test_create_listener_rejects_port_in_use():
    with create_listener("127.0.0.1", 0, 1) as first:
        port = first.getsockname()[1]
        blocker = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        with blocker:
            with pytest.raises(OSError):
                blocker.bind(("127.0.0.1", port))
                create_listener("127.0.0.1", port, 1)