"""Threaded TCP server speaking the line-oriented key/value protocol."""

from __future__ import annotations

import argparse
import logging
import socket
import threading

from miniredis.protocol import LineBuffer, execute_command
from miniredis.store import DEFAULT_DUMP_FILE, KeyValueStore

log = logging.getLogger(__name__)

PORT = 6380
BACKLOG = 5
BUFFER_SIZE = 1024


def handle_client(conn: socket.socket, store: KeyValueStore) -> None:
    """Serve one connection until the peer disconnects or sends QUIT."""
    with conn:
        log.info("Thread %s handling client fd %d", threading.get_ident(), conn.fileno())
        lines = LineBuffer()
        while True:
            try:
                data = conn.recv(BUFFER_SIZE - 1)
            except (ConnectionResetError, BrokenPipeError):
                log.info("Client connection reset")
                return
            except OSError as exc:
                log.error("recv failed: %s", exc)
                return
            if not data:
                log.info("Client disconnected")
                return
            for line in lines.feed(data):
                log.debug("Client sent: %s", line)
                result = execute_command(store, line)
                try:
                    if result.reply is not None:
                        conn.sendall(result.reply)
                except OSError as exc:
                    log.info("Send failed: %s", exc)
                    return
                if result.close:
                    log.info("Client is quitting")
                    return


def create_listener(host: str = "", port: int = PORT, backlog: int = BACKLOG) -> socket.socket:
    """Return a TCP socket bound to ``host``:``port`` and listening."""
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    except OSError as exc:
        log.warning("setsockopt failed: %s", exc)
    try:
        listener.bind((host, port))
        listener.listen(backlog)
    except OSError:
        listener.close()
        raise
    return listener


def serve(
    store: KeyValueStore, host: str = "", port: int = PORT, backlog: int = BACKLOG
) -> None:
    """Listen forever, loading the store first and handling each client in a thread."""
    with create_listener(host, port, backlog) as listener:
        log.info("Socket bound to port %d", port)
        try:
            store.load()
        except OSError as exc:
            log.warning(
                "Couldn't read dump file %s (%s); starting with empty store",
                store.dump_path,
                exc,
            )
        log.info("Listening on port %d", port)
        while True:
            try:
                conn, _ = listener.accept()
            except OSError as exc:
                log.error("Client accept failed: %s", exc)
                continue
            log.info("Connection accepted from client fd %d", conn.fileno())
            threading.Thread(target=handle_client, args=(conn, store), daemon=True).start()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the key/value command server.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--backlog", type=int, default=BACKLOG)
    parser.add_argument("--dump", default=DEFAULT_DUMP_FILE)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        serve(KeyValueStore(args.dump), args.host, args.port, args.backlog)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        log.error("Server failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())