"""Line-oriented command protocol: framing, tokenizing and command execution."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from miniredis.store import KeyValueStore

log = logging.getLogger(__name__)

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

OK = b"+OK\r\n"
PONG = b"+PONG\r\n"
NIL = b"$-1\r\n"
ERR_EMPTY = b"-ERR Empty command\r\n"
ERR_PING_ARGS = b"-ERR wrong number of arguments for PING command"
ERR_UNKNOWN = b"-ERR Wrong command or wrong number of arguments\r\n"


@dataclass(frozen=True)
class CommandResult:
    """What to send back for one command line, and whether to end the session."""

    reply: bytes | None = None
    close: bool = False


class LineBuffer:
    """Accumulates received bytes and yields complete lines without terminators."""

    def __init__(self) -> None:
        self._pending = b""

    def feed(self, data: bytes) -> list[str]:
        """Add ``data`` and return every complete line now available."""
        self._pending += data
        *complete, self._pending = self._pending.split(b"\n")
        return [
            line.removesuffix(b"\r").decode(_ENCODING, _ERRORS) for line in complete
        ]


def tokenize(line: str, delimiter: str = " ") -> list[str]:
    """Split on every delimiter, keeping empty fields except a final empty one."""
    tokens = line.split(delimiter)
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def bulk_string(value: str) -> bytes:
    """Encode ``value`` as a length-prefixed bulk reply."""
    raw = value.encode(_ENCODING, _ERRORS)
    return b"$%d\r\n%s\r\n" % (len(raw), raw)


def execute_command(store: KeyValueStore, line: str) -> CommandResult:
    """Run one command line against ``store`` and describe the reply."""
    if not line:
        return CommandResult()
    tokens = tokenize(line)
    if not tokens:
        return CommandResult(ERR_EMPTY)

    command = tokens[0].upper()
    argc = len(tokens)

    if command == "PING":
        if argc == 1:
            return CommandResult(PONG)
        if argc == 2:
            return CommandResult(bulk_string(tokens[1]))
        return CommandResult(ERR_PING_ARGS)
    if command == "SET" and argc == 3:
        store.set(tokens[1], tokens[2])
        return CommandResult(OK)
    if command == "GET" and argc == 2:
        value = store.get(tokens[1])
        return CommandResult(NIL if value is None else bulk_string(value))
    if command == "DEL" and argc == 2:
        return CommandResult(b":1\r\n" if store.delete(tokens[1]) else b":0\r\n")
    if command == "SAVE":
        try:
            store.save()
        except OSError as exc:
            log.error("Couldn't open dump file %s for writing: %s", store.dump_path, exc)
            return CommandResult()
        return CommandResult(OK)
    if command == "QUIT":
        return CommandResult(OK, close=True)
    return CommandResult(ERR_UNKNOWN)