"""A thread-safe string key/value store that can persist itself to a dump file."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

log = logging.getLogger(__name__)

DEFAULT_DUMP_FILE = "miniredis.dump"

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class KeyValueStore:
    """In-memory mapping of string keys to string values, guarded by a lock."""

    def __init__(self, dump_path: str | os.PathLike[str] = DEFAULT_DUMP_FILE) -> None:
        self.dump_path = Path(dump_path)
        self._data: dict[str, str] = {}
        self._lock = threading.Lock()

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        with self._lock:
            self._data[key] = value

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if it is absent."""
        with self._lock:
            return self._data.get(key)

    def delete(self, key: str) -> bool:
        """Remove ``key``; return True if it was present."""
        with self._lock:
            return self._data.pop(key, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def save(self) -> None:
        """Write every pair to the dump file as a key line followed by a value line.

        Raises OSError if the file cannot be written.
        """
        with self._lock:
            log.info("Saving data to %s ...", self.dump_path)
            with self.dump_path.open("w", encoding=_ENCODING, errors=_ERRORS, newline="") as out:
                for key, value in self._data.items():
                    out.write(f"{key}\n{value}\n")
            log.info("Data saved successfully.")

    def load(self) -> int:
        """Replace the contents with the pairs in the dump file; return how many were read.

        A trailing key without a value line is ignored. Raises OSError
        (FileNotFoundError when missing) if the file cannot be read.
        """
        with self._lock:
            with self.dump_path.open("r", encoding=_ENCODING, errors=_ERRORS, newline="") as infile:
                content = infile.read()
            log.info("Loading data from %s ...", self.dump_path)
            lines = content.split("\n")
            if lines and lines[-1] == "":
                lines.pop()
            self._data.clear()
            pairs = list(zip(lines[0::2], lines[1::2]))
            self._data.update(pairs)
            if pairs:
                log.info("Data loaded successfully.")
            else:
                log.info("Dump file %s is empty or badly formatted", self.dump_path)
            return len(pairs)