"""Memory and swap statistics read from the kernel's meminfo file."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

MEMINFO_FILE = "/proc/meminfo"
REFRESH_INTERVAL = 0.3

_CLEAR_SCREEN = "\033[H\033[2J"


@dataclass(frozen=True)
class MemoryStats:
    """Memory figures in kB."""

    total_memory: int = 0
    free_memory: int = 0
    available_memory: int = 0
    cached_memory: int = 0
    buffered_memory: int = 0
    total_swap: int = 0
    free_swap: int = 0
    cached_swap: int = 0


_FIELDS = {
    "MemTotal:": "total_memory",
    "MemFree:": "free_memory",
    "MemAvailable:": "available_memory",
    "Cached:": "cached_memory",
    "Buffers:": "buffered_memory",
    "SwapTotal:": "total_swap",
    "SwapFree:": "free_swap",
    "SwapCached:": "cached_swap",
}

_LABELS = [
    ("Total Memory     ", "total_memory"),
    ("Free Memory      ", "free_memory"),
    ("Available Memory ", "available_memory"),
    ("Cached Memory    ", "cached_memory"),
    ("Buffered Memory  ", "buffered_memory"),
    ("Total Swap       ", "total_swap"),
    ("Free Swap        ", "free_swap"),
    ("Cached Swap      ", "cached_swap"),
]


def _line_value(line: str, prefix: str) -> int:
    parts = line[len(prefix):].split()
    if not parts:
        raise ValueError(f"missing value in meminfo line: {line!r}")
    return int(parts[0])


def parse_meminfo(lines: Iterable[str]) -> MemoryStats:
    """Collect the known fields from meminfo lines; absent ones are zero.

    Raises ValueError if a known field has no integer value.
    """
    values: dict[str, int] = {}
    for line in lines:
        for prefix, name in _FIELDS.items():
            if line.startswith(prefix):
                values[name] = _line_value(line, prefix)
    return MemoryStats(**values)


def read_memory_info(path: str | Path = MEMINFO_FILE) -> MemoryStats:
    """Read and parse the meminfo file at ``path``."""
    with open(path, encoding="ascii") as meminfo:
        return parse_meminfo(meminfo)


def format_stats(stats: MemoryStats) -> str:
    """Render the statistics as a block of aligned lines."""
    rows = [f"  {label}: {getattr(stats, name)} kB" for label, name in _LABELS]
    return "\n".join(["Memory Statistics:", *rows]) + "\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show live memory statistics.")
    parser.add_argument("--meminfo", default=MEMINFO_FILE)
    parser.add_argument("--interval", type=float, default=REFRESH_INTERVAL)
    parser.add_argument("--count", type=int, default=None, help="refreshes (default: forever)")
    args = parser.parse_args(argv)
    shown = 0
    try:
        while args.count is None or shown < args.count:
            stats = read_memory_info(args.meminfo)
            sys.stdout.write(_CLEAR_SCREEN + format_stats(stats))
            sys.stdout.flush()
            shown += 1
            time.sleep(args.interval)
    except KeyboardInterrupt:
        pass
    except (OSError, ValueError) as exc:
        print(f"Couldn't read memory info: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())