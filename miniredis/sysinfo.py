"""Total and free RAM and swap, reported in megabytes."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from miniredis.memory import MEMINFO_FILE, parse_meminfo

_KIB = 1024
_MIB = 1024.0 * 1024.0


@dataclass(frozen=True)
class SystemMemory:
    """RAM and swap sizes in bytes."""

    total_ram: int = 0
    free_ram: int = 0
    total_swap: int = 0
    free_swap: int = 0


def parse_system_memory(lines: Iterable[str]) -> SystemMemory:
    """Take RAM and swap totals from meminfo lines, converting kB to bytes."""
    stats = parse_meminfo(lines)
    return SystemMemory(
        total_ram=stats.total_memory * _KIB,
        free_ram=stats.free_memory * _KIB,
        total_swap=stats.total_swap * _KIB,
        free_swap=stats.free_swap * _KIB,
    )


def read_system_memory(path: str | Path = MEMINFO_FILE) -> SystemMemory:
    """Read RAM and swap sizes from the meminfo file at ``path``."""
    with open(path, encoding="ascii") as meminfo:
        return parse_system_memory(meminfo)


def format_system_memory(info: SystemMemory) -> str:
    """Render the sizes in megabytes."""
    return (
        f"Total RAM: {info.total_ram / _MIB:g} MB\n"
        f"Free RAM : {info.free_ram / _MIB:g}MB\n"
        f"Total SWAP : {info.total_swap / _MIB:g}MB\n"
        f"Free SWAP : {info.free_swap / _MIB:g}MB\n"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show total and free RAM and swap.")
    parser.add_argument("--meminfo", default=MEMINFO_FILE)
    args = parser.parse_args(argv)
    try:
        info = read_system_memory(args.meminfo)
    except (OSError, ValueError):
        return 1
    sys.stdout.write(format_system_memory(info))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())