"""Filesystem size and free space for a path."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass

GIB = 1024 * 1024 * 1024


@dataclass(frozen=True)
class DiskUsage:
    """Block counts of the filesystem holding ``path``."""

    path: str
    block_size: int
    total_blocks: int
    free_blocks: int
    available_blocks: int

    @property
    def total_size(self) -> int:
        return self.total_blocks * self.block_size

    @property
    def free_size(self) -> int:
        return self.free_blocks * self.block_size

    @property
    def available_size(self) -> int:
        return self.available_blocks * self.block_size


def disk_usage(path: str | os.PathLike[str] = "/") -> DiskUsage:
    """Query the filesystem holding ``path``; raises OSError on failure."""
    stat = os.statvfs(path)
    return DiskUsage(
        path=os.fspath(path),
        block_size=stat.f_frsize,
        total_blocks=stat.f_blocks,
        free_blocks=stat.f_bfree,
        available_blocks=stat.f_bavail,
    )


def format_usage(usage: DiskUsage) -> str:
    """Render the usage with sizes in whole gigabytes, rounded down."""
    return (
        f"Filesystem stats for: {usage.path}\n"
        f"block_size : {usage.block_size}\n"
        f"  Total Size     : {usage.total_size // GIB} GB\n"
        f"  Free Size      : {usage.free_size // GIB} GB\n"
        f"  Available Size : {usage.available_size // GIB} GB\n"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show filesystem usage for a path.")
    parser.add_argument("path", nargs="?", default="/")
    args = parser.parse_args(argv)
    try:
        usage = disk_usage(args.path)
    except OSError as exc:
        print(f"statvfs failed: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(format_usage(usage))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())