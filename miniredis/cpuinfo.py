"""Processor model, logical threads and physical cores from the cpuinfo file."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

CPUINFO_FILE = "/proc/cpuinfo"


@dataclass(frozen=True)
class CpuDetails:
    """Processor summary; ``physical_cores`` holds sorted (physical id, core id) pairs."""

    model_name: str = ""
    logical_processors: int = 0
    physical_cores: tuple[tuple[int, int], ...] = ()

    @property
    def physical_core_count(self) -> int:
        return len(self.physical_cores)


def _field_value(line: str) -> str:
    _, _, value = line.partition(":")
    return value[1:] if value.startswith(" ") else value


def _int_field(line: str) -> int:
    parts = _field_value(line).split()
    if not parts:
        raise ValueError(f"missing value in cpuinfo line: {line!r}")
    return int(parts[0])


def parse_cpuinfo(lines: Iterable[str]) -> CpuDetails:
    """Summarise cpuinfo lines.

    The first model name seen is kept; each core id line records a core
    once a physical id has been seen. Raises ValueError on a non-integer id.
    """
    processors = 0
    model_name = ""
    cores: set[tuple[int, int]] = set()
    physical_id = -1
    for raw in lines:
        line = raw.rstrip("\n")
        if line.startswith("processor"):
            processors += 1
        if line.startswith("model name") and not model_name:
            model_name = _field_value(line)
        if line.startswith("physical id"):
            physical_id = _int_field(line)
        if line.startswith("core id"):
            core_id = _int_field(line)
            if physical_id != -1 and core_id != -1:
                cores.add((physical_id, core_id))
    return CpuDetails(model_name, processors, tuple(sorted(cores)))


def read_cpuinfo(path: str | Path = CPUINFO_FILE) -> CpuDetails:
    """Read and summarise the cpuinfo file at ``path``."""
    with open(path, encoding="utf-8", errors="replace") as cpuinfo:
        return parse_cpuinfo(cpuinfo)


def format_details(details: CpuDetails, num_cores: int) -> str:
    """Render the summary, listing every physical core."""
    lines = [
        f"Number of cores are {num_cores}",
        "CPU Information:",
        f"  Model name is : {details.model_name}",
        f"  Logical processors (threads) is : {details.logical_processors}",
        f"  Physical cores is : {details.physical_core_count}",
    ]
    lines += [
        f"Physical core id : {physical}\tCore id : {core}"
        for physical, core in details.physical_cores
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show processor details.")
    parser.add_argument("--cpuinfo", default=CPUINFO_FILE)
    args = parser.parse_args(argv)
    try:
        details = read_cpuinfo(args.cpuinfo)
    except OSError:
        print("Couldn't open cpuinfo file", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Couldn't parse cpuinfo file: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(format_details(details, os.cpu_count() or 0))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())