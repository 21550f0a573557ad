"""Overall CPU utilization sampled from the kernel's aggregate CPU counters."""

from __future__ import annotations

import argparse
import math
import sys
import time
from dataclasses import dataclass, fields
from pathlib import Path

STAT_FILE = "/proc/stat"
SAMPLE_INTERVAL = 1.0

_CPU_PREFIX = "cpu "


@dataclass(frozen=True)
class CpuTimes:
    """Cumulative jiffies spent by all CPUs in each state."""

    user: int = 0
    nice: int = 0
    system: int = 0
    idle: int = 0
    iowait: int = 0
    irq: int = 0
    softirq: int = 0
    steal: int = 0

    def total(self) -> int:
        """All time accounted for, busy or not."""
        return sum(getattr(self, f.name) for f in fields(self))

    def idle_time(self) -> int:
        """Time spent idle, including waiting on I/O."""
        return self.idle + self.iowait


def parse_cpu_line(line: str) -> CpuTimes:
    """Parse the aggregate ``cpu`` line; counters it lacks are taken as zero.

    Raises ValueError if the line is not the aggregate line or a counter
    is not an integer.
    """
    if not line.startswith(_CPU_PREFIX):
        raise ValueError(f"not an aggregate cpu line: {line!r}")
    counters = [int(value) for value in line.split()[1 : len(fields(CpuTimes)) + 1]]
    return CpuTimes(*counters)


def read_cpu_times(path: str | Path = STAT_FILE) -> CpuTimes:
    """Read the aggregate CPU counters from the first line of ``path``."""
    with open(path, encoding="ascii") as stat:
        first_line = stat.readline()
    return parse_cpu_line(first_line)


def utilization(before: CpuTimes, after: CpuTimes) -> float:
    """Percentage of non-idle time between two samples; NaN if no time passed."""
    total_diff = after.total() - before.total()
    idle_diff = after.idle_time() - before.idle_time()
    if total_diff == 0:
        return math.nan
    return 100.0 * (total_diff - idle_diff) / total_diff


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show overall CPU utilization.")
    parser.add_argument("--stat-file", default=STAT_FILE)
    parser.add_argument("--interval", type=float, default=SAMPLE_INTERVAL)
    parser.add_argument("--count", type=int, default=None, help="samples to take (default: forever)")
    args = parser.parse_args(argv)
    taken = 0
    try:
        while args.count is None or taken < args.count:
            before = read_cpu_times(args.stat_file)
            time.sleep(args.interval)
            after = read_cpu_times(args.stat_file)
            value = utilization(before, after)
            sys.stdout.write(f"\rCPU cpu_utilization is : {value:g}%")
            sys.stdout.flush()
            taken += 1
    except KeyboardInterrupt:
        pass
    except (OSError, ValueError) as exc:
        print(f"\nCouldn't read CPU counters: {exc}", file=sys.stderr)
        return 1
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())