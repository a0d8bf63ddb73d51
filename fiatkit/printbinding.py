"""Report which CPU cores each thread of this process is bound to.

The report has one line per rank, listing every thread's cores as a
compressed list such as ``(0-3,8)``.
"""

from __future__ import annotations

import argparse
import os
import socket
from collections.abc import Iterable, Sequence

__all__ = ["compress_cores", "format_binding", "current_binding", "main"]

_HOSTNAME_LEN = 99
_NO_CORE = -1


def compress_cores(cores: Iterable[int]) -> str:
    """Return a thread's cores as a parenthesised list with runs shown as ranges.

    Cores are taken in ascending order. A thread bound to no core is shown
    as ``(-1)``.
    """
    ordered = sorted(cores)
    count = len(ordered)

    def at(index: int) -> int:
        return ordered[index] if index < count else _NO_CORE

    parts = [f"({at(0)}"]
    if at(1) == at(0) + 1:
        parts.append("-")
    for index in range(1, count):
        prev, cur, nxt = at(index - 1), at(index), at(index + 1)
        if prev < cur - 1:
            parts.append(f",{cur}")
            if cur != count and nxt == cur + 1:
                parts.append("-")
        elif prev == cur - 1:
            if index == count - 1 or nxt > cur + 1:
                parts.append(str(cur))
    parts.append(")")
    return "".join(parts)


def format_binding(rank: int, hostname: str, thread_cores: Sequence[Iterable[int]]) -> str:
    """Return the report line for one rank; thread_cores holds each thread's cores."""
    header = f"Rank {rank:4d} on {hostname:>16s} has {len(thread_cores):3d} threads on cores: "
    return header + "".join(compress_cores(cores) for cores in thread_cores)


def _online_cpus() -> int:
    return os.cpu_count() or 0


def current_binding() -> tuple[str, list[list[int]]]:
    """Return the host name and, for each thread, the cores it may run on."""
    host = socket.gethostname()[:_HOSTNAME_LEN]
    getter = getattr(os, "sched_getaffinity", None)
    cores: list[int] = []
    if getter is not None:
        try:
            allowed = getter(0)
        except OSError:
            allowed = set()
        online = _online_cpus()
        cores = sorted(cpu for cpu in allowed if cpu < online)
    # A single thread of execution runs the report.
    return host, [cores]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the core binding of this process."""
    parser = argparse.ArgumentParser(
        prog="fiat-printbinding",
        description="Print the CPU cores each thread is bound to.",
    )
    parser.parse_args(argv)
    host, thread_cores = current_binding()
    print(format_binding(0, host, thread_cores))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())