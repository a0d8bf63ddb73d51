"""Environment, host, process and MPI-launcher queries."""

from __future__ import annotations

import os
import re
import socket
import threading
import time
from collections.abc import Iterable, Mapping, MutableMapping

__all__ = [
    "environment_entries",
    "get_env",
    "put_env",
    "sleep",
    "microsleep",
    "hostname",
    "padded_hostname",
    "cpuset_to_string",
    "affinity",
    "core_id",
    "get_pid",
    "get_tid",
    "mpi_epoch",
    "cpu_model",
    "mpi_rank",
    "mpi_size",
]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_MODEL_PREFIX = "model name\t: "

_RANK_VARIABLES = (
    "PMI_FORK_RANK",
    "ALPS_APP_PE",
    "PMIX_RANK",
    "PMI_RANK",
    "OMPI_COMM_WORLD_RANK",
    "EC_FARM_ID",
)

_SIZE_VARIABLES = (
    "PMIX_SIZE",
    "PMI_SIZE",
    "OMPI_COMM_WORLD_SIZE",
    "SLURM_NTASKS",
    "SLURM_NPROCS",
    "EC_FARM_SIZE",
)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def environment_entries(environ: Mapping[str, str] | None = None) -> list[str]:
    """Return every environment variable as a NAME=value string."""
    env = os.environ if environ is None else environ
    return [f"{name}={value}" for name, value in env.items()]


def get_env(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Return the value of a variable, or None if it is not set."""
    env = os.environ if environ is None else environ
    return env.get(name)


def put_env(
    setting: str,
    overwrite: bool = True,
    environ: MutableMapping[str, str] | None = None,
) -> None:
    """Apply a NAME=value setting; trailing blanks are stripped.

    A setting without '=' removes the variable. With overwrite false an
    existing variable is left alone.
    """
    env = os.environ if environ is None else environ
    setting = setting.rstrip(" ")
    if not setting:
        return
    name, sep, value = setting.partition("=")
    if not sep:
        env.pop(name, None)
        return
    if not overwrite and name in env:
        return
    env[name] = value


def sleep(seconds: int) -> int:
    """Sleep for whole seconds; return the seconds left unslept (always 0)."""
    if seconds > 0:
        time.sleep(seconds)
    return 0


def microsleep(usecs: int) -> None:
    """Sleep for a number of microseconds."""
    if usecs > 0:
        time.sleep(usecs / 1_000_000)


def hostname() -> str:
    """Return the host name cut short at its first dot."""
    return socket.gethostname().split(".", 1)[0]


def padded_hostname(width: int, padding: str | int = " ") -> str:
    """Return the short host name truncated or padded to width characters."""
    fill = chr(padding) if isinstance(padding, int) else padding
    if len(fill) != 1:
        raise ValueError(f"padding must be a single character, got {padding!r}")
    return hostname()[: max(width, 0)].ljust(max(width, 0), fill)


def cpuset_to_string(cpus: Iterable[int]) -> str:
    """Return a compact list of CPU numbers, with runs of three or more as ranges."""
    ordered = sorted(set(cpus))
    parts: list[str] = []
    start = 0
    while start < len(ordered):
        end = start
        while end + 1 < len(ordered) and ordered[end + 1] == ordered[end] + 1:
            end += 1
        run = end - start
        if run == 0:
            parts.append(str(ordered[start]))
        elif run == 1:
            parts.append(f"{ordered[start]},{ordered[end]}")
        else:
            parts.append(f"{ordered[start]}-{ordered[end]}")
        start = end + 1
    return ",".join(parts)


def affinity() -> str:
    """Return the calling thread's CPU affinity as a compact string."""
    getter = getattr(os, "sched_getaffinity", None)
    if getter is None:
        return ""
    try:
        cpus = getter(0)
    except OSError:
        return ""
    return cpuset_to_string(cpus)


def core_id() -> int:
    """Return the CPU the calling thread last ran on, or -1 if unknown."""
    for path in ("/proc/thread-self/stat", "/proc/self/stat"):
        try:
            with open(path, encoding="ascii", errors="replace") as handle:
                content = handle.read()
        except OSError:
            continue
        fields = content.rpartition(")")[2].split()
        # Field 39 ("processor"); fields after the command start at field 3.
        if len(fields) > 36:
            try:
                return int(fields[36])
            except ValueError:
                return -1
    return -1


def get_pid() -> int:
    """Return the process id."""
    return os.getpid()


def get_tid() -> int:
    """Return the native id of the calling thread."""
    return threading.get_native_id()


def mpi_epoch() -> float:
    """Return the wall-clock time in seconds since the Unix epoch."""
    return time.time()


def cpu_model(path: str = "/proc/cpuinfo") -> str:
    """Return the first "model name" entry of a cpuinfo file, or an empty string."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                if line.startswith(_MODEL_PREFIX):
                    return line[len(_MODEL_PREFIX):].split("\n", 1)[0]
    except OSError:
        return ""
    return ""


def _first_set(env: Mapping[str, str], names: Iterable[str]) -> str | None:
    for name in names:
        value = env.get(name)
        if value is not None:
            return value
    return None


def mpi_rank(environ: Mapping[str, str] | None = None) -> int:
    """Return this task's MPI rank as announced by the launcher, defaulting to 0."""
    env = os.environ if environ is None else environ
    text = _first_set(env, _RANK_VARIABLES)
    rank = _atoi(text) if text is not None else -1
    return max(rank, 0)


def mpi_size(environ: Mapping[str, str] | None = None) -> int:
    """Return the number of MPI tasks announced by the launcher, defaulting to 1."""
    env = os.environ if environ is None else environ
    text = _first_set(env, _SIZE_VARIABLES)
    size = _atoi(text) if text is not None else 0
    return size if size >= 1 else 1