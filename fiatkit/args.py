"""Registry of command-line arguments as a C-style main program sees them.

Arguments are recorded once, as early as possible, and can then be read
back by number. Registration stops at a terminator argument, taken from
``MPL_CL_TERMINATE`` and defaulting to ``-^``.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping, Sequence

__all__ = ["ArgumentRegistry", "find_executable"]

_PS_CMD = "/bin/ps"
_TAIL_CMD = "/usr/bin/tail"
_UNKNOWN_EXECUTABLE = "/unknown/executable"
_DEFAULT_TERMINATOR = "-^"


def _executable_from_proc() -> str | None:
    try:
        path = os.readlink(f"/proc/{os.getpid()}/exe")
    except OSError:
        return None
    return path or None


def _search_path(name: str) -> str | None:
    for directory in os.environ.get("PATH", "").split(os.pathsep):
        if not directory:
            continue
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def _executable_from_ps() -> str | None:
    if not os.access(_PS_CMD, os.X_OK):
        return None
    try:
        result = subprocess.run(
            [_PS_CMD, f"-p{os.getpid()}"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return None
    lines = [line for line in result.stdout.splitlines() if line.strip()]
    if not lines:
        return None
    fields = lines[-1].split()
    name = fields[3] if len(fields) > 4 else fields[-1]
    if "/" not in name:
        return _search_path(name) or name
    return name


def find_executable() -> str:
    """Return the path of the running executable, or a placeholder path."""
    return _executable_from_proc() or _executable_from_ps() or _UNKNOWN_EXECUTABLE


class ArgumentRegistry:
    """Command-line arguments registered once and read back by number.

    Argument 0 is the program name; :meth:`count` excludes it, while
    :meth:`argc` includes it.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ
        self._args: list[str | None] | None = None
        self._numargs = -1
        self._terminator: str | None = None
        self._executable: str | None = None

    def _current_terminator(self) -> str:
        if self._terminator is None:
            self._terminator = self._environ.get("MPL_CL_TERMINATE", _DEFAULT_TERMINATOR)
        return self._terminator

    def register(self, argv: Sequence[str | None]) -> None:
        """Record arguments, program name first; later calls are ignored."""
        if self._numargs != -1 or self._args is not None or not argv:
            return
        terminator = self._current_terminator()
        slots: list[str | None] = [None] * len(argv)
        taken = 0
        for arg in argv:
            if arg is None or arg == terminator:
                break
            slots[taken] = arg
            taken += 1
        self._args = slots
        if taken == 0:
            slots[0] = self.executable()
            self._numargs = 0
        else:
            self._executable = slots[0]
            self._numargs = taken - 1

    def argc(self) -> int:
        """Return the number of arguments including the program name."""
        return 1 + self._numargs

    def argv(self) -> list[str]:
        """Return the registered arguments, program name first."""
        if self._args is None:
            return [self.executable()]
        leading: list[str] = []
        for arg in self._args:
            if arg is None:
                break
            leading.append(arg)
        return leading

    def count(self) -> int:
        """Return the number of arguments after the program name."""
        return self._numargs

    def executable(self) -> str:
        """Return the program name, looking up the executable if none is known."""
        if self._executable is None:
            self._executable = find_executable()
        return self._executable

    def get(self, argno: int) -> str:
        """Return argument argno (0 is the executable); empty if there is none."""
        if argno == 0:
            return self.executable()
        if self._args is not None and 0 < argno <= self._numargs:
            return self._args[argno] or ""
        return ""

    def put(self, argno: int, value: str) -> None:
        """Replace argument argno."""
        if self._args is None or not 0 <= argno <= self._numargs:
            raise IndexError(f"argument number {argno} out of range 0..{self._numargs}")
        self._args[argno] = value

    def reset(self, argc: int, terminator: str | None = None) -> None:
        """Discard all arguments and make room for argc empty ones."""
        if terminator is not None:
            self._terminator = terminator
        self._numargs = max(argc, 0)
        self._args = [None] * (1 + self._numargs)