"""Process control: aborting with a message, exiting, signals and umask."""

from __future__ import annotations

import os
import re
import signal
import sys
from collections.abc import Mapping

__all__ = [
    "AbortError",
    "abort",
    "exit_with",
    "raise_signal",
    "parse_umask",
    "set_umask_from_env",
]

_OCTAL = re.compile(r"\s*([+-]?[0-7]+)")
_SIGABRT_TEXT = "*** Fatal error; aborting (SIGABRT) ..."


class AbortError(RuntimeError):
    """A fatal error that ends the program, with where it was raised."""

    def __init__(self, text: str = "", filename: str | None = None, linenum: int = 0) -> None:
        self.text = text
        self.filename = filename
        self.linenum = linenum
        if filename:
            message = f"{filename}:{linenum}: {text}"
        else:
            message = text
        super().__init__(message)


def abort(filename: str | None, linenum: int, text: str | None) -> None:
    """Abort with a message, optionally naming the file and line it came from."""
    raise AbortError(text or "", filename or None, linenum)


def exit_with(code: int | None = None) -> None:
    """Exit the program with the given status; no status means 0."""
    raise SystemExit(code if code is not None else 0)


def raise_signal(sig: int) -> None:
    """Send a signal to this process; SIGABRT aborts with a fatal error instead."""
    if sig == signal.SIGABRT:
        abort(__file__, 0, _SIGABRT_TEXT)
    signal.raise_signal(sig)


def parse_umask(text: str) -> int | None:
    """Read a leading octal number from text; None if there is none."""
    match = _OCTAL.match(text)
    return int(match.group(1), 8) if match else None


def set_umask_from_env(environ: Mapping[str, str] | None = None) -> tuple[int, int] | None:
    """Apply the octal umask in EC_SET_UMASK; return (new, old) or None if not applied."""
    env = os.environ if environ is None else environ
    text = env.get("EC_SET_UMASK")
    if text is None:
        return None
    new = parse_umask(text)
    if new is None:
        return None
    old = os.umask(new & 0o777)
    print(
        f"*** EC_SET_UMASK : new/old = {new:o}/{old:o} (oct), "
        f"{new}/{old} (dec), {new:x}/{old:x} (hex)",
        file=sys.stderr,
    )
    return new, old