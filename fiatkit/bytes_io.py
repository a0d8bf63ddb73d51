"""Unblocked binary file access through small integer unit numbers.

A :class:`UnitTable` hands out unit numbers for open files and offers
seek, tell, read, write, flush (with fsync) and close on them. Failures
raise :class:`BytesIOError`; running into end-of-file while reading or
seeking raises :class:`EndOfFileError`.
"""

from __future__ import annotations

import io
import os
import re
import warnings
from collections.abc import Mapping
from typing import BinaryIO

__all__ = [
    "BytesIOError",
    "EndOfFileError",
    "UnitTable",
    "parse_mode",
    "buffer_size_from_env",
    "debug_level_from_env",
]

_NAME_LEN = 256
_MODE_LEN = 10
_DEFAULT_BUFSIZE = io.DEFAULT_BUFFER_SIZE
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class BytesIOError(Exception):
    """A file operation on a unit failed."""

    def __init__(self, message: str, code: int = -2) -> None:
        super().__init__(message)
        self.code = code


class EndOfFileError(BytesIOError):
    """End-of-file was reached; ``data`` holds whatever was read before it."""

    def __init__(self, message: str, data: bytes = b"") -> None:
        super().__init__(message, code=-1)
        self.data = data


def parse_mode(mode: str) -> str:
    """Map an access mode (r, r+, w, c, a; any case) to an open flag string."""
    mode = mode[:_MODE_LEN]
    first = mode[:1]
    if first in ("a", "A"):
        return "a"
    if first in ("c", "C", "w", "W"):
        return "w"
    if first in ("r", "R"):
        return "r+" if mode[1:2] == "+" else "r"
    raise BytesIOError(f"Invalid open mode specified: {mode!r}", code=-3)


def _all_digits(text: str) -> bool:
    return all(ch in "0123456789" for ch in text)


def buffer_size_from_env(environ: Mapping[str, str] | None = None) -> int:
    """Return the file buffer size from BYTES_IO_BUFSIZE, or the default."""
    env = os.environ if environ is None else environ
    text = env.get("BYTES_IO_BUFSIZE")
    if text is None:
        return _DEFAULT_BUFSIZE
    if not _all_digits(text):
        raise BytesIOError(
            f"Invalid number string in BYTES_IO_BUFSIZE: {text}; "
            "it must comprise only digits [0-9]."
        )
    size = int(text) if text else 0
    if size <= 0:
        raise BytesIOError(
            f"Invalid buffer size in BYTES_IO_BUFSIZE: {text}; it must be positive."
        )
    return size


def debug_level_from_env(environ: Mapping[str, str] | None = None) -> int:
    """Return the debug level from BYTES_IO_DEBUG; 0 means debugging is off."""
    env = os.environ if environ is None else environ
    text = env.get("BYTES_IO_DEBUG")
    if text is None:
        return 0
    if not _all_digits(text):
        print(f"Invalid number string in BYTES_IO_DEBUG: {text}")
        print("BYTES_IO_DEBUG must comprise only digits [0-9].")
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class UnitTable:
    """A table of open binary files addressed by unit number."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ
        self._files: list[BinaryIO | None] = []
        self._debug_level: int | None = None
        self._bufsize: int | None = None

    def __enter__(self) -> UnitTable:
        return self

    def __exit__(self, *exc_info: object) -> None:
        for unit, handle in enumerate(self._files):
            if handle is not None:
                self.close(unit)

    def _debug(self, message: str) -> None:
        if self._debug_level:
            print(message)

    def _file(self, unit: int) -> BinaryIO:
        if 0 <= unit < len(self._files):
            handle = self._files[unit]
            if handle is not None:
                return handle
        raise BytesIOError(f"Unit {unit} is not open")

    def _free_slot(self) -> int:
        for unit, handle in enumerate(self._files):
            if handle is None:
                return unit
        self._files.append(None)
        return len(self._files) - 1

    def is_open(self, unit: int) -> bool:
        """Return True if the unit refers to an open file."""
        return 0 <= unit < len(self._files) and self._files[unit] is not None

    def open(self, name: str, mode: str) -> int:
        """Open a file and return its unit number."""
        if self._debug_level is None:
            self._debug_level = debug_level_from_env(self._environ)
            self._debug("BYTES_IO_OPEN: debug switched on")
        filename = name[:_NAME_LEN].rstrip(" ")
        self._debug(f"BYTES_IO_OPEN: filename = [{filename}]")
        flags = parse_mode(mode)
        self._debug(f"BYTES_IO_OPEN: file open mode = {flags}")
        if self._bufsize is None:
            self._bufsize = buffer_size_from_env(self._environ)
        unit = self._free_slot()
        self._debug(f"BYTES_IO_OPEN: fptable slot = {unit}")
        try:
            handle = open(filename, flags + "b", buffering=self._bufsize)
        except (OSError, ValueError) as exc:
            raise BytesIOError(f"{filename}: {exc}", code=-1) from exc
        self._debug(f"BYTES_IO_OPEN: file buffer size = {self._bufsize}")
        self._files[unit] = handle
        return unit

    def seek(self, unit: int, offset: int, whence: int) -> int:
        """Move to offset from start (0), current (1) or end (2); return the position.

        From the end the offset always counts backwards.
        """
        handle = self._file(unit)
        self._debug(f"BYTES_IO_SEEK: fptable slot = {unit}")
        self._debug(f"BYTES_IO_SEEK: Offset = {offset}")
        self._debug(f"BYTES_IO_SEEK: Type of offset = {whence}")
        if whence not in (os.SEEK_SET, os.SEEK_CUR, os.SEEK_END):
            raise BytesIOError(f"bytes_io_seek: invalid whence {whence}")
        if whence == os.SEEK_END:
            offset = -abs(offset)
        try:
            current = handle.tell()
            self._debug(f"BYTES_IO_SEEK: current position = {current}")
            if not (current == offset and whence == os.SEEK_SET):
                handle.seek(offset, whence)
            position = handle.tell()
        except (OSError, ValueError) as exc:
            raise BytesIOError(f"bytes_io_seek: {exc}") from exc
        self._debug(f"BYTES_IO_SEEK: byte offset from start of file = {position}")
        return position

    def tell(self, unit: int) -> int:
        """Return the current byte offset from the start of the file."""
        handle = self._file(unit)
        try:
            position = handle.tell()
        except (OSError, ValueError) as exc:
            raise BytesIOError(f"bytes_io_tell: {exc}") from exc
        self._debug(
            f"BYTES_IO_TELL: fptable slot = {unit}. "
            f"Byte offset from start of file = {position}"
        )
        return position

    def read(self, unit: int, nbytes: int) -> bytes:
        """Read exactly nbytes; a short read at end-of-file raises EndOfFileError."""
        if nbytes < 0:
            raise ValueError(f"number of bytes must not be negative, got {nbytes}")
        handle = self._file(unit)
        self._debug(
            f"BYTES_IO_READ: fptable slot = {unit}. Number of bytes to read = {nbytes}"
        )
        try:
            data = handle.read(nbytes)
        except (OSError, ValueError) as exc:
            raise BytesIOError(f"bytes_io_read: {exc}") from exc
        if len(data) != nbytes:
            raise EndOfFileError(
                f"bytes_io_read: end-of-file after {len(data)} of {nbytes} bytes",
                data=data,
            )
        self._debug(
            f"BYTES_IO_READ: fptable slot = {unit}. Number of bytes read = {nbytes}"
        )
        return data

    def write(self, unit: int, data: bytes) -> int:
        """Write data and return the number of bytes written."""
        handle = self._file(unit)
        payload = bytes(data)
        self._debug(
            f"BYTES_IO_WRITE: fptable slot = {unit}. "
            f"Number of bytes to write = {len(payload)}"
        )
        try:
            written = handle.write(payload)
        except (OSError, ValueError) as exc:
            raise BytesIOError(f"bytes_io_write: {exc}", code=-1) from exc
        if written != len(payload):
            raise BytesIOError(
                f"bytes_io_write: wrote {written} of {len(payload)} bytes", code=-1
            )
        self._debug(f"BYTES_IO_WRITE: number of bytes written = {written}")
        return written

    def flush(self, unit: int) -> None:
        """Flush buffered data and sync it to storage."""
        handle = self._file(unit)
        self._debug(f"BYTES_IO_FLUSH: fptable slot = {unit}")
        try:
            handle.flush()
        except (OSError, ValueError) as exc:
            raise BytesIOError(f"bytes_io_flush: fflush failed: {exc}") from exc
        try:
            os.fsync(handle.fileno())
        except OSError as exc:
            raise BytesIOError(f"bytes_io_flush: Cannot fsync: {exc}") from exc

    def close(self, unit: int) -> None:
        """Flush and close the file; closing a closed unit only warns."""
        self._debug(f"BYTES_IO_CLOSE: fptable slot = {unit}")
        if not self.is_open(unit):
            warnings.warn(
                f"bytes_io_close: File (fptable slot = {unit}) was already closed.",
                RuntimeWarning,
                stacklevel=2,
            )
            return
        self.flush(unit)
        handle = self._file(unit)
        try:
            handle.close()
        except OSError as exc:
            raise BytesIOError(f"bytes_io_close: {exc}") from exc
        self._files[unit] = None