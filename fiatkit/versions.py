"""Mapping of OpenMP release dates to version numbers."""

from __future__ import annotations

__all__ = ["openmp_version"]

# Lower bounds of the _OPENMP release date for each (version, subversion).
_RELEASES = (
    (201511, (4, 5)),
    (201307, (4, 0)),
    (201107, (3, 1)),
    (200805, (3, 0)),
    (200505, (2, 5)),
)


def openmp_version(openmp: int) -> tuple[int, int]:
    """Return (version, subversion) for an OpenMP yyyymm date; (0, 0) if older."""
    for since, version in _RELEASES:
        if openmp >= since:
            return version
    return (0, 0)