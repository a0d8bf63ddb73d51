"""Runtime utilities: date arithmetic, binary file units, byte order, arguments, environment, MPI constants and CPU binding."""

__version__ = "0.1.0"
__all__ = [
    "julian",
    "ecdates",
    "endian",
    "bytes_io",
    "args",
    "env",
    "mpi_constants",
    "versions",
    "printbinding",
    "process",
]