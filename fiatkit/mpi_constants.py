"""Named integer constants of the serial (single-task) MPI interface.

Names are the usual ``MPI_*`` identifiers. Lookups ignore case and accept
names with or without the ``MPI_`` prefix, as Fortran code would.
"""

from __future__ import annotations

from types import MappingProxyType

__all__ = ["lookup", "names_for", "all_constants"]

_PREFIX = "MPI_"

_CONSTANTS: dict[str, int] = {
    # Kind parameters
    "MPI_INTEGER_KIND": 4,
    "MPI_ADDRESS_KIND": 8,
    "MPI_OFFSET_KIND": 8,
    # Miscellaneous constants
    "MPI_STATUS_SIZE": 6,
    # Configurable length constants
    "MPI_MAX_PROCESSOR_NAME": 256 - 1,
    "MPI_MAX_ERROR_STRING": 256 - 1,
    "MPI_MAX_OBJECT_NAME": 64 - 1,
    "MPI_MAX_LIBRARY_VERSION_STRING": 256 - 1,
    "MPI_MAX_INFO_KEY": 36 - 1,
    "MPI_MAX_INFO_VAL": 256 - 1,
    "MPI_MAX_PORT_NAME": 1024 - 1,
    "MPI_MAX_DATAREP_STRING": 128 - 1,
    # General constants
    "MPI_ANY_SOURCE": -1,
    "MPI_ANY_TAG": -1,
    "MPI_APPNUM": 4,
    "MPI_BSEND_OVERHEAD": 128,
    "MPI_CART": 1,
    "MPI_COMBINER_CONTIGUOUS": 2,
    "MPI_COMBINER_DARRAY": 13,
    "MPI_COMBINER_DUP": 1,
    "MPI_COMBINER_F90_COMPLEX": 15,
    "MPI_COMBINER_F90_INTEGER": 16,
    "MPI_COMBINER_F90_REAL": 14,
    "MPI_COMBINER_HINDEXED": 8,
    "MPI_COMBINER_HINDEXED_BLOCK": 18,
    "MPI_COMBINER_HINDEXED_INTEGER": 7,
    "MPI_COMBINER_HVECTOR": 5,
    "MPI_COMBINER_HVECTOR_INTEGER": 4,
    "MPI_COMBINER_INDEXED": 6,
    "MPI_COMBINER_INDEXED_BLOCK": 9,
    "MPI_COMBINER_NAMED": 0,
    "MPI_COMBINER_RESIZED": 17,
    "MPI_COMBINER_STRUCT": 11,
    "MPI_COMBINER_STRUCT_INTEGER": 10,
    "MPI_COMBINER_SUBARRAY": 12,
    "MPI_COMBINER_VECTOR": 3,
    "MPI_COMM_TYPE_SHARED": 0,
    "MPI_CONGRUENT": 1,
    "MPI_DISTRIBUTE_BLOCK": 0,
    "MPI_DISTRIBUTE_CYCLIC": 1,
    "MPI_DISTRIBUTE_DFLT_DARG": -1,
    "MPI_DISTRIBUTE_NONE": 2,
    "MPI_ERROR": 3,
    "MPI_ERR_ACCESS": 20,
    "MPI_ERR_AMODE": 21,
    "MPI_ERR_ARG": 13,
    "MPI_ERR_ASSERT": 22,
    "MPI_ERR_BAD_FILE": 23,
    "MPI_ERR_BASE": 24,
    "MPI_ERR_BUFFER": 1,
    "MPI_ERR_COMM": 5,
    "MPI_ERR_CONVERSION": 25,
    "MPI_ERR_COUNT": 2,
    "MPI_ERR_DIMS": 12,
    "MPI_ERR_DISP": 26,
    "MPI_ERR_DUP_DATAREP": 27,
    "MPI_ERR_FILE": 30,
    "MPI_ERR_FILE_EXISTS": 28,
    "MPI_ERR_FILE_IN_USE": 29,
    "MPI_ERR_GROUP": 9,
    "MPI_ERR_INFO": 34,
    "MPI_ERR_INFO_KEY": 31,
    "MPI_ERR_INFO_NOKEY": 32,
    "MPI_ERR_INFO_VALUE": 33,
    "MPI_ERR_INTERN": 17,
    "MPI_ERR_IN_STATUS": 18,
    "MPI_ERR_IO": 35,
    "MPI_ERR_KEYVAL": 36,
    "MPI_ERR_LASTCODE": 54,
    "MPI_ERR_LOCKTYPE": 37,
    "MPI_ERR_NAME": 38,
    "MPI_ERR_NOT_SAME": 40,
    "MPI_ERR_NO_MEM": 39,
    "MPI_ERR_NO_SPACE": 41,
    "MPI_ERR_NO_SUCH_FILE": 42,
    "MPI_ERR_OP": 10,
    "MPI_ERR_OTHER": 16,
    "MPI_ERR_PENDING": 19,
    "MPI_ERR_PORT": 43,
    "MPI_ERR_QUOTA": 44,
    "MPI_ERR_RANK": 6,
    "MPI_ERR_READ_ONLY": 45,
    "MPI_ERR_REQUEST": 7,
    "MPI_ERR_RMA_CONFLICT": 46,
    "MPI_ERR_RMA_SYNC": 47,
    "MPI_ERR_ROOT": 8,
    "MPI_ERR_SERVICE": 48,
    "MPI_ERR_SIZE": 49,
    "MPI_ERR_SPAWN": 50,
    "MPI_ERR_SYSRESOURCE": -2,
    "MPI_ERR_TAG": 4,
    "MPI_ERR_TOPOLOGY": 11,
    "MPI_ERR_TRUNCATE": 15,
    "MPI_ERR_TYPE": 3,
    "MPI_ERR_UNKNOWN": 14,
    "MPI_ERR_UNSUPPORTED_DATAREP": 51,
    "MPI_ERR_UNSUPPORTED_OPERATION": 52,
    "MPI_ERR_WIN": 53,
    "MPI_GRAPH": 2,
    "MPI_HOST": 1,
    "MPI_IDENT": 0,
    "MPI_IO": 2,
    "MPI_KEYVAL_INVALID": -1,
    "MPI_LASTUSEDCODE": 5,
    "MPI_LOCK_EXCLUSIVE": 1,
    "MPI_LOCK_SHARED": 2,
    "MPI_MODE_NOCHECK": 1,
    "MPI_MODE_NOPRECEDE": 2,
    "MPI_MODE_NOPUT": 4,
    "MPI_MODE_NOSTORE": 8,
    "MPI_MODE_NOSUCCEED": 16,
    "MPI_ORDER_C": 0,
    "MPI_ORDER_FORTRAN": 1,
    "MPI_PROC_NULL": -2,
    "MPI_ROOT": -4,
    "MPI_SIMILAR": 2,
    "MPI_SOURCE": 1,
    "MPI_SUBVERSION": 1,
    "MPI_SUCCESS": 0,
    "MPI_TAG": 2,
    "MPI_TAG_UB": 0,
    "MPI_THREAD_FUNNELED": 1,
    "MPI_THREAD_MULTIPLE": 3,
    "MPI_THREAD_SERIALIZED": 2,
    "MPI_THREAD_SINGLE": 0,
    "MPI_TYPECLASS_COMPLEX": 3,
    "MPI_TYPECLASS_INTEGER": 1,
    "MPI_TYPECLASS_REAL": 2,
    "MPI_UNDEFINED": -32766,
    "MPI_UNEQUAL": 3,
    "MPI_UNIVERSE_SIZE": 6,
    "MPI_VERSION": 2,
    "MPI_WIN_BASE": 7,
    "MPI_WIN_DISP_UNIT": 9,
    "MPI_WIN_SIZE": 8,
    "MPI_WTIME_IS_GLOBAL": 3,
    # Handles
    "MPI_2COMPLEX": 26,
    "MPI_2DOUBLE_COMPLEX": 27,
    "MPI_2DOUBLE_PRECISION": 24,
    "MPI_2INT": 52,
    "MPI_2INTEGER": 25,
    "MPI_2REAL": 23,
    "MPI_AINT": 66,
    "MPI_BAND": 6,
    "MPI_BOR": 8,
    "MPI_BXOR": 10,
    "MPI_BYTE": 1,
    "MPI_CHAR": 34,
    "MPI_CHARACTER": 5,
    "MPI_COMM_NULL": 2,
    "MPI_COMM_SELF": 1,
    "MPI_COMM_WORLD": 0,
    "MPI_COMPLEX": 18,
    "MPI_COMPLEX16": 20,
    "MPI_COMPLEX32": 21,
    "MPI_COMPLEX8": 19,
    "MPI_CXX_BOOL": 54,
    "MPI_CXX_CPLEX": 55,
    "MPI_CXX_DBLCPLEX": 56,
    "MPI_CXX_LDBLCPLEX": 57,
    "MPI_DATATYPE_NULL": 0,
    "MPI_DOUBLE": 46,
    "MPI_DOUBLE_COMPLEX": 22,
    "MPI_DOUBLE_INT": 49,
    "MPI_DOUBLE_PRECISION": 17,
    "MPI_ERRHANDLER_NULL": 0,
    "MPI_ERRORS_ARE_FATAL": 1,
    "MPI_ERRORS_RETURN": 2,
    "MPI_FLOAT": 45,
    "MPI_FLOAT_INT": 48,
    "MPI_GROUP_EMPTY": 1,
    "MPI_GROUP_NULL": 0,
    "MPI_INFO_ENV": 1,
    "MPI_INFO_NULL": 0,
    "MPI_INT": 39,
    "MPI_INT16_T": 60,
    "MPI_INT32_T": 62,
    "MPI_INT64_T": 64,
    "MPI_INT8_T": 58,
    "MPI_INTEGER": 7,
    "MPI_INTEGER1": 8,
    "MPI_INTEGER16": 12,
    "MPI_INTEGER2": 9,
    "MPI_INTEGER4": 10,
    "MPI_INTEGER8": 11,
    "MPI_LAND": 5,
    "MPI_LB": 4,
    "MPI_LOGICAL": 6,
    "MPI_LOGICAL1": 29,
    "MPI_LOGICAL2": 30,
    "MPI_LOGICAL4": 31,
    "MPI_LOGICAL8": 32,
    "MPI_LONG": 41,
    "MPI_LONGDBL_INT": 50,
    "MPI_LONG_DOUBLE": 47,
    "MPI_LONG_INT": 51,
    "MPI_LONG_LONG_INT": 43,
    "MPI_LOR": 7,
    "MPI_LXOR": 9,
    "MPI_MAX": 1,
    "MPI_MAXLOC": 11,
    "MPI_MESSAGE_NO_PROC": 1,
    "MPI_MESSAGE_NULL": 0,
    "MPI_MIN": 2,
    "MPI_MINLOC": 12,
    "MPI_OFFSET": 67,
    "MPI_OP_NULL": 0,
    "MPI_PACKED": 2,
    "MPI_PROD": 4,
    "MPI_REAL": 13,
    "MPI_REAL16": 16,
    "MPI_REAL2": 28,
    "MPI_REAL4": 14,
    "MPI_REAL8": 15,
    "MPI_REPLACE": 13,
    "MPI_REQUEST_NULL": 0,
    "MPI_SHORT": 37,
    "MPI_SHORT_INT": 53,
    "MPI_SIGNED_CHAR": 36,
    "MPI_SUM": 3,
    "MPI_UB": 3,
    "MPI_UINT16_T": 61,
    "MPI_UINT32_T": 63,
    "MPI_UINT64_T": 65,
    "MPI_UINT8_T": 59,
    "MPI_UNSIGNED": 40,
    "MPI_UNSIGNED_CHAR": 35,
    "MPI_UNSIGNED_LONG": 42,
    "MPI_UNSIGNED_LONG_LONG": 44,
    "MPI_UNSIGNED_SHORT": 38,
    "MPI_WCHAR": 33,
    "MPI_WIN_NULL": 0,
    # I/O constants
    "MPI_DISPLACEMENT_CURRENT": -54278278,
    "MPI_MODE_APPEND": 128,
    "MPI_MODE_CREATE": 1,
    "MPI_MODE_DELETE_ON_CLOSE": 16,
    "MPI_MODE_EXCL": 64,
    "MPI_MODE_RDONLY": 2,
    "MPI_MODE_RDWR": 8,
    "MPI_MODE_SEQUENTIAL": 256,
    "MPI_MODE_UNIQUE_OPEN": 32,
    "MPI_MODE_WRONLY": 4,
    "MPI_SEEK_CUR": 602,
    "MPI_SEEK_END": 604,
    "MPI_SEEK_SET": 600,
}

_TABLE = MappingProxyType(_CONSTANTS)


def _normalise(name: str) -> str:
    key = name.strip().upper()
    return key if key.startswith(_PREFIX) else _PREFIX + key


def lookup(name: str) -> int:
    """Return the value of a constant; raise KeyError if it is unknown."""
    key = _normalise(name)
    try:
        return _TABLE[key]
    except KeyError:
        raise KeyError(f"unknown MPI constant: {name!r}") from None


def names_for(value: int) -> list[str]:
    """Return the sorted names of all constants that have the given value."""
    return sorted(name for name, val in _TABLE.items() if val == value)


def all_constants() -> dict[str, int]:
    """Return a fresh dictionary of every constant by name."""
    return dict(_TABLE)