# fiatkit

Small runtime utilities for numerical and scientific programs. The package
has no dependencies outside the standard library.

## Modules

- `fiatkit.julian`: date and time arithmetic on Julian day numbers.
  `Date(year, month, day)` and `Time(hour, minute, second)` are frozen
  dataclasses. Functions include `date_to_julian`, `julian_to_date`,
  `time_to_seconds`, `seconds_to_time`, `date_to_century`, `century_to_date`,
  `date_to_yearday`, `yearday_to_date`, `add_days`, `add_hours`,
  `add_minutes`, `add_seconds`, `days_between`, `hours_between`,
  `minutes_between` and `seconds_between`. Years run from 0 to 9999. Bad
  input raises `InvalidDateError`, `InvalidTimeError` or `DateRangeError`,
  all subclasses of `JulianError` (itself a `ValueError`).
- `fiatkit.ecdates`: the same arithmetic with plain integer arguments and
  results: `daydiff`, `hourdiff`, `mindiff`, `secdiff`, `dayincr`,
  `hourincr`, `minincr`, `secincr`, `cd2date`, `yd2date`, `idate2cd`,
  `idate2yd`, `icd2ymd` and `iymd2cd`. "Century days" count from
  1900-01-01, which is day 1. `icd2ymd` and `iymd2cd` use packed
  `YYYYMMDD` integers.
- `fiatkit.endian`: `is_little_endian`, `is_big_endian`, `swap_bytes(data, size)`
  (reverses every `size`-byte element), `to_big_endian(data, size)` and
  `transfer(data, out_len)` (copies at most `out_len` leading bytes).
- `fiatkit.bytes_io`: `UnitTable`, a table of open binary files addressed by
  integer unit numbers, with `open`, `seek`, `tell`, `read`, `write`,
  `flush` (which also fsyncs), `close` and `is_open`. It works as a context
  manager that closes every unit still open. Modes are `r`, `r+`, `w`/`c`
  and `a`, in either case. Failures raise `BytesIOError`; a short read or
  seek past the data raises `EndOfFileError`, whose `data` holds what was
  read. The buffer size comes from `BYTES_IO_BUFSIZE` and the debug level
  from `BYTES_IO_DEBUG` (see `buffer_size_from_env`, `debug_level_from_env`).
- `fiatkit.args`: `ArgumentRegistry` records the command-line arguments once,
  stopping at a terminator (`MPL_CL_TERMINATE`, `-^` by default), and gives
  them back with `argc`, `argv`, `count`, `get`, `put` and `reset`.
  `find_executable` locates the running program through `/proc` or, failing
  that, by running `/bin/ps`.
- `fiatkit.env`: `environment_entries`, `get_env`, `put_env`, `sleep`,
  `microsleep`, `hostname`, `padded_hostname`, `cpuset_to_string`,
  `affinity`, `core_id`, `get_pid`, `get_tid`, `mpi_epoch`, `cpu_model`,
  and `mpi_rank` / `mpi_size`, which read the rank and task count from
  common launcher variables (defaulting to 0 and 1).
- `fiatkit.mpi_constants`: the serial MPI constant table. `lookup` ignores
  case and the `MPI_` prefix; `names_for` finds names by value;
  `all_constants` returns a copy of the table.
- `fiatkit.versions`: `openmp_version` maps an OpenMP `yyyymm` release date
  to `(version, subversion)`.
- `fiatkit.process`: `abort` raises `AbortError`, `exit_with` raises
  `SystemExit`, `raise_signal` sends a signal (SIGABRT becomes an
  `AbortError`), and `set_umask_from_env` applies the octal umask in
  `EC_SET_UMASK`.
- `fiatkit.printbinding`: `compress_cores`, `format_binding`,
  `current_binding` and the `main` function of the command below.

## Example

```python
from fiatkit.julian import Date, Time, add_hours
from fiatkit.ecdates import idate2cd, cd2date

new_date, new_time = add_hours(Date(2024, 2, 28), Time(20, 0, 0), 30)
# Date(year=2024, month=3, day=1), Time(hour=2, minute=0, second=0)

icd = idate2cd(1900, 1, 1)   # 1
cd2date(icd)                  # (1900, 1, 1)
```

```python
from fiatkit.bytes_io import UnitTable

with UnitTable() as table:
    unit = table.open("data.bin", "w")
    table.write(unit, b"\x00\x01\x02")
```

## Command

```
fiat-printbinding
```

This prints the host name and the cores the current process may run on,
with runs written compactly, for example:

```
Rank    0 on           myhost has   1 threads on cores: (0-7)
```

## What it does not do

`fiat-printbinding` reports only the process it runs in, as rank 0 with a
single thread. It does not start or talk to other MPI ranks and does not
gather bindings from them; `fiatkit.mpi_constants` is a table of values,
not a message-passing layer.

## Tests

```
pip install -e .[test]
pytest
```