[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fiatkit"
version = "0.1.0"
description = "Runtime utilities for scientific codes: Julian-day date arithmetic, unit-numbered binary file I/O, byte swapping, argument and environment helpers, MPI constants and CPU binding reports."
requires-python = ">=3.10"
dependencies = []
keywords = ["julian", "date arithmetic", "binary io", "byteswap", "endian", "mpi", "affinity"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fiat-printbinding = "fiatkit.printbinding:main"

[tool.hatch.build.targets.wheel]
packages = ["fiatkit"]

[tool.pytest.ini_options]
addopts = "-ra"
