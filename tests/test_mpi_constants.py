import pytest

from fiatkit.mpi_constants import all_constants, lookup, names_for


@pytest.mark.parametrize(
    "name, value",
    [
        ("MPI_COMM_WORLD", 0),
        ("MPI_SUCCESS", 0),
        ("MPI_ANY_SOURCE", -1),
        ("MPI_UNDEFINED", -32766),
        ("MPI_DISPLACEMENT_CURRENT", -54278278),
        ("MPI_SEEK_END", 604),
        ("MPI_MAX_PORT_NAME", 1023),
        ("MPI_MAX_PROCESSOR_NAME", 255),
    ],
)
def test_lookup_pinned_values(name, value):
    assert lookup(name) == value


def test_lookup_ignores_case_and_prefix():
    assert lookup("mpi_comm_self") == lookup("MPI_COMM_SELF")
    assert lookup("COMM_SELF") == lookup("MPI_COMM_SELF")
    assert lookup("seek_set") == lookup("MPI_SEEK_SET")


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup("MPI_NO_SUCH_THING")


def test_every_constant_is_found_by_its_value():
    for name, value in all_constants().items():
        assert name in names_for(value)
        assert lookup(name) == value


def test_names_for_is_sorted_and_consistent():
    names = names_for(0)
    assert names == sorted(names)
    assert "MPI_COMM_WORLD" in names
    assert all(lookup(name) == 0 for name in names)


def test_names_for_unused_value_is_empty():
    assert names_for(123456789) == []


def test_all_constants_returns_a_copy():
    table = all_constants()
    table["MPI_COMM_WORLD"] = 99
    assert lookup("MPI_COMM_WORLD") == 0
    assert all_constants()["MPI_COMM_WORLD"] == 0


def test_all_names_carry_the_prefix():
    assert all(name.startswith("MPI_") for name in all_constants())