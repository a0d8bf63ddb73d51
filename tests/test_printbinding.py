import re

import pytest

from fiatkit.printbinding import compress_cores, current_binding, format_binding, main


def _expand(text):
    """Read a compressed core list back into a set of cores."""
    assert text.startswith("(") and text.endswith(")")
    cores = set()
    for part in text[1:-1].split(","):
        if "-" in part:
            low, high = part.split("-")
            cores.update(range(int(low), int(high) + 1))
        else:
            cores.add(int(part))
    return cores


def test_contiguous_run_is_a_range():
    assert compress_cores([0, 1, 2, 3]) == "(0-3)"


def test_isolated_cores_are_listed():
    assert compress_cores([0, 2, 4]) == "(0,2,4)"


def test_no_cores():
    assert compress_cores([]) == "(-1)"


@pytest.mark.parametrize(
    "cores",
    [[5], [0, 1], [0, 1, 2, 5, 6, 7], [1, 3, 4, 5, 9], [10, 11, 12, 13, 20, 22]],
)
def test_round_trip(cores):
    assert _expand(compress_cores(cores)) == set(cores)


def test_unsorted_input_is_ordered():
    assert compress_cores([3, 1, 2, 0]) == compress_cores([0, 1, 2, 3])


def test_format_binding_layout():
    line = format_binding(0, "node", [[0, 1, 2, 3], [4]])
    assert line.startswith("Rank    0 on             node has   2 threads on cores: ")
    assert line.endswith(compress_cores([0, 1, 2, 3]) + compress_cores([4]))


def test_format_binding_long_hostname_not_truncated():
    name = "a-very-long-hostname-indeed"
    line = format_binding(12, name, [[0]])
    assert f"Rank   12 on {name} has   1 threads" in line


def test_current_binding_shape():
    host, thread_cores = current_binding()
    assert len(thread_cores) == 1
    cores = thread_cores[0]
    assert cores == sorted(cores)
    assert all(core >= 0 for core in cores)
    assert len(host) <= 99


def test_main_prints_rank_zero(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert re.match(r"Rank    0 on .* has   1 threads on cores: \(", out)