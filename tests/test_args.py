import os

import pytest

from fiatkit.args import ArgumentRegistry, find_executable


def test_find_executable_is_absolute_path():
    path = find_executable()
    assert path.startswith("/")


def test_register_records_arguments():
    reg = ArgumentRegistry(environ={})
    reg.register(["prog", "a", "b"])
    assert reg.argc() == 3
    assert reg.count() == 2
    assert reg.argv() == ["prog", "a", "b"]
    assert reg.get(1) == "a"
    assert reg.get(2) == "b"
    assert reg.executable() == "prog"
    assert reg.get(0) == "prog"


def test_default_terminator_stops_registration():
    reg = ArgumentRegistry(environ={})
    reg.register(["prog", "x", "-^", "y"])
    assert reg.count() == 1
    assert reg.argv() == ["prog", "x"]


def test_terminator_from_environment():
    reg = ArgumentRegistry(environ={"MPL_CL_TERMINATE": "--stop"})
    reg.register(["prog", "a", "--stop", "b", "-^"])
    assert reg.argv() == ["prog", "a"]


def test_none_entry_stops_registration():
    reg = ArgumentRegistry(environ={})
    reg.register(["prog", "a", None, "b"])
    assert reg.count() == 1


def test_second_register_is_ignored():
    reg = ArgumentRegistry(environ={})
    reg.register(["prog", "a"])
    reg.register(["other", "b", "c"])
    assert reg.argv() == ["prog", "a"]


def test_empty_argv_registers_nothing():
    reg = ArgumentRegistry(environ={})
    reg.register([])
    assert reg.argc() == 0
    assert reg.count() == -1
    assert reg.argv() == [reg.executable()]


def test_terminator_first_uses_executable():
    reg = ArgumentRegistry(environ={})
    reg.register(["-^", "a"])
    assert reg.argc() == 1
    assert reg.count() == 0
    assert reg.argv() == [reg.executable()]
    assert reg.executable() == find_executable()


def test_get_out_of_range_is_empty():
    reg = ArgumentRegistry(environ={})
    reg.register(["prog", "a"])
    assert reg.get(2) == ""
    assert reg.get(-1) == ""


def test_put_replaces_argument():
    reg = ArgumentRegistry(environ={})
    reg.register(["prog", "a", "b"])
    reg.put(1, "changed")
    assert reg.get(1) == "changed"
    assert reg.argv() == ["prog", "changed", "b"]


def test_put_out_of_range_raises():
    reg = ArgumentRegistry(environ={})
    reg.register(["prog", "a"])
    with pytest.raises(IndexError):
        reg.put(2, "x")


def test_put_before_register_raises():
    reg = ArgumentRegistry(environ={})
    with pytest.raises(IndexError):
        reg.put(0, "x")


def test_reset_clears_and_resizes():
    reg = ArgumentRegistry(environ={})
    reg.register(["prog", "a"])
    reg.reset(2, "@@")
    assert reg.count() == 2
    assert reg.argc() == 3
    assert reg.argv() == []
    assert reg.get(1) == ""
    reg.put(0, "p")
    reg.put(1, "q")
    reg.put(2, "r")
    assert reg.argv() == ["p", "q", "r"]


def test_reset_negative_becomes_zero():
    reg = ArgumentRegistry(environ={})
    reg.reset(-5)
    assert reg.count() == 0
    with pytest.raises(IndexError):
        reg.put(1, "x")


def test_register_after_reset_is_ignored():
    reg = ArgumentRegistry(environ={})
    reg.reset(1)
    reg.register(["prog", "a"])
    assert reg.argv() == []
    assert reg.count() == 1


def test_executable_before_register_matches_lookup():
    reg = ArgumentRegistry(environ=dict(os.environ))
    assert reg.get(0) == find_executable()