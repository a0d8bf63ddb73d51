import os
import signal

import pytest

from fiatkit.process import (
    AbortError,
    abort,
    exit_with,
    parse_umask,
    raise_signal,
    set_umask_from_env,
)


def test_abort_carries_location():
    with pytest.raises(AbortError) as info:
        abort("model.c", 42, "bad input")
    err = info.value
    assert err.filename == "model.c"
    assert err.linenum == 42
    assert err.text == "bad input"
    assert "model.c" in str(err) and "bad input" in str(err)


def test_abort_without_file_or_text():
    with pytest.raises(AbortError) as info:
        abort(None, 7, None)
    assert info.value.text == ""
    assert info.value.filename is None
    assert str(info.value) == ""


def test_exit_with_code():
    with pytest.raises(SystemExit) as info:
        exit_with(3)
    assert info.value.code == 3


def test_exit_without_code_is_zero():
    with pytest.raises(SystemExit) as info:
        exit_with(None)
    assert info.value.code == 0


def test_sigabrt_aborts():
    with pytest.raises(AbortError) as info:
        raise_signal(signal.SIGABRT)
    assert "SIGABRT" in info.value.text


def test_other_signal_is_delivered():
    received = []
    previous = signal.signal(signal.SIGUSR1, lambda signum, frame: received.append(signum))
    try:
        raise_signal(signal.SIGUSR1)
    finally:
        signal.signal(signal.SIGUSR1, previous)
    assert received == [signal.SIGUSR1]


@pytest.mark.parametrize("text", ["022", " 0777", "17x", "7"])
def test_parse_umask_reads_octal(text):
    assert parse_umask(text) == int(text.strip().rstrip("x"), 8)


@pytest.mark.parametrize("text", ["abc", "8", "", "  "])
def test_parse_umask_rejects(text):
    assert parse_umask(text) is None


def test_set_umask_unset_variable():
    assert set_umask_from_env({}) is None


def test_set_umask_invalid_value():
    assert set_umask_from_env({"EC_SET_UMASK": "xyz"}) is None


def test_set_umask_applies(capsys):
    original = os.umask(0o22)
    try:
        result = set_umask_from_env({"EC_SET_UMASK": "027"})
        current = os.umask(0o22)
    finally:
        os.umask(original)
    assert result == (0o27, 0o22)
    assert current == 0o27
    assert "*** EC_SET_UMASK : new/old = 27/22 (oct)" in capsys.readouterr().err