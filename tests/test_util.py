import pytest

from framechat.util import (
    DEBUG_ENV,
    RED,
    RESET,
    debug_log,
    log,
    log_error,
    name_hash,
)


def test_empty_and_none_hash_to_seed():
    assert name_hash("") == 8603
    assert name_hash(None) == 8603


def test_hash_is_deterministic_and_32_bit():
    first = name_hash("message")
    assert first == name_hash("message")
    assert 0 <= first <= 0xFFFFFFFF


@pytest.mark.parametrize("text", ["message", "join", "Join", "JOIN"])
def test_str_and_bytes_agree(text):
    assert name_hash(text) == name_hash(text.encode())


def test_dispatch_names_are_distinct():
    names = ["message", "join", "Join", "JOIN", "leave", "quit"]
    assert len({name_hash(name) for name in names}) == len(names)


def test_hash_stops_at_nul():
    assert name_hash("join\0extra") == name_hash("join")
    assert name_hash("\0join") == name_hash("")


def test_high_bytes_are_hashed():
    assert name_hash("\u00e9") != name_hash("")
    assert 0 <= name_hash("\u00e9t\u00e9") <= 0xFFFFFFFF


def test_log_prints_line(capsys):
    log("hello there")
    assert capsys.readouterr().out == "hello there\n"


def test_log_error_wraps_in_red(capsys):
    log_error("broken")
    assert capsys.readouterr().out == f"{RED}broken{RESET}\n"


def test_debug_log_silent_by_default(capsys, monkeypatch):
    monkeypatch.delenv(DEBUG_ENV, raising=False)
    debug_log("hidden")
    assert capsys.readouterr().out == ""


def test_debug_log_prints_when_enabled(capsys, monkeypatch):
    monkeypatch.setenv(DEBUG_ENV, "1")
    debug_log("shown")
    assert capsys.readouterr().out == "shown\n"