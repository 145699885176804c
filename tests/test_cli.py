"""Tests for the pakr-iec command line entry point."""

import argparse

import pytest

from pakr_iec.cli import EXIT_OK, EXIT_OUT_OF_RANGE, magnitude, main, parse_args


def test_main_decimal_default(capsys):
    assert main(["1000", "10000000"]) == EXIT_OK
    out = capsys.readouterr().out
    assert out.splitlines() == ["1.0k", "10.0M"]


def test_main_iec_mode(capsys):
    assert main(["--mode", "iec", "1024", "1127"]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["1.0ki", "1.1ki"]


def test_main_accepts_prefixed_literals(capsys):
    assert main(["--mode", "iec", "0x400", "1_048_576"]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["1.0ki", "1.0Mi"]


def test_main_both(capsys):
    assert main(["--both", "2097152"]) == EXIT_OK
    assert capsys.readouterr().out == "2097152\t2.0M\t2.0Mi\n"


def test_main_default_mode_from_env(capsys, monkeypatch):
    monkeypatch.setenv("DEFAULT_MODE", "iec")
    assert main(["1024"]) == EXIT_OK
    assert capsys.readouterr().out == "1.0ki\n"


def test_main_out_of_range_logs_and_continues(capsys):
    too_big = str(1000**9)
    assert main(["1", too_big, "1000"]) == EXIT_OUT_OF_RANGE
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["1.0", "1.0k"]
    assert "Magnitude out of range" in captured.err
    assert "MagnitudeOutOfRangeError" in captured.err
    assert too_big in captured.err


def test_main_writes_log_file(capsys, monkeypatch, tmp_path):
    log_file = tmp_path / "logs" / "pakr_iec.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert main(["1024"]) == EXIT_OK
    assert "Formatted" in log_file.read_text(encoding="utf-8")


@pytest.mark.parametrize("arg", ["-1", "abc", "1.5", ""])
def test_main_rejects_bad_values(arg, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([arg])
    assert exc_info.value.code == 2


def test_magnitude_type():
    assert magnitude("0") == 0
    assert magnitude("0o17") == 15
    assert magnitude("0b1000") == 8
    with pytest.raises(argparse.ArgumentTypeError):
        magnitude("-5")


def test_parse_args_defaults():
    args = parse_args(["5"])
    assert args.values == [5]
    assert args.mode == "decimal"
    assert args.both is False
