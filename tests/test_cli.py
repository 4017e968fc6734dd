"""Tests for the command line entry point."""

from __future__ import annotations

from otpgen.__main__ import main

from conftest import SECRET_SHA1, SECRET_SHA256


def test_prints_code(capsys):
    assert main([SECRET_SHA1, "--time", "59"]) == 0
    assert capsys.readouterr().out == "287082\n"


def test_algorithm_and_digits(capsys):
    argv = [SECRET_SHA256, "--time", "59", "--algorithm", "SHA256", "--digits", "8", "--standard-modulus"]
    assert main(argv) == 0
    assert capsys.readouterr().out == "46119246\n"


def test_defaults_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("OTPGEN_DIGITS", "8")
    monkeypatch.setenv("OTPGEN_PERIOD", "60")
    assert main([SECRET_SHA1, "--time", "119"]) == 0
    assert capsys.readouterr().out == "00287082\n"


def test_invalid_secret_exits_with_error(capsys):
    assert main(["1", "--time", "59"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error:" in captured.err


def test_unsupported_algorithm(capsys):
    assert main([SECRET_SHA1, "--algorithm", "MD5"]) == 2
    assert "SHA1, SHA256 or SHA512" in capsys.readouterr().err


def test_invalid_algorithm_in_environment(monkeypatch, capsys):
    monkeypatch.setenv("OTPGEN_ALGORITHM", "MD5")
    assert main([SECRET_SHA1, "--time", "59"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: invalid configuration: OTPGEN_ALGORITHM")
    assert len(captured.err.strip().splitlines()) == 1


def test_invalid_digits_in_environment(monkeypatch, capsys):
    monkeypatch.setenv("OTPGEN_DIGITS", "0")
    assert main([SECRET_SHA1, "--time", "59", "--digits", "6"]) == 2
    assert "OTPGEN_DIGITS" in capsys.readouterr().err
