"""Tests for the securetoken command line."""

import pytest
from click.testing import CliRunner

from securetoken import Token, __version__
from securetoken import cli as cli_module
from securetoken.cli import cli


@pytest.fixture
def runner(monkeypatch):
    # Logging writes to the runner's temporary streams otherwise
    monkeypatch.setattr(cli_module, "configure_logging", lambda settings=None: None)
    return CliRunner()


def test_generate_default(runner):
    result = runner.invoke(cli, ["generate"])

    assert result.exit_code == 0
    token = Token.from_text(result.stdout.strip())
    assert len(token) == 32


def test_generate_many(runner):
    result = runner.invoke(cli, ["generate", "--length", "16", "--count", "3"])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 3
    assert len({line for line in lines}) == 3
    assert all(len(Token.from_text(line)) == 16 for line in lines)


def test_generate_hex(runner):
    result = runner.invoke(cli, ["generate", "-l", "16", "--format", "hex"])

    assert result.exit_code == 0
    value = result.stdout.strip()
    assert len(value) == 32
    assert bytes.fromhex(value)


def test_generate_rejects_negative_length(runner):
    result = runner.invoke(cli, ["generate", "--length", "-1"])
    assert result.exit_code == 2


def test_decode(runner):
    result = runner.invoke(cli, ["decode", "--", "--8"])

    assert result.exit_code == 0
    assert "Length: 2 bytes" in result.stdout
    assert "fbef" in result.stdout


def test_decode_invalid_text(runner):
    result = runner.invoke(cli, ["decode", "ab+c"])

    assert result.exit_code == 1
    assert "Hex" not in result.stdout


def test_info(runner):
    result = runner.invoke(cli, ["info"])

    assert result.exit_code == 0
    assert f"securetoken v{__version__}" in result.stdout
    assert "Default Length:  32 bytes" in result.stdout
    assert "Environment:     testing" in result.stdout


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout
