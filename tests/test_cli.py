"""Tests for the command-line front end."""

import io
import logging
import os

import pytest

from core_bridge import config
from core_bridge.__main__ import main
from core_bridge.logging_setup import BRIEF_FORMAT, DETAILED_FORMAT, setup_logging

from conftest import SAMPLE_TOKEN, make_token


def _exit_code(argv) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


# ============================================================================
# Dispatcher
# ============================================================================


def test_usage_without_command(capsys):
    assert _exit_code([]) == 0
    assert "usage: python -m core_bridge" in capsys.readouterr().out


def test_unknown_command(capsys):
    assert _exit_code(["frobnicate"]) == 1
    assert "Unknown command: frobnicate" in capsys.readouterr().out


def test_hello(capsys):
    main(["hello"])
    assert capsys.readouterr().out.strip() == "Hello mh from Python!"


# ============================================================================
# jwt
# ============================================================================


def test_jwt_argument(capsys):
    main(["jwt", SAMPLE_TOKEN])
    out = capsys.readouterr().out
    assert "Header:" in out
    assert '    "alg": "HS256"' in out
    assert '"name": "John Doe"' in out
    assert "SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c" in out


def test_jwt_raw(capsys):
    main(["jwt", "--raw", SAMPLE_TOKEN])
    assert '{"alg":"HS256","typ":"JWT"}' in capsys.readouterr().out


def test_jwt_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(f"  {SAMPLE_TOKEN}\n"))
    main(["jwt", "--stdin"])
    assert '"sub": "1234567890"' in capsys.readouterr().out


def test_jwt_empty_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("   \n"))
    assert _exit_code(["jwt", "--stdin"]) == 1
    assert "No token received" in capsys.readouterr().out


def test_jwt_interactive(capsys, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: SAMPLE_TOKEN + "  ")
    main(["jwt"])
    out = capsys.readouterr().out
    assert "JWT Token Decoder" in out
    assert '"typ": "JWT"' in out


def test_jwt_interactive_eof(monkeypatch):
    def _raise(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", _raise)
    assert _exit_code(["jwt"]) == 130


@pytest.mark.parametrize(
    "token, fragment",
    [
        ("a.b", "expected 3 parts"),
        ("a.b.c", "base64url"),
        ("aW52YWxpZA.aW52YWxpZA.sig", "as JSON"),
    ],
)
def test_jwt_errors(capsys, token, fragment):
    assert _exit_code(["jwt", token]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Error:")
    assert fragment in out


def test_jwt_deeply_nested_header_reports_error(capsys):
    assert _exit_code(["jwt", make_token("[" * 100000 + "]" * 100000, {"a": 1})]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Error: Could not parse header as JSON")


# ============================================================================
# calc
# ============================================================================


def test_calc_sequence(capsys):
    main(["calc", "--initial", "10", "add", "5", "multiply", "2", "subtract", "10", "divide", "4"])
    assert capsys.readouterr().out.strip() == "5"


def test_calc_negative_operands(capsys):
    main(["calc", "--initial", "-7", "divide", "2", "add", "-1"])
    assert capsys.readouterr().out.strip() == "-4"


def test_calc_no_steps_prints_initial(capsys):
    main(["calc", "--initial", "3"])
    assert capsys.readouterr().out.strip() == "3"


def test_calc_initial_from_config(capsys, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("calculator:\n  initial_value: 40\n")
    main(["calc", "--config", str(path), "add", "2"])
    assert capsys.readouterr().out.strip() == "42"


def test_calc_reads_default_config_from_working_directory(capsys, tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "config.yaml").write_text("calculator:\n  initial_value: 20\n")
    main(["calc", "multiply", "2"])
    assert capsys.readouterr().out.strip() == "40"


def test_calc_initial_from_env(capsys, monkeypatch):
    monkeypatch.setenv(config.ENV_INITIAL_VALUE, "100")
    main(["calc", "subtract", "1"])
    assert capsys.readouterr().out.strip() == "99"


def test_calc_overflow_reports_unchanged_value(capsys):
    assert _exit_code(["calc", "--initial", "2147483647", "add", "1"]) == 1
    out = capsys.readouterr().out
    assert "Error: add 1" in out
    assert "Value unchanged: 2147483647" in out


def test_calc_division_by_zero(capsys):
    assert _exit_code(["calc", "--initial", "9", "divide", "0"]) == 1
    out = capsys.readouterr().out
    assert "Division by zero" in out
    assert "Value unchanged: 9" in out


@pytest.mark.parametrize(
    "argv",
    [
        ["calc", "add"],
        ["calc", "modulo", "3"],
        ["calc", "add", "three"],
        ["calc", "add", "2147483648"],
        ["calc", "--initial", "2147483648"],
    ],
)
def test_calc_argument_errors(argv):
    assert _exit_code(argv) == 2


def test_calc_bad_config_exits(tmp_path):
    assert _exit_code(["calc", "--config", str(tmp_path / "missing.yaml"), "add", "1"]) == 1


# ============================================================================
# Logging setup
# ============================================================================


def test_setup_logging_console_only():
    assert setup_logging() is None
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert handlers[0].level == logging.WARNING
    assert handlers[0].formatter._fmt == BRIEF_FORMAT


def test_setup_logging_verbose_with_file(tmp_path):
    log_path = setup_logging(verbose=True, log_dir=str(tmp_path / "logs"))
    assert log_path is not None
    assert os.path.dirname(log_path) == str(tmp_path / "logs")

    logging.getLogger("core_bridge.test").debug("hello from the test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    with open(log_path, encoding="utf-8") as f:
        assert "hello from the test" in f.read()
    assert all(h.level == logging.DEBUG for h in logging.getLogger().handlers)
    assert all(h.formatter._fmt == DETAILED_FORMAT for h in logging.getLogger().handlers)
