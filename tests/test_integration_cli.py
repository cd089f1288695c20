"""Integration tests for CLI functionality."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from polysolver_pkg.cli import main_entry
from polysolver_pkg.logging_config import reset_logging

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def run_cli(*args, input_text=None):
    return subprocess.run(
        [sys.executable, "-m", "polysolver_pkg", *args],
        capture_output=True,
        text=True,
        timeout=30,
        cwd=PROJECT_ROOT,
        input=input_text,
        encoding="utf-8",
        env={**os.environ, "PYTHONIOENCODING": "utf-8"},
    )


def test_cli_version():
    """Test --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert result.stdout.strip() != ""


def test_cli_eval_human():
    result = run_cli("--eval", "x^2-5x+6=0")
    assert result.returncode == 0
    assert "x1 = 3.000000, x2 = 2.000000" in result.stdout
    assert "Normalized:" in result.stdout


def test_cli_eval_json():
    result = run_cli("--eval", "2x+4=0", "--format", "json")
    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["ok"] is True
    assert data["result"] == "x = -2.000000"


def test_cli_eval_payload():
    result = run_cli("-e", "0=0", "--format", "payload")
    assert result.returncode == 0
    assert json.loads(result.stdout) == {
        "ast": {"name": "=", "children": [{"name": "0"}, {"name": "0"}]},
        "result": "0 = 0. Infinite solutions.",
    }


def test_cli_invalid_input():
    result = run_cli("-e", "x#1=0", "--format", "payload")
    assert result.returncode == 1
    assert "error" in json.loads(result.stdout)


def test_cli_show_ast():
    result = run_cli("-e", "x=1", "--show-ast")
    assert result.returncode == 0
    assert result.stdout.rstrip().endswith("=\n  x\n  1")


def test_cli_division_flag():
    assert run_cli("-e", "x/2=1").returncode == 1
    result = run_cli("-e", "x/2=1", "--division", "zero")
    assert result.returncode == 0
    assert "Equation degree is 0." in result.stdout


def test_cli_max_exponent_flag():
    result = run_cli("-e", "x^20=0", "--max-exponent", "10", "--format", "json")
    assert result.returncode == 1
    assert json.loads(result.stdout)["error_code"] == "EXPONENT_TOO_LARGE"


def test_cli_precision_flag():
    result = run_cli("-e", "3x=1", "-p", "2")
    assert "x = 0.33" in result.stdout


def test_cli_repl_session():
    result = run_cli(input_text="help\nast on\nx=2\nquit\n")
    assert result.returncode == 0
    assert "REPL commands" in result.stdout
    assert "x = 2.000000" in result.stdout
    assert "Goodbye." in result.stdout


def test_cli_repl_eof():
    result = run_cli(input_text="2x=4\n")
    assert result.returncode == 0
    assert "x = 2.000000" in result.stdout


def test_cli_help():
    """Test --help flag."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "polysolver" in result.stdout.lower()


def test_launcher_script():
    result = subprocess.run(
        [sys.executable, str(PROJECT_ROOT / "polysolver.py"), "-e", "x=3"],
        capture_output=True,
        text=True,
        timeout=30,
        cwd=PROJECT_ROOT,
    )
    assert result.returncode == 0
    assert "x = 3.000000" in result.stdout


def test_main_entry_in_process(capsys):
    try:
        assert main_entry(["-e", "x^2+1=0", "--format", "json"]) == 0
    finally:
        # main_entry installs a stderr handler bound to the captured stream
        reset_logging()
    data = json.loads(capsys.readouterr().out)
    assert data["type"] == "complex"
    assert "roots" in data


def test_cli_debug_log_file(tmp_path):
    log_file = tmp_path / "polysolver.log"
    result = run_cli("--log-level", "DEBUG", "--log-file", str(log_file), "-e", "2x+4=0")
    assert result.returncode == 0
    logged = log_file.read_text(encoding="utf-8")
    assert "[DEBUG] polysolver.cli: Configuration: division=error" in logged
    assert "polysolver.solver" in logged


@pytest.mark.parametrize("flag", ["--log-level", "--format"])
def test_cli_rejects_bad_choices(flag):
    result = run_cli(flag, "BOGUS", "-e", "x=1")
    assert result.returncode == 2


def test_ascii_superscript_fallback():
    from polysolver_pkg.cli import _ascii_superscripts

    assert _ascii_superscripts("x² - x¹⁰ + 1") == "x^2 - x^10 + 1"
