"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from envfile import __version__
from envfile.cli.main import build_parser, main


def run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "envfile.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "envfile: Environment File Codec" in result.stdout
    assert "--analyze" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert f"envfile {__version__}" in result.stdout


def test_cli_analyze_file(tmp_path: Path, record_source: str) -> None:
    """Test CLI --analyze with a file defining records."""
    source = tmp_path / "settings.py"
    source.write_text(record_source, encoding="utf-8")

    result = run_cli("--analyze", str(source))
    assert result.returncode == 0, result.stderr
    assert "envfile: Environment File Codec" in result.stdout
    assert "2 records loaded." in result.stdout
    assert "Settings" in result.stdout
    assert "MY_SETTING" in result.stdout
    assert "EMPTY [omitempty]" in result.stdout
    assert "(skipped)" in result.stdout
    assert "Keys: 3, skipped fields: 1" in result.stdout
    assert "Warning: key DB_USER is shared by fields user, password" in result.stdout


def test_cli_analyze_no_records(tmp_path: Path) -> None:
    """Test CLI --analyze with a file without records."""
    source = tmp_path / "empty.py"
    source.write_text("VALUE = 1\n", encoding="utf-8")

    result = run_cli("--analyze", str(source))
    assert result.returncode == 0
    assert "No record classes found" in result.stdout


def test_cli_analyze_broken_file(tmp_path: Path) -> None:
    """Test CLI --analyze with a file that fails to import."""
    source = tmp_path / "broken.py"
    source.write_text("raise RuntimeError('boom')\n", encoding="utf-8")

    result = run_cli("--analyze", str(source))
    assert result.returncode == 1
    assert "Error analyzing file: boom" in result.stderr


def test_cli_analyze_missing_file() -> None:
    """Test CLI --analyze with missing file."""
    result = run_cli("--analyze", "nonexistent.py")
    assert result.returncode == 1
    assert "not found" in result.stderr.lower()


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = run_cli()
    assert result.returncode == 0
    assert "envfile: Environment File Codec" in result.stdout


def test_main_missing_file(tmp_path: Path, capsys) -> None:
    """Test main() reports a missing file through its exit code."""
    assert main(["--analyze", str(tmp_path / "missing.py")]) == 1
    captured = capsys.readouterr()
    assert "Error: File not found" in captured.err
    assert captured.out == ""


def test_main_no_args_prints_grammar(capsys) -> None:
    """Test main() without arguments prints help with the config grammar."""
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "key[,flag]*" in out
    assert ",omitempty" in out


def test_main_analyze(tmp_path: Path, record_source: str, capsys) -> None:
    """Test main() analyzes a file in-process."""
    source = tmp_path / "settings.py"
    source.write_text(record_source, encoding="utf-8")

    assert main(["--analyze", str(source)]) == 0
    assert "2 records loaded." in capsys.readouterr().out


def test_build_parser_defaults() -> None:
    """Test parsed defaults when no flags are given."""
    args = build_parser().parse_args([])
    assert args.analyze is None
    assert args.verbose is False
