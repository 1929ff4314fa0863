# topmark:header:start
#
#   project      : PillarMode
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests: group help, hint and global option conflicts."""

from __future__ import annotations

from click.testing import Result

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli, parametrize


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    """Running the bare group shows a hint followed by the help text."""
    result: Result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert result.output.startswith("Hint:")
    assert "Usage:" in result.output
    for name in ("highlight", "wrap", "rules", "compile", "version"):
        assert name in result.output


@mark_cli
@parametrize("command", ["highlight", "wrap", "rules", "compile", "version"])
def test_subcommand_help(command: str) -> None:
    """Every subcommand accepts ``-h``."""
    result: Result = run_cli([command, "-h"])
    assert_SUCCESS(result)
    assert "Usage:" in result.output


@mark_cli
def test_verbose_and_quiet_conflict() -> None:
    """``-v`` and ``-q`` are mutually exclusive."""
    result: Result = run_cli(["-v", "-q", "version"])
    assert_USAGE_ERROR(result)


@mark_cli
def test_unknown_color_mode() -> None:
    """Invalid ``--color`` values are rejected by Click."""
    result: Result = run_cli(["--color", "sometimes", "version"])
    assert result.exit_code == 2, result.output
