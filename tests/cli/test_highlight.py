# topmark:header:start
#
#   project      : PillarMode
#   file         : test_highlight.py
#   file_relpath : tests/cli/test_highlight.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `highlight` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from click.testing import Result

from pillarmode.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

DOC: str = '!Title\n\nSome ""bold"" text\n\nEnd\n'


def _write_doc(root: Path) -> None:
    (root / "doc.pillar").write_text(DOC, encoding="utf-8")


@mark_cli
def test_highlight_lists_spans(isolation: Path) -> None:
    """The default listing shows offsets, rule names and matched text."""
    _write_doc(isolation)
    result: Result = run_cli_in(isolation, ["--no-color", "highlight", "doc.pillar"])
    assert_SUCCESS(result)
    lines: list[str] = result.output.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith(" 0-6 ")
    assert "header-1" in lines[0]
    assert lines[1].startswith("13-21")
    assert "bold" in lines[1]


@mark_cli
def test_highlight_json_extends_window(isolation: Path) -> None:
    """A window inside the bold text grows to the enclosing paragraph."""
    _write_doc(isolation)
    result: Result = run_cli_in(
        isolation,
        ["highlight", "doc.pillar", "--start", "14", "--end", "15", "--format", "json"],
    )
    assert_SUCCESS(result)
    payload: dict[str, Any] = json.loads(result.output)
    assert payload["window"] == {"start": 6, "end": 28}
    assert payload["spans"] == [
        {"start": 13, "end": 21, "rule": "bold", "style": "bold", "text": '""bold""'}
    ]


@mark_cli
def test_highlight_no_extend(isolation: Path) -> None:
    """With ``--no-extend`` the requested window is scanned as is."""
    _write_doc(isolation)
    result: Result = run_cli_in(
        isolation,
        [
            "highlight",
            "doc.pillar",
            "--start",
            "14",
            "--end",
            "15",
            "--no-extend",
            "--format",
            "json",
        ],
    )
    assert_SUCCESS(result)
    payload: dict[str, Any] = json.loads(result.output)
    assert payload["window"] == {"start": 14, "end": 15}
    assert payload["spans"] == []


@mark_cli
def test_highlight_extension_disabled_by_config(isolation: Path) -> None:
    """``[highlight] extend_region = false`` turns extension off by default."""
    _write_doc(isolation)
    (isolation / "pillarmode.toml").write_text(
        "[highlight]\nextend_region = false\n", encoding="utf-8"
    )
    argv: list[str] = ["highlight", "doc.pillar", "--start", "14", "--end", "15"]
    result: Result = run_cli_in(isolation, [*argv, "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.output)["window"] == {"start": 14, "end": 15}

    result = run_cli_in(isolation, [*argv, "--extend", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.output)["window"] == {"start": 6, "end": 28}


@mark_cli
def test_highlight_ndjson(isolation: Path) -> None:
    """NDJSON output has one span per line."""
    _write_doc(isolation)
    result: Result = run_cli_in(isolation, ["highlight", "doc.pillar", "--format", "ndjson"])
    assert_SUCCESS(result)
    rules: list[str] = [json.loads(line)["rule"] for line in result.output.splitlines()]
    assert rules == ["header-1", "bold"]


@mark_cli
def test_highlight_render_plain(isolation: Path) -> None:
    """Without color, rendering reproduces the window text."""
    _write_doc(isolation)
    result: Result = run_cli_in(isolation, ["--no-color", "highlight", "doc.pillar", "--render"])
    assert_SUCCESS(result)
    assert result.output == DOC


@mark_cli
def test_highlight_render_color(isolation: Path) -> None:
    """With color forced on, styled spans carry ANSI sequences."""
    _write_doc(isolation)
    result: Result = run_cli_in(
        isolation, ["--color", "always", "highlight", "doc.pillar", "--render"]
    )
    assert_SUCCESS(result)
    assert "\x1b[" in result.output
    assert result.output.split("\n")[4] == "End"


@mark_cli
def test_highlight_start_after_end(isolation: Path) -> None:
    """A reversed window is a usage error."""
    _write_doc(isolation)
    result: Result = run_cli_in(
        isolation, ["highlight", "doc.pillar", "--start", "9", "--end", "3"]
    )
    assert_USAGE_ERROR(result)


@mark_cli
def test_highlight_missing_file(isolation: Path) -> None:
    """A missing document exits with FILE_NOT_FOUND."""
    result: Result = run_cli_in(isolation, ["highlight", "missing.pillar"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
