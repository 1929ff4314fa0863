# topmark:header:start
#
#   project      : PillarMode
#   file         : test_special_text.py
#   file_relpath : tests/rules/test_special_text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for delimiter-based (special text) rules."""

from __future__ import annotations

import pytest

from pillarmode.rules.base import InsertionAction, SpecialTextRule
from pillarmode.rules.registry import RuleRegistry
from pillarmode.scan.highlighter import highlight
from pillarmode.scan.window import ScanWindow
from tests.conftest import parametrize


def _stars() -> SpecialTextRule:
    return SpecialTextRule(
        "strong",
        delimiter="**",
        shortcut_key="s",
        attributes={"weight": "bold"},
    )


def _matches(rule: SpecialTextRule, text: str) -> list[str]:
    return [m.group(0) for m in rule.regex.finditer(text)]


def test_pattern_is_derived_from_delimiter() -> None:
    """The authored pattern comes from the delimiter, with the body in group 1."""
    rule: SpecialTextRule = _stars()
    assert "[[anything]]" in rule.pattern
    m = rule.regex.search("a **b** c")
    assert m is not None
    assert (m.group(0), m.group(1)) == ("**b**", "b")


def test_first_closing_delimiter_wins() -> None:
    """The body is as short as possible: ``**a**b**`` styles ``**a**``."""
    assert _matches(_stars(), "**a**b**") == ["**a**"]


def test_body_may_span_lines() -> None:
    """Emphasis may continue on the next line."""
    assert _matches(_stars(), "**one\ntwo**") == ["**one\ntwo**"]


@parametrize(
    "text",
    [
        r"\**not bold**",  # escaped opener
        r"**not bold\**",  # escaped closer
        "****",  # empty body
        "**",
    ],
)
def test_no_match(text: str) -> None:
    """Escaped delimiters and empty bodies are not markup."""
    assert _matches(_stars(), text) == []


def test_escaped_opener_does_not_hide_later_markup() -> None:
    """Scanning resumes after an escaped delimiter."""
    assert _matches(_stars(), r"\** x **y**") == ["**y**"]


def test_pattern_cannot_be_overridden() -> None:
    """The pattern is not an init parameter."""
    with pytest.raises(TypeError):
        SpecialTextRule("x", pattern="x", delimiter="~~", shortcut_key="x")  # type: ignore[call-arg]


def test_make_action() -> None:
    """The insertion action carries the delimiter and shortcut key."""
    action: InsertionAction = _stars().make_action()
    assert action == InsertionAction(name="strong", markup="**", key="s")


def test_highlight_styles_whole_match() -> None:
    """The styled span covers the delimiters, not only the body."""
    registry = RuleRegistry()
    registry.register(_stars())
    text = "x **bold** y"
    spans = highlight(ScanWindow.whole(text), text, registry)
    assert [(s.start, s.end, s.text(text)) for s in spans] == [(2, 10, "**bold**")]
