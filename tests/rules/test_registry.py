# topmark:header:start
#
#   project      : PillarMode
#   file         : test_registry.py
#   file_relpath : tests/rules/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for rule registration."""

from __future__ import annotations

import pytest

from pillarmode.core.errors import (
    CyclicStyleInheritanceError,
    DuplicateRuleNameError,
    DuplicateShortcutError,
    DuplicateStyleError,
    InvalidPatternError,
    RegistrationError,
)
from pillarmode.rules.base import MarkupRule, SpecialTextRule
from pillarmode.rules.registry import RuleRegistry
from pillarmode.styles.base import StyleDescriptor


def test_register_records_rule_and_style() -> None:
    """A registered rule gets a style descriptor named after it."""
    registry = RuleRegistry()
    rule = MarkupRule("comment", r"^%.*$", attributes={"slant": "italic"})
    assert registry.register(rule) is rule

    assert "comment" in registry
    assert registry.get("comment") is rule
    style: StyleDescriptor = registry.style_for("comment")
    assert style.id == "comment"
    assert style.attributes == {"slant": "italic"}


def test_rules_keep_registration_order() -> None:
    """Rules are listed in the order they were registered."""
    registry = RuleRegistry()
    for name in ("c", "a", "b"):
        registry.register(MarkupRule(name, name))
    assert [r.name for r in registry.all_rules()] == ["c", "a", "b"]
    assert [r.name for r in registry] == ["c", "a", "b"]


def test_duplicate_name_is_rejected_and_first_kept() -> None:
    """A second rule with the same name is rejected; the first one stays."""
    registry = RuleRegistry()
    first = MarkupRule("x", "a")
    registry.register(first)
    with pytest.raises(DuplicateRuleNameError):
        registry.register(MarkupRule("x", "b"))
    assert registry.get("x") is first
    assert len(registry) == 1


def test_empty_name_is_rejected() -> None:
    """Rules must be named."""
    with pytest.raises(ValueError):
        RuleRegistry().register(MarkupRule("", "a"))


def test_invalid_pattern_leaves_registry_untouched() -> None:
    """A pattern that does not compile is rejected before anything is recorded."""
    registry = RuleRegistry()
    with pytest.raises(InvalidPatternError):
        registry.register(MarkupRule("broken", "(unclosed"))
    assert "broken" not in registry
    assert "broken" not in registry.styles


def test_capture_group_must_exist() -> None:
    """Styling a group the pattern does not define is an invalid pattern."""
    registry = RuleRegistry()
    with pytest.raises(InvalidPatternError):
        registry.register(MarkupRule("nogroup", r"^-+ ", capture_group=1))
    registry.register(MarkupRule("group", r"^(-+) ", capture_group=1))


def test_rule_name_clashing_with_standalone_style() -> None:
    """A rule cannot reuse the id of a standalone style."""
    registry = RuleRegistry()
    registry.register_style(StyleDescriptor("header"))
    with pytest.raises(DuplicateStyleError):
        registry.register(MarkupRule("header", "!"))
    assert "header" not in registry


def test_rule_closing_a_style_cycle_is_rejected() -> None:
    """A rule whose style would close an inheritance cycle is rejected."""
    registry = RuleRegistry()
    registry.register_style(StyleDescriptor("base", parent="leaf"))
    with pytest.raises(CyclicStyleInheritanceError):
        registry.register(MarkupRule("leaf", "x", parent="base"))
    assert "leaf" not in registry


def test_special_text_rule_records_action() -> None:
    """Special text rules expose an insertion action bound to their key."""
    registry = RuleRegistry()
    registry.register(SpecialTextRule("bold", delimiter='""', shortcut_key="b"))

    action = registry.action_for_key("b")
    assert action is not None
    assert (action.name, action.markup) == ("bold", '""')
    assert registry.action_for_key("z") is None
    assert [a.name for a in registry.insertion_actions()] == ["bold"]


def test_duplicate_shortcut_is_rejected() -> None:
    """Two special text rules cannot share a shortcut key."""
    registry = RuleRegistry()
    registry.register(SpecialTextRule("bold", delimiter='""', shortcut_key="b"))
    with pytest.raises(DuplicateShortcutError):
        registry.register(SpecialTextRule("blink", delimiter="!!", shortcut_key="b"))
    assert "blink" not in registry
    assert "blink" not in registry.styles


def test_extend_accepts_rules_and_styles() -> None:
    """Standalone styles and rules can be mixed; parents may come first."""
    registry = RuleRegistry()
    registry.extend(
        [
            StyleDescriptor("header", {"weight": "bold"}),
            MarkupRule("header-1", "^!(?!!).*$", attributes={"height": 1.6}, parent="header"),
        ]
    )
    style = registry.style_for("header-1")
    assert registry.styles.resolve_all(style) == {"weight": "bold", "height": 1.6}


def test_style_for_unknown_rule() -> None:
    """Asking for the style of an unregistered rule is a lookup error."""
    with pytest.raises(KeyError):
        RuleRegistry().style_for("missing")


def test_registration_errors_share_a_base() -> None:
    """Callers can catch every registration failure at once."""
    for exc in (
        InvalidPatternError,
        DuplicateRuleNameError,
        DuplicateStyleError,
        CyclicStyleInheritanceError,
        DuplicateShortcutError,
    ):
        assert issubclass(exc, RegistrationError)
