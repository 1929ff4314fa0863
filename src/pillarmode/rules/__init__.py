# topmark:header:start
#
#   project      : PillarMode
#   file         : __init__.py
#   file_relpath : src/pillarmode/rules/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup rules: authoring, pattern preprocessing and registration.

Typical usage:
    >>> from pillarmode.rules import get_rule_registry
    >>> registry = get_rule_registry()
    >>> [rule.name for rule in registry.all_rules()][:3]
    ['header-1', 'header-2', 'header-3']
"""

from __future__ import annotations

from pillarmode.rules.base import InsertionAction, MarkupRule, SpecialTextRule
from pillarmode.rules.instances import build_rule_registry, get_rule_registry
from pillarmode.rules.preprocess import (
    ANYTHING_FRAGMENT,
    expand_placeholders,
    preprocess,
    symmetric_delimiter_pattern,
)
from pillarmode.rules.registry import RuleRegistry

__all__ = [
    "ANYTHING_FRAGMENT",
    "InsertionAction",
    "MarkupRule",
    "RuleRegistry",
    "SpecialTextRule",
    "build_rule_registry",
    "expand_placeholders",
    "get_rule_registry",
    "preprocess",
    "symmetric_delimiter_pattern",
]
