# topmark:header:start
#
#   project      : PillarMode
#   file         : base.py
#   file_relpath : src/pillarmode/rules/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup rule definitions.

A [`MarkupRule`][pillarmode.rules.base.MarkupRule] associates an authored
pattern with the style applied to what it matches. A
[`SpecialTextRule`][pillarmode.rules.base.SpecialTextRule] is the common case
of markup enclosed by the same literal delimiter on both sides (``""bold""``);
it derives its pattern from the delimiter and also yields an
[`InsertionAction`][pillarmode.rules.base.InsertionAction] bound to a shortcut
key.

Rules are plain frozen data. Validation (pattern compilation, unique names,
style inheritance) happens in
[`RuleRegistry.register`][pillarmode.rules.registry.RuleRegistry.register].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from pillarmode.editing.insertion import compute_insertion
from pillarmode.rules.preprocess import preprocess, symmetric_delimiter_pattern
from pillarmode.styles.base import StyleDescriptor

if TYPE_CHECKING:
    import re
    from collections.abc import Mapping

    from pillarmode.editing.insertion import EditPlan, Span


@dataclass(frozen=True)
class MarkupRule:
    r"""Association between a textual pattern and a visual style.

    Attributes:
        name (str): Identifier, unique within a registry. Also the id of the
            style created for the rule.
        pattern (str): Authored regular expression; may contain the
            ``[[anything]]`` placeholder.
        capture_group (int | None): Group whose span is styled. ``None`` styles
            the whole match.
        attributes (Mapping[str, Any]): Style attributes of the rule's style.
        parent (str | None): Id of the style the rule's style inherits from.
        description (str): Human-readable description.

    Example:
        >>> MarkupRule(
        ...     "comment",
        ...     r"^%.*$",
        ...     attributes={"foreground": "bright_black", "slant": "italic"},
        ... )
    """

    name: str
    pattern: str
    capture_group: int | None = None
    attributes: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    parent: str | None = None
    description: str = ""

    @cached_property
    def regex(self) -> re.Pattern[str]:
        """Compiled, placeholder-expanded pattern (raises ``InvalidPatternError``)."""
        return preprocess(self.pattern)

    def make_style(self) -> StyleDescriptor:
        """Build the style descriptor the registry records for this rule."""
        return StyleDescriptor(id=self.name, attributes=self.attributes, parent=self.parent)


@dataclass(frozen=True, kw_only=True)
class SpecialTextRule(MarkupRule):
    """Markup delimited by the same literal string on both sides.

    The pattern is derived from ``delimiter`` and cannot be passed in.

    Attributes:
        delimiter (str): Literal written before and after the styled text.
        shortcut_key (str): Key identifier bound to the insertion action.

    Example:
        >>> SpecialTextRule("bold", delimiter='""', shortcut_key="b",
        ...                 attributes={"weight": "bold"})
    """

    pattern: str = field(init=False, default="")
    delimiter: str
    shortcut_key: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", symmetric_delimiter_pattern(self.delimiter))

    def make_action(self) -> InsertionAction:
        """Return the insertion action that wraps text in this rule's delimiter."""
        return InsertionAction(name=self.name, markup=self.delimiter, key=self.shortcut_key)


@dataclass(frozen=True)
class InsertionAction:
    """Insertion command derived from a special text rule.

    Attributes:
        name (str): Name of the originating rule.
        markup (str): Markup inserted on both sides of the selection or caret.
        key (str): Shortcut key identifier.
    """

    name: str
    markup: str
    key: str

    def plan(self, selection: Span | None, caret: int) -> EditPlan:
        """Compute the edit wrapping ``selection`` (or inserting at ``caret``)."""
        return compute_insertion(self.markup, selection, caret)
