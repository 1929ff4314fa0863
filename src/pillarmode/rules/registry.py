# topmark:header:start
#
#   project      : PillarMode
#   file         : registry.py
#   file_relpath : src/pillarmode/rules/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rule registry.

The [`RuleRegistry`][pillarmode.rules.registry.RuleRegistry] owns the ordered
list of markup rules, the style registry holding one descriptor per rule (plus
standalone parent styles), and the insertion actions derived from special text
rules.

Notes:
    * Registration is append-only and happens while the registry is built.
      Rules are never removed.
    * A rejected registration leaves the registry untouched: the name check,
      pattern compilation and style validation all run before anything is
      recorded.
    * Registration order is significant: the matching pass emits spans rule by
      rule in that order.
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING

from pillarmode.config.logging import PillarLogger, get_logger
from pillarmode.core.errors import (
    DuplicateRuleNameError,
    DuplicateShortcutError,
    InvalidPatternError,
    RegistrationError,
)
from pillarmode.rules.base import InsertionAction, MarkupRule, SpecialTextRule
from pillarmode.styles.base import StyleDescriptor
from pillarmode.styles.registry import StyleRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger: PillarLogger = get_logger(__name__)


class RuleRegistry:
    """Ordered, append-only collection of markup rules and their styles."""

    def __init__(self, styles: StyleRegistry | None = None) -> None:
        self._lock = RLock()
        self._rules: dict[str, MarkupRule] = {}
        self._actions: dict[str, InsertionAction] = {}
        self.styles: StyleRegistry = styles if styles is not None else StyleRegistry()

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[MarkupRule]:
        return iter(self.all_rules())

    def register(self, rule: MarkupRule) -> MarkupRule:
        """Register ``rule`` and the style descriptor named after it.

        For a [`SpecialTextRule`][pillarmode.rules.base.SpecialTextRule] the
        insertion action for its delimiter and shortcut key is recorded too.

        Args:
            rule (MarkupRule): Rule with a unique, non-empty name.

        Returns:
            MarkupRule: The registered rule.

        Raises:
            ValueError: If the rule has no name.
            DuplicateRuleNameError: If the name is already registered.
            InvalidPatternError: If the pattern does not compile, or
                ``capture_group`` exceeds the number of groups it defines.
            DuplicateStyleError: If a standalone style already uses the rule name.
            CyclicStyleInheritanceError: If the rule's style would close a parent cycle.
            DuplicateShortcutError: If a special text rule reuses a bound shortcut key.
        """
        if not rule.name:
            raise ValueError("MarkupRule.name is required.")
        with self._lock:
            try:
                if rule.name in self._rules:
                    raise DuplicateRuleNameError(f"Duplicate rule name: {rule.name}")
                self._check_capture_group(rule)
                style: StyleDescriptor = rule.make_style()
                self.styles.check(style)
                if isinstance(rule, SpecialTextRule):
                    self._check_shortcut(rule)
            except RegistrationError as exc:
                logger.debug("Rejected rule %s: %s", rule.name, exc)
                raise

            self.styles.register(style)
            self._rules[rule.name] = rule
            if isinstance(rule, SpecialTextRule):
                self._actions[rule.name] = rule.make_action()
            logger.debug("Registered rule %s", rule.name)
            return rule

    def register_style(self, style: StyleDescriptor) -> StyleDescriptor:
        """Register a standalone style (typically a parent shared by several rules)."""
        with self._lock:
            return self.styles.register(style)

    def extend(self, items: Iterable[MarkupRule | StyleDescriptor]) -> None:
        """Register rules and standalone styles in iteration order."""
        for item in items:
            if isinstance(item, StyleDescriptor):
                self.register_style(item)
            else:
                self.register(item)

    def all_rules(self) -> tuple[MarkupRule, ...]:
        """Return the registered rules in registration order."""
        return tuple(self._rules.values())

    def get(self, name: str) -> MarkupRule | None:
        """Return the rule registered under ``name``, or None."""
        return self._rules.get(name)

    def style_for(self, rule: MarkupRule | str) -> StyleDescriptor:
        """Return the style descriptor recorded for ``rule`` (a rule or its name).

        Raises:
            KeyError: If no such rule is registered.
        """
        name: str = rule if isinstance(rule, str) else rule.name
        if name not in self._rules:
            raise KeyError(name)
        style: StyleDescriptor | None = self.styles.get(name)
        assert style is not None  # recorded together with the rule
        return style

    def insertion_actions(self) -> tuple[InsertionAction, ...]:
        """Return the insertion actions of special text rules, in registration order."""
        return tuple(self._actions.values())

    def action_for_key(self, key: str) -> InsertionAction | None:
        """Return the insertion action bound to ``key``, or None."""
        for action in self._actions.values():
            if action.key == key:
                return action
        return None

    @staticmethod
    def _check_capture_group(rule: MarkupRule) -> None:
        # Compiling here surfaces InvalidPatternError before anything is recorded
        groups: int = rule.regex.groups
        if rule.capture_group is not None and not 0 <= rule.capture_group <= groups:
            raise InvalidPatternError(
                f"Rule {rule.name!r} styles group {rule.capture_group} "
                f"but its pattern defines {groups} group(s)",
                pattern=rule.regex.pattern,
            )

    def _check_shortcut(self, rule: SpecialTextRule) -> None:
        owner: InsertionAction | None = self.action_for_key(rule.shortcut_key)
        if owner is not None:
            raise DuplicateShortcutError(
                f"Shortcut key {rule.shortcut_key!r} of rule {rule.name!r} "
                f"is already bound to {owner.name!r}"
            )
