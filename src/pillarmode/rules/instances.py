# topmark:header:start
#
#   project      : PillarMode
#   file         : instances.py
#   file_relpath : src/pillarmode/rules/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default rule registry for Pillar documents.

Builds the runtime [`RuleRegistry`][pillarmode.rules.registry.RuleRegistry]
from the built-in rule tables and, optionally, from plugin entry points. The
registry is constructed lazily on first access and cached thereafter; it is
fully populated before any caller sees it.

Notes:
    * Built-ins are imported lazily from topical modules, in a fixed order.
    * Plugins are discovered via the ``pillarmode.rules`` entry point group.
      An entry point resolves to an iterable of rules and styles (or a callable
      returning one). Plugin entries that fail to load or register are logged
      and skipped; built-in entries must register cleanly.
"""

from __future__ import annotations

from collections.abc import Iterable as IterABC
from functools import lru_cache
from importlib import import_module
from importlib.metadata import EntryPoints, entry_points
from typing import TYPE_CHECKING, Any, Final, Iterable, Sequence, cast

from pillarmode.config.logging import PillarLogger, get_logger
from pillarmode.core.errors import RegistrationError
from pillarmode.rules.base import MarkupRule
from pillarmode.rules.registry import RuleRegistry
from pillarmode.styles.base import StyleDescriptor

if TYPE_CHECKING:
    from types import ModuleType

logger: PillarLogger = get_logger(__name__)

# (module, attribute) pairs, registered in this order
_BUILTIN_TABLES: Final[tuple[tuple[str, str], ...]] = (
    ("pillarmode.rules.builtins.blocks", "HEADER_RULES"),
    ("pillarmode.rules.builtins.inline", "RULES"),
    ("pillarmode.rules.builtins.blocks", "RULES"),
)

ENTRYPOINT_GROUP: Final[str] = "pillarmode.rules"

RuleEntry = MarkupRule | StyleDescriptor


def iter_builtin_entries() -> Iterable[RuleEntry]:
    """Yield built-in rules and styles from the topical modules (lazy import)."""
    for modname, attr in _BUILTIN_TABLES:
        mod: ModuleType = import_module(modname)
        table: Any = getattr(mod, attr, None)
        if not isinstance(table, list):
            logger.warning("Module %s has no %s list; skipping", modname, attr)
            continue
        for obj in cast("Sequence[object]", table):
            if isinstance(obj, (MarkupRule, StyleDescriptor)):
                yield obj
            else:
                logger.warning("Non-rule entry in %s.%s: %r", modname, attr, obj)


def iter_plugin_entries() -> Iterable[RuleEntry]:
    """Yield rules and styles provided by external plugins (entry points)."""
    try:
        eps = entry_points()
    except Exception:
        logger.exception("Failed to read entry points")
        return

    candidates: EntryPoints = eps.select(group=ENTRYPOINT_GROUP)

    for ep in candidates:
        try:
            provider: Any = ep.load()
            provided: Any = provider() if callable(provider) else provider
        except Exception:
            logger.exception("Failed loading rules from entry point %s", ep.name)
            continue
        if not isinstance(provided, IterABC):
            logger.warning(
                "Entry point %s did not return an iterable of rules: %r", ep.name, provided
            )
            continue
        for obj in cast("IterABC[object]", provided):
            if isinstance(obj, (MarkupRule, StyleDescriptor)):
                yield obj
            else:
                logger.warning("Entry point %s provided non-rule: %r", ep.name, obj)


def build_rule_registry(*, include_plugins: bool = True) -> RuleRegistry:
    """Build a new registry holding the built-in rules (and plugin rules).

    Args:
        include_plugins (bool): Also register entries from the
            ``pillarmode.rules`` entry point group.

    Returns:
        RuleRegistry: A fully populated registry.

    Raises:
        RegistrationError: If a built-in entry is rejected.
    """
    registry = RuleRegistry()
    registry.extend(iter_builtin_entries())

    if include_plugins:
        for entry in iter_plugin_entries():
            try:
                registry.extend([entry])
            except RegistrationError as exc:
                name: str = entry.id if isinstance(entry, StyleDescriptor) else entry.name
                logger.warning("Skipping plugin entry %s: %s", name, exc)

    logger.debug("Loaded %d rules and %d styles", len(registry), len(registry.styles))
    return registry


@lru_cache(maxsize=1)
def get_rule_registry() -> RuleRegistry:
    """Return (and cache) the default rule registry (lazy; import-time light)."""
    return build_rule_registry()
