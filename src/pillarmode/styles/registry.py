# topmark:header:start
#
#   project      : PillarMode
#   file         : registry.py
#   file_relpath : src/pillarmode/styles/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style registry and attribute resolution.

The registry stores [`StyleDescriptor`][pillarmode.styles.base.StyleDescriptor]
objects by id. ``parent`` links may point at ids that are registered later
(forward references); an id that never gets registered simply ends the
resolution chain.

Notes:
    * Cycles are rejected when the closing link is registered, so resolution
      always terminates and needs no cycle bookkeeping of its own.
    * Registration is guarded by an ``RLock``. Once populated the registry is
      read-only and resolution may run concurrently from any number of readers.
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING, Any

from pillarmode.config.logging import get_logger
from pillarmode.core.errors import CyclicStyleInheritanceError, DuplicateStyleError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pillarmode.config.logging import PillarLogger
    from pillarmode.styles.base import StyleDescriptor

logger: PillarLogger = get_logger(__name__)


class StyleRegistry:
    """Append-only table of style descriptors keyed by id."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._styles: dict[str, StyleDescriptor] = {}

    def __contains__(self, style_id: object) -> bool:
        return style_id in self._styles

    def __len__(self) -> int:
        return len(self._styles)

    def __iter__(self) -> Iterator[StyleDescriptor]:
        return iter(tuple(self._styles.values()))

    def get(self, style_id: str) -> StyleDescriptor | None:
        """Return the style registered under ``style_id``, or None."""
        return self._styles.get(style_id)

    def check(self, style: StyleDescriptor) -> None:
        """Validate ``style`` against the registry without registering it.

        Args:
            style (StyleDescriptor): Candidate descriptor.

        Raises:
            DuplicateStyleError: If the id is already registered.
            CyclicStyleInheritanceError: If following ``parent`` links from the
                candidate reaches the candidate again.
        """
        if style.id in self._styles:
            raise DuplicateStyleError(f"Duplicate style id: {style.id}")

        chain: list[str] = [style.id]
        current: str | None = style.parent
        while current is not None:
            chain.append(current)
            if current == style.id:
                raise CyclicStyleInheritanceError(
                    f"Style inheritance cycle: {' -> '.join(chain)}",
                    chain=tuple(chain),
                )
            parent: StyleDescriptor | None = self._styles.get(current)
            current = parent.parent if parent is not None else None

    def register(self, style: StyleDescriptor) -> StyleDescriptor:
        """Register a style descriptor.

        Args:
            style (StyleDescriptor): Descriptor with a unique id.

        Returns:
            StyleDescriptor: The registered descriptor.

        Raises:
            DuplicateStyleError: If the id is already registered.
            CyclicStyleInheritanceError: If the descriptor would close a parent cycle.
        """
        with self._lock:
            try:
                self.check(style)
            except (DuplicateStyleError, CyclicStyleInheritanceError) as exc:
                logger.debug("Rejected style %s: %s", style.id, exc)
                raise
            if style.unknown_attributes:
                logger.debug(
                    "Style %s sets attributes without a built-in renderer: %s",
                    style.id,
                    ", ".join(style.unknown_attributes),
                )
            self._styles[style.id] = style
            logger.trace("Registered style %s (parent=%s)", style.id, style.parent)
            return style

    def lineage(self, style: StyleDescriptor) -> tuple[StyleDescriptor, ...]:
        """Return ``style`` followed by its registered ancestors, nearest first."""
        out: list[StyleDescriptor] = [style]
        parent_id: str | None = style.parent
        while parent_id is not None:
            parent: StyleDescriptor | None = self._styles.get(parent_id)
            if parent is None:
                break
            out.append(parent)
            parent_id = parent.parent
        return tuple(out)

    def resolve_attribute(self, style: StyleDescriptor, attribute: str) -> Any | None:
        """Look ``attribute`` up on ``style`` and then on its ancestors.

        Args:
            style (StyleDescriptor): Style to start from.
            attribute (str): Attribute name (see
                [`StyleAttribute`][pillarmode.styles.base.StyleAttribute]).

        Returns:
            Any | None: The nearest value, or None if no style in the chain sets it.
        """
        for descriptor in self.lineage(style):
            if attribute in descriptor.attributes:
                return descriptor.attributes[attribute]
        return None

    def resolve_all(self, style: StyleDescriptor) -> dict[str, Any]:
        """Return every attribute visible from ``style``; nearer styles win."""
        merged: dict[str, Any] = {}
        for descriptor in reversed(self.lineage(style)):
            merged.update(descriptor.attributes)
        return merged
