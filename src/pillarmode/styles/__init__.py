# topmark:header:start
#
#   project      : PillarMode
#   file         : __init__.py
#   file_relpath : src/pillarmode/styles/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style descriptors and inheritance-aware attribute resolution."""

from __future__ import annotations

from typing import Any

from pillarmode.styles.base import KNOWN_ATTRIBUTES, StyleAttribute, StyleDescriptor
from pillarmode.styles.registry import StyleRegistry


def resolve_attribute(
    style: StyleDescriptor,
    attribute: str | StyleAttribute,
    *,
    registry: StyleRegistry,
) -> Any | None:
    """Resolve ``attribute`` for ``style``, following parents through ``registry``."""
    name: str = attribute.value if isinstance(attribute, StyleAttribute) else attribute
    return registry.resolve_attribute(style, name)


__all__ = [
    "KNOWN_ATTRIBUTES",
    "StyleAttribute",
    "StyleDescriptor",
    "StyleRegistry",
    "resolve_attribute",
]
