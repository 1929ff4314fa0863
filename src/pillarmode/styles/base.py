# topmark:header:start
#
#   project      : PillarMode
#   file         : base.py
#   file_relpath : src/pillarmode/styles/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style descriptors attached to markup rules.

A [`StyleDescriptor`][pillarmode.styles.base.StyleDescriptor] is a named set of
visual attributes (weight, slant, decorations, colors, height). Attributes a
descriptor does not set are looked up on its parent, identified by id, so the
descriptors of a registry form a forest. Descriptors are created once at
startup and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


class StyleAttribute(str, Enum):
    """Attribute names understood by the built-in renderers.

    Hosts may store other attributes on a descriptor; they are resolved like
    the known ones but only hosts that understand them will use them.

    Attributes:
        WEIGHT: ``"bold"`` or ``"normal"``.
        SLANT: ``"italic"`` or ``"normal"``.
        UNDERLINE: ``True`` to underline the span.
        STRIKE_THROUGH: ``True`` to strike the span through.
        FOREGROUND: Foreground color name.
        BACKGROUND: Background color name.
        HEIGHT: Relative text height (``1.0`` is the default size).
        INHERIT: Name of a host style the host should merge underneath.
    """

    WEIGHT = "weight"
    SLANT = "slant"
    UNDERLINE = "underline"
    STRIKE_THROUGH = "strike_through"
    FOREGROUND = "foreground"
    BACKGROUND = "background"
    HEIGHT = "height"
    INHERIT = "inherit"


KNOWN_ATTRIBUTES: frozenset[str] = frozenset(a.value for a in StyleAttribute)


@dataclass(frozen=True)
class StyleDescriptor:
    """Named, immutable set of style attributes.

    Attributes:
        id (str): Unique style identifier. Styles created for rules use the rule name.
        attributes (Mapping[str, Any]): Attribute name -> value. Stored as a
            read-only mapping.
        parent (str | None): Id of the style that supplies unset attributes.
    """

    id: str
    attributes: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    parent: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("StyleDescriptor.id is required.")
        # Freeze a private copy so later edits to the caller's dict are invisible
        frozen: Mapping[str, Any] = MappingProxyType(
            {str(k): v for k, v in dict(self.attributes).items()}
        )
        object.__setattr__(self, "attributes", frozen)

    @property
    def unknown_attributes(self) -> tuple[str, ...]:
        """Attribute names set on this descriptor that no built-in renderer knows."""
        return tuple(sorted(k for k in self.attributes if k not in KNOWN_ATTRIBUTES))
