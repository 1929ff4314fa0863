# topmark:header:start
#
#   project      : PillarMode
#   file         : test_resolver.py
#   file_relpath : tests/styles/test_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for style registration and inheritance-aware resolution."""

from __future__ import annotations

import pytest

from pillarmode.core.errors import CyclicStyleInheritanceError, DuplicateStyleError
from pillarmode.styles import StyleAttribute, StyleDescriptor, StyleRegistry, resolve_attribute


def _registry(*styles: StyleDescriptor) -> StyleRegistry:
    registry = StyleRegistry()
    for style in styles:
        registry.register(style)
    return registry


def test_own_attribute() -> None:
    """An attribute set on the style itself is returned."""
    s = StyleDescriptor("s", {"weight": "bold"})
    assert resolve_attribute(s, "weight", registry=_registry(s)) == "bold"


def test_inherited_attribute() -> None:
    """Unset attributes come from the parent chain."""
    base = StyleDescriptor("base", {"foreground": "blue", "weight": "bold"})
    child = StyleDescriptor("child", {"weight": "normal"}, parent="base")
    registry = _registry(base, child)

    assert resolve_attribute(child, "foreground", registry=registry) == "blue"
    assert resolve_attribute(child, StyleAttribute.WEIGHT, registry=registry) == "normal"


def test_unset_attribute_is_none() -> None:
    """An attribute nobody in the chain sets resolves to None."""
    s = StyleDescriptor("s", {"weight": "bold"})
    assert resolve_attribute(s, "slant", registry=_registry(s)) is None


def test_deep_chain() -> None:
    """Resolution walks as many levels as needed."""
    a = StyleDescriptor("a", {"height": 1.2})
    b = StyleDescriptor("b", parent="a")
    c = StyleDescriptor("c", parent="b")
    assert resolve_attribute(c, "height", registry=_registry(a, b, c)) == 1.2


def test_forward_reference_ends_chain() -> None:
    """A parent that is not registered yet simply ends the chain."""
    child = StyleDescriptor("child", {"weight": "bold"}, parent="later")
    registry = _registry(child)
    assert resolve_attribute(child, "foreground", registry=registry) is None

    registry.register(StyleDescriptor("later", {"foreground": "red"}))
    assert resolve_attribute(child, "foreground", registry=registry) == "red"


def test_two_style_cycle_is_rejected() -> None:
    """``A.parent = B`` then ``B.parent = A`` is refused at registration."""
    registry = _registry(StyleDescriptor("A", parent="B"))
    with pytest.raises(CyclicStyleInheritanceError) as excinfo:
        registry.register(StyleDescriptor("B", parent="A"))
    assert excinfo.value.chain == ("B", "A", "B")
    assert "B" not in registry


def test_self_parent_is_rejected() -> None:
    """A style cannot inherit from itself."""
    with pytest.raises(CyclicStyleInheritanceError):
        StyleRegistry().register(StyleDescriptor("me", parent="me"))


def test_duplicate_style_is_rejected() -> None:
    """Style ids are unique; the first registration is kept."""
    first = StyleDescriptor("s", {"weight": "bold"})
    registry = _registry(first)
    with pytest.raises(DuplicateStyleError):
        registry.register(StyleDescriptor("s"))
    assert registry.get("s") is first


def test_resolve_all_child_wins() -> None:
    """The merged mapping holds every visible attribute; nearer styles win."""
    base = StyleDescriptor("base", {"foreground": "blue", "weight": "bold"})
    child = StyleDescriptor("child", {"foreground": "red"}, parent="base")
    registry = _registry(base, child)
    assert registry.resolve_all(child) == {"foreground": "red", "weight": "bold"}
    assert [s.id for s in registry.lineage(child)] == ["child", "base"]


def test_attributes_are_frozen() -> None:
    """Descriptors copy and freeze their attributes."""
    attrs = {"weight": "bold"}
    s = StyleDescriptor("s", attrs)
    attrs["weight"] = "normal"
    assert s.attributes["weight"] == "bold"
    with pytest.raises(TypeError):
        s.attributes["weight"] = "normal"  # type: ignore[index]


def test_unknown_attributes_are_accepted() -> None:
    """Attributes without a built-in renderer are kept and reported."""
    s = StyleDescriptor("s", {"box": True, "weight": "bold"})
    registry = _registry(s)
    assert s.unknown_attributes == ("box",)
    assert resolve_attribute(s, "box", registry=registry) is True


def test_id_is_required() -> None:
    """Anonymous styles are not allowed."""
    with pytest.raises(ValueError):
        StyleDescriptor("")
