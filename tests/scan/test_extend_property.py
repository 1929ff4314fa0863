# topmark:header:start
#
#   project      : PillarMode
#   file         : test_extend_property.py
#   file_relpath : tests/scan/test_extend_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for scan-region extension.

For arbitrary Pillar-like documents and windows:
1) the extended window contains the (clamped) input window,
2) extending again returns the same window,
3) spans found in a window the extender produced do not change when the
   window is extended further.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings

from pillarmode.rules.instances import build_rule_registry
from pillarmode.scan.highlighter import highlight
from pillarmode.scan.window import ScanWindow, extend
from tests.strategies_pillar import s_document_and_window

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

REGISTRY = build_rule_registry(include_plugins=False)


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=200)
@given(sample=s_document_and_window())
def test_extension_contains_input(sample: tuple[str, int, int]) -> None:
    """The extended window is a superset of the clamped request."""
    text, start, end = sample
    requested: ScanWindow = ScanWindow(start, end).clamp(len(text))
    assert extend(ScanWindow(start, end), text).contains(requested)


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=200)
@given(sample=s_document_and_window())
def test_extension_is_idempotent(sample: tuple[str, int, int]) -> None:
    """Extending an extended window is a no-op."""
    text, start, end = sample
    once: ScanWindow = extend(ScanWindow(start, end), text)
    assert extend(once, text) == once


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=100)
@given(sample=s_document_and_window())
def test_highlight_is_stable_on_extended_window(sample: tuple[str, int, int]) -> None:
    """Highlighting an extended window twice yields the same spans."""
    text, start, end = sample
    window: ScanWindow = extend(ScanWindow(start, end), text)
    first = highlight(window, text, REGISTRY)
    second = highlight(extend(window, text), text, REGISTRY)
    assert first == second
    for span in first:
        assert window.start <= span.start < span.end <= window.end
