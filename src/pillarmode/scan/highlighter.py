# topmark:header:start
#
#   project      : PillarMode
#   file         : highlighter.py
#   file_relpath : src/pillarmode/scan/highlighter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Matching and styling pass.

Runs every registered rule over a scan window and reports the styled spans.
Overlapping spans from different rules are all reported; choosing which one
wins is left to the host. Spans come out in a stable order (rule registration
order, then match start) so any host-side priority policy is deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pillarmode.config.logging import PillarLogger, get_logger
from pillarmode.scan.window import ScanWindow, extend

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pillarmode.rules.base import MarkupRule
    from pillarmode.rules.registry import RuleRegistry
    from pillarmode.scan.window import TextSource
    from pillarmode.styles.base import StyleDescriptor

logger: PillarLogger = get_logger(__name__)


@dataclass(frozen=True)
class StyledSpan:
    """A document range tagged with the style of the rule that matched it.

    Attributes:
        start (int): Start offset in the document (inclusive).
        end (int): End offset in the document (exclusive).
        rule (str): Name of the matching rule.
        style (StyleDescriptor): Style recorded for that rule.
    """

    start: int
    end: int
    rule: str
    style: StyleDescriptor

    def text(self, document: TextSource) -> str:
        """Return the styled text from ``document``."""
        return document[self.start : self.end]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation (without resolved attributes)."""
        return {"start": self.start, "end": self.end, "rule": self.rule, "style": self.style.id}


def _iter_rule_spans(
    rule: MarkupRule,
    style: StyleDescriptor,
    text: str,
    window: ScanWindow,
) -> Iterator[StyledSpan]:
    group: int = rule.capture_group or 0
    for match in rule.regex.finditer(text, window.start, window.end):
        start, end = match.span(group)
        # Skip groups that did not participate and empty matches
        if start < 0 or start == end:
            continue
        yield StyledSpan(start, end, rule.name, style)


def highlight(
    window: ScanWindow,
    document: TextSource,
    rules: RuleRegistry,
) -> list[StyledSpan]:
    """Match every rule of ``rules`` inside ``window`` and return the styled spans.

    Matching runs against the full document text bounded by ``window`` (as
    with ``re.Pattern.finditer(text, pos, endpos)``), so offsets are document
    offsets and ``^`` sees the real line boundary at the window start. The
    window end acts as the end of the text: a window ending mid-line lets ``$``
    and negative lookaheads match early there. Call
    [`extend`][pillarmode.scan.window.extend] first, or use
    [`highlight_region`][pillarmode.scan.highlighter.highlight_region].

    Args:
        window (ScanWindow): Window to scan (clamped to the document length).
        document (TextSource): Stable snapshot of the document text.
        rules (RuleRegistry): Populated rule registry.

    Returns:
        list[StyledSpan]: Spans ordered by rule registration order, then start offset.
    """
    text: str = document if isinstance(document, str) else document[0 : len(document)]
    bounded: ScanWindow = window.clamp(len(text))

    spans: list[StyledSpan] = []
    for rule in rules.all_rules():
        style: StyleDescriptor = rules.style_for(rule)
        spans.extend(_iter_rule_spans(rule, style, text, bounded))

    logger.debug("Matched %d span(s) in window [%d, %d)", len(spans), bounded.start, bounded.end)
    return spans


def highlight_region(
    window: ScanWindow,
    document: TextSource,
    rules: RuleRegistry,
) -> tuple[ScanWindow, list[StyledSpan]]:
    """Extend ``window`` to paragraph boundaries, then highlight it.

    Returns:
        tuple[ScanWindow, list[StyledSpan]]: The extended window and its spans.
    """
    extended: ScanWindow = extend(window, document)
    return extended, highlight(extended, document, rules)
