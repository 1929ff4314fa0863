# topmark:header:start
#
#   project      : PillarMode
#   file         : window.py
#   file_relpath : src/pillarmode/scan/window.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scan windows and paragraph-aligned region extension.

A host re-highlights a document window by window, typically just the lines
around an edit. Multi-line constructs (script blocks, emphasis wrapped over a
line break) would be truncated or missed if a window started or ended inside
them, so [`extend`][pillarmode.scan.window.extend] grows every window outward
to the nearest blank line on each side.

Assumption:
    Distinct markup blocks are separated by at least one blank line. This holds
    for Pillar documents as normally written but is a heuristic, not a
    guarantee derived from the grammar: two constructs written without a blank
    line between them are scanned as one paragraph, and a multi-line construct
    that itself contains a blank line can still be cut at that line.

    When no blank line follows the window, its end is left where it was,
    possibly mid-line. The matching pass treats that end as the end of the
    text, so line rules can match a truncated line: with a window ending after
    the first character of ``!!Section``, ``header-1`` matches ``!``. Hosts
    that request windows ending at line ends are not affected.

    A blank line in a CRLF document has no two consecutive newline characters
    and is not treated as a boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Protocol, overload, runtime_checkable

from pillarmode.config.logging import PillarLogger, get_logger

logger: PillarLogger = get_logger(__name__)

# Paragraph boundary: two consecutive line separators
BLANK_LINE: Final[str] = "\n\n"


@runtime_checkable
class TextSource(Protocol):
    """Read-only document text addressed by character offset.

    ``str`` satisfies this protocol, so plain strings can be scanned directly.
    Hosts with their own buffer type only need to support ``len()`` and slicing.
    """

    def __len__(self) -> int:
        """Return the document length in characters."""
        ...

    @overload
    def __getitem__(self, key: int, /) -> str: ...

    @overload
    def __getitem__(self, key: slice, /) -> str: ...

    def __getitem__(self, key: int | slice, /) -> str:
        """Return the text at ``key`` (an offset or a slice of offsets)."""
        ...


@dataclass(frozen=True)
class ScanWindow:
    """Half-open character range ``[start, end)`` requested for (re-)scanning."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise ValueError(f"Window offsets must be non-negative: [{self.start}, {self.end})")
        if self.start > self.end:
            raise ValueError(f"Window start {self.start} is after its end {self.end}")

    @classmethod
    def whole(cls, document: TextSource) -> ScanWindow:
        """Return the window covering all of ``document``."""
        return cls(0, len(document))

    def __len__(self) -> int:
        return self.end - self.start

    def contains(self, other: ScanWindow) -> bool:
        """True if ``other`` lies entirely within this window."""
        return self.start <= other.start and other.end <= self.end

    def clamp(self, length: int) -> ScanWindow:
        """Return this window limited to a document of ``length`` characters."""
        start: int = min(self.start, length)
        end: int = min(self.end, length)
        if (start, end) == (self.start, self.end):
            return self
        return ScanWindow(start, end)


def _text(document: TextSource) -> str:
    return document if isinstance(document, str) else document[0 : len(document)]


def extend(window: ScanWindow, document: TextSource) -> ScanWindow:
    """Grow ``window`` to the nearest paragraph boundaries of ``document``.

    Backward, the start moves to the nearest blank-line boundary (``"\\n\\n"``)
    beginning at or before it. Forward, the end moves past the nearest boundary
    beginning at or after ``end - 2``, i.e. to the start of the line that
    follows the blank line. An edge with no boundary in its direction stays
    where it is. The window is first clamped to the document length.

    The result always contains the (clamped) input window, and extending an
    already extended window returns it unchanged.

    Args:
        window (ScanWindow): Requested window.
        document (TextSource): Stable snapshot of the document text.

    Returns:
        ScanWindow: The extended window.
    """
    text: str = _text(document)
    clamped: ScanWindow = window.clamp(len(text))
    start: int = clamped.start
    end: int = clamped.end

    # rfind's end bound is exclusive: +2 lets a boundary begin exactly at `start`
    before: int = text.rfind(BLANK_LINE, 0, start + len(BLANK_LINE))
    if before != -1:
        start = before

    after: int = text.find(BLANK_LINE, max(end - len(BLANK_LINE), 0))
    if after != -1:
        end = max(end, after + len(BLANK_LINE))

    extended = ScanWindow(start, end)
    if extended != clamped:
        logger.trace("Extended scan window %r -> %r", window, extended)
    return extended
