# topmark:header:start
#
#   project      : PillarMode
#   file         : __init__.py
#   file_relpath : src/pillarmode/scan/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scan windows, region extension and the matching pass.

A host highlighting pass calls [`extend`][pillarmode.scan.window.extend] on the
window it wants re-tagged, then [`highlight`][pillarmode.scan.highlighter.highlight]
on the extended window, and applies the returned spans. The document must not
change between the two calls.
"""

from __future__ import annotations

from pillarmode.scan.highlighter import StyledSpan, highlight, highlight_region
from pillarmode.scan.window import BLANK_LINE, ScanWindow, TextSource, extend

__all__ = [
    "BLANK_LINE",
    "ScanWindow",
    "StyledSpan",
    "TextSource",
    "extend",
    "highlight",
    "highlight_region",
]
