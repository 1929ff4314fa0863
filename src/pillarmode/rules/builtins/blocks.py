# topmark:header:start
#
#   project      : PillarMode
#   file         : blocks.py
#   file_relpath : src/pillarmode/rules/builtins/blocks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line and block level Pillar markup.

Exports:
    HEADER_RULES (list[MarkupRule | StyleDescriptor]): The shared ``header``
        style followed by one rule per header level (``!`` to ``!!!!!!``).
    RULES (list[MarkupRule | StyleDescriptor]): Line constructs (anchors,
        comments, preformatted lines, lists, tables, horizontal rules) and the
        multi-line script and raw blocks.

Notes:
    Script (``[[[ ... ]]]``) and raw (``{{{ ... }}}``) blocks span lines through
    the ``[[anything]]`` placeholder. The scan-region extender keeps such blocks
    whole as long as they do not contain blank lines, which is how Pillar
    documents are normally written.
"""

from __future__ import annotations

from ...styles.base import StyleDescriptor
from ..base import MarkupRule

_HEADER_HEIGHTS: tuple[float, ...] = (1.6, 1.5, 1.4, 1.3, 1.2, 1.1)


def _header_rules() -> list[MarkupRule | StyleDescriptor]:
    out: list[MarkupRule | StyleDescriptor] = [
        StyleDescriptor(
            id="header",
            attributes={"weight": "bold", "foreground": "blue", "inherit": "header"},
        )
    ]
    for level, height in enumerate(_HEADER_HEIGHTS, start=1):
        out.append(
            MarkupRule(
                f"header-{level}",
                rf"^!{{{level}}}(?!!).*$",
                attributes={"height": height},
                parent="header",
                description=f"Header level {level}",
            )
        )
    return out


HEADER_RULES: list[MarkupRule | StyleDescriptor] = _header_rules()

RULES: list[MarkupRule | StyleDescriptor] = [
    MarkupRule(
        "anchor",
        r"^@(?!@)\S+",
        attributes={"foreground": "cyan", "underline": True},
        description="Anchor: @name",
    ),
    MarkupRule(
        "comment",
        r"^%.*$",
        attributes={"foreground": "bright_black", "slant": "italic", "inherit": "comment"},
        description="Comment line: % text",
    ),
    MarkupRule(
        "preformatted",
        r"^= .*$",
        attributes={"foreground": "green", "inherit": "fixed-pitch"},
        description="Preformatted line: = text",
    ),
    MarkupRule(
        "horizontal-rule",
        r"^_$",
        attributes={"foreground": "bright_black"},
        description="Horizontal rule: _",
    ),
    MarkupRule(
        "list-item",
        r"^([-#;:]+)[ \t]",
        capture_group=1,
        attributes={"weight": "bold", "foreground": "yellow"},
        description="List markers: - # ; :",
    ),
    MarkupRule(
        "table-cell",
        r"^\|!?",
        attributes={"weight": "bold", "foreground": "bright_black"},
        description="Table cell marker: |cell |!header",
    ),
    MarkupRule(
        "script",
        r"^\[\[\[[[anything]]^\]\]\]",
        attributes={"foreground": "green", "inherit": "fixed-pitch"},
        description="Script block: [[[ ... ]]]",
    ),
    MarkupRule(
        "raw",
        r"\{\{\{[[anything]]\}\}\}",
        attributes={"foreground": "magenta"},
        description="Raw block: {{{ ... }}}",
    ),
]
