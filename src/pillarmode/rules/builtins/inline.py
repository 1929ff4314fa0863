# topmark:header:start
#
#   project      : PillarMode
#   file         : inline.py
#   file_relpath : src/pillarmode/rules/builtins/inline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inline Pillar markup.

Exports:
    RULES (list[MarkupRule | StyleDescriptor]): Text formatting delimited by
        doubled characters (``""bold""``, ``''italic''``, ...), each bound to a
        shortcut key, followed by links, figures and annotations.

Notes:
    A delimiter preceded by a backslash is literal text: ``\\""`` neither opens
    nor closes bold.
"""

from __future__ import annotations

from ...styles.base import StyleDescriptor
from ..base import MarkupRule, SpecialTextRule

RULES: list[MarkupRule | StyleDescriptor] = [
    SpecialTextRule(
        "bold",
        delimiter='""',
        shortcut_key="b",
        attributes={"weight": "bold"},
        description="Bold text",
    ),
    SpecialTextRule(
        "italic",
        delimiter="''",
        shortcut_key="i",
        attributes={"slant": "italic"},
        description="Italic text",
    ),
    SpecialTextRule(
        "monospaced",
        delimiter="==",
        shortcut_key="m",
        attributes={"foreground": "magenta", "inherit": "fixed-pitch"},
        description="Monospaced text",
    ),
    SpecialTextRule(
        "strikethrough",
        delimiter="--",
        shortcut_key="-",
        attributes={"strike_through": True},
        description="Struck-through text",
    ),
    SpecialTextRule(
        "subscript",
        delimiter="@@",
        shortcut_key="@",
        attributes={"height": 0.8},
        description="Subscript",
    ),
    SpecialTextRule(
        "superscript",
        delimiter="^^",
        shortcut_key="^",
        attributes={"height": 0.8},
        description="Superscript",
    ),
    SpecialTextRule(
        "underlined",
        delimiter="__",
        shortcut_key="_",
        attributes={"underline": True},
        description="Underlined text",
    ),
    MarkupRule(
        "link",
        r"(?<!\\)\*[^*\n]+\*",
        attributes={"foreground": "blue", "underline": True, "inherit": "link"},
        description="Link: *target* or *alias>target*",
    ),
    MarkupRule(
        "figure",
        r"(?<!\\)\+[^+\n]+\+",
        attributes={"foreground": "cyan"},
        description="Figure: +caption>file|label=name+",
    ),
    MarkupRule(
        "annotation",
        r"\$\{[^}\n]*\}\$",
        attributes={"foreground": "yellow"},
        description="Annotation: ${name:param=value}$",
    ),
]
