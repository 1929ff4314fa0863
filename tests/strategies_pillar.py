# topmark:header:start
#
#   project      : PillarMode
#   file         : strategies_pillar.py
#   file_relpath : tests/strategies_pillar.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hypothesis strategies producing Pillar-like documents and windows."""

from __future__ import annotations

from hypothesis import strategies as st

# Lines drawn from the constructs the built-in rules recognize, plus plain prose
PILLAR_LINES: list[str] = [
    "!Title",
    "!!Section",
    '""bold"" and \'\'italic\'\'',
    "==code== here",
    "- item",
    "# numbered",
    "|cell |!head",
    "% a comment",
    "= preformatted",
    "_",
    "[[[",
    "]]]",
    "{{{",
    "}}}",
    "*http://example.com*",
    "plain prose",
    "",
]


@st.composite
def s_pillar_document(draw: st.DrawFn, *, max_lines: int = 30) -> str:
    """Draw a document made of Pillar-ish lines (blank lines included)."""
    lines: list[str] = draw(
        st.lists(
            st.one_of(st.sampled_from(PILLAR_LINES), st.text(alphabet="ab \n\"'=", max_size=12)),
            max_size=max_lines,
        )
    )
    trailing: str = draw(st.sampled_from(["", "\n", "\n\n"]))
    return "\n".join(lines) + trailing


@st.composite
def s_document_and_window(draw: st.DrawFn) -> tuple[str, int, int]:
    """Draw a document and a window ``[start, end)`` that may exceed its length."""
    text: str = draw(s_pillar_document())
    a: int = draw(st.integers(min_value=0, max_value=len(text) + 5))
    b: int = draw(st.integers(min_value=0, max_value=len(text) + 5))
    return text, min(a, b), max(a, b)
