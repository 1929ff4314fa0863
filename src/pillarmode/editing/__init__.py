# topmark:header:start
#
#   project      : PillarMode
#   file         : __init__.py
#   file_relpath : src/pillarmode/editing/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup insertion helpers (pure edit planning, no document mutation)."""

from __future__ import annotations

from pillarmode.editing.insertion import (
    EditPlan,
    Insertion,
    Span,
    compute_insertion,
    validate_markup,
)

__all__ = [
    "EditPlan",
    "Insertion",
    "Span",
    "compute_insertion",
    "validate_markup",
]
