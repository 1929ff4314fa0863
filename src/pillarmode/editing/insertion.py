# topmark:header:start
#
#   project      : PillarMode
#   file         : insertion.py
#   file_relpath : src/pillarmode/editing/insertion.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compute the edits that wrap a selection in markup.

[`compute_insertion`][pillarmode.editing.insertion.compute_insertion] is a
pure function: it describes *where* markup goes and where the caret should end
up, and leaves applying the edit to the host. [`EditPlan.apply`][pillarmode.editing.insertion.EditPlan.apply]
performs the edit on a plain string for hosts (and tests) that work on text.

Offsets are character offsets into the document *before* the edit. Insertions
are listed by descending offset so they can be applied one after the other
without shifting the offsets that remain.
"""

from __future__ import annotations

from dataclasses import dataclass

from pillarmode.config.logging import PillarLogger, get_logger
from pillarmode.core.errors import InvalidMarkupError

logger: PillarLogger = get_logger(__name__)


@dataclass(frozen=True)
class Span:
    """Half-open character range ``[start, end)``.

    A span built with ``start > end`` is normalized, mirroring how editors
    report a selection made backwards.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise ValueError(f"Span offsets must be non-negative: [{self.start}, {self.end})")
        if self.start > self.end:
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """True if the span covers no character."""
        return self.start == self.end


@dataclass(frozen=True)
class Insertion:
    """Insert ``text`` at ``offset``."""

    offset: int
    text: str


@dataclass(frozen=True)
class EditPlan:
    """Ordered insertions plus the caret position after they are applied.

    Attributes:
        insertions (tuple[Insertion, ...]): Insertions, highest offset first.
        caret (int): Caret offset in the edited document.
    """

    insertions: tuple[Insertion, ...]
    caret: int

    def apply(self, text: str) -> str:
        """Return ``text`` with every insertion applied.

        Raises:
            ValueError: If an insertion offset lies beyond the end of ``text``.
        """
        result: str = text
        for ins in self.insertions:
            if ins.offset > len(result):
                raise ValueError(f"Insertion offset {ins.offset} beyond end of text ({len(text)})")
            result = result[: ins.offset] + ins.text + result[ins.offset :]
        return result


def validate_markup(markup: str) -> None:
    """Raise ``InvalidMarkupError`` unless ``markup`` is non-empty single-line text."""
    if not markup:
        raise InvalidMarkupError("Markup must not be empty.")
    if "\n" in markup or "\r" in markup:
        raise InvalidMarkupError(f"Markup must not contain line separators: {markup!r}")


def compute_insertion(markup: str, selection: Span | None, caret_offset: int) -> EditPlan:
    """Plan the insertion of ``markup`` around a selection or at the caret.

    With a non-empty ``selection`` the markup is inserted right before its
    start and right after its end; the caret lands after the selected text,
    just before the closing markup. Without a selection (or with an empty one)
    the markup is inserted twice at ``caret_offset`` and the caret lands
    between the two copies, ready for typing.

    Args:
        markup (str): Markup written on both sides (e.g. ``'""'``).
        selection (Span | None): Selected range, if any.
        caret_offset (int): Current caret offset.

    Returns:
        EditPlan: Insertions (highest offset first) and the resulting caret.

    Raises:
        InvalidMarkupError: If ``markup`` is empty or contains a line separator.
        ValueError: If ``caret_offset`` is negative.
    """
    validate_markup(markup)
    if caret_offset < 0:
        raise ValueError(f"Caret offset must be non-negative: {caret_offset}")

    width: int = len(markup)
    if selection is not None and not selection.is_empty:
        plan = EditPlan(
            insertions=(
                Insertion(selection.end, markup),
                Insertion(selection.start, markup),
            ),
            caret=selection.end + width,
        )
    else:
        plan = EditPlan(
            insertions=(Insertion(caret_offset, markup + markup),),
            caret=caret_offset + width,
        )
    logger.trace("Insertion plan for %r: %r", markup, plan)
    return plan
