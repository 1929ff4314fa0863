# topmark:header:start
#
#   project      : PillarMode
#   file         : wrap.py
#   file_relpath : src/pillarmode/cli/commands/wrap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PillarMode `wrap` command.

Plans the insertion of markup around a selection (``--start``/``--end``) or at
the caret (``--caret``), like an editor shortcut would. The markup is given
literally (``--markup '""'``) or through the shortcut key of a special text
rule (``--key b``). The edited text is printed, or written back with
``--apply``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from pillarmode.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    get_rules,
    read_document,
    write_document,
)
from pillarmode.cli.errors import PillarModeUsageError, cli_errors
from pillarmode.cli.options import output_format_option
from pillarmode.cli.utils import OutputFormat
from pillarmode.config.logging import PillarLogger, get_logger
from pillarmode.editing.insertion import EditPlan, Span, compute_insertion

if TYPE_CHECKING:
    from pillarmode.cli.console import ConsoleLike
    from pillarmode.rules.base import InsertionAction

logger: PillarLogger = get_logger(__name__)


def _resolve_markup(markup: str | None, key: str | None) -> str:
    """Return the markup to insert from ``--markup`` or ``--key``."""
    if (markup is None) == (key is None):
        raise PillarModeUsageError("Exactly one of '--markup' and '--key' is required.")
    if markup is not None:
        return markup
    assert key is not None
    action: InsertionAction | None = get_rules().action_for_key(key)
    if action is None:
        raise PillarModeUsageError(f"No insertion action is bound to key {key!r}.")
    logger.debug("Key %r resolves to rule %s (%r)", key, action.name, action.markup)
    return action.markup


def _plan_to_dict(plan: EditPlan) -> dict[str, Any]:
    return {
        "insertions": [{"offset": i.offset, "text": i.text} for i in plan.insertions],
        "caret": plan.caret,
    }


@click.command(
    name="wrap",
    help="Wrap a selection (or insert at the caret) with Pillar markup.",
)
@click.argument(
    "file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--markup", default=None, help="Markup to write on both sides (e.g. '\"\"').")
@click.option("--key", default=None, help="Shortcut key of a special text rule (e.g. 'b').")
@click.option("--start", type=click.IntRange(min=0), default=None, help="Selection start offset.")
@click.option("--end", type=click.IntRange(min=0), default=None, help="Selection end offset.")
@click.option(
    "--caret",
    type=click.IntRange(min=0),
    default=None,
    help="Caret offset when there is no selection (defaults to the end of the document).",
)
@click.option("--apply", "apply_changes", is_flag=True, help="Write the result back to FILE.")
@output_format_option(OutputFormat.DEFAULT, OutputFormat.JSON)
def wrap_command(
    *,
    file: Path,
    markup: str | None,
    key: str | None,
    start: int | None,
    end: int | None,
    caret: int | None,
    apply_changes: bool,
    output_format: OutputFormat | None,
) -> None:
    """Insert markup around a selection or at the caret.

    Args:
        file (Path): Document to edit.
        markup (str | None): Literal markup.
        key (str | None): Shortcut key resolving to a special text rule's delimiter.
        start (int | None): Selection start (requires ``end``).
        end (int | None): Selection end (requires ``start``).
        caret (int | None): Caret offset; ignored when a selection is given.
        apply_changes (bool): Write the edited text back to ``file``.
        output_format (OutputFormat | None): ``default`` prints the edited text,
            ``json`` prints the edit plan.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if (start is None) != (end is None):
        raise PillarModeUsageError("'--start' and '--end' must be given together.")
    if start is not None and caret is not None:
        raise PillarModeUsageError("'--caret' cannot be combined with a selection.")

    text: str = read_document(file)
    text_markup: str = _resolve_markup(markup, key)

    selection: Span | None = None
    if start is not None and end is not None:
        selection = Span(start, end)
    caret_offset: int = len(text) if caret is None else caret
    limit: int = max(caret_offset, selection.end if selection is not None else 0)
    if limit > len(text):
        raise PillarModeUsageError(f"Offset {limit} is beyond the end of {file} ({len(text)}).")

    with cli_errors():
        plan: EditPlan = compute_insertion(text_markup, selection, caret_offset)
    edited: str = plan.apply(text)

    if apply_changes:
        write_document(file, edited)
        logger.info("Wrote %s (caret at %d)", file, plan.caret)

    if fmt == OutputFormat.JSON:
        payload: dict[str, Any] = _plan_to_dict(plan)
        payload["file"] = str(file)
        payload["applied"] = apply_changes
        console.print(json.dumps(payload, indent=2))
        return

    if apply_changes:
        if get_effective_verbosity(ctx) >= 0:
            console.print(f"Updated {file} (caret at {plan.caret})")
        return
    console.print(edited, nl=False)
    if get_effective_verbosity(ctx) > 0:
        console.warn(f"caret: {plan.caret}")
