# topmark:header:start
#
#   project      : PillarMode
#   file         : highlight.py
#   file_relpath : src/pillarmode/cli/commands/highlight.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PillarMode `highlight` command.

Runs the matching pass over (a window of) a document, the way an editor's
highlighting engine would, and prints the styled spans. With ``--render`` the
window text is printed with the resolved styles applied as ANSI attributes.

Where spans overlap, ``--render`` keeps the style of the earliest registered
rule; the span listing reports every span.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from pillarmode.cli.cmd_common import (
    get_config,
    get_console,
    get_effective_verbosity,
    get_rules,
    read_document,
)
from pillarmode.cli.errors import PillarModeUsageError
from pillarmode.cli.options import output_format_option
from pillarmode.cli.utils import OutputFormat, render_markdown_table, style_kwargs_for
from pillarmode.config.logging import PillarLogger, get_logger
from pillarmode.scan.highlighter import highlight
from pillarmode.scan.window import ScanWindow, extend

if TYPE_CHECKING:
    from pillarmode.cli.console import ConsoleLike
    from pillarmode.config.model import Config
    from pillarmode.rules.registry import RuleRegistry
    from pillarmode.scan.highlighter import StyledSpan

logger: PillarLogger = get_logger(__name__)


def render_window(
    console: ConsoleLike,
    text: str,
    window: ScanWindow,
    spans: list[StyledSpan],
    registry: RuleRegistry,
) -> str:
    """Return the window text with each character styled by the first span covering it.

    Args:
        console (ConsoleLike): Console providing ``styled()``.
        text (str): Full document text.
        window (ScanWindow): Rendered window.
        spans (list[StyledSpan]): Spans in registration order.
        registry (RuleRegistry): Registry used to resolve style attributes.

    Returns:
        str: The styled window text.
    """
    owner: list[StyledSpan | None] = [None] * len(window)
    for span in spans:
        for offset in range(max(span.start, window.start), min(span.end, window.end)):
            if owner[offset - window.start] is None:
                owner[offset - window.start] = span

    resolved: dict[str, dict[str, Any]] = {}
    pieces: list[str] = []
    run_start: int = 0
    for i in range(1, len(owner) + 1):
        if i < len(owner) and owner[i] is owner[run_start]:
            continue
        chunk: str = text[window.start + run_start : window.start + i]
        owning: StyledSpan | None = owner[run_start]
        if owning is None:
            pieces.append(chunk)
        else:
            if owning.rule not in resolved:
                resolved[owning.rule] = style_kwargs_for(registry.styles.resolve_all(owning.style))
            # Styled per line so ANSI resets do not leak across line breaks
            styled_lines: list[str] = [
                console.styled(part, **resolved[owning.rule]) if part else part
                for part in chunk.split("\n")
            ]
            pieces.append("\n".join(styled_lines))
        run_start = i
    return "".join(pieces)


def _span_record(span: StyledSpan, text: str) -> dict[str, Any]:
    record: dict[str, Any] = span.to_dict()
    record["text"] = span.text(text)
    return record


@click.command(
    name="highlight",
    help="Show the styled spans the Pillar rules produce for a document.",
)
@click.argument(
    "file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--start", type=click.IntRange(min=0), default=None, help="Window start offset.")
@click.option("--end", type=click.IntRange(min=0), default=None, help="Window end offset.")
@click.option(
    "--extend/--no-extend",
    "extend_region",
    default=None,
    help="Grow the window to paragraph boundaries first (default from [highlight] extend_region).",
)
@click.option("--render", is_flag=True, help="Print the window text with styles applied.")
@output_format_option()
def highlight_command(
    *,
    file: Path,
    start: int | None,
    end: int | None,
    extend_region: bool | None,
    render: bool,
    output_format: OutputFormat | None,
) -> None:
    """Highlight a document window and report the styled spans.

    Args:
        file (Path): Pillar document.
        start (int | None): Window start; defaults to the start of the document.
        end (int | None): Window end; defaults to the end of the document.
        extend_region (bool | None): Override of the configured region extension.
        render (bool): Print the styled text instead of the span list.
        output_format (OutputFormat | None): Output format of the span list.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)
    config: Config = get_config(ctx)
    registry: RuleRegistry = get_rules()
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    text: str = read_document(file)
    lo: int = 0 if start is None else start
    hi: int = len(text) if end is None else end
    if lo > hi:
        raise PillarModeUsageError(f"--start ({lo}) must not exceed --end ({hi}).")
    window: ScanWindow = ScanWindow(lo, hi).clamp(len(text))

    do_extend: bool = config.extend_region if extend_region is None else extend_region
    if do_extend:
        window = extend(window, text)
    logger.debug("Highlighting %s in window [%d, %d)", file, window.start, window.end)
    spans: list[StyledSpan] = highlight(window, text, registry)

    if render:
        console.print(render_window(console, text, window, spans, registry), nl=False)
        if not text[window.start : window.end].endswith("\n"):
            console.print()
        return

    if fmt == OutputFormat.JSON:
        payload: dict[str, Any] = {
            "file": str(file),
            "window": {"start": window.start, "end": window.end},
            "spans": [_span_record(s, text) for s in spans],
        }
        console.print(json.dumps(payload, indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for s in spans:
            console.print(json.dumps(_span_record(s, text)))
        return
    if fmt == OutputFormat.MARKDOWN:
        rows: list[list[str]] = [
            [str(s.start), str(s.end), f"`{s.rule}`", f"`{s.text(text)!r}`"] for s in spans
        ]
        headers: list[str] = ["Start", "End", "Rule", "Text"]
        console.print(render_markdown_table(headers, rows, align={0: "right", 1: "right"}))
        return

    if get_effective_verbosity(ctx) > 0:
        console.print(
            console.styled(
                f"{file}: window [{window.start}, {window.end}), {len(spans)} span(s)\n",
                bold=True,
                underline=True,
            )
        )
    width: int = len(str(window.end))
    for s in spans:
        kwargs: dict[str, Any] = style_kwargs_for(registry.styles.resolve_all(s.style))
        console.print(
            f"{s.start:>{width}}-{s.end:<{width}} {s.rule:<16} "
            f"{console.styled(repr(s.text(text)), **kwargs)}"
        )
