# topmark:header:start
#
#   project      : PillarMode
#   file         : rules.py
#   file_relpath : src/pillarmode/cli/commands/rules.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PillarMode `rules` command.

Lists the registered markup rules in registration order (which is also the
order in which their spans are reported), optionally with their patterns,
shortcut keys and resolved style attributes.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from pillarmode.cli.cmd_common import get_console, get_effective_verbosity, get_rules
from pillarmode.cli.options import output_format_option
from pillarmode.cli.utils import OutputFormat, render_markdown_table, style_kwargs_for
from pillarmode.constants import PILLARMODE_VERSION, VALUE_NOT_SET
from pillarmode.rules.base import SpecialTextRule

if TYPE_CHECKING:
    from pillarmode.cli.console import ConsoleLike
    from pillarmode.rules.base import MarkupRule
    from pillarmode.rules.registry import RuleRegistry


def _shortcut(rule: MarkupRule) -> str | None:
    return rule.shortcut_key if isinstance(rule, SpecialTextRule) else None


def _serialize(rule: MarkupRule, registry: RuleRegistry, *, details: bool) -> dict[str, Any]:
    """Serialize a rule for machine output."""
    out: dict[str, Any] = {"name": rule.name, "description": rule.description}
    if details:
        out.update(
            {
                "pattern": rule.pattern,
                "capture_group": rule.capture_group,
                "shortcut_key": _shortcut(rule),
                "parent": rule.parent,
                "style": registry.styles.resolve_all(registry.style_for(rule)),
            }
        )
    return out


def _format_attributes(attributes: dict[str, Any]) -> str:
    return ", ".join(f"{k}={v}" for k, v in sorted(attributes.items()))


@click.command(
    name="rules",
    help="List the registered markup rules.",
    epilog="""
Rules are listed in registration order. Spans produced by 'pillarmode highlight'
follow the same order.
""",
)
@output_format_option()
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show pattern, capture group, shortcut key and resolved style of each rule.",
)
def rules_command(
    *,
    show_details: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List registered markup rules.

    Args:
        show_details (bool): Include pattern, capture group, shortcut key and
            resolved style attributes.
        output_format (OutputFormat | None): Output format; None means ``default``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)
    registry: RuleRegistry = get_rules()
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    rules: tuple[MarkupRule, ...] = registry.all_rules()

    if fmt == OutputFormat.JSON:
        payload = [_serialize(r, registry, details=show_details) for r in rules]
        console.print(json.dumps(payload, indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for r in rules:
            console.print(json.dumps(_serialize(r, registry, details=show_details)))
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print("# Markup Rules\n")
        console.print(f"PillarMode version **{PILLARMODE_VERSION}** registers these rules:\n")
        if show_details:
            headers: list[str] = ["Rule", "Key", "Pattern", "Style", "Description"]
            rows: list[list[str]] = [
                [
                    f"`{r.name}`",
                    f"`{_shortcut(r)}`" if _shortcut(r) else "",
                    f"`{r.pattern}`",
                    _format_attributes(registry.styles.resolve_all(registry.style_for(r))),
                    r.description,
                ]
                for r in rules
            ]
        else:
            headers = ["Rule", "Description"]
            rows = [[f"`{r.name}`", r.description] for r in rules]
        console.print(render_markdown_table(headers, rows))
        return

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Registered markup rules:\n", bold=True, underline=True))

    num_width: int = len(str(len(rules)))
    name_width: int = max((len(r.name) for r in rules), default=1)
    for idx, r in enumerate(rules, start=1):
        attributes: dict[str, Any] = registry.styles.resolve_all(registry.style_for(r))
        name: str = console.styled(f"{r.name:<{name_width}}", **style_kwargs_for(attributes))
        console.print(f"{idx:>{num_width}}. {name} {console.styled(r.description, dim=True)}")
        if show_details:
            console.print(f"      pattern      : {r.pattern}")
            if r.capture_group is not None:
                console.print(f"      capture group: {r.capture_group}")
            console.print(f"      shortcut key : {_shortcut(r) or VALUE_NOT_SET}")
            if r.parent:
                console.print(f"      parent style : {r.parent}")
            console.print(f"      style        : {_format_attributes(attributes)}")
