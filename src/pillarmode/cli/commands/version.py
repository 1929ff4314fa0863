# topmark:header:start
#
#   project      : PillarMode
#   file         : version.py
#   file_relpath : src/pillarmode/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PillarMode `version` command.

Prints the PillarMode version installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from pillarmode.cli.cmd_common import get_console, get_effective_verbosity
from pillarmode.cli.options import output_format_option
from pillarmode.cli.utils import OutputFormat
from pillarmode.constants import PILLARMODE_VERSION

if TYPE_CHECKING:
    from pillarmode.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of PillarMode.",
)
@output_format_option(OutputFormat.DEFAULT, OutputFormat.JSON, OutputFormat.MARKDOWN)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of PillarMode.

    Args:
        output_format (OutputFormat | None): Output format (default, json or markdown).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": PILLARMODE_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# PillarMode Version\n")
        console.print(f"**PillarMode version: {PILLARMODE_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("PillarMode version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(PILLARMODE_VERSION, bold=True)}")
    else:
        console.print(console.styled(PILLARMODE_VERSION, bold=True))
