# topmark:header:start
#
#   project      : PillarMode
#   file         : compile.py
#   file_relpath : src/pillarmode/cli/commands/compile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PillarMode `compile` command.

Exports a Pillar document with the external compiler configured under
``[compiler] executable``. The compiler's exit status is propagated when it
fails.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from pillarmode.cli.cli_types import EnumChoiceParam
from pillarmode.cli.cmd_common import get_config, get_console, get_effective_verbosity
from pillarmode.cli.errors import PillarModeFileNotFoundError, cli_errors
from pillarmode.compiler import ExportFormat, compile_document

if TYPE_CHECKING:
    from pillarmode.cli.console import ConsoleLike
    from pillarmode.config.model import Config


@click.command(
    name="compile",
    help="Export a Pillar document with the external 'pillar' compiler.",
)
@click.argument(
    "file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--to",
    "fmt",
    type=EnumChoiceParam(ExportFormat),
    default=None,
    help=(
        f"Export format ({', '.join(f.value for f in ExportFormat)}); "
        "defaults to [compiler] default_format."
    ),
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (defaults to FILE with the format's suffix).",
)
def compile_command(*, file: Path, fmt: ExportFormat | None, output: Path | None) -> None:
    """Export ``file`` through the external compiler.

    Args:
        file (Path): Pillar document (``.pillar`` or ``.pier``).
        fmt (ExportFormat | None): Export format; None uses the configured default.
        output (Path | None): Output file.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)
    config: Config = get_config(ctx)

    if not file.is_file():
        raise PillarModeFileNotFoundError(f"File not found: {file}")

    with cli_errors():
        target: Path = compile_document(
            file,
            fmt=fmt or config.default_format,
            output=output,
            executable=config.compiler_executable,
        )

    if get_effective_verbosity(ctx) >= 0:
        console.print(f"Wrote {console.styled(str(target), bold=True)}")
