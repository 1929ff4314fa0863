# topmark:header:start
#
#   project      : PillarMode
#   file         : main.py
#   file_relpath : src/pillarmode/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PillarMode command-line entry point.

Group-level options (verbosity, color, configuration files) are resolved once
and stored in ``ctx.obj`` for the subcommands:

- ``verbosity_level`` (int): program-output verbosity.
- ``console`` ([`ConsoleLike`][pillarmode.cli.console.ConsoleLike]): user-facing output.
- ``color_enabled`` (bool): whether ANSI styling is emitted.
- ``config_files`` / ``no_config``: inputs of the lazily loaded configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pillarmode.cli.commands.compile import compile_command
from pillarmode.cli.commands.highlight import highlight_command
from pillarmode.cli.commands.rules import rules_command
from pillarmode.cli.commands.version import version_command
from pillarmode.cli.commands.wrap import wrap_command
from pillarmode.cli.console import ClickConsole
from pillarmode.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from pillarmode.cli.utils import ColorMode, resolve_color_mode
from pillarmode.config.logging import PillarLogger, get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from pathlib import Path

    from pillarmode.cli.console import ConsoleLike

logger: PillarLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[Path, ...] = (),
    no_config: bool = False,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit ``--color`` value (or None).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_files (tuple[Path, ...]): Extra configuration files from ``--config``.
        no_config (bool): Whether local configuration discovery is disabled.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment, not from -v/-q
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    override: ColorMode | None = ColorMode.NEVER if no_color else color_mode
    enable_color: bool = resolve_color_mode(color_mode_override=override, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["config_files"] = tuple(config_files)
    ctx.obj["no_config"] = no_config


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="PillarMode: Pillar markup recognition, styling and editing helpers.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Entry point for the PillarMode CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_files=config_files,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'pillarmode highlight FILE' to see how a document is styled.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(rules_command)

cli.add_command(highlight_command)

cli.add_command(wrap_command)

cli.add_command(compile_command)

if __name__ == "__main__":
    cli()
