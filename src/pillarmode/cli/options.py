# topmark:header:start
#
#   project      : PillarMode
#   file         : options.py
#   file_relpath : src/pillarmode/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options for PillarMode commands.

Reusable option decorators (verbosity, color, configuration files, output
format) and their resolution logic, so the group and commands stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, TypeVar

import click

from pillarmode.cli.cli_types import EnumChoiceParam
from pillarmode.cli.errors import PillarModeUsageError
from pillarmode.cli.utils import ColorMode, OutputFormat

F = TypeVar("F", bound=Callable[..., object])

#: Program-output verbosity levels.
VERBOSITY_QUIET: int = -1
VERBOSITY_DEFAULT: int = 0
VERBOSITY_VERBOSE: int = 1
VERBOSITY_DEBUG: int = 2


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: ``-1`` (quiet), ``0`` (default), ``1`` (verbose) or ``2`` (very verbose).

    Raises:
        PillarModeUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PillarModeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count >= 2:
        return VERBOSITY_DEBUG
    if verbose_count == 1:
        return VERBOSITY_VERBOSE
    if quiet_count >= 1:
        return VERBOSITY_QUIET
    return VERBOSITY_DEFAULT


def common_verbose_options(f: F) -> F:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase program output. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Reduce program output.",
    )(f)
    return f


def common_color_options(f: F) -> F:
    """Add ``--color auto|always|never`` and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: F) -> F:
    """Add ``--config PATH`` (repeatable) and ``--no-config``."""
    f = click.option(
        "--config",
        "config_files",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        multiple=True,
        help="Extra TOML configuration file (applied after discovered files; repeatable).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore pyproject.toml and pillarmode.toml in the working directory.",
    )(f)
    return f


def output_format_option(*formats: OutputFormat) -> Callable[[F], F]:
    """Return a decorator adding ``--format`` restricted to ``formats`` (all if empty)."""
    allowed: tuple[OutputFormat, ...] = formats or tuple(OutputFormat)

    def _validate(
        _ctx: click.Context,
        _param: click.Parameter,
        value: OutputFormat | None,
    ) -> OutputFormat | None:
        if value is not None and value not in allowed:
            raise click.BadParameter(
                f"'{value.value}' is not supported here "
                f"(choose from {', '.join(v.value for v in allowed)})"
            )
        return value

    def decorator(f: F) -> F:
        return click.option(
            "--format",
            "output_format",
            type=EnumChoiceParam(OutputFormat),
            default=None,
            callback=_validate,
            help=f"Output format ({', '.join(v.value for v in allowed)}).",
        )(f)

    return decorator
