# topmark:header:start
#
#   project      : PillarMode
#   file         : cmd_common.py
#   file_relpath : src/pillarmode/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plumbing shared by several commands.

Accessors for the state the group stores in ``ctx.obj`` (console, verbosity,
configuration) and document I/O mapped onto CLI errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pillarmode.cli.errors import (
    PillarModeDataError,
    PillarModeFileNotFoundError,
    PillarModeIOError,
    cli_errors,
)
from pillarmode.config.logging import PillarLogger, get_logger
from pillarmode.config.model import Config, MutableConfig
from pillarmode.rules.instances import get_rule_registry

if TYPE_CHECKING:
    from pathlib import Path

    import click

    from pillarmode.cli.console import ConsoleLike
    from pillarmode.rules.registry import RuleRegistry

logger: PillarLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context by the group."""
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (0 when the group did not set one)."""
    return int(ctx.obj.get("verbosity_level", 0))


def get_config(ctx: click.Context) -> Config:
    """Load, merge and freeze the configuration once per invocation.

    Raises:
        PillarModeConfigError: If a configuration file holds an invalid value.
    """
    cached: Config | None = ctx.obj.get("config")
    if cached is not None:
        return cached
    with cli_errors():
        config: Config = MutableConfig.load_merged(
            extra_config_files=ctx.obj.get("config_files", ()),
            no_config=bool(ctx.obj.get("no_config", False)),
        ).freeze()
    logger.debug("Effective configuration: %s", config)
    ctx.obj["config"] = config
    return config


def get_rules() -> RuleRegistry:
    """Return the process-wide rule registry, mapping registration failures.

    Raises:
        PillarModeSoftwareError: If the built-in rule table fails to register.
    """
    with cli_errors():
        return get_rule_registry()


def read_document(path: Path) -> str:
    """Read a document as UTF-8 text.

    Newlines are kept as-is so offsets match the file byte-for-character.

    Raises:
        PillarModeFileNotFoundError: If ``path`` does not exist.
        PillarModeDataError: If the file is not valid UTF-8.
        PillarModeIOError: For other read errors.
    """
    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()
    except FileNotFoundError as exc:
        raise PillarModeFileNotFoundError(f"File not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise PillarModeDataError(f"Cannot decode {path} as UTF-8: {exc}") from exc
    except OSError as exc:
        raise PillarModeIOError(f"Cannot read {path}: {exc}") from exc


def write_document(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` as UTF-8 without newline translation.

    Raises:
        PillarModeIOError: If the file cannot be written.
    """
    try:
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as exc:
        raise PillarModeIOError(f"Cannot write {path}: {exc}") from exc
