# topmark:header:start
#
#   project      : PillarMode
#   file         : errors.py
#   file_relpath : src/pillarmode/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the PillarMode CLI.

Usage:
    Commands raise these (or let [`cli_errors`][pillarmode.cli.errors.cli_errors]
    translate library errors into them) to exit with a standardized message and
    exit code.

Styling:
    Errors are printed through the project console when one is present in the
    Click context, otherwise with Click's default styling.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any

import click

from pillarmode.cli.exit_codes import ExitCode
from pillarmode.core.errors import (
    CompilerError,
    CompilerNotFoundError,
    ConfigError,
    InvalidMarkupError,
    PillarModeError,
    RegistrationError,
    UnsupportedDocumentError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


class PillarModeCliError(click.ClickException):
    """Base class for all PillarMode CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in ``show()``)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class PillarModeUsageError(PillarModeCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PillarModeDataError(PillarModeCliError):
    """Error for invalid input data (markup, offsets, encoding)."""

    exit_code = ExitCode.DATA_ERROR


class PillarModeFileNotFoundError(PillarModeCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PillarModeUnavailableError(PillarModeCliError):
    """Error when the compiler is missing or the document type is unsupported."""

    exit_code = ExitCode.UNAVAILABLE


class PillarModeSoftwareError(PillarModeCliError):
    """Error for internal failures (e.g. a rule table that fails to register)."""

    exit_code = ExitCode.SOFTWARE_ERROR


class PillarModeIOError(PillarModeCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class PillarModeConfigError(PillarModeCliError):
    """Error for invalid configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class PillarModeCompilerError(PillarModeCliError):
    """Error when the external compiler fails; exits with the compiler's status."""

    def __init__(self, message: str, *, returncode: int) -> None:
        super().__init__(message)
        self.exit_code = returncode if 0 < returncode < 256 else ExitCode.FAILURE


@contextmanager
def cli_errors() -> Iterator[None]:
    """Translate library errors raised in the body into CLI errors.

    Raises:
        PillarModeCliError: The subclass matching the library error category.
    """
    try:
        yield
    except ConfigError as exc:
        raise PillarModeConfigError(str(exc)) from exc
    except InvalidMarkupError as exc:
        raise PillarModeDataError(str(exc)) from exc
    except (CompilerNotFoundError, UnsupportedDocumentError) as exc:
        raise PillarModeUnavailableError(str(exc)) from exc
    except CompilerError as exc:
        raise PillarModeCompilerError(str(exc), returncode=exc.returncode) from exc
    except RegistrationError as exc:
        raise PillarModeSoftwareError(str(exc)) from exc
    except PillarModeError as exc:
        raise PillarModeCliError(str(exc)) from exc
