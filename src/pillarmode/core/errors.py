# topmark:header:start
#
#   project      : PillarMode
#   file         : errors.py
#   file_relpath : src/pillarmode/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the PillarMode engine.

Registration errors are raised synchronously while the rule and style tables
are being populated; the offending entry is never added. The matching pass and
the scan-region extender do not raise for well-formed input.

The CLI maps these exceptions onto
[`pillarmode.cli.errors`][pillarmode.cli.errors] so that each failure class
ends the process with a stable exit code.
"""

from __future__ import annotations


class PillarModeError(Exception):
    """Base class for all PillarMode errors."""


class RegistrationError(PillarModeError):
    """Base class for errors detected while registering rules or styles."""


class InvalidPatternError(RegistrationError):
    """A rule pattern does not compile once the wildcard placeholder is expanded.

    Attributes:
        pattern (str): The expanded pattern that failed to compile.
    """

    def __init__(self, message: str, *, pattern: str) -> None:
        super().__init__(message)
        self.pattern = pattern


class DuplicateRuleNameError(RegistrationError):
    """A rule with the same name is already registered."""


class DuplicateStyleError(RegistrationError):
    """A style descriptor with the same id is already registered."""


class CyclicStyleInheritanceError(RegistrationError):
    """Following ``parent`` links from a style leads back to the style itself.

    Attributes:
        chain (tuple[str, ...]): Style ids visited, starting and ending with the
            offending id.
    """

    def __init__(self, message: str, *, chain: tuple[str, ...]) -> None:
        super().__init__(message)
        self.chain = chain


class InvalidMarkupError(PillarModeError):
    """Markup text handed to the insertion helper is empty or spans lines."""


class ConfigError(PillarModeError):
    """A configuration value is present but invalid."""


class UnsupportedDocumentError(PillarModeError):
    """The document is not a Pillar source (``.pillar`` / ``.pier``)."""


class CompilerError(PillarModeError):
    """The external Pillar compiler exited with a failure status.

    Attributes:
        returncode (int): Exit status reported by the compiler.
        stderr (str): Captured standard error of the compiler.
    """

    def __init__(self, message: str, *, returncode: int, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class CompilerNotFoundError(PillarModeError):
    """The configured compiler executable cannot be found."""


class DuplicateShortcutError(RegistrationError):
    """A special text rule reuses a shortcut key already bound to another rule."""
