# topmark:header:start
#
#   project      : PillarMode
#   file         : preprocess.py
#   file_relpath : src/pillarmode/rules/preprocess.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn authored rule patterns into compiled regular expressions.

Rule authors write ordinary Python regular expressions and may use the
``[[anything]]`` placeholder wherever a construct can enclose arbitrary text,
including line breaks (script blocks, raw blocks, multi-line emphasis). The
placeholder expands to a lazy, line-crossing wildcard so one rule never
swallows the remainder of the document.

All patterns are compiled with ``re.MULTILINE``: ``^`` and ``$`` anchor at line
boundaries, the way markup rules are naturally written.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Final

from pillarmode.config.logging import PillarLogger, get_logger
from pillarmode.constants import ANYTHING_PLACEHOLDER, ESCAPE_CHAR
from pillarmode.core.errors import InvalidPatternError

logger: PillarLogger = get_logger(__name__)

# Lazy "any character" that also crosses line separators, whatever the outer flags are.
ANYTHING_FRAGMENT: Final[str] = "(?s:.)*?"

PATTERN_FLAGS: Final[re.RegexFlag] = re.MULTILINE


def expand_placeholders(template: str) -> str:
    """Replace every wildcard placeholder in ``template`` by the lazy wildcard.

    Args:
        template (str): Authored pattern.

    Returns:
        str: The pattern text with all placeholders expanded; other characters unchanged.
    """
    return template.replace(ANYTHING_PLACEHOLDER, ANYTHING_FRAGMENT)


@lru_cache(maxsize=256)
def preprocess(template: str) -> re.Pattern[str]:
    """Expand ``template`` and compile it for matching against multi-line text.

    Args:
        template (str): Authored pattern, possibly containing ``[[anything]]``.

    Returns:
        re.Pattern[str]: The compiled pattern.

    Raises:
        InvalidPatternError: If the expanded pattern is not a valid regular expression.
    """
    expanded: str = expand_placeholders(template)
    try:
        compiled: re.Pattern[str] = re.compile(expanded, PATTERN_FLAGS)
    except re.error as exc:
        logger.debug("Pattern %r does not compile: %s", expanded, exc)
        raise InvalidPatternError(
            f"Invalid pattern {template!r}: {exc}",
            pattern=expanded,
        ) from exc
    logger.trace("Compiled pattern %r -> %r", template, expanded)
    return compiled


def symmetric_delimiter_pattern(delimiter: str) -> str:
    """Return the authored pattern for markup enclosed in ``delimiter`` on both sides.

    Neither delimiter may be escaped and the enclosed text must not be empty;
    capture group 1 is the enclosed text.

    Args:
        delimiter (str): Literal delimiter, e.g. ``'""'`` for bold.

    Returns:
        str: An authored pattern (still containing the placeholder).

    Raises:
        ValueError: If ``delimiter`` is empty.
    """
    if not delimiter:
        raise ValueError("Delimiter must not be empty.")
    delim: str = re.escape(delimiter)
    esc: str = re.escape(ESCAPE_CHAR)
    return f"(?<!{esc}){delim}({ANYTHING_PLACEHOLDER}[^{esc}]){delim}"
