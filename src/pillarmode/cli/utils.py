# topmark:header:start
#
#   project      : PillarMode
#   file         : utils.py
#   file_relpath : src/pillarmode/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent helpers for the PillarMode CLI.

- [`OutputFormat`][pillarmode.cli.utils.OutputFormat] and
  [`ColorMode`][pillarmode.cli.utils.ColorMode] enums.
- Color-mode resolution from CLI flags, environment and output format.
- Markdown table rendering.
- Mapping resolved style attributes onto ``click.style`` keyword arguments.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable).
      NDJSON: One JSON object per line (machine-readable).
      MARKDOWN: GitHub-flavoured Markdown.

    Notes:
      Machine formats (``JSON`` and ``NDJSON``) never include ANSI color.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"
    MARKDOWN = "markdown"


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. Machine formats (``json``/``ndjson``) are never colored.
        2. ``--color always`` / ``--color never``.
        3. Environment: ``FORCE_COLOR`` (set and not ``"0"``) enables,
           ``NO_COLOR`` (any value) disables.
        4. Otherwise, whether stdout is a TTY.

    Args:
        color_mode_override (ColorMode | None): Parsed ``--color`` value; None if not given.
        output_format (OutputFormat | None): Output format, if already known.
        stdout_isatty (bool | None): Override for TTY detection.

    Returns:
        bool: True if ANSI color should be enabled.
    """
    if output_format in (OutputFormat.JSON, OutputFormat.NDJSON):
        return False

    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers (Sequence[str]): Column headers.
        rows (Sequence[Sequence[str]]): Rows, each as long as ``headers``.
        align (Mapping[int, str] | None): Column index to ``"left"`` (default),
            ``"right"`` or ``"center"``.

    Returns:
        str: The table, ending with a newline.

    Raises:
        ValueError: If a row does not have as many cells as there are headers.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [len(str(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _sep_for(i: int) -> str:
        style: str = (align or {}).get(i, "left").lower()
        w: int = max(3, widths[i])
        if style == "right":
            return "-" * (w - 1) + ":"
        if style == "center":
            return ":" + "-" * (w - 2) + ":"
        return "-" * w

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{str(c):<{widths[i]}}" for i, c in enumerate(cells)) + " |"

    lines: list[str] = [_line(headers), "| " + " | ".join(_sep_for(i) for i in range(ncols)) + " |"]
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines) + "\n"


def style_kwargs_for(attributes: Mapping[str, Any]) -> dict[str, Any]:
    """Map resolved style attributes to ``click.style`` keyword arguments.

    Attributes without a terminal rendition (``height``, ``inherit``) are ignored.

    Args:
        attributes (Mapping[str, Any]): Resolved attributes of a style.

    Returns:
        dict[str, Any]: Keyword arguments for ``click.style``.
    """
    kwargs: dict[str, Any] = {}
    if "foreground" in attributes:
        kwargs["fg"] = attributes["foreground"]
    if "background" in attributes:
        kwargs["bg"] = attributes["background"]
    if attributes.get("weight") == "bold":
        kwargs["bold"] = True
    if attributes.get("slant") == "italic":
        kwargs["italic"] = True
    if attributes.get("underline"):
        kwargs["underline"] = True
    if attributes.get("strike_through"):
        kwargs["strikethrough"] = True
    return kwargs
