# topmark:header:start
#
#   project      : PillarMode
#   file         : io.py
#   file_relpath : src/pillarmode/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module reads PillarMode configuration from:
- the packaged default TOML template, and
- on-disk TOML files (``pillarmode.toml`` / ``pyproject.toml``).

Parsing is done with ``tomlkit`` and returned as plain ``dict`` structures.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from pillarmode.config.keys import Toml
from pillarmode.config.logging import PillarLogger, get_logger
from pillarmode.constants import (
    DEFAULT_COMPILER_EXECUTABLE,
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from pathlib import Path

logger: PillarLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_defaults_dict() -> TomlTable:
    """Return PillarMode's runtime defaults as a new dict (no I/O)."""
    return {
        Toml.SECTION_COMPILER: {
            Toml.KEY_EXECUTABLE: DEFAULT_COMPILER_EXECUTABLE,
            Toml.KEY_DEFAULT_FORMAT: "html",
        },
        Toml.SECTION_HIGHLIGHT: {
            Toml.KEY_EXTEND_REGION: True,
        },
    }


def load_default_config_template_text() -> str:
    """Return the annotated default configuration template bundled with the package.

    Falls back to rendering the runtime defaults when the resource is unreadable.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    try:
        return resource.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Cannot read packaged default config template %s: %s", resource, exc)
        return tomlkit.dumps(load_defaults_dict())


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content; empty on failure.

    Notes:
        Errors are logged and an empty dict is returned on failure.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_config_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the PillarMode table of a parsed TOML file.

    For ``pyproject.toml`` that is ``[tool.pillarmode]``; for any other file
    it is the whole document. Returns None when ``pyproject.toml`` has no such
    section.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    if not isinstance(section, dict) or not section:
        logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
        return None
    return cast("TomlTable", section)
