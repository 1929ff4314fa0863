# topmark:header:start
#
#   project      : PillarMode
#   file         : keys.py
#   file_relpath : src/pillarmode/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for PillarMode configuration.

These names are the external configuration API as written in
``pillarmode.toml`` and in ``[tool.pillarmode]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by PillarMode configuration.

    The ordering mirrors ``pillarmode-default.toml``.
    """

    # [compiler]
    SECTION_COMPILER: Final[str] = "compiler"

    KEY_EXECUTABLE: Final[str] = "executable"
    KEY_DEFAULT_FORMAT: Final[str] = "default_format"

    # [highlight]
    SECTION_HIGHLIGHT: Final[str] = "highlight"

    KEY_EXTEND_REGION: Final[str] = "extend_region"
