# topmark:header:start
#
#   project      : PillarMode
#   file         : constants.py
#   file_relpath : src/pillarmode/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PillarMode Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PILLARMODE_VERSION: str = get_version("pillarmode")

# Name of the bundled default config inside the package `pillarmode.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "pillarmode.config"
DEFAULT_TOML_CONFIG_NAME: str = "pillarmode-default.toml"

# Local config file looked up in the working directory
LOCAL_TOML_CONFIG_NAME: str = "pillarmode.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "pillarmode"

# Environment variable controlling the internal log level
LOG_LEVEL_ENV_VAR: str = "PILLARMODE_LOG_LEVEL"

# Wildcard placeholder available to rule authors: any text, lazily, across lines
ANYTHING_PLACEHOLDER: str = "[[anything]]"

# Character that prevents the following delimiter from opening or closing markup
ESCAPE_CHAR: str = "\\"

# Document extensions handled by the Pillar compiler
PILLAR_EXTENSIONS: tuple[str, ...] = (".pillar", ".pier")

DEFAULT_COMPILER_EXECUTABLE: str = "pillar"

VALUE_NOT_SET: str = "<not set>"
