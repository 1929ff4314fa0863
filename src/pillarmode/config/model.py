# topmark:header:start
#
#   project      : PillarMode
#   file         : model.py
#   file_relpath : src/pillarmode/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model.

Two layers, as elsewhere in the code base:

- [`MutableConfig`][pillarmode.config.model.MutableConfig] is a builder. Values
  left at ``None`` are *unset*, so layered sources can be merged last-wins
  without losing information.
- [`Config`][pillarmode.config.model.Config] is the frozen snapshot handed to
  commands; every field has a concrete value.

Layering (later wins): runtime defaults, ``[tool.pillarmode]`` in
``pyproject.toml``, ``pillarmode.toml`` in the working directory, then
explicitly requested files.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pillarmode.compiler import ExportFormat
from pillarmode.config.io import extract_config_table, load_defaults_dict, load_toml_dict
from pillarmode.config.keys import Toml
from pillarmode.config.logging import PillarLogger, get_logger
from pillarmode.constants import (
    DEFAULT_COMPILER_EXECUTABLE,
    LOCAL_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
)
from pillarmode.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pillarmode.config.io import TomlTable

logger: PillarLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        compiler_executable (str): Pillar compiler executable (name or path).
        default_format (ExportFormat): Format used when none is requested.
        extend_region (bool): Whether scan windows are grown to paragraph boundaries.
        config_files (tuple[Path, ...]): Files that contributed, in merge order.
    """

    compiler_executable: str
    default_format: ExportFormat
    extend_region: bool
    config_files: tuple[Path, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration as a TOML-serializable dict."""
        return {
            Toml.SECTION_COMPILER: {
                Toml.KEY_EXECUTABLE: self.compiler_executable,
                Toml.KEY_DEFAULT_FORMAT: self.default_format.value,
            },
            Toml.SECTION_HIGHLIGHT: {
                Toml.KEY_EXTEND_REGION: self.extend_region,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            compiler_executable=self.compiler_executable,
            default_format=self.default_format,
            extend_region=self.extend_region,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder; ``None`` means "not set by this layer"."""

    compiler_executable: str | None = None
    default_format: ExportFormat | None = None
    extend_region: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a configuration layer from a parsed TOML table.

        Unknown sections and keys are logged and ignored.

        Args:
            data (TomlTable): PillarMode table (already extracted from ``pyproject.toml``).
            config_file (Path | None): Source file, recorded for provenance.

        Returns:
            MutableConfig: The layer.

        Raises:
            ConfigError: If a known key has a value of the wrong type or an
                unsupported export format.
        """
        where: str = str(config_file) if config_file is not None else "defaults"
        draft = cls()

        compiler: Any = data.get(Toml.SECTION_COMPILER, {})
        if not isinstance(compiler, dict):
            raise ConfigError(f"[{Toml.SECTION_COMPILER}] must be a table ({where})")
        executable: Any = compiler.get(Toml.KEY_EXECUTABLE)
        if executable is not None:
            if not isinstance(executable, str) or not executable.strip():
                raise ConfigError(
                    f"{Toml.SECTION_COMPILER}.{Toml.KEY_EXECUTABLE} must be a non-empty "
                    f"string ({where})"
                )
            draft.compiler_executable = executable.strip()
        fmt_raw: Any = compiler.get(Toml.KEY_DEFAULT_FORMAT)
        if fmt_raw is not None:
            fmt: ExportFormat | None = (
                ExportFormat.from_name(fmt_raw) if isinstance(fmt_raw, str) else None
            )
            if fmt is None:
                allowed: str = ", ".join(f.value for f in ExportFormat)
                raise ConfigError(
                    f"{Toml.SECTION_COMPILER}.{Toml.KEY_DEFAULT_FORMAT} must be one of "
                    f"{allowed}, got {fmt_raw!r} ({where})"
                )
            draft.default_format = fmt

        highlight: Any = data.get(Toml.SECTION_HIGHLIGHT, {})
        if not isinstance(highlight, dict):
            raise ConfigError(f"[{Toml.SECTION_HIGHLIGHT}] must be a table ({where})")
        extend_region: Any = highlight.get(Toml.KEY_EXTEND_REGION)
        if extend_region is not None:
            if not isinstance(extend_region, bool):
                raise ConfigError(
                    f"{Toml.SECTION_HIGHLIGHT}.{Toml.KEY_EXTEND_REGION} must be a boolean "
                    f"({where})"
                )
            draft.extend_region = extend_region

        known: set[str] = {Toml.SECTION_COMPILER, Toml.SECTION_HIGHLIGHT}
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown configuration key %r (%s)", key, where)

        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a configuration layer from ``path``.

        Returns:
            MutableConfig | None: The layer, or None if the file holds no
                PillarMode configuration (e.g. ``pyproject.toml`` without
                ``[tool.pillarmode]``) or cannot be parsed.
        """
        logger.debug("Loading configuration from %s", path)
        table: TomlTable | None = extract_config_table(path, load_toml_dict(path))
        if not table:
            return None
        return cls.from_toml_dict(table, config_file=path)

    @staticmethod
    def discover_local_config_files(start: Path) -> list[Path]:
        """Return the config files present in ``start``, lowest precedence first."""
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, LOCAL_TOML_CONFIG_NAME):
            candidate: Path = start / name
            if candidate.is_file():
                found.append(candidate)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge defaults, discovered files and explicit files (last wins).

        Args:
            cwd (Path | None): Directory searched for local config files
                (defaults to the current working directory).
            extra_config_files (Iterable[Path] | None): Explicit files, applied last.
            no_config (bool): Skip discovery of local config files.

        Returns:
            MutableConfig: The merged builder.
        """
        draft: MutableConfig = cls.from_defaults()
        if not no_config:
            for path in cls.discover_local_config_files(cwd or Path.cwd()):
                layer = cls.from_toml_file(path)
                if layer is not None:
                    draft = draft.merge_with(layer)
        for path in extra_config_files or ():
            layer = cls.from_toml_file(Path(path))
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override this one."""
        return MutableConfig(
            compiler_executable=other.compiler_executable
            if other.compiler_executable is not None
            else self.compiler_executable,
            default_format=other.default_format
            if other.default_format is not None
            else self.default_format,
            extend_region=other.extend_region
            if other.extend_region is not None
            else self.extend_region,
            config_files=self.config_files + other.config_files,
        )

    def freeze(self) -> Config:
        """Return an immutable snapshot, filling unset values with defaults."""
        return Config(
            compiler_executable=self.compiler_executable or DEFAULT_COMPILER_EXECUTABLE,
            default_format=self.default_format or ExportFormat.HTML,
            extend_region=True if self.extend_region is None else self.extend_region,
            config_files=tuple(self.config_files),
        )
