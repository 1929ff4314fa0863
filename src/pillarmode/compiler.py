# topmark:header:start
#
#   project      : PillarMode
#   file         : compiler.py
#   file_relpath : src/pillarmode/compiler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Invoke the external Pillar compiler.

The compiler is an opaque executable (``pillar`` by default) called as::

    pillar export --to=<format> <source>

Its standard output is redirected into the output file. Nothing in the
recognition engine depends on this module; the built-in rule table and the
markup the compiler accepts are simply expected to stay in sync.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import tempfile
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from pillarmode.config.logging import PillarLogger, get_logger
from pillarmode.constants import DEFAULT_COMPILER_EXECUTABLE, PILLAR_EXTENSIONS
from pillarmode.core.errors import (
    CompilerError,
    CompilerNotFoundError,
    UnsupportedDocumentError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

logger: PillarLogger = get_logger(__name__)


class ExportFormat(str, Enum):
    """Output formats supported by ``pillar export``."""

    LATEX = "latex"
    HTML = "html"
    MARKDOWN = "markdown"

    @property
    def suffix(self) -> str:
        """File suffix conventionally used for this format."""
        return {"latex": ".tex", "html": ".html", "markdown": ".md"}[self.value]

    @classmethod
    def from_name(cls, name: str | None) -> ExportFormat | None:
        """Return the member whose value matches ``name`` (case-insensitive), or None."""
        if name is None:
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


def is_pillar_document(path: Path) -> bool:
    """True if ``path`` has a Pillar document extension."""
    return path.suffix.lower() in PILLAR_EXTENSIONS


def default_output_path(source: Path, fmt: ExportFormat) -> Path:
    """Return ``source`` with its suffix replaced by the format's suffix."""
    return source.with_suffix(fmt.suffix)


def resolve_executable(executable: str) -> str:
    """Return the path of ``executable`` (searched on ``PATH`` unless absolute).

    Raises:
        CompilerNotFoundError: If the executable cannot be found.
    """
    raw: str = executable.strip() or DEFAULT_COMPILER_EXECUTABLE
    if os.path.isabs(raw):
        if os.path.isfile(raw):
            return raw
        raise CompilerNotFoundError(f"Pillar compiler not found: {raw}")
    found: str | None = shutil.which(raw)
    if found is None:
        raise CompilerNotFoundError(f"Pillar compiler not found on PATH: {raw}")
    return found


def build_command(executable: str, source: Path, fmt: ExportFormat) -> list[str]:
    """Return the argument vector exporting ``source`` to ``fmt``."""
    return [executable, "export", f"--to={fmt.value}", str(source)]


def compile_document(
    source: Path,
    *,
    fmt: ExportFormat,
    output: Path | None = None,
    executable: str = DEFAULT_COMPILER_EXECUTABLE,
) -> Path:
    """Export ``source`` with the external compiler and write the result to ``output``.

    Args:
        source (Path): Pillar document (``.pillar`` or ``.pier``).
        fmt (ExportFormat): Target format.
        output (Path | None): Output file; defaults to ``source`` with the format suffix.
        executable (str): Compiler executable name or path.

    Returns:
        Path: The output file.

    Raises:
        UnsupportedDocumentError: If ``source`` is not a Pillar document, or the
            output would overwrite it.
        CompilerNotFoundError: If the executable cannot be found.
        CompilerError: If the compiler exits with a non-zero status.
    """
    if not is_pillar_document(source):
        raise UnsupportedDocumentError(
            f"Not a Pillar document (expected {', '.join(PILLAR_EXTENSIONS)}): {source}"
        )
    target: Path = output if output is not None else default_output_path(source, fmt)
    if target.resolve() == source.resolve():
        raise UnsupportedDocumentError(f"Output would overwrite the source document: {source}")
    cmd: Sequence[str] = build_command(resolve_executable(executable), source, fmt)
    logger.info("Running %s > %s", " ".join(cmd), target)

    # Output goes to a sibling temp file; the target is replaced only on success
    tmp = tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        dir=target.parent,
        prefix=f".{target.name}.",
        suffix=".tmp",
        delete=False,
    )
    tmp_path = Path(tmp.name)
    try:
        with tmp:
            proc = subprocess.run(
                cmd,
                stdout=tmp,
                stderr=subprocess.PIPE,
                text=True,
                check=False,
            )
        if proc.returncode != 0:
            stderr: str = str(proc.stderr or "").strip()
            logger.error("Pillar compiler failed (exit %d): %s", proc.returncode, stderr)
            raise CompilerError(
                stderr or f"Pillar compiler failed (exit {proc.returncode})",
                returncode=proc.returncode,
                stderr=stderr,
            )
        os.replace(tmp_path, target)
    finally:
        tmp_path.unlink(missing_ok=True)
    logger.debug("Wrote %s", target)
    return target
