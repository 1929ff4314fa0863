# topmark:header:start
#
#   project      : PillarMode
#   file         : __main__.py
#   file_relpath : src/pillarmode/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running PillarMode via ``python -m pillarmode``.

It delegates directly to :func:`pillarmode.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how PillarMode is launched.

Examples:
    Highlight a document using the module interface::

        python -m pillarmode highlight notes.pillar
"""

from __future__ import annotations

from pillarmode.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
