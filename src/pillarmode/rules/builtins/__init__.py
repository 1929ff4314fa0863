# topmark:header:start
#
#   project      : PillarMode
#   file         : __init__.py
#   file_relpath : src/pillarmode/rules/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in Pillar markup rules.

Each submodule exports a ``RULES`` list mixing
[`pillarmode.rules.base.MarkupRule`][] entries and the standalone
[`pillarmode.styles.base.StyleDescriptor`][] parents they inherit from. The
aggregator in ``instances.py`` registers these lists in a fixed order, which is
also the order in which the matching pass emits spans.
"""

from __future__ import annotations
