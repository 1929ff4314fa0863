# topmark:header:start
#
#   project      : PillarMode
#   file         : __init__.py
#   file_relpath : src/pillarmode/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, framework-independent building blocks shared by all PillarMode layers."""

from __future__ import annotations
