# topmark:header:start
#
#   project      : PillarMode
#   file         : __init__.py
#   file_relpath : src/pillarmode/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PillarMode package.

PillarMode recognizes the inline and block constructs of the Pillar markup
language, maps them to display styles, and computes the edits needed to wrap
text in markup. Editors embed the engine through a small typed API; a Click
CLI exposes the same operations from the shell.
"""

from __future__ import annotations
