# topmark:header:start
#
#   project      : PillarMode
#   file         : __init__.py
#   file_relpath : src/pillarmode/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for PillarMode.

Build a [`MutableConfig`][pillarmode.config.model.MutableConfig] (from defaults,
TOML files or both), then ``freeze()`` it into the immutable
[`Config`][pillarmode.config.model.Config] consumed by commands.

Submodules are imported explicitly (``pillarmode.config.model``,
``pillarmode.config.logging``); this package does not re-export them because
``pillarmode.compiler`` imports the logging module while the model imports
``pillarmode.compiler``.
"""
