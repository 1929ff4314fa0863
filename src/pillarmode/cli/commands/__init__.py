# topmark:header:start
#
#   project      : PillarMode
#   file         : __init__.py
#   file_relpath : src/pillarmode/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PillarMode subcommands, registered on the group in ``pillarmode.cli.main``."""
