# topmark:header:start
#
#   project      : PillarMode
#   file         : __init__.py
#   file_relpath : src/pillarmode/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line front end for PillarMode.

The entry point is [`cli`][pillarmode.cli.main.cli]; subcommands live in
``pillarmode.cli.commands``.
"""
