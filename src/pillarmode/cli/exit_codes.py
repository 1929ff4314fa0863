# topmark:header:start
#
#   project      : PillarMode
#   file         : exit_codes.py
#   file_relpath : src/pillarmode/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the PillarMode CLI.

Values follow the BSD ``sysexits`` convention where one applies, so scripts
and editors driving the CLI can tell failure categories apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the PillarMode CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Invalid input data (bad markup, bad offsets, undecodable
            text). Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNAVAILABLE: A required service is unavailable (the external compiler
            or a non-Pillar document). Mirrors BSD ``EX_UNAVAILABLE (69)``.
        SOFTWARE_ERROR: Internal error, e.g. a rule table that fails to
            register. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading or writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNAVAILABLE = 69  # EX_UNAVAILABLE
    SOFTWARE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
