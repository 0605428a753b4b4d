# topmark:header:start
#
#   project      : YarsFormat
#   file         : exit_codes.py
#   file_relpath : src/yars_format/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes used by the yars-format CLI.

Errors take precedence: a run that hit any error exits with `ExitCode.FAILURE`
even when, in check mode, other files would change.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the yars-format CLI.

    Attributes:
        SUCCESS (int): Every file was processed; nothing to report.
        WOULD_CHANGE (int): Check mode found at least one file that would change.
        FAILURE (int): At least one file could not be read, parsed or written.
            Click usage errors use the same code.
    """

    SUCCESS = 0
    WOULD_CHANGE = 1
    FAILURE = 2
