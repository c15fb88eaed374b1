# topmark:header:start
#
#   project      : C4DSL
#   file         : exit_codes.py
#   file_relpath : src/c4dsl/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the C4DSL CLI.

Values follow the BSD `sysexits` convention so that scripts and CI jobs can
tell a bad invocation from a bad workspace document or an unreadable file.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the C4DSL CLI.

    Attributes:
        SUCCESS: The command completed.
        FAILURE: Generic failure; prefer a more specific code.
        USAGE_ERROR: Invalid flags or arguments. Mirrors ``EX_USAGE (64)``.
        DATA_ERROR: The workspace document or model is invalid (malformed
            document, failed field validation, bad parent declaration).
            Mirrors ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: The input document does not exist. Mirrors ``EX_NOINPUT (66)``.
        IO_ERROR: Reading the input or writing the output failed. Mirrors ``EX_IOERR (74)``.
        CONFIG_ERROR: A config file is invalid. Mirrors ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Last-resort bucket for unhandled errors.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
