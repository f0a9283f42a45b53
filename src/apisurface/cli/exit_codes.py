# topmark:header:start
#
#   project      : API Surface
#   file         : exit_codes.py
#   file_relpath : src/apisurface/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the API Surface CLI.

Values follow the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the API Surface CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure, e.g. the module raised while being imported.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        MODULE_NOT_FOUND: The requested module cannot be found. Mirrors BSD
            ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
    MODULE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
