# topmark:header:start
#
#   project      : fileheader
#   file         : exit_codes.py
#   file_relpath : src/fileheader/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the fileheader CLI.

fileheader follows the BSD ``sysexits`` convention where practical. The one
deliberate divergence is ``WOULD_CHANGE = 2``, returned by ``check`` when some
files lack the header; tests must assert ``result.exception is None`` to tell
it apart from Click's own usage errors, which also exit with 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes.

    Attributes:
        SUCCESS: Every file is compliant, or every requested change was written.
        FAILURE: At least one file could not be processed.
        WOULD_CHANGE: ``check`` found files without the header.
        USAGE_ERROR: Invalid invocation. Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Invalid configuration (bad TOML, unknown license, no
            header). Mirrors BSD ``EX_CONFIG (78)``.
        INTERRUPTED: The run was interrupted (Ctrl-C) before all files were
            dispatched.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG

    INTERRUPTED = 130  # 128 + SIGINT
