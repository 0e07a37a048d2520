"""Process exit codes for CLI commands.

The numeric values are part of the CLI contract and should remain stable:
- 0: Success
- 1: User error (bad arguments, nothing to release, empty update)
- 2: Environment error (editor could not be launched)
- 3: Document error (the changelog could not be parsed)
- 5: I/O error (file missing, unreadable or unwritable)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    DOCUMENT_ERROR = 3
    IO_ERROR = 5
