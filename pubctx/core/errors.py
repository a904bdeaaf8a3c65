"""Error codes for CLI exit status.

These values are used as process exit codes and should remain stable:
- 0: Success
- 1: User error (missing flags, invalid config)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the pubctx CLI."""

    OK = 0
    USER_ERROR = 1

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")

