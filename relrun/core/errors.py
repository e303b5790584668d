"""Exit codes for the relrun command line.

Every command maps its failure to one of these codes so CI jobs can tell a
bad invocation from a broken environment or a failed release.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    These values are part of the CI contract and should remain stable:
    - 0: Success
    - 1: User error (bad version, unknown bump kind, invalid arguments)
    - 2: Environment error (missing token or repository)
    - 3: Release error (release-please reported a failure)
    - 4: Network error (release-please could not reach GitHub)
    - 5: I/O error (config or manifest unreadable, temp config unwritable)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    RELEASE_ERROR = 3
    NETWORK_ERROR = 4
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
