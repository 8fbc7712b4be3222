"""Custom exception hierarchy for dotstow.

All exceptions that cross layer boundaries must inherit from
:class:`DotstowError`.  Raw OS errors raised while spawning the Stow
process must NEVER propagate beyond the infrastructure layer — they are
caught there and re-raised as a typed subclass defined here.

Hierarchy
---------
DotstowError
├── EnvironmentError
│   └── MissingDependencyError
└── StowFailedError
    └── CommandNotFoundError
"""

from __future__ import annotations


class DotstowError(Exception):
    """Base exception for all dotstow errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(DotstowError):
    """Raised when a required runtime dependency is not available."""


class MissingDependencyError(EnvironmentError):
    """Raised when the ``stow`` binary cannot be located on PATH."""


# --- External tool ---------------------------------------------------------

class StowFailedError(DotstowError):
    """Raised when Stow terminates with a non-zero exit status.

    The exit status is kept so the CLI can hand it back to the caller
    unchanged.
    """

    def __init__(
        self,
        message: str,
        *,
        returncode: int = 1,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.returncode: int = _shell_status(returncode)


class CommandNotFoundError(StowFailedError):
    """Raised when the Stow executable could not be spawned at all."""

    EXIT_STATUS: int = 127
    """Status the shell reports for an unknown command."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message, returncode=self.EXIT_STATUS, hint=hint)


def _shell_status(returncode: int) -> int:
    """Map a process return code to the status a shell would report.

    A negative code means the process was killed by that signal and
    becomes ``128 + signal``.  Zero is never reported for a failure.
    """
    if returncode < 0:
        return 128 - returncode
    if returncode == 0:
        return 1
    return returncode
