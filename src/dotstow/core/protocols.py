"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from dotstow.core.models import StowStatus


class CommandRunner(Protocol):
    """Contract for process execution backends."""

    def run(self, argv: Sequence[str], *, cwd: Path | None = None) -> int:
        """Run *argv* to completion and return its exit status.

        Implementations must block until the process exits and must map
        OS-level spawn failures to
        :class:`~dotstow.exceptions.StowFailedError` subclasses.

        Raises
        ------
        CommandNotFoundError
            When the executable does not exist.
        StowFailedError
            When the process cannot be started for another reason.
        """
        ...  # pragma: no cover


class StowLocator(Protocol):
    """Contract for locating the Stow binary."""

    def __call__(self, executable: str) -> StowStatus:
        """Probe for *executable* and describe what was found."""
        ...  # pragma: no cover
