"""Core installer service — orchestrates install, uninstall and check.

The service delegates process execution to a
:class:`~dotstow.core.protocols.CommandRunner` and binary lookup to a
:class:`~dotstow.core.protocols.StowLocator`, both injected at
construction time.  It is responsible for:

* Building the Stow argument vector for each action.
* Gating ``install`` (and only ``install``) on the dependency check.
* Turning a non-zero exit status into
  :class:`~dotstow.exceptions.StowFailedError`.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* Nothing is retried; no cleanup is attempted after a failure.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dotstow.core.commands import build_args
from dotstow.core.models import StowAction, StowConfig, StowStatus
from dotstow.core.protocols import CommandRunner, StowLocator
from dotstow.exceptions import DotstowError, MissingDependencyError, StowFailedError

logger = logging.getLogger(__name__)


def missing_dependency_error(status: StowStatus, executable: str) -> MissingDependencyError:
    """Build the error raised when *executable* is not on PATH."""
    hint_lines: list[str] = []
    if status.install_commands:
        hint_lines.append("Install stow using one of:")
        hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
    return MissingDependencyError(
        f"{executable} is not installed or not on PATH.",
        hint="\n".join(hint_lines) if hint_lines else None,
    )


class StowService:
    """Stateless service that drives Stow for a single package.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    locator:
        Callable satisfying the :class:`StowLocator` protocol.
    config:
        Package, target and binary to operate on.
    """

    def __init__(
        self,
        runner: CommandRunner,
        locator: StowLocator,
        config: StowConfig | None = None,
    ) -> None:
        self._runner: CommandRunner = runner
        self._locator: StowLocator = locator
        self._config: StowConfig = config if config is not None else StowConfig()

    @property
    def config(self) -> StowConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check(self) -> Path:
        """Return the resolved path of the Stow binary.

        Raises
        ------
        MissingDependencyError
            When the binary cannot be found on PATH.
        """
        executable = self._config.executable
        status = self._locator(executable)
        if not status.found or status.path is None:
            raise missing_dependency_error(status, executable)
        logger.debug("%s resolved to %s", executable, status.path)
        return status.path

    def install(self) -> None:
        """Link the package into the target, adopting conflicting files.

        The dependency check runs first; when it fails no process is
        started.

        Raises
        ------
        MissingDependencyError
            When Stow is not on PATH.
        StowFailedError
            When Stow exits non-zero.
        """
        self.check()
        self._run(StowAction.INSTALL)

    def uninstall(self) -> None:
        """Remove the links previously created for the package.

        No dependency check is performed; a missing binary surfaces as
        :class:`~dotstow.exceptions.CommandNotFoundError` from the runner.

        Raises
        ------
        StowFailedError
            When Stow exits non-zero or cannot be executed.
        """
        self._run(StowAction.UNINSTALL)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run(self, action: StowAction) -> None:
        argv = build_args(action, self._config)
        logger.info("%s %s -> %s", action.value, self._config.package, self._config.target)
        try:
            returncode = self._runner.run(argv, cwd=self._config.stow_dir)
        except DotstowError:
            # Already typed; propagate unchanged.
            raise
        except Exception as exc:
            raise StowFailedError(
                f"Unexpected error while running {self._config.executable}: {exc}",
            ) from exc

        if returncode != 0:
            raise StowFailedError(
                f"{self._config.executable} {action.value} failed with exit status {returncode}.",
                returncode=returncode,
                hint=_failure_hint(action),
            )


def _failure_hint(action: StowAction) -> str:
    if action is StowAction.INSTALL:
        return "See the stow output above; conflicting links must be resolved by hand."
    return "See the stow output above; the package may not be installed in this target."
