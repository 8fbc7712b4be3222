"""``subprocess`` backed implementation of :class:`~dotstow.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that spawns external
processes.  OS errors raised while starting the process are caught here
and re-raised as :class:`~dotstow.exceptions.StowFailedError` subclasses.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path

from dotstow.exceptions import CommandNotFoundError, StowFailedError

logger = logging.getLogger(__name__)

PERMISSION_DENIED: int = 126
"""Exit status reported when the process could not be started."""


def format_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


class SubprocessRunner:
    """Concrete :class:`CommandRunner` backed by :func:`subprocess.run`.

    Output is not captured: the child inherits stdout/stderr so Stow's
    verbose report reaches the terminal as it is produced.
    """

    def run(self, argv: Sequence[str], *, cwd: Path | None = None) -> int:
        """Run *argv* and block until it exits.

        Raises
        ------
        CommandNotFoundError
            When ``argv[0]`` does not exist.
        StowFailedError
            For any other OS error while starting the process.
        """
        argv_list = list(argv)
        logger.info("CMD %s", format_argv(argv_list))

        try:
            completed = subprocess.run(argv_list, cwd=cwd, check=False)
        except FileNotFoundError as exc:
            if cwd is not None and not Path(cwd).is_dir():
                raise StowFailedError(
                    f"Working directory does not exist: {cwd}",
                    returncode=PERMISSION_DENIED,
                ) from exc
            raise CommandNotFoundError(
                f"{argv_list[0]}: command not found",
                hint="Run 'dotstow check' to see how to install stow.",
            ) from exc
        except OSError as exc:
            raise StowFailedError(
                f"Could not execute {argv_list[0]}: {exc}",
                returncode=PERMISSION_DENIED,
            ) from exc

        logger.debug("exit status %d from %s", completed.returncode, argv_list[0])
        return completed.returncode
