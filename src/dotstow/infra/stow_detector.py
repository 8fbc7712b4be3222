"""Infrastructure: Stow detection and platform guidance.

This module is responsible for locating the ``stow`` binary on the
system PATH and providing platform-specific installation guidance when
it is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from pathlib import Path

from dotstow.core.models import DEFAULT_EXECUTABLE, StowStatus


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_stow(executable: str = DEFAULT_EXECUTABLE) -> StowStatus:
    """Probe the system for the Stow binary.

    Returns a :class:`StowStatus` regardless of whether Stow is present —
    the caller decides whether to abort or merely report.
    """
    result = shutil.which(executable)

    if result is not None:
        found_at = Path(result)
        return StowStatus(
            found=True,
            path=found_at,
            version_hint=f"found at {found_at}",
            install_commands=(),
        )

    return StowStatus(
        found=False,
        path=None,
        version_hint="not found",
        install_commands=_platform_install_commands(),
    )


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "linux":
        return (
            "sudo apt install stow",
            "sudo dnf install stow",
            "sudo pacman -S stow",
        )
    if system == "darwin":
        return ("brew install stow",)
    if system == "freebsd":
        return ("sudo pkg install stow",)
    return ("Please install GNU Stow from https://www.gnu.org/software/stow/",)
