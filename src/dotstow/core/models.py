"""Domain models for dotstow.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies
on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


DEFAULT_PACKAGE: str = "pkg"
"""Package directory stowed when none is given."""

DEFAULT_EXECUTABLE: str = "stow"
"""Name of the symlink-farm manager binary looked up on PATH."""


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

class StowAction(enum.Enum):
    """Operation performed on the package."""

    INSTALL = "install"
    UNINSTALL = "uninstall"


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StowConfig:
    """Everything needed to build a Stow invocation.

    The defaults reproduce the fixed behaviour: package ``pkg`` from the
    current directory, linked into the user's home directory.
    """

    package: str = DEFAULT_PACKAGE
    """Package directory name, relative to :attr:`stow_dir`."""

    target: Path = field(default_factory=Path.home)
    """Directory the symlinks are created in (Stow ``--target``)."""

    stow_dir: Path = field(default_factory=Path.cwd)
    """Directory holding the package; the child process runs here."""

    executable: str = DEFAULT_EXECUTABLE
    """Binary name (or path) of the symlink-farm manager."""

    simulate: bool = False
    """Ask Stow for a dry run (``--simulate``)."""

    @property
    def package_path(self) -> Path:
        return self.stow_dir / self.package


# ---------------------------------------------------------------------------
# Dependency probe result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StowStatus:
    """Result of a Stow detection probe.

    Attributes
    ----------
    found : bool
        Whether the binary was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    version_hint : str
        Human-readable status string (e.g. ``"found at …"`` or ``"not found"``).
    install_commands : tuple[str, ...]
        Suggested shell commands for installing Stow on the current
        platform.  Empty when Stow is already present.
    """

    found: bool
    path: Path | None
    version_hint: str
    install_commands: tuple[str, ...]
