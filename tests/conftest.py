"""Shared pytest fixtures and configuration for the dotstow test suite.

Guidelines
----------
* stow is never executed — the runner is mocked at the infra boundary.
* Filesystem access is limited to ``tmp_path``.
* Tests must not depend on whether stow is installed on the host.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from dotstow.core.models import StowConfig, StowStatus


@pytest.fixture
def config(tmp_path: Path) -> StowConfig:
    home = tmp_path / "home"
    home.mkdir()
    dotfiles = tmp_path / "dotfiles"
    (dotfiles / "pkg").mkdir(parents=True)
    return StowConfig(target=home, stow_dir=dotfiles)


@pytest.fixture
def stow_found() -> StowStatus:
    return StowStatus(
        found=True,
        path=Path("/usr/bin/stow"),
        version_hint="found at /usr/bin/stow",
        install_commands=(),
    )


@pytest.fixture
def stow_missing() -> StowStatus:
    return StowStatus(
        found=False,
        path=None,
        version_hint="not found",
        install_commands=("sudo apt install stow",),
    )


@pytest.fixture
def runner() -> MagicMock:
    mock = MagicMock()
    mock.run.return_value = 0
    return mock
