"""Tests for stow detection (infra/stow_detector.py).

All tests mock :func:`shutil.which` — no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from dotstow.core.models import StowStatus
from dotstow.infra.stow_detector import _platform_install_commands, detect_stow


class TestDetectStow:
    @patch("dotstow.infra.stow_detector.shutil.which")
    def test_found(self, mock_which: MagicMock) -> None:
        mock_which.return_value = "/usr/bin/stow"
        status = detect_stow()

        assert status.found is True
        assert isinstance(status.path, Path)
        assert status.install_commands == ()
        mock_which.assert_called_once_with("stow")

    def test_symlink_is_not_resolved(self, tmp_path: Path) -> None:
        real = tmp_path / "stow-2.4" / "stow"
        real.parent.mkdir()
        real.touch()
        link = tmp_path / "stow"
        link.symlink_to(real)

        with patch("dotstow.infra.stow_detector.shutil.which", return_value=str(link)):
            status = detect_stow()
        assert status.path == link

    @patch("dotstow.infra.stow_detector.shutil.which", return_value=None)
    def test_not_found(self, _mock_which: MagicMock) -> None:
        status = detect_stow()

        assert status.found is False
        assert status.path is None
        assert status.version_hint == "not found"
        assert len(status.install_commands) > 0

    @patch("dotstow.infra.stow_detector.shutil.which", return_value=None)
    def test_custom_executable(self, mock_which: MagicMock) -> None:
        detect_stow("xstow")
        mock_which.assert_called_once_with("xstow")


class TestPlatformInstallCommands:
    @patch("dotstow.infra.stow_detector.platform.system", return_value="Linux")
    def test_linux_commands(self, _mock_sys: MagicMock) -> None:
        cmds = _platform_install_commands()
        assert any("apt" in c for c in cmds)
        assert any("dnf" in c for c in cmds)
        assert any("pacman" in c for c in cmds)

    @patch("dotstow.infra.stow_detector.platform.system", return_value="Darwin")
    def test_darwin_commands(self, _mock_sys: MagicMock) -> None:
        assert _platform_install_commands() == ("brew install stow",)

    @patch("dotstow.infra.stow_detector.platform.system", return_value="Plan9")
    def test_fallback(self, _mock_sys: MagicMock) -> None:
        (cmd,) = _platform_install_commands()
        assert "gnu.org" in cmd


class TestStowStatus:
    def test_frozen(self) -> None:
        status = StowStatus(found=True, path=Path("/usr/bin/stow"), version_hint="found", install_commands=())
        with pytest.raises(AttributeError):
            status.found = False  # type: ignore[misc]
