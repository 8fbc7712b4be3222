"""Tests for the ``dotstow doctor`` command (cli/doctor.py).

stow detection is mocked — no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from dotstow.cli import exit_codes
from dotstow.cli.doctor import (
    _os_check,
    _package_check,
    _python_version_check,
    _stow_check,
    _target_check,
    run_doctor,
)
from dotstow.core.models import StowConfig, StowStatus


class TestIndividualChecks:
    def test_python_row(self) -> None:
        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status or "FAIL" in status

    def test_stow_found(self, stow_found: StowStatus) -> None:
        label, value, status = _stow_check(stow_found)
        assert label == "stow"
        assert value == "/usr/bin/stow"
        assert "OK" in status

    def test_stow_missing_is_failure(self, stow_missing: StowStatus) -> None:
        _label, _value, status = _stow_check(stow_missing)
        assert "FAIL" in status

    def test_package_present(self, config: StowConfig) -> None:
        assert "OK" in _package_check(config)[2]

    def test_package_missing(self, tmp_path: Path) -> None:
        cfg = StowConfig(target=tmp_path, stow_dir=tmp_path / "nowhere")
        _label, value, status = _package_check(cfg)
        assert "missing" in value
        assert "FAIL" in status

    def test_target_missing_is_warning(self, tmp_path: Path) -> None:
        cfg = StowConfig(target=tmp_path / "nohome", stow_dir=tmp_path)
        assert "WARN" in _target_check(cfg)[2]

    @patch("dotstow.cli.doctor.platform.machine", return_value="arm64")
    @patch("dotstow.cli.doctor.platform.release", return_value="23.4.0")
    @patch("dotstow.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(self, *_mocks: MagicMock) -> None:
        _label, value, _status = _os_check()
        assert "macOS" in value
        assert "Darwin" not in value


class TestRunDoctor:
    @patch("dotstow.cli.doctor.detect_stow")
    def test_all_pass_returns_success(
        self, mock_detect: MagicMock, stow_found: StowStatus, config: StowConfig,
    ) -> None:
        mock_detect.return_value = stow_found
        assert run_doctor(config) == exit_codes.SUCCESS

    @patch("dotstow.cli.doctor.detect_stow")
    def test_stow_detected_once(
        self, mock_detect: MagicMock, stow_missing: StowStatus, config: StowConfig,
    ) -> None:
        mock_detect.return_value = stow_missing
        run_doctor(config)
        mock_detect.assert_called_once_with("stow")

    @patch("dotstow.cli.doctor.detect_stow")
    def test_missing_stow_fails(
        self, mock_detect: MagicMock, stow_missing: StowStatus, config: StowConfig,
    ) -> None:
        mock_detect.return_value = stow_missing
        assert run_doctor(config) == exit_codes.GENERAL_ERROR

    @patch("dotstow.cli.doctor.detect_stow")
    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output_shows_install_guidance(
        self,
        mock_detect: MagicMock,
        stow_missing: StowStatus,
        config: StowConfig,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        mock_detect.return_value = stow_missing
        code = run_doctor(config)

        err = capsys.readouterr().err
        assert code == exit_codes.GENERAL_ERROR
        assert "sudo apt install stow" in err
        assert "Some checks failed." in err
