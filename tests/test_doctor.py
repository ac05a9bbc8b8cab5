"""Tests for the ``swftrawl doctor`` command (cli/doctor.py).

Decoder discovery is mocked — no plugin needs to be installed.

Coverage:
* Doctor runs and returns SUCCESS when a decoder is available.
* Doctor returns GENERAL_ERROR when no decoder can be found.
* Individual check functions return correct tuples.
* CLI routing dispatches to ``run_doctor`` with ``--decoder``.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from swftrawl.cli import exit_codes
from swftrawl.infra.decoder_loader import DecoderStatus


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _mock_decoder_found() -> DecoderStatus:
    return DecoderStatus(
        found=True,
        spec="flashdev_swf:Decoder",
        origin="option",
        detail="flashdev_swf:Decoder (option)",
    )


def _mock_decoder_missing() -> DecoderStatus:
    return DecoderStatus(
        found=False,
        spec=None,
        origin="none",
        detail="No SWF decoder is configured.",
    )


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from swftrawl.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status or "FAIL" in status


class TestDecoderCheck:
    @patch("swftrawl.cli.doctor.detect_decoder")
    def test_found(self, mock_detect: MagicMock) -> None:
        from swftrawl.cli.doctor import _decoder_check

        mock_detect.return_value = _mock_decoder_found()
        label, value, status = _decoder_check("flashdev_swf:Decoder")
        assert label == "decoder"
        assert "flashdev_swf:Decoder" in value
        assert "OK" in status
        mock_detect.assert_called_once_with("flashdev_swf:Decoder")

    @patch("swftrawl.cli.doctor.detect_decoder")
    def test_missing(self, mock_detect: MagicMock) -> None:
        from swftrawl.cli.doctor import _decoder_check

        mock_detect.return_value = _mock_decoder_missing()
        label, value, status = _decoder_check()
        assert label == "decoder"
        assert value == "not configured"
        assert "FAIL" in status


class TestRichCheck:
    def test_installed(self) -> None:
        from swftrawl.cli.doctor import _rich_check

        label, _value, status = _rich_check()
        assert label == "rich"
        # rich is a declared dependency
        assert "OK" in status

    @patch.dict("sys.modules", {"rich": None})
    def test_not_installed(self) -> None:
        from swftrawl.cli.doctor import _rich_check

        label, value, status = _rich_check()
        assert value == "NOT INSTALLED"
        assert "WARN" in status


class TestOsCheck:
    def test_returns_tuple(self) -> None:
        from swftrawl.cli.doctor import _os_check

        label, value, status = _os_check()
        assert label == "OS"
        assert isinstance(value, str)
        assert "OK" in status

    @patch("swftrawl.cli.doctor.platform.machine", return_value="arm64")
    @patch("swftrawl.cli.doctor.platform.release", return_value="23.4.0")
    @patch("swftrawl.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(
        self,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
    ) -> None:
        from swftrawl.cli.doctor import _os_check

        _label, value, _status = _os_check()
        assert "macOS" in value
        assert "Darwin" not in value


class TestSwftrawlVersionCheck:
    def test_returns_current_version(self) -> None:
        from swftrawl.cli.doctor import _swftrawl_version_check
        from swftrawl.version import __version__

        label, value, status = _swftrawl_version_check()
        assert label == "swftrawl"
        assert value == __version__
        assert "OK" in status


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    @patch("swftrawl.cli.doctor.detect_decoder")
    def test_all_pass_returns_success(self, mock_detect: MagicMock) -> None:
        from swftrawl.cli.doctor import run_doctor

        mock_detect.return_value = _mock_decoder_found()
        code = run_doctor()
        assert code == exit_codes.SUCCESS

    @patch("swftrawl.cli.doctor.detect_decoder")
    def test_missing_decoder_fails(
        self, mock_detect: MagicMock, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from swftrawl.cli.doctor import run_doctor

        mock_detect.return_value = _mock_decoder_missing()
        code = run_doctor()
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "SWFTRAWL_DECODER" in err
        assert "Some checks failed." in err

    @patch("swftrawl.cli.doctor.platform.machine", return_value="arm64")
    @patch("swftrawl.cli.doctor.platform.release", return_value="23.4.0")
    @patch("swftrawl.cli.doctor.platform.system", return_value="Darwin")
    @patch("swftrawl.cli.doctor.detect_decoder")
    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output_without_rich(
        self,
        mock_detect: MagicMock,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from swftrawl.cli.doctor import run_doctor

        mock_detect.return_value = _mock_decoder_missing()
        _ = run_doctor()
        captured = capsys.readouterr()
        assert "swftrawl doctor" in captured.err
        assert "macOS" in captured.err
        assert "export SWFTRAWL_DECODER=" in captured.err


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestDoctorRouting:
    @patch("swftrawl.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_dispatches(self, mock_run: MagicMock) -> None:
        from swftrawl.cli.app import main

        code = main(["doctor"])
        assert code == exit_codes.SUCCESS
        mock_run.assert_called_once_with(None)

    @patch("swftrawl.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_decoder_option_forwarded(self, mock_run: MagicMock) -> None:
        from swftrawl.cli.app import main

        main(["doctor", "--decoder", "pkg.mod:Decoder"])
        mock_run.assert_called_once_with("pkg.mod:Decoder")

    @patch("swftrawl.cli.doctor.run_doctor", return_value=exit_codes.GENERAL_ERROR)
    def test_doctor_failure_propagates(self, mock_run: MagicMock) -> None:
        from swftrawl.cli.app import main

        code = main(["doctor"])
        assert code == exit_codes.GENERAL_ERROR

    def test_real_doctor_with_plugin(self, plugin: str) -> None:
        from swftrawl.cli.app import main

        assert main(["doctor", "--decoder", plugin]) == exit_codes.SUCCESS
