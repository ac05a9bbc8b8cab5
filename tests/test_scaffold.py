"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from swftrawl import __version__
from swftrawl.cli import exit_codes
from swftrawl.cli.app import main
from swftrawl.exceptions import (
    DecodeError,
    DecoderUnavailableError,
    EnvironmentError,
    InputValidationError,
    OutputWriteError,
    SwfTrawlError,
    append_decoder_setup_suggestion,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InputValidationError,
            DecodeError,
            OutputWriteError,
            EnvironmentError,
            DecoderUnavailableError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[SwfTrawlError]
    ) -> None:
        assert issubclass(exc_class, SwfTrawlError)

    def test_decoder_unavailable_is_environment_error(self) -> None:
        assert issubclass(DecoderUnavailableError, EnvironmentError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(SwfTrawlError, Exception)

    def test_hint_is_stored(self) -> None:
        err = SwfTrawlError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = SwfTrawlError("boom")
        assert err.hint is None

    def test_decode_error_joins_messages(self) -> None:
        err = DecodeError("a.swf", ["first", "second"])
        assert str(err) == "first\nsecond"
        assert err.errors == ("first", "second")
        assert err.source_id == "a.swf"

    def test_validation_error_keeps_problems(self) -> None:
        err = InputValidationError(["one", "two"], hint="see --help")
        assert str(err) == "one\ntwo"
        assert err.problems == ("one", "two")
        assert err.hint == "see --help"

    def test_setup_suggestion_appended_once(self) -> None:
        once = append_decoder_setup_suggestion("No decoder.")
        assert once.startswith("No decoder.\n")
        assert "--decoder" in once
        assert append_decoder_setup_suggestion(once) == once


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "--classlistout" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_help_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    @patch("swftrawl.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_returns_success(self, _mock_doc: object) -> None:
        code = main(["doctor"])
        assert code == exit_codes.SUCCESS

    def test_unknown_command_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["bogus"])
        assert exc_info.value.code == 2

    def test_actions_route_to_trawl(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Valid inputs should route to _handle_trawl (mocked)."""
        from swftrawl.cli import app as app_module

        seen: list[list[str]] = []
        monkeypatch.setattr(
            app_module,
            "_handle_trawl",
            lambda args, actions: seen.append([a.option for a in actions]) or exit_codes.SUCCESS,
        )
        code = main(["--swf", "a.swf", "--classlistout", "--exclude", "x.xml"])
        assert code == exit_codes.SUCCESS
        assert seen == [["classlistout", "exclude"]]
