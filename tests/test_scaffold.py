"""Smoke tests: verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from buildprobe import __version__
from buildprobe.cli import exit_codes
from buildprobe.cli.app import main
from buildprobe.exceptions import (
    ConfigParseError,
    ConfigReadError,
    EnvironmentError,
    ProbeError,
    SelfCheckError,
    UnsupportedFormatError,
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
            ConfigReadError,
            ConfigParseError,
            UnsupportedFormatError,
            SelfCheckError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[ProbeError]
    ) -> None:
        assert issubclass(exc_class, ProbeError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(ProbeError, Exception)

    def test_hint_is_stored(self) -> None:
        err = ProbeError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert ProbeError("boom").hint is None

    def test_read_error_keeps_path(self) -> None:
        err = ConfigReadError("cannot read", path="/tmp/x.json")
        assert err.path == "/tmp/x.json"

    def test_unsupported_format_message(self) -> None:
        err = UnsupportedFormatError("yaml")
        assert str(err) == "Unknown output format 'yaml'"
        assert err.output_format == "yaml"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

class TestEntryPoints:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == exit_codes.SUCCESS

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert f"buildprobe {__version__}" in capsys.readouterr().out

    def test_short_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-V"])
        assert exc_info.value.code == 0

    def test_help_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "--platform" in out
        assert "Output format: text, json" in out

    def test_dunder_main_importable(self) -> None:
        import buildprobe.__main__ as entry

        assert callable(entry.cli)
