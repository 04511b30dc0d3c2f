"""Shared pytest fixtures and configuration for the buildprobe test suite.

Guidelines
----------
* No network access in any test.
* Platform and environment lookups are patched at the infra boundary.
* Config files live under ``tmp_path``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _plain_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from emitting ANSI codes into captured stderr."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[object], Path]:
    """Return a helper that writes *payload* as JSON and returns the path.

    Strings are written verbatim so malformed documents can be tested.
    """

    def _write(payload: object, name: str = "config.json") -> Path:
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
