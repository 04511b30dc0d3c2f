"""Inline self-checks run after every successful report.

Three checks exercise the library paths the pipeline depends on:

* **serialization**: a throwaway configuration survives a JSON
  round-trip.  Failure is fatal.
* **error handling**: reading a path that does not exist fails with
  :class:`~buildprobe.exceptions.ConfigReadError`.  An unexpected
  success is reported, never escalated.
* **environment**: a home-directory variable is visible.  Absence is a
  skip, never a failure.

Progress is written to stderr only; the report body on stdout is
never touched.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from buildprobe.cli.console import console, escape
from buildprobe.core.codec import configuration_from_json, configuration_to_json
from buildprobe.core.models import Configuration
from buildprobe.exceptions import ConfigParseError, ConfigReadError, SelfCheckError
from buildprobe.infra.config_loader import read_config_text
from buildprobe.infra.environment import HOME_VARIABLES, lookup_home_directory

MISSING_PROBE_PATH: Path = Path("/nonexistent/file")

SAMPLE_CONFIGURATION: Configuration = Configuration(
    name="test",
    version="1.0.0",
    features=("test", "io"),
)


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------

def _serialization_check(sample: Configuration = SAMPLE_CONFIGURATION) -> None:
    """Round-trip *sample* through JSON or raise :class:`SelfCheckError`."""
    try:
        restored = configuration_from_json(configuration_to_json(sample))
    except ConfigParseError as exc:
        raise SelfCheckError(
            f"Serialization self-check failed: {exc}",
        ) from exc
    if restored != sample:
        raise SelfCheckError(
            "Serialization self-check failed: round-trip changed the value.",
            hint=f"expected {sample!r}, got {restored!r}",
        )


def _error_path_check(probe_path: Path = MISSING_PROBE_PATH) -> bool:
    """Return ``True`` when reading *probe_path* fails as expected."""
    try:
        read_config_text(probe_path)
    except ConfigReadError:
        return True
    return False


def _environment_check(environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when a home-directory variable is set."""
    return lookup_home_directory(environ) is not None


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_self_checks(
    verbose_level: int,
    *,
    probe_path: Path = MISSING_PROBE_PATH,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Run every self-check, reporting progress according to *verbose_level*.

    Raises
    ------
    SelfCheckError
        If the serialization round-trip fails.
    """
    detailed = verbose_level > 1

    if verbose_level > 0:
        console.print("Running basic operations test...")

    _serialization_check()
    if detailed:
        console.print("[green]✅ Serialization test passed[/green]")

    if _error_path_check(probe_path):
        if detailed:
            console.print("[green]✅ Error handling test passed[/green]")
    elif detailed:
        console.print(
            "[yellow]⚠️ Error handling test: "
            f"'{escape(str(probe_path))}' was unexpectedly readable[/yellow]",
        )

    found = _environment_check(environ)
    if detailed:
        if found:
            console.print("[green]✅ Environment variable test passed[/green]")
        else:
            console.print(
                "[yellow]⚠️ Environment variable test skipped "
                f"(none of {', '.join(HOME_VARIABLES)} set)[/yellow]",
            )
