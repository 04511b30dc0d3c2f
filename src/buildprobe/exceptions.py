"""Custom exception hierarchy for buildprobe.

All exceptions that cross layer boundaries must inherit from
:class:`ProbeError`.  Raw ``OSError`` and ``json.JSONDecodeError``
instances must not propagate beyond the infrastructure and core
layers; they are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
ProbeError
├── ConfigReadError
├── ConfigParseError
├── UnsupportedFormatError
├── SelfCheckError
└── EnvironmentError
"""

from __future__ import annotations


class ProbeError(Exception):
    """Base exception for all buildprobe errors.

    The CLI error boundary renders ``str(exc)`` and, when present,
    :attr:`hint` without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigReadError(ProbeError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(
        self, message: str, *, path: str, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.path: str = path


class ConfigParseError(ProbeError):
    """Raised when configuration text is not valid JSON or fails the schema."""


# --- Rendering -------------------------------------------------------------

class UnsupportedFormatError(ProbeError):
    """Raised when the requested output format is not recognised."""

    def __init__(self, output_format: str) -> None:
        super().__init__(f"Unknown output format '{output_format}'")
        self.output_format: str = output_format


# --- Diagnostics -----------------------------------------------------------

class SelfCheckError(ProbeError):
    """Raised when a fatal inline self-check fails."""


class EnvironmentError(ProbeError):
    """Raised when a required runtime dependency is not available."""
