"""Domain models for buildprobe.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  Sequences are stored as tuples so that a
constructed instance can never be mutated.
"""

from __future__ import annotations

from dataclasses import dataclass

from buildprobe.version import __version__

DEFAULT_NAME: str = "test-rust-app"
"""Application name used when no configuration file is supplied."""

DEFAULT_FEATURES: tuple[str, ...] = ("basic",)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Configuration:
    """The name/version/features record rendered by the CLI."""

    name: str
    """Non-empty application identifier."""

    version: str
    """Non-empty, semantic-version-like string."""

    features: tuple[str, ...]
    """Ordered feature labels."""


def default_configuration() -> Configuration:
    """Return the built-in configuration used when no file is loaded."""
    return Configuration(
        name=DEFAULT_NAME,
        version=__version__,
        features=DEFAULT_FEATURES,
    )


# ---------------------------------------------------------------------------
# Platform descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PlatformInfo:
    """Operating-system name, CPU architecture and OS family."""

    os: str
    """e.g. ``linux``, ``macos``, ``windows``."""

    arch: str
    """e.g. ``x86_64``, ``aarch64``."""

    family: str
    """``unix`` or ``windows``."""
