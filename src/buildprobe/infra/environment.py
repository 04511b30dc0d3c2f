"""Infrastructure: read-only environment lookups."""

from __future__ import annotations

import os
from collections.abc import Mapping

HOME_VARIABLES: tuple[str, ...] = ("HOME", "USERPROFILE")
"""Home-directory variable names, primary first, Windows fallback second."""


def lookup_home_directory(
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Return the first set home-directory variable, or ``None``.

    *environ* defaults to :data:`os.environ`; it is never modified.
    """
    env = os.environ if environ is None else environ
    for name in HOME_VARIABLES:
        value = env.get(name)
        if value is not None:
            return value
    return None
