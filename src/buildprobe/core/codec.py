"""JSON (de)serialization for :class:`~buildprobe.core.models.Configuration`.

Every function here is a pure transformation with no file access.  Parsing
is strict about the three known fields and ignores anything else:

* ``name`` and ``version`` must be strings (empty strings are accepted).
* ``features`` must be a list of strings (an empty list is accepted).

Any violation raises :class:`~buildprobe.exceptions.ConfigParseError`.
"""

from __future__ import annotations

import json
from typing import Any

from buildprobe.core.models import Configuration
from buildprobe.exceptions import ConfigParseError


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

def configuration_to_dict(config: Configuration) -> dict[str, Any]:
    """Convert *config* into a JSON-compatible dict (key order preserved)."""
    return {
        "name": config.name,
        "version": config.version,
        "features": list(config.features),
    }


def configuration_to_json(config: Configuration) -> str:
    """Serialize *config* to compact JSON text."""
    return json.dumps(configuration_to_dict(config), ensure_ascii=False)


# ---------------------------------------------------------------------------
# Deserialization
# ---------------------------------------------------------------------------

def _require_text(data: dict[str, Any], key: str) -> str:
    if key not in data:
        raise ConfigParseError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise ConfigParseError(
            f"invalid type for `{key}`: expected a string, "
            f"got {type(value).__name__}",
        )
    return value


def _require_features(data: dict[str, Any]) -> tuple[str, ...]:
    if "features" not in data:
        raise ConfigParseError("missing field `features`")
    raw = data["features"]
    if not isinstance(raw, list):
        raise ConfigParseError(
            "invalid type for `features`: expected a list of strings, "
            f"got {type(raw).__name__}",
        )
    for index, item in enumerate(raw):
        if not isinstance(item, str):
            raise ConfigParseError(
                f"invalid type for `features[{index}]`: expected a string, "
                f"got {type(item).__name__}",
            )
    return tuple(raw)


def configuration_from_dict(data: object) -> Configuration:
    """Build a :class:`Configuration` from already-decoded JSON data.

    Raises
    ------
    ConfigParseError
        If *data* is not an object or any field fails validation.
    """
    if not isinstance(data, dict):
        raise ConfigParseError(
            f"expected a JSON object, got {type(data).__name__}",
        )
    return Configuration(
        name=_require_text(data, "name"),
        version=_require_text(data, "version"),
        features=_require_features(data),
    )


def configuration_from_json(text: str) -> Configuration:
    """Parse JSON *text* into a :class:`Configuration`.

    Raises
    ------
    ConfigParseError
        On malformed JSON or schema mismatch.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(f"malformed JSON: {exc}") from exc
    return configuration_from_dict(data)
