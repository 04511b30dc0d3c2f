"""Infrastructure: reading configuration files from disk.

This module is the only place that opens a configuration file.  Raw
``OSError`` / ``UnicodeDecodeError`` instances are re-raised as
:class:`~buildprobe.exceptions.ConfigReadError`; parse failures surface
as :class:`~buildprobe.exceptions.ConfigParseError` from the codec.

Rules
-----
* The file is read fully and closed before parsing.
* No fallback to defaults here; callers decide.
* No ``print()``.
"""

from __future__ import annotations

from pathlib import Path

from buildprobe.core.codec import configuration_from_json
from buildprobe.core.models import Configuration
from buildprobe.exceptions import ConfigReadError


def read_config_text(path: str | Path) -> str:
    """Return the UTF-8 contents of *path*.

    Raises
    ------
    ConfigReadError
        When the file is missing, unreadable, or not valid UTF-8.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(
            f"Could not read config file '{path}': {exc}",
            path=str(path),
        ) from exc


def load_configuration(path: str | Path) -> Configuration:
    """Read and parse the configuration stored at *path*.

    Raises
    ------
    ConfigReadError
        When the file cannot be read.
    ConfigParseError
        When the contents are malformed JSON or fail the schema.
    """
    text = read_config_text(path)
    return configuration_from_json(text)
