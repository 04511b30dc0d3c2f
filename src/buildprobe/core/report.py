"""Pure status-report rendering.

The renderers return the full report body as a string; writing it to
stdout is the CLI layer's job.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from buildprobe.core.codec import configuration_to_dict
from buildprobe.core.models import Configuration, PlatformInfo
from buildprobe.exceptions import UnsupportedFormatError

TEXT: str = "text"
JSON: str = "json"


def build_report_payload(
    config: Configuration,
    platform_info: PlatformInfo | None = None,
) -> dict[str, Any]:
    """Return the JSON report object, with ``platform`` only when given."""
    payload = configuration_to_dict(config)
    payload["status"] = "success"
    if platform_info is not None:
        payload["platform"] = {
            "os": platform_info.os,
            "arch": platform_info.arch,
            "family": platform_info.family,
        }
    return payload


def render_json(
    config: Configuration,
    platform_info: PlatformInfo | None = None,
) -> str:
    """Render the report as pretty-printed JSON."""
    return json.dumps(
        build_report_payload(config, platform_info),
        indent=2,
        ensure_ascii=False,
    )


def render_text(
    config: Configuration,
    platform_info: PlatformInfo | None = None,
) -> str:
    """Render the human-readable report lines."""
    lines = [
        f"🚀 {config.name} v{config.version}",
        f"Features: {', '.join(config.features)}",
    ]
    if platform_info is not None:
        lines.append(
            f"Platform: {platform_info.os} {platform_info.arch} "
            f"({platform_info.family})"
        )
    lines.append("Status: ✅ Success")
    return "\n".join(lines)


_RENDERERS: dict[str, Callable[[Configuration, PlatformInfo | None], str]] = {
    TEXT: render_text,
    JSON: render_json,
}

SUPPORTED_FORMATS: tuple[str, ...] = tuple(_RENDERERS)


def render_report(
    output_format: str,
    config: Configuration,
    platform_info: PlatformInfo | None = None,
) -> str:
    """Dispatch to the renderer for *output_format*.

    Raises
    ------
    UnsupportedFormatError
        If *output_format* is not one of :data:`SUPPORTED_FORMATS`.
    """
    renderer = _RENDERERS.get(output_format)
    if renderer is None:
        raise UnsupportedFormatError(output_format)
    return renderer(config, platform_info)
