"""Core layer — pure data models, JSON codec and report rendering.

Rules
-----
* No ``print()`` calls.
* No filesystem or environment access.
* No imports from ``cli`` or ``infra``.
"""

from buildprobe.core.codec import (
    configuration_from_dict,
    configuration_from_json,
    configuration_to_dict,
    configuration_to_json,
)
from buildprobe.core.models import Configuration, PlatformInfo, default_configuration
from buildprobe.core.report import SUPPORTED_FORMATS, render_report

__all__: list[str] = [
    "SUPPORTED_FORMATS",
    "Configuration",
    "PlatformInfo",
    "configuration_from_dict",
    "configuration_from_json",
    "configuration_to_dict",
    "configuration_to_json",
    "default_configuration",
    "render_report",
]
