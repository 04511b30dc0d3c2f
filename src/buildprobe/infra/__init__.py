"""Infrastructure layer — filesystem, platform and environment access.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Raw OS errors are re-raised as
  :class:`~buildprobe.exceptions.ProbeError` subclasses.
"""

from buildprobe.infra.config_loader import load_configuration, read_config_text
from buildprobe.infra.environment import lookup_home_directory
from buildprobe.infra.platform_info import detect_platform

__all__: list[str] = [
    "detect_platform",
    "load_configuration",
    "lookup_home_directory",
    "read_config_text",
]
