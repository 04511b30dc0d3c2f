"""buildprobe — smoke-test CLI for validating a build/test pipeline.

Parses a few flags, resolves a JSON configuration, prints a status
report and runs a handful of inline self-checks.
"""

from buildprobe.version import __version__

__all__: list[str] = ["__version__"]
