"""Allow ``python -m buildprobe`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m buildprobe`` behaves identically to the ``buildprobe``
console script.
"""

from __future__ import annotations

from buildprobe.cli.app import cli

if __name__ == "__main__":
    cli()
