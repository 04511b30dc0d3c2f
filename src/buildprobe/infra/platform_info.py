"""Infrastructure: host platform detection.

Values use the short lowercase vocabulary common to build matrices
(``linux`` / ``macos`` / ``windows``, ``x86_64`` / ``aarch64``,
``unix`` / ``windows``) rather than the raw :mod:`platform` strings.
"""

from __future__ import annotations

import platform

from buildprobe.core.models import PlatformInfo

_OS_NAMES: dict[str, str] = {
    "Linux": "linux",
    "Darwin": "macos",
    "Windows": "windows",
    "FreeBSD": "freebsd",
    "OpenBSD": "openbsd",
    "NetBSD": "netbsd",
}

_ARCH_NAMES: dict[str, str] = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
    "x86": "x86",
    "arm64": "aarch64",
    "aarch64": "aarch64",
    "armv7l": "arm",
    "armv6l": "arm",
    "ppc64le": "powerpc64",
    "ppc64": "powerpc64",
    "s390x": "s390x",
    "riscv64": "riscv64",
}


def _normalise_os(system: str) -> str:
    return _OS_NAMES.get(system, system.lower() or "unknown")


def _normalise_arch(machine: str) -> str:
    lowered = machine.lower()
    return _ARCH_NAMES.get(lowered, lowered or "unknown")


def _os_family(os_name: str) -> str:
    return "windows" if os_name == "windows" else "unix"


def detect_platform() -> PlatformInfo:
    """Probe the running interpreter's host platform."""
    os_name = _normalise_os(platform.system())
    return PlatformInfo(
        os=os_name,
        arch=_normalise_arch(platform.machine()),
        family=_os_family(os_name),
    )
