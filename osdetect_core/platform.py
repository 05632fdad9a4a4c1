"""Ambient platform identification.

This module is intentionally standalone with no dependencies on other osdetect
modules so that gatherers can import it without circular imports.
"""
import platform


def get_os_name() -> str:
    """Return normalized OS name: 'windows', 'linux', 'macos', or the raw system name."""
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    return system


def get_arch() -> str:
    """Return the CPU architecture identifier, e.g. 'x86_64' or 'aarch64'."""
    machine = platform.machine().lower()
    if machine == "amd64":
        return "x86_64"
    elif machine == "arm64":
        return "aarch64"
    elif machine in ("i386", "i686"):
        return "x86"
    return machine
