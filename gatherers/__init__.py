"""Platform gatherers for OS-specific information collection."""
from .base import Gatherer
from .windows_gatherer import WindowsGatherer
from .linux_gatherer import LinuxGatherer
from .macos_gatherer import MacOSGatherer

__all__ = [
    "Gatherer",
    "WindowsGatherer",
    "LinuxGatherer",
    "MacOSGatherer",
]
