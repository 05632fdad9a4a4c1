"""
osdetect core - host operating system detection.
"""
__version__ = "0.1.0"

from .exceptions import (
    OSDetectError,
    CommandFailedError,
    FileReadError,
    UnsupportedOsError,
    ParseError,
)
from .schemas import OsInfo
from .host import CommandRunner, SubprocessRunner
from .config import get_config, get_config_manager
from .detector import OsDetector

__all__ = [
    "__version__",
    # Exceptions
    "OSDetectError",
    "CommandFailedError",
    "FileReadError",
    "UnsupportedOsError",
    "ParseError",
    # Models
    "OsInfo",
    # Host access
    "CommandRunner",
    "SubprocessRunner",
    # Config
    "get_config",
    "get_config_manager",
    # Detection
    "OsDetector",
]
