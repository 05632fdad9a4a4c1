"""Operating system detection with memoization."""
import logging
from typing import Callable, Dict, Optional

from .config import DetectorConfig, get_config
from .exceptions import UnsupportedOsError
from .host import CommandRunner, SubprocessRunner
from .platform import get_arch, get_os_name
from .schemas import OsInfo

logger = logging.getLogger(__name__)


class OsDetector:
    """Detects the host operating system and caches the first successful result.

    The cache is never invalidated: the detected OS is assumed not to change
    for the lifetime of the process. Instances are not thread-safe; guard a
    shared detector with a lock or give each thread its own.
    """

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        platform_tag: Optional[str] = None,
        architecture: Optional[str] = None,
        config: Optional[DetectorConfig] = None,
    ):
        """Initialize the detector.

        Args:
            runner: Command/file access used by the gatherers. Defaults to a
                SubprocessRunner honoring the configured command timeout.
            platform_tag: Pin the platform family instead of reading it from the
                running interpreter at query time.
            architecture: Pin the architecture identifier.
            config: Configuration to use. If None, the global config is loaded.
        """
        self.config = config if config is not None else get_config()
        self.runner = runner or SubprocessRunner(timeout=self.config.command_timeout)
        self.platform_tag = platform_tag
        self.architecture = architecture or get_arch()
        self.cached_info: Optional[OsInfo] = None

    def get_os_info(self) -> OsInfo:
        """Return information about the host operating system.

        Returns:
            OsInfo for the current platform.

        Raises:
            UnsupportedOsError: If the platform is not Windows, Linux or macOS.
            CommandFailedError: If a command or system file could not be read.
            ParseError: If command output could not be interpreted.
        """
        if self.cached_info is not None:
            logger.debug("Returning cached OS info")
            return self.cached_info.model_copy()

        tag = self.platform_tag if self.platform_tag is not None else get_os_name()
        dispatch: Dict[str, Callable[[], OsInfo]] = {
            "windows": self.get_windows_info,
            "linux": self.get_linux_info,
            "macos": self.get_macos_info,
        }
        gather = dispatch.get(tag)
        if gather is None:
            raise UnsupportedOsError(tag)

        logger.debug(f"Detecting OS info for platform '{tag}'")
        info = gather()
        self.cached_info = info.model_copy()
        return info

    def get_windows_info(self) -> OsInfo:
        """Gather Windows information, bypassing the cache."""
        from gatherers.windows_gatherer import WindowsGatherer

        return WindowsGatherer(self.runner, self.architecture).gather()

    def get_linux_info(self) -> OsInfo:
        """Gather Linux information, bypassing the cache."""
        from gatherers.linux_gatherer import LinuxGatherer

        return LinuxGatherer(
            self.runner,
            self.architecture,
            os_release_path=self.config.os_release_path,
        ).gather()

    def get_macos_info(self) -> OsInfo:
        """Gather macOS information, bypassing the cache."""
        from gatherers.macos_gatherer import MacOSGatherer

        return MacOSGatherer(self.runner, self.architecture).gather()
