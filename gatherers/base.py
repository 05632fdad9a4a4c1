from abc import ABC, abstractmethod
from typing import Optional

from osdetect_core.host import CommandRunner
from osdetect_core.platform import get_arch
from osdetect_core.schemas import OsInfo


class Gatherer(ABC):
    """Abstract base class for platform-specific information gathering."""

    def __init__(self, runner: CommandRunner, architecture: Optional[str] = None):
        self.runner = runner
        self.architecture = architecture or get_arch()

    @abstractmethod
    def gather(self) -> OsInfo:
        """Return a fully populated OsInfo for this platform."""
        raise NotImplementedError
