"""Host access used by the gatherers: external commands and system files."""
import logging
import subprocess
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .exceptions import CommandFailedError, FileReadError

logger = logging.getLogger(__name__)


class CommandRunner(ABC):
    """Abstract capability for running commands and reading files on the host."""

    @abstractmethod
    def run(self, argv: Sequence[str]) -> str:
        """Run a command and return its captured stdout.

        The exit status is not inspected. Raises CommandFailedError if the
        command cannot be launched or its output cannot be obtained.
        """
        raise NotImplementedError

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Return the contents of a text file. Raises FileReadError."""
        raise NotImplementedError


class SubprocessRunner(CommandRunner):
    """CommandRunner backed by subprocess and the local filesystem."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def run(self, argv: Sequence[str]) -> str:
        logger.debug(f"Running command: {' '.join(argv)}")
        try:
            result = subprocess.run(
                list(argv),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise CommandFailedError(f"{argv[0]} timed out after {e.timeout} seconds") from e
        except OSError as e:
            raise CommandFailedError(str(e)) from e

        return result.stdout.decode("utf-8", errors="replace") if result.stdout else ""

    def read_text(self, path: str) -> str:
        logger.debug(f"Reading {path}")
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            raise FileReadError(path, str(e)) from e
