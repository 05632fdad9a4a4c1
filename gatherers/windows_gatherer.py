import logging

from osdetect_core.exceptions import ParseError
from osdetect_core.schemas import OsInfo

from .base import Gatherer

logger = logging.getLogger(__name__)

VERSION_COMMAND = ["cmd", "/C", "ver"]
SYSTEMINFO_COMMAND = ["cmd", "/C", "systeminfo"]


def parse_build(systeminfo_output: str) -> str:
    """Extract the OS build from systeminfo output.

    Uses the first line containing "OS Build" and returns the text between its
    first colon, trimmed. Returns "Unknown" when no line matches.
    """
    for line in systeminfo_output.splitlines():
        if "OS Build" in line:
            _, _, value = line.partition(":")
            return value.strip()
    return "Unknown"


class WindowsGatherer(Gatherer):
    def gather(self) -> OsInfo:
        output = self.runner.run(VERSION_COMMAND)
        lines = output.splitlines()
        if not lines:
            raise ParseError("Unable to read Windows version")
        version = lines[0]

        return OsInfo(
            name="Windows",
            version=version,
            architecture=self.architecture,
            additional_info=self.build_info(),
        )

    def build_info(self) -> str:
        """Return "Build: <n>" from systeminfo."""
        build = parse_build(self.runner.run(SYSTEMINFO_COMMAND))
        if build == "Unknown":
            logger.debug("No 'OS Build' line in systeminfo output")
        return f"Build: {build}"
