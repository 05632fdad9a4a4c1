import logging
from typing import Optional, Tuple

from osdetect_core.host import CommandRunner
from osdetect_core.schemas import OsInfo

from .base import Gatherer

logger = logging.getLogger(__name__)

DEFAULT_OS_RELEASE_PATH = "/etc/os-release"
KERNEL_COMMAND = ["uname", "-r"]


def parse_os_release(text: str) -> Tuple[str, str]:
    """Return (name, version) from os-release text.

    The last NAME= and VERSION= lines win. Surrounding double quotes are
    stripped. Missing keys yield empty strings.
    """
    name = ""
    version = ""
    for line in text.splitlines():
        if line.startswith("NAME="):
            name = line.split("=", 1)[1].strip('"')
        elif line.startswith("VERSION="):
            version = line.split("=", 1)[1].strip('"')
    return name, version


class LinuxGatherer(Gatherer):
    def __init__(
        self,
        runner: CommandRunner,
        architecture: Optional[str] = None,
        os_release_path: str = DEFAULT_OS_RELEASE_PATH,
    ):
        super().__init__(runner, architecture)
        self.os_release_path = os_release_path

    def gather(self) -> OsInfo:
        name, version = parse_os_release(self.runner.read_text(self.os_release_path))
        if not name:
            logger.debug(f"No NAME= entry in {self.os_release_path}")

        kernel = self.runner.run(KERNEL_COMMAND).strip()

        return OsInfo(
            name=name,
            version=version,
            architecture=self.architecture,
            additional_info=kernel,
        )
