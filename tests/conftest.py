import pytest
from typing import Dict, List, Sequence, Tuple, Union

from osdetect_core.config import DetectorConfig
from osdetect_core.exceptions import CommandFailedError, FileReadError
from osdetect_core.host import CommandRunner


class FakeRunner(CommandRunner):
    """CommandRunner that serves canned output and records every invocation.

    A response set to an exception instance is raised instead of returned.
    """

    def __init__(
        self,
        commands: Dict[Tuple[str, ...], Union[str, Exception]] = None,
        files: Dict[str, Union[str, Exception]] = None,
    ):
        self.commands = commands or {}
        self.files = files or {}
        self.calls: List[Tuple[str, ...]] = []
        self.reads: List[str] = []

    def run(self, argv: Sequence[str]) -> str:
        key = tuple(argv)
        self.calls.append(key)
        response = self.commands.get(key)
        if response is None:
            raise CommandFailedError(f"No such file or directory: '{argv[0]}'")
        if isinstance(response, Exception):
            raise response
        return response

    def read_text(self, path: str) -> str:
        self.reads.append(path)
        response = self.files.get(path)
        if response is None:
            raise FileReadError(path, f"[Errno 2] No such file or directory: '{path}'")
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def invocations(self) -> int:
        return len(self.calls) + len(self.reads)


UBUNTU_OS_RELEASE = """\
PRETTY_NAME="Ubuntu 22.04.3 LTS"
NAME="Ubuntu"
VERSION_ID="22.04"
VERSION="22.04"
VERSION_CODENAME=jammy
ID=ubuntu
ID_LIKE=debian
"""

SYSTEMINFO_OUTPUT = """\
Host Name:                 DESKTOP-1234
OS Name:                   Microsoft Windows 10 Pro
OS Version:                10.0.19045 N/A Build 19045
OS Manufacturer:           Microsoft Corporation
OS Build:               19045
System Type:               x64-based PC
"""


@pytest.fixture
def config():
    return DetectorConfig()


@pytest.fixture
def linux_runner():
    return FakeRunner(
        commands={("uname", "-r"): "6.5.0-21-generic\n"},
        files={"/etc/os-release": UBUNTU_OS_RELEASE},
    )


@pytest.fixture
def windows_runner():
    return FakeRunner(
        commands={
            ("cmd", "/C", "ver"): "Microsoft Windows [Version 10.0.19045.3803]\r\n",
            ("cmd", "/C", "systeminfo"): SYSTEMINFO_OUTPUT,
        },
    )


@pytest.fixture
def macos_runner():
    return FakeRunner(
        commands={
            ("sw_vers", "-productVersion"): "14.2.1\n",
            ("sw_vers", "-buildVersion"): "23C71\n",
        },
    )
