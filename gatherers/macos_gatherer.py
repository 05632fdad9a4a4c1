from osdetect_core.schemas import OsInfo

from .base import Gatherer

PRODUCT_VERSION_COMMAND = ["sw_vers", "-productVersion"]
BUILD_VERSION_COMMAND = ["sw_vers", "-buildVersion"]


class MacOSGatherer(Gatherer):
    def gather(self) -> OsInfo:
        version = self.runner.run(PRODUCT_VERSION_COMMAND).strip()
        build = self.runner.run(BUILD_VERSION_COMMAND).strip()

        return OsInfo(
            name="macOS",
            version=version,
            architecture=self.architecture,
            additional_info=f"Build: {build}",
        )
