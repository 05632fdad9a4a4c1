"""osdetect exception hierarchy."""


class OSDetectError(Exception):
    """Base exception for all osdetect errors."""
    pass


class CommandFailedError(OSDetectError):
    """Raised when an external command cannot be launched or its output obtained."""
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Command execution failed: {detail}")


class FileReadError(CommandFailedError):
    """Raised when a required system file cannot be read."""
    def __init__(self, path: str, detail: str):
        self.path = path
        super().__init__(detail)


class UnsupportedOsError(OSDetectError):
    """Raised when the platform tag is not one of the supported families."""
    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Unsupported operating system: {tag}")


class ParseError(OSDetectError):
    """Raised when command output cannot be interpreted."""
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to parse system information: {detail}")
