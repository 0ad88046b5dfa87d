"""Fatal conditions raised by the scrubber and reported by the CLI."""

from __future__ import annotations
from pathlib import Path


class ScrubError(Exception):
    """Base class; the message is the one-line diagnostic shown to the user."""


class EnvironmentUnavailable(ScrubError):
    def __init__(self, name: str = "HOME") -> None:
        super().__init__(f"Unable to determine user's home directory (${name} is not set)")
        self.name = name


class SelectionAborted(ScrubError):
    def __init__(self, reason: str = "No file selected") -> None:
        super().__init__(reason)


class NameResolutionFailure(ScrubError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Unable to retrieve input file name from {path}")
        self.path = path


class ReadFailure(ScrubError):
    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to read file {path}: {cause}")
        self.path = path
        self.cause = cause


class WriteFailure(ScrubError):
    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to write file {path}: {cause}")
        self.path = path
        self.cause = cause


class ConfigFailure(ScrubError):
    """Config file unreadable, malformed, or holding a bad value."""
