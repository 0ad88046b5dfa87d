"""path-scrubber: blank out embedded source-file paths in binaries."""

from .redactor import Redactor, RedactorConfig, redact_buffer, scrub
from .strings import extract_strings
from .patterns import build_pattern, find_paths
from .config import ScrubberConfig, load_config, load_from_yaml
from .types import ExtractedString, PathMatch, ScrubResult
from .errors import (
    ScrubError, EnvironmentUnavailable, SelectionAborted,
    NameResolutionFailure, ReadFailure, WriteFailure, ConfigFailure,
)

__all__ = [
    "Redactor", "RedactorConfig", "redact_buffer", "scrub",
    "extract_strings",
    "build_pattern", "find_paths",
    "ScrubberConfig", "load_config", "load_from_yaml",
    "ExtractedString", "PathMatch", "ScrubResult",
    "ScrubError", "EnvironmentUnavailable", "SelectionAborted",
    "NameResolutionFailure", "ReadFailure", "WriteFailure", "ConfigFailure",
]
__version__ = "0.1.0"
