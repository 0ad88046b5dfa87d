"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ExtractedString:
    """A printable run pulled out of the input buffer."""
    offset: int            # index into the input where the run begins
    text: str


@dataclass(frozen=True, slots=True)
class PathMatch:
    """A path-like span, half-open [start, end)."""
    start: int
    end: int
    text: str


@dataclass(slots=True)
class ScrubResult:
    """Result of scrubbing a buffer."""
    data: bytes                                  # redacted copy, same length as input
    matches: list[PathMatch] = field(default_factory=list)  # absolute spans applied
    strings_scanned: int = 0
