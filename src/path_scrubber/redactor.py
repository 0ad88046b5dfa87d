"""Redactor is the main API.  Extract strings, match paths, blank them out.

Usage:
    from path_scrubber import scrub

    result = scrub(open("app.bin", "rb").read())
    print(len(result.matches))   # spans overwritten with spaces
    result.data                  # same length as the input

Matching always runs against the untouched input; spaces are written
into a separate copy so earlier redactions never change later matches.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Iterable

from .patterns import DEFAULT_SUFFIX, build_pattern, find_paths
from .strings import DEFAULT_MIN_LENGTH, check_min_length, extract_strings
from .types import ExtractedString, PathMatch, ScrubResult

logger = logging.getLogger(__name__)

_BLANK = b" "


@dataclass
class RedactorConfig:
    """Configuration for the Redactor."""
    min_length: int = DEFAULT_MIN_LENGTH   # shortest run worth scanning
    suffix: str = DEFAULT_SUFFIX           # extension token after the dot


def redact_buffer(
    out: bytearray,
    records: Iterable[ExtractedString],
    pattern: re.Pattern | None = None,
) -> list[PathMatch]:
    """Overwrite every path match in `out` with spaces.

    Relative match offsets are shifted by each record's offset.  A span
    ending past the buffer is skipped.  Returns the spans applied.
    """
    pattern = pattern or build_pattern()
    applied: list[PathMatch] = []
    for record in records:
        for m in find_paths(record.text, pattern):
            start = record.offset + m.start
            end = record.offset + m.end
            if end > len(out):
                logger.debug("span %d:%d outside buffer of %d bytes, skipped", start, end, len(out))
                continue
            out[start:end] = _BLANK * (end - start)
            applied.append(PathMatch(start=start, end=end, text=m.text))
    return applied


class Redactor:
    """Scrubs source-file paths out of binary buffers."""

    def __init__(self, config: RedactorConfig | None = None) -> None:
        self.config = config or RedactorConfig()
        check_min_length(self.config.min_length)
        # Compiled up front so a bad suffix fails at construction
        self._pattern = build_pattern(self.config.suffix)

    @property
    def pattern(self) -> re.Pattern:
        return self._pattern

    def scrub(self, data: bytes) -> ScrubResult:
        """Return a redacted copy of `data`; `data` itself is left alone."""
        source = bytes(data)
        records = extract_strings(source, self.config.min_length)
        out = bytearray(source)
        matches = redact_buffer(out, records, self._pattern)
        logger.debug("redacted %d spans across %d strings", len(matches), len(records))
        return ScrubResult(data=bytes(out), matches=matches, strings_scanned=len(records))


def scrub(
    data: bytes,
    *,
    min_length: int = DEFAULT_MIN_LENGTH,
    suffix: str = DEFAULT_SUFFIX,
) -> ScrubResult:
    """Convenience wrapper around `Redactor(...).scrub(data)`."""
    return Redactor(RedactorConfig(min_length=min_length, suffix=suffix)).scrub(data)
