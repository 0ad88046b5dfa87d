"""Path-like pattern: finds source-file paths inside extracted strings.

A match is the shortest run of characters that are neither whitespace
nor ':' followed by a literal `.<suffix>`.  The prefix may be empty, so
a bare `.rs` matches on its own.
"""

from __future__ import annotations
import re
from functools import lru_cache

from .types import PathMatch

DEFAULT_SUFFIX = "rs"

_SUFFIX_RE = re.compile(r"[A-Za-z0-9]{2}")


@lru_cache(maxsize=8)
def build_pattern(suffix: str = DEFAULT_SUFFIX) -> re.Pattern:
    """Compile the path pattern for a two-character extension."""
    if not isinstance(suffix, str) or not _SUFFIX_RE.fullmatch(suffix):
        raise ValueError(f"suffix must be two alphanumeric characters, got {suffix!r}")
    return re.compile(r"([^\s:]*?\." + re.escape(suffix) + r")")


PATH_PATTERN = build_pattern()


def find_paths(text: str, pattern: re.Pattern = PATH_PATTERN) -> list[PathMatch]:
    """Non-overlapping matches in `text`, offsets relative to `text`."""
    return [
        PathMatch(start=m.start(), end=m.end(), text=m.group())
        for m in pattern.finditer(text)
    ]
