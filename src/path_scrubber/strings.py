"""String extraction, the classic `strings` scan over a byte buffer.

A run is any maximal stretch of printable ASCII (0x21-0x7E) or space.
Runs are closed only by a non-printable byte, so a run that reaches the
end of the buffer is never emitted.
"""

from __future__ import annotations
import logging

from .types import ExtractedString

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 4

_SPACE = 0x20


def _printable(b: int) -> bool:
    return 0x21 <= b <= 0x7E or b == _SPACE


def check_min_length(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"min_length must be a positive integer, got {value!r}")
    return value


def extract_strings(data: bytes, min_len: int = DEFAULT_MIN_LENGTH) -> list[ExtractedString]:
    """Return every closed printable run of at least `min_len` bytes.

    Args:
        data: Buffer to scan. Not modified.
        min_len: Minimum run length; a run qualifies when `length >= min_len`.
    """
    check_min_length(min_len)

    results: list[ExtractedString] = []
    start: int | None = None

    for i, b in enumerate(data):
        if _printable(b):
            if start is None:
                start = i
        elif start is not None:
            if i - start >= min_len:
                try:
                    text = bytes(data[start:i]).decode("utf-8")
                except UnicodeDecodeError:
                    logger.debug("skipping undecodable run at offset %d", start)
                else:
                    results.append(ExtractedString(offset=start, text=text))
            start = None

    if start is not None:
        logger.debug("dropping unterminated trailing run at offset %d", start)

    logger.debug("extracted %d strings from %d bytes", len(results), len(data))
    return results
