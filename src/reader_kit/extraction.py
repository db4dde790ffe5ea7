# src/reader_kit/extraction.py

"""Substring extraction over article content.

Offsets are validated, never clamped: a range outside the content is a
caller error and raises InvalidRangeError.
"""

import logging

from reader_kit.chapters.models import Chapter
from reader_kit.errors import InvalidRangeError

logger = logging.getLogger(__name__)


def check_range(
    length: int, start_offset: int, end_offset: int, *, allow_empty: bool
) -> None:
    """Raise InvalidRangeError unless 0 <= start <= end <= length.

    With allow_empty=False the range must also be non-empty (start < end).
    """
    if start_offset < 0 or end_offset > length or start_offset > end_offset:
        raise InvalidRangeError(start_offset, end_offset, length)
    if not allow_empty and start_offset == end_offset:
        raise InvalidRangeError(start_offset, end_offset, length)


def extract_range(content: str, start_offset: int, end_offset: int) -> str:
    """Return content[start_offset:end_offset] stripped of surrounding whitespace."""
    try:
        check_range(len(content), start_offset, end_offset, allow_empty=True)
    except InvalidRangeError:
        logger.error(
            "Cannot extract range [%s, %s) from content of length %d",
            start_offset,
            end_offset,
            len(content),
        )
        raise
    return content[start_offset:end_offset].strip()


def extract_chapter_content(content: str, chapter: Chapter) -> str:
    return extract_range(content, chapter.start_offset, chapter.end_offset)
