# src/reader_kit/chapters/navigation.py

import math
import re

from .models import Chapter

_CHAPTER_PREFIX_RE = re.compile(r"^(chapter|ch\.)", re.IGNORECASE)


def current_chapter_index(chapters: list[Chapter], position: int) -> int:
    """Index of the chapter containing `position`.

    Falls back to the last chapter when no range contains the position
    (e.g. position == len(content)), and to 0 for an empty list.
    """
    if not chapters:
        return 0
    for index, chapter in enumerate(chapters):
        if chapter.start_offset <= position < chapter.end_offset:
            return index
    return len(chapters) - 1


def format_chapter_title(chapter: Chapter, index: int) -> str:
    if _CHAPTER_PREFIX_RE.match(chapter.title):
        return chapter.title
    return f"Chapter {index + 1}: {chapter.title}"


def reading_time_minutes(text: str, words_per_minute: int = 200) -> int:
    """Estimated minutes to read `text`, rounded up."""
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be > 0")
    word_count = len(text.split())
    return math.ceil(word_count / words_per_minute)
