from .detector import detect_chapters, scan_headings
from .models import Chapter
from .navigation import current_chapter_index, format_chapter_title, reading_time_minutes
from .patterns import (
    AllCapsHeading,
    ChapterWordHeading,
    HeadingMatch,
    MarkdownHeading,
    NumberedHeading,
    match_heading,
)

__all__ = [
    # Detection
    "detect_chapters",
    "scan_headings",
    # Types
    "Chapter",
    "HeadingMatch",
    "MarkdownHeading",
    "ChapterWordHeading",
    "NumberedHeading",
    "AllCapsHeading",
    "match_heading",
    # Navigation
    "current_chapter_index",
    "format_chapter_title",
    "reading_time_minutes",
]
