# Articles
from .articles import Article
from .articles.store import ArticleStore

# Chapters
from .chapters import (
    Chapter,
    current_chapter_index,
    detect_chapters,
    format_chapter_title,
    reading_time_minutes,
)

# Config
from .config import ReaderConfig

# Errors
from .errors import InvalidRangeError, NotFoundError, ReaderKitError

# Extraction
from .extraction import extract_chapter_content, extract_range

# Highlights
from .highlights import HIGHLIGHT_COLORS, Highlight, HighlightColor
from .highlights.highlight_store import HighlightStore

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Reading passes
from .passes import (
    PassProgress,
    ReadingPass,
    completion_percentage,
    initial_progress,
    next_pass,
    toggle_pass,
)

# Templates
from .templates import CopyTemplate, TemplatesLibrary, generate_template

__all__ = [
    # Articles
    "Article",
    "ArticleStore",
    # Chapters
    "Chapter",
    "current_chapter_index",
    "detect_chapters",
    "format_chapter_title",
    "reading_time_minutes",
    # Config
    "ReaderConfig",
    # Errors
    "InvalidRangeError",
    "NotFoundError",
    "ReaderKitError",
    # Extraction
    "extract_chapter_content",
    "extract_range",
    # Highlights
    "HIGHLIGHT_COLORS",
    "Highlight",
    "HighlightColor",
    "HighlightStore",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Reading passes
    "PassProgress",
    "ReadingPass",
    "completion_percentage",
    "initial_progress",
    "next_pass",
    "toggle_pass",
    # Templates
    "CopyTemplate",
    "TemplatesLibrary",
    "generate_template",
]
