# src/reader_kit/config.py

from dataclasses import dataclass

from reader_kit.highlights.models import HighlightColor


@dataclass(frozen=True)
class ReaderConfig:
    """Configuration for the article store and its collaborators.

    Immutable. Explicit. No magic defaults from environment.
    """

    fallback_title: str = "Full Content"
    words_per_minute: int = 200
    templates_dir: str | None = None  # Falls back to the packaged library
    default_highlight_color: HighlightColor = HighlightColor.YELLOW

    def __post_init__(self) -> None:
        if self.words_per_minute <= 0:
            raise ValueError("words_per_minute must be > 0")
        if not self.fallback_title.strip():
            raise ValueError("fallback_title must not be blank")
