# src/reader_kit/articles/models.py

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from reader_kit.chapters.models import Chapter
from reader_kit.highlights.models import Highlight
from reader_kit.passes.progress import PassProgress


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Article(BaseModel):
    """An article and everything derived from its content.

    `content` is never rewritten after creation. `chapters` is a cache
    filled on first detection; highlights share its offset space but are
    owned independently.
    """

    id: str
    title: str
    content: str
    chapters: list[Chapter] | None = None
    current_chapter_index: int = Field(default=0, ge=0)
    highlights: list[Highlight] = Field(default_factory=list)
    reading_pass_progress: PassProgress = Field(default_factory=PassProgress)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    class Config:
        extra = "forbid"
        validate_assignment = True

    def touch(self) -> None:
        self.updated_at = utcnow()
