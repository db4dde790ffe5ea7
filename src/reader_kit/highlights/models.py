# src/reader_kit/highlights/models.py

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class HighlightColor(str, Enum):
    """Colors a highlight can be rendered with."""

    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PINK = "pink"
    PURPLE = "purple"
    ORANGE = "orange"


HIGHLIGHT_COLORS: dict[HighlightColor, str] = {
    HighlightColor.YELLOW: "#FEF08A",
    HighlightColor.GREEN: "#BBF7D0",
    HighlightColor.BLUE: "#BFDBFE",
    HighlightColor.PINK: "#FBCFE8",
    HighlightColor.PURPLE: "#DDD6FE",
    HighlightColor.ORANGE: "#FED7AA",
}


class Highlight(BaseModel):
    """A user annotation anchored to a character range of an article.

    Immutable. Updates produce a new record with the same id and offsets.
    `text` duplicates content[start_offset:end_offset] for display.
    """

    id: str
    article_id: str
    text: str
    note: str | None = None
    color: HighlightColor = HighlightColor.YELLOW
    start_offset: int = Field(ge=0)
    end_offset: int = Field(ge=0)
    created_at: datetime
    updated_at: datetime

    class Config:
        extra = "forbid"
        frozen = True
