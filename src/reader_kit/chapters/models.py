# src/reader_kit/chapters/models.py

from pydantic import BaseModel, Field


class Chapter(BaseModel):
    """A contiguous range of article content with a title and nesting level.

    Offsets are zero-based character indexes into the article content.
    The range is half-open: [start_offset, end_offset).
    """

    id: str
    title: str
    start_offset: int = Field(ge=0)
    end_offset: int = Field(ge=0)
    level: int = Field(default=1, ge=1)

    class Config:
        extra = "forbid"
        frozen = True
