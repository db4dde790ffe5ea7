# src/reader_kit/errors.py


class ReaderKitError(Exception):
    """Base class for reader-kit errors."""


class InvalidRangeError(ReaderKitError, ValueError):
    """A character range falls outside the content it points into."""

    def __init__(self, start_offset: int, end_offset: int, length: int) -> None:
        self.start_offset = start_offset
        self.end_offset = end_offset
        self.length = length
        super().__init__(
            f"Invalid range [{start_offset}, {end_offset}) for content of length {length}"
        )


class NotFoundError(ReaderKitError, KeyError):
    """An article, highlight or chapter id does not exist."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""
