# src/reader_kit/passes/progress.py

"""Three-stage reading workflow: read it yourself, have it explained, quiz yourself.

Each stage is an independent flag. The order manual -> explain -> qa is
advisory only: any subset may be complete, and completed passes can be
unchecked again.
"""

from enum import Enum

from pydantic import BaseModel


class ReadingPass(str, Enum):
    """Reading stages, in recommended order."""

    MANUAL = "manual"
    EXPLAIN = "explain"
    QA = "qa"


PASS_ORDER: tuple[ReadingPass, ...] = (
    ReadingPass.MANUAL,
    ReadingPass.EXPLAIN,
    ReadingPass.QA,
)

_DISPLAY_NAMES = {
    ReadingPass.MANUAL: "Pass 1: Manual Reading",
    ReadingPass.EXPLAIN: "Pass 2: Explain & Summarize",
    ReadingPass.QA: "Pass 3: Q&A",
}

_DESCRIPTIONS = {
    ReadingPass.MANUAL: "Read through the content at your own pace",
    ReadingPass.EXPLAIN: "Use an LLM to explain and summarize key concepts",
    ReadingPass.QA: "Deepen understanding through questions and answers",
}

_EMOJI = {
    ReadingPass.MANUAL: "\U0001f4d6",
    ReadingPass.EXPLAIN: "\U0001f4a1",
    ReadingPass.QA: "\U0001f3af",
}


class PassProgress(BaseModel):
    manual: bool = False
    explain: bool = False
    qa: bool = False

    class Config:
        extra = "forbid"
        frozen = True

    def is_done(self, reading_pass: ReadingPass | str) -> bool:
        return bool(getattr(self, ReadingPass(reading_pass).value))


def initial_progress() -> PassProgress:
    return PassProgress()


def toggle_pass(progress: PassProgress, reading_pass: ReadingPass | str) -> PassProgress:
    """Return a copy of `progress` with one flag flipped."""
    field = ReadingPass(reading_pass).value
    return progress.model_copy(update={field: not getattr(progress, field)})


def next_pass(progress: PassProgress) -> ReadingPass | None:
    """First incomplete pass in recommended order, or None when all are done."""
    for reading_pass in PASS_ORDER:
        if not progress.is_done(reading_pass):
            return reading_pass
    return None


def completed_count(progress: PassProgress) -> int:
    return sum(1 for reading_pass in PASS_ORDER if progress.is_done(reading_pass))


def completion_percentage(progress: PassProgress) -> int:
    """Rounded share of completed passes: 0, 33, 67 or 100."""
    return round(100 * completed_count(progress) / len(PASS_ORDER))


def is_complete(progress: PassProgress) -> bool:
    return completed_count(progress) == len(PASS_ORDER)


def display_name(reading_pass: ReadingPass | str) -> str:
    return _DISPLAY_NAMES[ReadingPass(reading_pass)]


def description(reading_pass: ReadingPass | str) -> str:
    return _DESCRIPTIONS[ReadingPass(reading_pass)]


def emoji(reading_pass: ReadingPass | str) -> str:
    return _EMOJI[ReadingPass(reading_pass)]
