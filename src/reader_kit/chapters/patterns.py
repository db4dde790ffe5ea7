# src/reader_kit/chapters/patterns.py

"""Heading pattern families recognised by the chapter detector.

Each family maps a trimmed line to a typed heading match. Families are
tried in a fixed order and the first match wins:

1. Markdown headings ("## Details")
2. Chapter markers ("Chapter 1: Beginnings", "Ch. IV", "CHAPTER ONE")
3. Numbered outline sections ("1. Intro", "2.3 Scope")
4. All-caps lines ("THE LONG GOODBYE")
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

_MARKDOWN_RE = re.compile(r"^(#{1,6})\s+(.+)$")

_NUMBER_WORDS = "one|two|three|four|five|six|seven|eight|nine|ten"
_CHAPTER_RE = re.compile(
    r"^(?P<marker>(?i:chapter|ch\.))\s+"
    rf"(?P<number>[IVXLCDM]+|\d+|(?i:{_NUMBER_WORDS}))"
    r"(?:[\s:.\-]+(?P<title>.*))?$"
)

# At least one dot, so plain sentences starting with a year do not match
_NUMBERED_RE = re.compile(r"^(\d+(?:\.\d+)+\.?|\d+\.)\s+(.+)$")

_ALL_CAPS_RE = re.compile(r"^[A-Z][A-Z\s]{10,}$")


@dataclass(frozen=True)
class MarkdownHeading:
    title: str
    level: int


@dataclass(frozen=True)
class ChapterWordHeading:
    title: str
    level: int = 1


@dataclass(frozen=True)
class NumberedHeading:
    title: str
    level: int


@dataclass(frozen=True)
class AllCapsHeading:
    title: str
    level: int = 1


HeadingMatch = MarkdownHeading | ChapterWordHeading | NumberedHeading | AllCapsHeading


def _match_markdown(line: str) -> MarkdownHeading | None:
    m = _MARKDOWN_RE.match(line)
    if not m:
        return None
    return MarkdownHeading(title=m.group(2).strip(), level=len(m.group(1)))


def _match_chapter_word(line: str) -> ChapterWordHeading | None:
    m = _CHAPTER_RE.match(line)
    if not m:
        return None
    title = (m.group("title") or "").strip()
    if not title:
        title = f"{m.group('marker')} {m.group('number')}"
    return ChapterWordHeading(title=title)


def _match_numbered(line: str) -> NumberedHeading | None:
    m = _NUMBERED_RE.match(line)
    if not m:
        return None
    groups = [g for g in m.group(1).split(".") if g]
    return NumberedHeading(title=m.group(2).strip(), level=len(groups))


def _match_all_caps(line: str) -> AllCapsHeading | None:
    if not _ALL_CAPS_RE.match(line):
        return None
    return AllCapsHeading(title=line.strip())


# Priority order is fixed
MATCHERS: tuple[Callable[[str], HeadingMatch | None], ...] = (
    _match_markdown,
    _match_chapter_word,
    _match_numbered,
    _match_all_caps,
)


def match_heading(line: str) -> HeadingMatch | None:
    """Classify a single line as a heading, or return None.

    The line is trimmed before matching.
    """
    trimmed = line.strip()
    if not trimmed:
        return None
    for matcher in MATCHERS:
        heading = matcher(trimmed)
        if heading is not None:
            return heading
    return None
