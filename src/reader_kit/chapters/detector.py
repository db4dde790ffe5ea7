# src/reader_kit/chapters/detector.py

import logging
from dataclasses import dataclass
from functools import reduce

from reader_kit.observability import names
from reader_kit.observability.base import MetricsHook, NoOpMetricsHook, timed

from .models import Chapter
from .patterns import HeadingMatch, match_heading

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_TITLE = "Full Content"
DEFAULT_PREAMBLE_TITLE = "Preface"


@dataclass(frozen=True)
class _Found:
    offset: int
    heading: HeadingMatch
    prev: "_Found | None"


@dataclass(frozen=True)
class _ScanState:
    cursor: int
    last: _Found | None


def _scan_line(state: _ScanState, line: str) -> _ScanState:
    heading = match_heading(line)
    last = state.last
    if heading is not None:
        last = _Found(offset=state.cursor, heading=heading, prev=last)
    # +1 for the "\n" consumed by the split
    return _ScanState(cursor=state.cursor + len(line) + 1, last=last)


def scan_headings(content: str) -> list[tuple[int, HeadingMatch]]:
    """Return (line start offset, heading) for every heading line in content.

    Lines are split on "\\n" only, so offsets stay in the same coordinate
    space as the raw content string.
    """
    final = reduce(_scan_line, content.split("\n"), _ScanState(0, None))
    headings: list[tuple[int, HeadingMatch]] = []
    found = final.last
    while found is not None:
        headings.append((found.offset, found.heading))
        found = found.prev
    headings.reverse()
    return headings


def detect_chapters(
    content: str,
    *,
    source_id: str = "unknown",
    fallback_title: str = DEFAULT_FALLBACK_TITLE,
    preamble_title: str = DEFAULT_PREAMBLE_TITLE,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Chapter]:
    """
    Partition content into chapters using heading heuristics.

    Guarantees:
    - Non-empty result
    - First chapter starts at 0, last chapter ends at len(content)
    - Each chapter ends where the next one starts
    - Deterministic ids: "{source_id}:{index}:{start_offset}"

    Never raises. Content without any heading line yields a single
    fallback chapter spanning the whole text. Non-blank text before the
    first heading becomes its own chapter titled `preamble_title`.
    """
    with timed(metrics_hook, names.CHAPTER_DETECTION_DURATION):
        headings = scan_headings(content)
        length = len(content)

        chapters: list[Chapter] = []
        if headings:
            sections: list[tuple[int, str, int]] = [
                (offset, heading.title, heading.level) for offset, heading in headings
            ]
            first_offset = sections[0][0]
            if content[:first_offset].strip():
                sections.insert(0, (0, preamble_title, 1))
            else:
                # Leading blank lines belong to the first heading
                sections[0] = (0, sections[0][1], sections[0][2])

            ends = [offset for offset, _, _ in sections[1:]] + [length]
            for index, ((chapter_start, title, level), chapter_end) in enumerate(
                zip(sections, ends)
            ):
                chapters.append(
                    Chapter(
                        id=f"{source_id}:{index}:{chapter_start}",
                        title=title,
                        start_offset=chapter_start,
                        end_offset=chapter_end,
                        level=level,
                    )
                )
        else:
            logger.debug("No headings found in %s, using fallback chapter", source_id)
            metrics_hook.increment(names.CHAPTER_DETECTION_FALLBACKS)
            chapters.append(
                Chapter(
                    id=f"{source_id}:0:0",
                    title=fallback_title,
                    start_offset=0,
                    end_offset=length,
                    level=1,
                )
            )

    metrics_hook.increment(names.CHAPTERS_DETECTED, len(chapters))
    logger.debug("Detected %d chapters in %s", len(chapters), source_id)
    return chapters
