# src/reader_kit/articles/store.py

"""In-memory arena of articles keyed by id.

Each article owns its chapters, highlights and pass progress. Mutations
of one article are serialized through that article's lock; different
articles never contend. Readers get deep copies, never the live record.
"""

import logging
import threading
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from reader_kit.chapters.detector import detect_chapters
from reader_kit.chapters.models import Chapter
from reader_kit.chapters.navigation import reading_time_minutes
from reader_kit.config import ReaderConfig
from reader_kit.errors import InvalidRangeError, NotFoundError
from reader_kit.extraction import check_range, extract_chapter_content
from reader_kit.observability import names
from reader_kit.observability.base import MetricsHook, NoOpMetricsHook
from reader_kit.passes.progress import PassProgress, ReadingPass, toggle_pass
from reader_kit.templates.generator import generate_template
from reader_kit.templates.templates_library import TemplatesLibrary

from .models import Article

logger = logging.getLogger(__name__)


class ArticleStore:
    def __init__(
        self,
        config: ReaderConfig = ReaderConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook
        self._articles: dict[str, Article] = {}
        self._locks: dict[str, threading.RLock] = {}
        self._meta_lock = threading.Lock()  # Protects the two dicts
        self._library: TemplatesLibrary | None = None

    # ------------------------------------------------------------------
    # Arena
    # ------------------------------------------------------------------

    def add(self, title: str, content: str, article_id: str | None = None) -> Article:
        article = Article(id=article_id or str(uuid.uuid4()), title=title, content=content)
        return self._insert(article)

    def load_record(self, record: dict[str, Any]) -> Article:
        """Rehydrate an article from a record produced by `to_record`.

        Cached chapters are dropped and re-detected from the content on
        first access. Highlight ranges are checked against the content.

        Raises:
            InvalidRangeError: If a highlight does not fit the content.
            pydantic.ValidationError: If the record is malformed.
        """
        article = Article.model_validate(record)
        for highlight in article.highlights:
            try:
                check_range(
                    len(article.content),
                    highlight.start_offset,
                    highlight.end_offset,
                    allow_empty=False,
                )
            except InvalidRangeError:
                logger.error(
                    "Record %s has highlight %s outside its content",
                    article.id,
                    highlight.id,
                )
                raise
        article.chapters = None
        return self._insert(article)

    def _insert(self, article: Article) -> Article:
        with self._meta_lock:
            if article.id in self._articles:
                raise ValueError(f"Article '{article.id}' already exists")
            self._articles[article.id] = article
            self._locks[article.id] = threading.RLock()
            count = len(self._articles)

        self.metrics_hook.record_gauge(names.ARTICLES_STORED, count)
        logger.info("Added article %s (%d chars)", article.id, len(article.content))
        return article.model_copy(deep=True)

    def get(self, article_id: str) -> Article:
        with self.locked(article_id) as article:
            return article.model_copy(deep=True)

    def remove(self, article_id: str) -> None:
        with self.locked(article_id):
            with self._meta_lock:
                del self._articles[article_id]
                del self._locks[article_id]
                count = len(self._articles)

        self.metrics_hook.record_gauge(names.ARTICLES_STORED, count)
        logger.debug("Removed article: %s", article_id)

    def ids(self) -> list[str]:
        with self._meta_lock:
            return list(self._articles)

    def to_record(self, article_id: str) -> dict[str, Any]:
        """Flat JSON-compatible dict of the article, for persistence."""
        with self.locked(article_id) as article:
            return article.model_dump(mode="json")

    @contextmanager
    def locked(self, article_id: str) -> Iterator[Article]:
        """Hold the article's lock and yield the live record.

        A lock taken while the article was removed and re-added under the
        same id is stale; the current lock is acquired instead.

        Raises:
            NotFoundError: If no article has this id.
        """
        while True:
            lock = self._current_lock(article_id)
            with lock:
                with self._meta_lock:
                    current = self._locks.get(article_id)
                    article = self._articles.get(article_id)
                if current is lock:
                    yield article
                    return
            if current is None:
                logger.error("Article removed while waiting for lock: %s", article_id)
                raise NotFoundError(f"Article '{article_id}' not found")
            logger.debug("Article %s was replaced while waiting, retrying", article_id)

    def _current_lock(self, article_id: str) -> threading.RLock:
        with self._meta_lock:
            lock = self._locks.get(article_id)
        if lock is None:
            logger.error("Article not found: %s", article_id)
            raise NotFoundError(f"Article '{article_id}' not found")
        return lock

    # ------------------------------------------------------------------
    # Chapters
    # ------------------------------------------------------------------

    def chapters(self, article_id: str) -> list[Chapter]:
        """Chapters of the article, detected on first access and cached."""
        with self.locked(article_id) as article:
            return list(self._ensure_chapters(article))

    def _ensure_chapters(self, article: Article) -> list[Chapter]:
        if article.chapters is None:
            article.chapters = detect_chapters(
                article.content,
                source_id=article.id,
                fallback_title=self.config.fallback_title,
                metrics_hook=self.metrics_hook,
            )
        return article.chapters

    def set_current_chapter(self, article_id: str, index: int) -> Chapter:
        with self.locked(article_id) as article:
            chapters = self._ensure_chapters(article)
            if not 0 <= index < len(chapters):
                logger.error(
                    "Chapter index %s out of range for article %s", index, article_id
                )
                raise NotFoundError(
                    f"Chapter index {index} not found in article '{article_id}'"
                )
            article.current_chapter_index = index
            article.touch()
            return chapters[index]

    def current_chapter(self, article_id: str) -> Chapter:
        with self.locked(article_id) as article:
            chapters = self._ensure_chapters(article)
            # Clamp indexes carried over from a record with different chapters
            return chapters[min(article.current_chapter_index, len(chapters) - 1)]

    def get_chapter(self, article_id: str, chapter_id: str) -> Chapter:
        with self.locked(article_id) as article:
            for chapter in self._ensure_chapters(article):
                if chapter.id == chapter_id:
                    return chapter
        logger.error("Chapter not found: %s in article %s", chapter_id, article_id)
        raise NotFoundError(f"Chapter '{chapter_id}' not found in article '{article_id}'")

    def reading_time(self, article_id: str, chapter_id: str | None = None) -> int:
        """Estimated minutes to read the article, or one of its chapters."""
        article = self.get(article_id)
        text = article.content
        if chapter_id is not None:
            text = extract_chapter_content(
                article.content, self.get_chapter(article_id, chapter_id)
            )
        return reading_time_minutes(text, self.config.words_per_minute)

    # ------------------------------------------------------------------
    # Reading passes
    # ------------------------------------------------------------------

    def progress(self, article_id: str) -> PassProgress:
        with self.locked(article_id) as article:
            return article.reading_pass_progress

    def toggle_pass(self, article_id: str, reading_pass: ReadingPass | str) -> PassProgress:
        with self.locked(article_id) as article:
            progress = toggle_pass(article.reading_pass_progress, reading_pass)
            article.reading_pass_progress = progress
            article.touch()

        self.metrics_hook.increment(
            names.READING_PASS_TOGGLES_TOTAL,
            labels={"pass": ReadingPass(reading_pass).value},
        )
        logger.debug("Toggled %s pass for article %s", reading_pass, article_id)
        return progress

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def generate_template(
        self,
        article_id: str,
        pass_type: ReadingPass | str,
        chapter_id: str | None = None,
    ) -> str:
        chapter = (
            self.get_chapter(article_id, chapter_id) if chapter_id is not None else None
        )
        article = self.get(article_id)
        return generate_template(
            article,
            chapter,
            pass_type,
            library=self._templates(),
            metrics_hook=self.metrics_hook,
        )

    def _templates(self) -> TemplatesLibrary | None:
        if self.config.templates_dir is None:
            return None  # packaged library
        if self._library is None:
            self._library = TemplatesLibrary(self.config.templates_dir)
        return self._library

    def list(self) -> list[Article]:
        articles = []
        for article_id in self.ids():
            try:
                articles.append(self.get(article_id))
            except NotFoundError:
                # Removed since ids() was taken
                continue
        return articles
