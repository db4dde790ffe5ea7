# src/reader_kit/highlights/highlight_store.py

import logging
import uuid

from reader_kit.articles.models import Article, utcnow
from reader_kit.articles.store import ArticleStore
from reader_kit.errors import InvalidRangeError, NotFoundError
from reader_kit.extraction import check_range
from reader_kit.observability import names
from reader_kit.observability.base import MetricsHook, NoOpMetricsHook

from .models import Highlight, HighlightColor

logger = logging.getLogger(__name__)


class HighlightStore:
    """Create, recolor, annotate and delete highlights on stored articles.

    Offsets are supplied by the caller (the rendering layer maps a text
    selection to a range) and only validated here. Overlapping highlights
    are allowed. Offsets never change after creation.
    """

    def __init__(
        self,
        articles: ArticleStore,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.articles = articles
        self.metrics_hook = metrics_hook

    def create(
        self,
        article_id: str,
        text: str,
        start_offset: int,
        end_offset: int,
        color: HighlightColor | str | None = None,
        note: str | None = None,
    ) -> Highlight:
        """Anchor a new highlight to [start_offset, end_offset) of the article.

        Without a color the configured default highlight color is used.

        Raises:
            NotFoundError: If the article does not exist.
            InvalidRangeError: Unless 0 <= start_offset < end_offset <= len(content).
            ValueError: If color is not a known highlight color.
        """
        resolved_color = HighlightColor(
            color if color is not None else self.articles.config.default_highlight_color
        )

        with self.articles.locked(article_id) as article:
            try:
                check_range(
                    len(article.content), start_offset, end_offset, allow_empty=False
                )
            except InvalidRangeError:
                logger.error(
                    "Rejected highlight [%s, %s) on article %s (length %d)",
                    start_offset,
                    end_offset,
                    article_id,
                    len(article.content),
                )
                self.metrics_hook.increment(
                    names.HIGHLIGHT_ERRORS_TOTAL, labels={"reason": "invalid_range"}
                )
                raise

            if article.content[start_offset:end_offset] != text:
                logger.debug(
                    "Highlight text differs from content range [%s, %s) in %s",
                    start_offset,
                    end_offset,
                    article_id,
                )

            now = utcnow()
            highlight = Highlight(
                id=str(uuid.uuid4()),
                article_id=article_id,
                text=text,
                note=note,
                color=resolved_color,
                start_offset=start_offset,
                end_offset=end_offset,
                created_at=now,
                updated_at=now,
            )
            article.highlights = [*article.highlights, highlight]
            article.touch()

        self.metrics_hook.increment(
            names.HIGHLIGHTS_CREATED_TOTAL, labels={"color": resolved_color.value}
        )
        logger.debug("Created highlight %s on article %s", highlight.id, article_id)
        return highlight

    def update(
        self,
        highlight_id: str,
        *,
        note: str | None = None,
        color: HighlightColor | str | None = None,
    ) -> Highlight:
        """Change the note and/or color of a highlight. Offsets are immutable.

        None leaves a field unchanged, so it cannot clear a note. Pass an
        empty note (or call `clear_note`) to remove it.
        """
        changes: dict[str, object] = {}
        if note is not None:
            changes["note"] = note or None
        if color is not None:
            changes["color"] = HighlightColor(color)

        article_id = self._owner_of(highlight_id)
        with self.articles.locked(article_id) as article:
            index = self._index_in(article, highlight_id)
            updated = article.highlights[index].model_copy(
                update={**changes, "updated_at": utcnow()}
            )
            highlights = list(article.highlights)
            highlights[index] = updated
            article.highlights = highlights
            article.touch()

        self.metrics_hook.increment(names.HIGHLIGHTS_UPDATED_TOTAL)
        logger.debug("Updated highlight %s: %s", highlight_id, sorted(changes))
        return updated

    def update_note(self, highlight_id: str, note: str) -> Highlight:
        return self.update(highlight_id, note=note)

    def clear_note(self, highlight_id: str) -> Highlight:
        return self.update(highlight_id, note="")

    def update_color(self, highlight_id: str, color: HighlightColor | str) -> Highlight:
        return self.update(highlight_id, color=color)

    def delete(self, highlight_id: str) -> None:
        """Remove a highlight.

        Raises:
            NotFoundError: If no stored article has a highlight with this id.
        """
        article_id = self._owner_of(highlight_id)
        with self.articles.locked(article_id) as article:
            index = self._index_in(article, highlight_id)
            article.highlights = [
                h for i, h in enumerate(article.highlights) if i != index
            ]
            article.touch()

        self.metrics_hook.increment(names.HIGHLIGHTS_DELETED_TOTAL)
        logger.debug("Deleted highlight %s from article %s", highlight_id, article_id)

    def get(self, highlight_id: str) -> Highlight:
        article_id = self._owner_of(highlight_id)
        with self.articles.locked(article_id) as article:
            return article.highlights[self._index_in(article, highlight_id)]

    def list_for_article(self, article_id: str) -> list[Highlight]:
        """Highlights of one article in insertion order."""
        with self.articles.locked(article_id) as article:
            return list(article.highlights)

    def list_all(self) -> list[tuple[Highlight, Article]]:
        """Every highlight of every stored article, paired with its article."""
        return [
            (highlight, article)
            for article in self.articles.list()
            for highlight in article.highlights
        ]

    def _owner_of(self, highlight_id: str) -> str:
        for article_id in self.articles.ids():
            try:
                with self.articles.locked(article_id) as article:
                    if any(h.id == highlight_id for h in article.highlights):
                        return article_id
            except NotFoundError:
                # Removed since ids() was taken
                continue
        logger.error("Highlight not found: %s", highlight_id)
        raise NotFoundError(f"Highlight '{highlight_id}' not found")

    @staticmethod
    def _index_in(article: Article, highlight_id: str) -> int:
        for index, highlight in enumerate(article.highlights):
            if highlight.id == highlight_id:
                return index
        # Deleted between lookup and lock
        logger.error("Highlight not found: %s", highlight_id)
        raise NotFoundError(f"Highlight '{highlight_id}' not found")
