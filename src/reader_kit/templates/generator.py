# src/reader_kit/templates/generator.py

import logging
from functools import lru_cache

from reader_kit.articles.models import Article
from reader_kit.chapters.models import Chapter
from reader_kit.extraction import extract_chapter_content
from reader_kit.observability import names
from reader_kit.observability.base import MetricsHook, NoOpMetricsHook, timed
from reader_kit.passes.progress import ReadingPass

from .templates_library import TemplatesLibrary

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def default_library() -> TemplatesLibrary:
    return TemplatesLibrary()


def generate_template(
    article: Article,
    chapter: Chapter | None,
    pass_type: ReadingPass | str,
    *,
    library: TemplatesLibrary | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    """Build copy-ready text for one reading pass.

    Args:
        article: Article supplying the title and, without a chapter, the content.
        chapter: Chapter to copy, or None for the whole article.
        pass_type: "manual", "explain" or "qa".
        library: Template source. Defaults to the packaged templates.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        The rendered template.

    Raises:
        ValueError: If pass_type is not a known reading pass.
        InvalidRangeError: If the chapter does not fit the article content.
    """
    with timed(metrics_hook, names.TEMPLATE_RENDER_DURATION):
        reading_pass = ReadingPass(pass_type)
        library = library or default_library()

        if chapter is not None:
            content = extract_chapter_content(article.content, chapter)
            heading = chapter.title
            subject = f'"{article.title}" - {chapter.title}'
        else:
            content = article.content
            heading = article.title
            subject = f'"{article.title}"'

        template = library.get(reading_pass.value)
        if reading_pass is ReadingPass.MANUAL:
            text = template.render(heading=heading, content=content)
        else:
            text = template.render(subject=subject, content=content)

    metrics_hook.increment(
        names.TEMPLATES_GENERATED_TOTAL, labels={"pass": reading_pass.value}
    )
    logger.debug(
        "Generated %s template for article %s (chapter=%s)",
        reading_pass.value,
        article.id,
        chapter.id if chapter is not None else None,
    )
    return text
