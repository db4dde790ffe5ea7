from pathlib import Path

import pytest

from reader_kit.articles.models import Article
from reader_kit.chapters.detector import detect_chapters
from reader_kit.observability import names
from reader_kit.templates.generator import generate_template
from reader_kit.templates.templates_library import TemplatesLibrary


@pytest.fixture
def article() -> Article:
    return Article(id="a1", title="Foo", content="Bar")


@pytest.fixture
def chaptered_article() -> Article:
    return Article(
        id="a2",
        title="Guide",
        content="# Intro\nhello there\n## Details\nthe fine print\n",
    )


class TestManualTemplate:
    def test_heading_and_content_only(self, article: Article) -> None:
        assert generate_template(article, None, "manual") == "# Foo\n\nBar"

    def test_chapter_uses_chapter_title_and_text(
        self, chaptered_article: Article
    ) -> None:
        details = detect_chapters(chaptered_article.content)[1]

        text = generate_template(chaptered_article, details, "manual")

        assert text == "# Details\n\n## Details\nthe fine print"


class TestExplainTemplate:
    def test_wraps_content_with_instructions(self, article: Article) -> None:
        text = generate_template(article, None, "explain")

        assert text.startswith('I\'m reading "Foo". Please help me understand')
        assert "1. Explaining the main concepts" in text
        assert "---\n\nBar\n\n---" in text
        assert text.endswith("Please provide a clear explanation and summary.")

    def test_names_chapter_after_article(self, chaptered_article: Article) -> None:
        intro = detect_chapters(chaptered_article.content)[0]

        text = generate_template(chaptered_article, intro, "explain")

        assert text.startswith('I\'m reading "Guide" - Intro.')
        assert "# Intro\nhello there" in text
        assert "the fine print" not in text


class TestQATemplate:
    def test_requests_generated_questions(self, article: Article) -> None:
        text = generate_template(article, None, "qa")

        assert '"Foo"' in text
        assert "Generate thoughtful questions about this content" in text
        assert "Bar" in text
        assert text.endswith("What questions should I be asking about this material?")


class TestGenerateTemplate:
    def test_unknown_pass_raises(self, article: Article) -> None:
        with pytest.raises(ValueError):
            generate_template(article, None, "summary")

    def test_is_pure(self, chaptered_article: Article) -> None:
        chapter = detect_chapters(chaptered_article.content)[0]

        first = generate_template(chaptered_article, chapter, "qa")
        second = generate_template(chaptered_article, chapter, "qa")

        assert first == second
        assert chaptered_article.chapters is None

    def test_custom_library(self, article: Article, tmp_path: Path) -> None:
        (tmp_path / "manual.yaml").write_text(
            """name: manual
version: "1.0"
description: Terse
inputs:
  heading: Heading
  content: Body
template: "{heading}: {content}"
"""
        )

        text = generate_template(
            article, None, "manual", library=TemplatesLibrary(tmp_path)
        )

        assert text == "Foo: Bar"

    def test_records_metrics(self, article: Article, metrics) -> None:
        generate_template(article, None, "qa", metrics_hook=metrics)

        assert metrics.counters[names.TEMPLATES_GENERATED_TOTAL] == 1
        assert (names.TEMPLATES_GENERATED_TOTAL, {"pass": "qa"}) in metrics.labels
