from collections import defaultdict

import pytest

from reader_kit.articles.store import ArticleStore
from reader_kit.highlights.highlight_store import HighlightStore


class RecordingMetricsHook:
    """Metrics hook that keeps everything it receives."""

    def __init__(self) -> None:
        self.latencies: dict[str, list[float]] = defaultdict(list)
        self.counters: dict[str, int] = defaultdict(int)
        self.gauges: dict[str, float] = {}
        self.labels: list[tuple[str, dict[str, str] | None]] = []

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies[name].append(value_ms)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters[name] += value
        self.labels.append((name, labels))

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges[name] = value


MARKDOWN_ARTICLE = "# Intro\nhello\n## Details\nworld\n"


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()


@pytest.fixture
def article_store(metrics: RecordingMetricsHook) -> ArticleStore:
    return ArticleStore(metrics_hook=metrics)


@pytest.fixture
def highlight_store(
    article_store: ArticleStore, metrics: RecordingMetricsHook
) -> HighlightStore:
    return HighlightStore(article_store, metrics_hook=metrics)
