# src/reader_kit/observability/base.py

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import monotonic
from typing import Protocol

METRICS_LOGGER_NAME = "reader_kit.metrics"


class MetricsHook(Protocol):
    """Sink for the timings and counters emitted by reader-kit components.

    Chapter detection, highlight edits, pass toggles and template
    rendering all report here. Durations are in milliseconds.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    """Default hook. Discards everything."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


class LoggingMetricsHook:
    """Writes every metric as one log record on the "reader_kit.metrics" logger.

    Useful in a reading app without a metrics backend: enable the logger
    at DEBUG to see detection timings and highlight counts.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.DEBUG,
    ) -> None:
        self.logger = logger or logging.getLogger(METRICS_LOGGER_NAME)
        self.level = level

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self._log("latency", name, f"{value_ms:.3f}ms", labels)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self._log("counter", name, f"+{value}", labels)

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self._log("gauge", name, f"{value:g}", labels)

    def _log(
        self, kind: str, name: str, value: str, labels: dict[str, str] | None
    ) -> None:
        if not self.logger.isEnabledFor(self.level):
            return
        self.logger.log(
            self.level, "%s %s=%s%s", kind, name, value, _format_labels(labels)
        )


def _format_labels(labels: dict[str, str] | None) -> str:
    if not labels:
        return ""
    return " " + " ".join(f"{key}={labels[key]}" for key in sorted(labels))


@contextmanager
def timed(
    metrics_hook: MetricsHook,
    name: str,
    labels: dict[str, str] | None = None,
) -> Iterator[None]:
    """Report the duration of the block as a latency, in milliseconds.

    Nothing is recorded when the block raises.
    """
    start = monotonic()
    yield
    metrics_hook.record_latency(name, 1000 * (monotonic() - start), labels)
