# src/services/health_checker.py

"""Connectivity check for the configured catalog sources."""

import asyncio
import logging
from dataclasses import dataclass

from src.config.settings import Settings
from src.models.source_attempt import SourceAttemptResult
from src.services.catalog_resolver import default_sources
from src.sources.base_source import BaseCatalogSource

logger = logging.getLogger("catalog.health")


@dataclass
class HealthResult:
    """Result of a single source health check."""

    source_id: str
    location: str
    status: str  # "ok", "slow", "down"
    latency_ms: float
    message: str


def _summary(attempt: SourceAttemptResult) -> str:
    """Record count, plus entries the validator threw away."""
    text = f"{len(attempt.products)} products"
    if attempt.dropped:
        text += f", {attempt.dropped} malformed dropped"
    return text


def probe_source(source: BaseCatalogSource) -> HealthResult:
    """Run one fetch against *source* and classify it."""
    attempt = source.fetch()
    source_id = source.kind.value

    if not attempt.succeeded:
        return HealthResult(
            source_id=source_id,
            location=source.describe(),
            status="down",
            latency_ms=attempt.elapsed_ms,
            message=attempt.error[:80],
        )

    if attempt.elapsed_ms > Settings.SLOW_THRESHOLD_MS:
        return HealthResult(
            source_id=source_id,
            location=source.describe(),
            status="slow",
            latency_ms=attempt.elapsed_ms,
            message=f"{_summary(attempt)}, high latency",
        )

    return HealthResult(
        source_id=source_id,
        location=source.describe(),
        status="ok",
        latency_ms=attempt.elapsed_ms,
        message=_summary(attempt),
    )


class HealthChecker:
    """Probes every configured catalog source concurrently."""

    def __init__(
        self, sources: list[BaseCatalogSource] | None = None,
    ) -> None:
        self.sources = default_sources() if sources is None else sources

    async def check_all(self) -> list[HealthResult]:
        """Probe all sources; unlike a resolution, none is skipped."""
        tasks = [
            asyncio.to_thread(probe_source, src) for src in self.sources
        ]
        results: list[HealthResult] = list(await asyncio.gather(*tasks))
        for r in results:
            logger.info(
                "Health check %s: %s (%.0fms) %s",
                r.source_id,
                r.status,
                r.latency_ms,
                r.message,
            )
        return results
