# src/services/catalog_resolver.py

"""Walks the catalog sources in priority order until one succeeds."""

import logging
from dataclasses import dataclass, field

from src.config.settings import Settings
from src.models.product import ProductRecord
from src.models.source_attempt import SourceAttemptResult, SourceKind
from src.sources.base_source import BaseCatalogSource
from src.sources.fallback_source import LocalFallbackSource
from src.sources.remote_source import RemoteApiSource

logger = logging.getLogger("catalog.resolver")


@dataclass
class Resolution:
    """Outcome of one full pass over the source chain."""

    products: list[ProductRecord] = field(
        default_factory=lambda: list[ProductRecord]()
    )
    attempts: list[SourceAttemptResult] = field(
        default_factory=lambda: list[SourceAttemptResult]()
    )
    source: SourceKind | None = None
    advisory: str | None = None

    @property
    def failed(self) -> bool:
        """True when every source was exhausted without success."""
        return self.source is None


def default_sources(
    api_base: str | None = None,
    fallback_location: str | None = None,
) -> list[BaseCatalogSource]:
    """Build the configured chain: remote API (if set), then fallback."""
    base = Settings.API_BASE if api_base is None else api_base
    sources: list[BaseCatalogSource] = []
    if base:
        sources.append(RemoteApiSource(base))
    sources.append(LocalFallbackSource(fallback_location))
    return sources


class CatalogResolver:
    """Obtain the product list from the first source that succeeds."""

    def __init__(
        self, sources: list[BaseCatalogSource] | None = None,
    ) -> None:
        self.sources = default_sources() if sources is None else sources

    def resolve(self) -> Resolution:
        """Try each source once, in order, and stop at the first success.

        A source that fails (transport error, timeout, non-2xx or a
        malformed body) hands over to the next one.  When a later
        source rescues the load, the result carries an advisory.
        """
        result = Resolution()

        for source in self.sources:
            attempt = source.fetch()
            result.attempts.append(attempt)
            if not attempt.succeeded:
                continue

            result.products = attempt.products
            result.source = attempt.source
            if len(result.attempts) > 1:
                result.advisory = Settings.ADVISORY_MESSAGE
                logger.warning(
                    "Primary catalog source failed; serving %d products "
                    "from %s",
                    len(attempt.products),
                    attempt.source.value,
                )
            return result

        logger.error(
            "All %d catalog sources failed: %s",
            len(result.attempts),
            "; ".join(
                f"{a.source.value}: {a.error}" for a in result.attempts
            ),
        )
        return result
