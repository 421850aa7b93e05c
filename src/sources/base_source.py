# src/sources/base_source.py

"""Abstract base class for catalog data sources."""

import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.filters.product_validator import ProductValidator
from src.models.source_attempt import (
    AttemptOutcome,
    SourceAttemptResult,
    SourceKind,
)


class SourceUnavailableError(Exception):
    """Transport-level failure: network error, timeout or non-2xx."""


class BaseCatalogSource(ABC):
    """One provider in the catalog fallback chain.

    Subclasses only know how to obtain the raw body; decoding, payload
    validation, timing and error capture live here so every source
    reports through the same :class:`SourceAttemptResult`.
    """

    kind: SourceKind

    def __init__(self, timeout: float | None = None) -> None:
        self.settings = Settings()
        self.logger = logging.getLogger(
            f"catalog.sources.{self.kind.value}"
        )
        self._request_timeout: float = (
            self.settings.REQUEST_TIMEOUT if timeout is None else timeout
        )
        self._session: curl_requests.Session | None = None

    @property
    def session(self) -> curl_requests.Session:
        """Lazily created browser-impersonating HTTP session."""
        if self._session is None:
            self._session = curl_requests.Session(
                impersonate=self.settings.IMPERSONATE_BROWSER
            )
        return self._session

    @session.setter
    def session(self, value: curl_requests.Session) -> None:
        self._session = value

    def _http_get(
        self, url: str, params: dict[str, str] | None = None,
    ) -> str:
        """Single bounded GET with caching disabled; returns the body."""
        try:
            resp = self.session.get(
                url,
                params=params,
                headers=self.settings.DEFAULT_HEADERS,
                timeout=self._request_timeout,
            )
        except Exception as exc:
            raise SourceUnavailableError(
                f"request to {url} failed: {exc}"
            ) from exc
        if not 200 <= resp.status_code < 300:
            raise SourceUnavailableError(
                f"HTTP {resp.status_code} from {url}"
            )
        return resp.text

    def fetch(self) -> SourceAttemptResult:
        """Run one attempt against this source and never raise."""
        start = time.monotonic()
        try:
            body = self._read_body()
            payload: Any = json.loads(body)
            raw = ProductValidator.extract_records(payload)
            products, dropped = ProductValidator.validate(raw)
        except Exception as exc:
            elapsed_ms = (time.monotonic() - start) * 1000
            self.logger.warning(
                "[%s] Attempt failed after %.0fms: %s",
                self.kind.value,
                elapsed_ms,
                exc,
                exc_info=True,
            )
            return SourceAttemptResult(
                source=self.kind,
                outcome=AttemptOutcome.FAILED,
                error=str(exc),
                elapsed_ms=elapsed_ms,
            )

        elapsed_ms = (time.monotonic() - start) * 1000
        outcome = (
            AttemptOutcome.SUCCESS_WITH_DATA
            if products
            else AttemptOutcome.SUCCESS_EMPTY
        )
        self.logger.info(
            "[%s] Loaded %d products from %s in %.0fms",
            self.kind.value,
            len(products),
            self.describe(),
            elapsed_ms,
        )
        return SourceAttemptResult(
            source=self.kind,
            outcome=outcome,
            products=products,
            elapsed_ms=elapsed_ms,
            dropped=dropped,
        )

    @abstractmethod
    def describe(self) -> str:
        """Human-readable location of this source (URL or path)."""
        ...

    @abstractmethod
    def _read_body(self) -> str:
        """Return the raw JSON text or raise on transport failure."""
        ...
