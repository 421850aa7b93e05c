# src/sources/fallback_source.py

"""Local fallback catalog: the static ``products.json`` of the site."""

import time
from pathlib import Path

from src.models.source_attempt import SourceKind
from src.sources.base_source import BaseCatalogSource, SourceUnavailableError


class LocalFallbackSource(BaseCatalogSource):
    """Static JSON fallback, served over HTTP or read from disk.

    HTTP locations get a fresh ``_=<epoch millis>`` parameter on every
    fetch so edits to the file show up immediately.
    """

    kind = SourceKind.LOCAL_FALLBACK

    def __init__(
        self, location: str | None = None, timeout: float | None = None,
    ) -> None:
        super().__init__(timeout)
        self.location = (
            self.settings.FALLBACK_LOCATION if location is None else location
        )

    @property
    def is_remote(self) -> bool:
        return self.location.startswith(("http://", "https://"))

    def describe(self) -> str:
        return self.location

    def _read_body(self) -> str:
        if self.is_remote:
            cache_buster = str(int(time.time() * 1000))
            return self._http_get(
                self.location,
                params={self.settings.CACHE_BUST_PARAM: cache_buster},
            )
        path = Path(self.location)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SourceUnavailableError(
                f"cannot read {path}: {exc}"
            ) from exc
