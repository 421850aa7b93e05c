# src/sources/remote_source.py

"""Remote catalog API: ``GET {base}/products``."""

from src.models.source_attempt import SourceKind
from src.sources.base_source import BaseCatalogSource


class RemoteApiSource(BaseCatalogSource):
    """Primary source, only used when an API base address is configured."""

    kind = SourceKind.REMOTE_API

    def __init__(self, base_url: str, timeout: float | None = None) -> None:
        super().__init__(timeout)
        self.base_url = base_url.rstrip("/")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/products"

    def describe(self) -> str:
        return self.endpoint

    def _read_body(self) -> str:
        return self._http_get(self.endpoint)
