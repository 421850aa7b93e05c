# src/models/source_attempt.py

"""Outcome of a single attempt to load the catalog from one source."""

from dataclasses import dataclass, field
from enum import Enum

from src.models.product import ProductRecord


class SourceKind(str, Enum):
    """Where a product list came from."""

    REMOTE_API = "remote-api"
    LOCAL_FALLBACK = "local-fallback"


class AttemptOutcome(str, Enum):
    """Result tag of one source attempt."""

    SUCCESS_WITH_DATA = "success-with-data"
    SUCCESS_EMPTY = "success-empty"
    FAILED = "failed"


@dataclass
class SourceAttemptResult:
    """Transient result of one source attempt during a resolution."""

    source: SourceKind
    outcome: AttemptOutcome
    products: list[ProductRecord] = field(
        default_factory=lambda: list[ProductRecord]()
    )
    error: str = ""
    elapsed_ms: float = 0.0
    dropped: int = 0

    @property
    def succeeded(self) -> bool:
        return self.outcome is not AttemptOutcome.FAILED
