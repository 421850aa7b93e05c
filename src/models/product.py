# src/models/product.py

"""Product record as delivered by the catalog API or fallback file."""

from dataclasses import dataclass
from typing import Any

from src.config.settings import Settings


def _text(value: Any) -> str:
    """Normalise an optional JSON scalar to stripped text."""
    if value is None:
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class ProductRecord:
    """A single catalog entry. Read-only once parsed."""

    id: str
    title: str
    category: str = ""
    price: str = ""
    description: str = ""
    note: str = ""
    meta: str = ""
    image: str = ""
    slug: str = ""
    topseller: bool = False

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ProductRecord":
        """Build a record from a decoded JSON object, applying defaults."""
        return cls(
            id=_text(raw.get("id")),
            title=_text(raw.get("title")) or Settings.UNTITLED_LABEL,
            category=_text(raw.get("category")),
            price=_text(raw.get("price")),
            description=_text(raw.get("description")),
            note=_text(raw.get("note")),
            meta=_text(raw.get("meta")),
            image=_text(raw.get("image")),
            slug=_text(raw.get("slug")),
            topseller=raw.get("topseller") is True,
        )

    @property
    def category_key(self) -> str:
        """Bucket name: the category, or the sentinel when missing."""
        return self.category or Settings.UNCATEGORIZED_LABEL

    @property
    def summary(self) -> str:
        """The single explanatory line (first non-empty text wins)."""
        return self.description or self.note or self.meta

    @property
    def page_name(self) -> str:
        """Detail page stem: slug, falling back to id."""
        return self.slug or self.id

    def to_dict(self) -> dict[str, object]:
        """Serialise back to plain JSON-ready data."""
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category_key,
            "price": self.price,
            "note": self.summary,
            "image": self.image,
            "slug": self.page_name,
            "topseller": self.topseller,
        }
