# src/filters/category_organizer.py

"""Group products into category buckets in display order."""

import logging
from dataclasses import dataclass, field

from src.config.settings import Settings
from src.models.product import ProductRecord

logger = logging.getLogger("catalog.filters")


@dataclass
class CategoryBucket:
    """All products sharing one category value."""

    name: str
    products: list[ProductRecord] = field(
        default_factory=lambda: list[ProductRecord]()
    )

    def __len__(self) -> int:
        return len(self.products)


class CategoryOrganizer:
    """Order buckets: configured categories, then the rest, sentinel last."""

    @staticmethod
    def group(
        products: list[ProductRecord],
    ) -> dict[str, list[ProductRecord]]:
        """Partition products by category, keeping input order per bucket."""
        grouped: dict[str, list[ProductRecord]] = {}
        for product in products:
            grouped.setdefault(product.category_key, []).append(product)
        return grouped

    @staticmethod
    def organize(
        products: list[ProductRecord],
        order: list[str] | None = None,
    ) -> list[CategoryBucket]:
        """Return the non-empty buckets in display order.

        Names from *order* come first in that sequence.  Remaining
        categories follow sorted by name, and the uncategorized
        sentinel bucket always closes the list.
        """
        category_order = (
            Settings.CATEGORY_ORDER if order is None else order
        )
        grouped = CategoryOrganizer.group(products)
        sentinel = Settings.UNCATEGORIZED_LABEL

        ordered: list[str] = []
        for name in category_order:
            if name in grouped and name != sentinel and name not in ordered:
                ordered.append(name)
        ordered.extend(
            sorted(
                name
                for name in grouped
                if name not in ordered and name != sentinel
            )
        )
        if sentinel in grouped:
            ordered.append(sentinel)

        unlisted = [n for n in ordered if n not in category_order]
        if unlisted:
            logger.debug(
                "Categories outside the configured order: %s",
                ", ".join(unlisted),
            )

        return [CategoryBucket(name, grouped[name]) for name in ordered]
