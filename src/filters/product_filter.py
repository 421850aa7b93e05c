# src/filters/product_filter.py

"""Category selection and free-text search over the loaded catalog."""

import logging
from dataclasses import dataclass

from src.models.product import ProductRecord

logger = logging.getLogger("catalog.filters")


@dataclass
class FilterState:
    """Current category selection and search text for one session.

    ``selected_category`` is ``None`` for "all categories", so no
    category name from the data can be mistaken for it.
    """

    selected_category: str | None = None
    search_query: str = ""


class ProductFilter:
    """Derive the visible subset of the catalog from a FilterState."""

    @staticmethod
    def matches_category(
        product: ProductRecord, selected_category: str | None,
    ) -> bool:
        """Exact, case-sensitive match; ``None`` passes all."""
        if selected_category is None:
            return True
        return product.category_key == selected_category

    @staticmethod
    def matches_query(product: ProductRecord, needle: str) -> bool:
        """Substring match of an already lowered query on any text field.

        An empty needle matches everything.
        """
        if not needle:
            return True
        fields = (product.title, product.summary, product.category_key)
        return any(needle in value.lower() for value in fields)

    @staticmethod
    def visible(
        products: list[ProductRecord],
        selected_category: str | None,
        search_query: str,
    ) -> list[ProductRecord]:
        """Return the products passing both predicates, in input order."""
        needle = search_query.strip().lower()
        kept = [
            p
            for p in products
            if ProductFilter.matches_category(p, selected_category)
            and ProductFilter.matches_query(p, needle)
        ]
        logger.debug(
            "Filter category=%r query=%r kept %d of %d products",
            selected_category,
            needle,
            len(kept),
            len(products),
        )
        return kept

    @staticmethod
    def apply(
        products: list[ProductRecord], state: FilterState,
    ) -> list[ProductRecord]:
        """Shorthand for :meth:`visible` with a FilterState."""
        return ProductFilter.visible(
            products, state.selected_category, state.search_query
        )
