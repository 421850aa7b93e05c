# src/filters/product_validator.py

"""Payload validation: turn decoded JSON into product records."""

import logging
from typing import Any

from src.models.product import ProductRecord

logger = logging.getLogger("catalog.filters")


class CatalogPayloadError(ValueError):
    """The response body is neither a list nor an object with ``products``."""


class ProductValidator:
    """Validate catalog payloads and drop entries that are not records."""

    @staticmethod
    def extract_records(payload: Any) -> list[Any]:
        """Return the raw record list from an accepted payload shape.

        Accepts a bare JSON array or an object with a ``products``
        array.  Anything else raises :class:`CatalogPayloadError`.
        """
        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict):
            products = payload.get("products")
            if isinstance(products, list):
                return products
        raise CatalogPayloadError(
            "expected a JSON array or an object with a 'products' array, "
            f"got {type(payload).__name__}"
        )

    @staticmethod
    def validate(
        raw_records: list[Any],
    ) -> tuple[list[ProductRecord], int]:
        """Convert JSON objects to records, dropping anything else.

        Returns the parsed records and the count of dropped entries.
        """
        records: list[ProductRecord] = []
        dropped = 0

        for index, raw in enumerate(raw_records):
            if not isinstance(raw, dict):
                logger.debug(
                    "Dropped non-object catalog entry at index %d (%s)",
                    index,
                    type(raw).__name__,
                )
                dropped += 1
                continue
            records.append(ProductRecord.from_dict(raw))

        if dropped:
            logger.info(
                "Validation dropped %d malformed catalog entries",
                dropped,
            )

        return records, dropped
