# tests/test_product_validator.py

"""Tests for payload shape checks and record conversion."""

import unittest

from src.filters.product_validator import (
    CatalogPayloadError,
    ProductValidator,
)


class TestExtractRecords(unittest.TestCase):
    """Accepted and rejected payload shapes."""

    def test_bare_array_accepted(self) -> None:
        raw = [{"id": 1}]
        self.assertIs(ProductValidator.extract_records(raw), raw)

    def test_products_object_accepted(self) -> None:
        raw = {"products": [{"id": 1}], "total": 1}
        self.assertEqual(
            ProductValidator.extract_records(raw), [{"id": 1}]
        )

    def test_object_without_products_rejected(self) -> None:
        with self.assertRaises(CatalogPayloadError):
            ProductValidator.extract_records({"items": []})

    def test_products_not_a_list_rejected(self) -> None:
        with self.assertRaises(CatalogPayloadError):
            ProductValidator.extract_records({"products": "none"})

    def test_scalar_rejected(self) -> None:
        for payload in (None, 42, "products"):
            with self.subTest(payload=payload):
                with self.assertRaises(CatalogPayloadError):
                    ProductValidator.extract_records(payload)


class TestValidate(unittest.TestCase):
    """Conversion of raw entries to ProductRecord."""

    def test_objects_converted(self) -> None:
        records, dropped = ProductValidator.validate(
            [{"id": 1, "title": "A"}, {"id": 2, "title": "B"}]
        )
        self.assertEqual([r.title for r in records], ["A", "B"])
        self.assertEqual(dropped, 0)

    def test_non_objects_dropped(self) -> None:
        records, dropped = ProductValidator.validate(
            [{"id": 1, "title": "A"}, "junk", None, [1, 2]]
        )
        self.assertEqual(len(records), 1)
        self.assertEqual(dropped, 3)

    def test_empty_list(self) -> None:
        records, dropped = ProductValidator.validate([])
        self.assertEqual(records, [])
        self.assertEqual(dropped, 0)


if __name__ == "__main__":
    unittest.main()
