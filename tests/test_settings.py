# tests/test_settings.py

"""Tests for the Settings configuration class."""

import unittest
from pathlib import Path

from src.config.settings import Settings, project_path


class TestSettings(unittest.TestCase):
    """Verify Settings constants."""

    def test_request_timeout_is_ten_seconds(self) -> None:
        self.assertEqual(Settings.REQUEST_TIMEOUT, 10.0)

    def test_category_order_unique(self) -> None:
        order = Settings.CATEGORY_ORDER
        self.assertEqual(len(order), len(set(order)))

    def test_sentinel_not_in_category_order(self) -> None:
        self.assertNotIn(
            Settings.UNCATEGORIZED_LABEL, Settings.CATEGORY_ORDER
        )

    def test_no_cache_headers(self) -> None:
        self.assertEqual(
            Settings.DEFAULT_HEADERS["Cache-Control"], "no-cache"
        )
        self.assertEqual(Settings.DEFAULT_HEADERS["Pragma"], "no-cache")

    def test_path_constants_are_paths(self) -> None:
        self.assertIsInstance(Settings.BASE_DIR, Path)
        self.assertIsInstance(Settings.SITE_DIR, Path)
        self.assertIsInstance(Settings.OUTPUT_DIR, Path)
        self.assertIsInstance(Settings.LOGS_DIR, Path)

    def test_page_template_exists(self) -> None:
        self.assertTrue(Settings.PAGE_TEMPLATE.exists())

    def test_messaging_endpoint_is_https(self) -> None:
        self.assertTrue(Settings.MESSAGING_BASE_URL.startswith("https://"))

    def test_impersonate_browser_is_string(self) -> None:
        self.assertIsInstance(Settings.IMPERSONATE_BROWSER, str)
        self.assertTrue(len(Settings.IMPERSONATE_BROWSER) > 0)


class TestProjectPath(unittest.TestCase):
    """Fallback locations from the environment."""

    def test_relative_path_anchored_at_base(self) -> None:
        base = Path("/srv/catalog")
        self.assertEqual(
            project_path("site/products.json", base),
            str(base / "site" / "products.json"),
        )

    def test_absolute_path_unchanged(self) -> None:
        location = str(Path("/data/products.json").resolve())
        self.assertEqual(project_path(location, Path("/srv")), location)

    def test_url_unchanged(self) -> None:
        url = "https://shop.example.com/products.json"
        self.assertEqual(project_path(url, Path("/srv")), url)

    def test_default_fallback_is_absolute(self) -> None:
        self.assertTrue(Path(Settings.FALLBACK_LOCATION).is_absolute())


if __name__ == "__main__":
    unittest.main()
