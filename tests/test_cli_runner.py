# tests/test_cli_runner.py

"""Tests for the headless build/list commands."""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import MagicMock

from bs4 import BeautifulSoup

from src.cli.runner import build_page, list_catalog
from src.models.product import ProductRecord
from src.models.source_attempt import SourceKind
from src.services.catalog_controller import CatalogController
from src.services.catalog_resolver import Resolution


def _controller(resolution: Resolution) -> CatalogController:
    resolver = MagicMock()
    resolver.resolve.return_value = resolution
    return CatalogController(resolver=resolver)


def _loaded() -> Resolution:
    return Resolution(
        products=[
            ProductRecord(id="1", title="Tisch", category="Mietmöbel"),
            ProductRecord(id="2", title="Pavillon", category="Zelte und Pavillons"),
            ProductRecord(id="3", title="Gutschein"),
        ],
        source=SourceKind.LOCAL_FALLBACK,
    )


class TestBuildPage(unittest.IsolatedAsyncioTestCase):
    """build_page writes a materialised page per filter option."""

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.out_dir = self._tmp.name

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _page(self, name: str = "produkte.html") -> BeautifulSoup:
        path = Path(self.out_dir) / name
        return BeautifulSoup(path.read_text(encoding="utf-8"), "lxml")

    async def test_build_all_categories(self) -> None:
        code = await build_page(None, self.out_dir, _controller(_loaded()))
        self.assertEqual(code, 0)
        page = self._page()
        headings = [h.get_text() for h in page.select("h2.category-title")]
        self.assertEqual(
            headings, ["Mietmöbel", "Zelte und Pavillons", "Sonstige"]
        )
        self.assertTrue((Path(self.out_dir) / "products.json").exists())

    async def test_every_filter_link_has_a_page(self) -> None:
        code = await build_page(None, self.out_dir, _controller(_loaded()))
        self.assertEqual(code, 0)

        landing = self._page()
        links = landing.select("#category-filter a.filter-btn")
        self.assertEqual(len(links), 4)
        self.assertEqual(landing.select("script"), [])
        self.assertEqual(landing.select("button.filter-btn"), [])
        self.assertIsNone(landing.find(id="search-input"))

        for link in links:
            with self.subTest(href=link["href"]):
                page = self._page(str(link["href"]))
                active = page.select("#category-filter a[aria-current=page]")
                self.assertEqual(active[0]["href"], link["href"])

        tents = self._page("produkte-zelte-und-pavillons.html")
        titles = [h.get_text() for h in tents.select("h3.product-title")]
        self.assertEqual(titles, ["Pavillon"])
        other = self._page("produkte-sonstige.html")
        self.assertEqual(len(other.select("article.product-card")), 1)

    async def test_build_with_search(self) -> None:
        code = await build_page("pav", self.out_dir, _controller(_loaded()))
        self.assertEqual(code, 0)
        page = self._page()
        self.assertEqual(len(page.select("article.product-card")), 1)
        summary = page.select_one(".search-summary")
        assert summary is not None
        self.assertIn("pav", summary.get_text())
        furniture = self._page("produkte-mietmoebel.html")
        self.assertEqual(len(furniture.select(".catalog-empty")), 1)

    async def test_build_failed_writes_error_page(self) -> None:
        code = await build_page(None, self.out_dir, _controller(Resolution()))
        self.assertEqual(code, 1)
        page = self._page()
        self.assertEqual(len(page.select(".catalog-error")), 1)
        self.assertEqual(page.select("article"), [])
        self.assertEqual(page.select("#category-filter a"), [])
        self.assertIsNone(page.find(id="search-input"))
        self.assertEqual(
            sorted(p.name for p in Path(self.out_dir).iterdir()),
            ["produkte.html"],
        )


class TestListCatalog(unittest.IsolatedAsyncioTestCase):
    """list_catalog prints grouped JSON or a table."""

    async def test_json_output(self) -> None:
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = await list_catalog(None, "tisch", "json", _controller(_loaded()))
        self.assertEqual(code, 0)
        data = json.loads(buf.getvalue())
        self.assertEqual(data[0]["category"], "Mietmöbel")
        self.assertEqual(data[0]["products"][0]["title"], "Tisch")
        self.assertIn("wa.me", data[0]["products"][0]["contact"])

    async def test_empty_result_exit_code(self) -> None:
        code = await list_catalog(None, "xyz", "json", _controller(_loaded()))
        self.assertEqual(code, 1)

    async def test_failed_exit_code(self) -> None:
        code = await list_catalog(None, None, "table", _controller(Resolution()))
        self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()
