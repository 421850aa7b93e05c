# src/storage/file_manager.py

"""Reads the page template and writes rendered catalog pages to disk."""

import json
import logging
from pathlib import Path

from bs4 import BeautifulSoup

from src.config.settings import Settings
from src.models.product import ProductRecord

logger = logging.getLogger("catalog.storage")


class FileManager:
    """Handles page templates and build output."""

    def __init__(
        self,
        output_dir: Path | None = None,
        template_path: Path | None = None,
    ) -> None:
        self.output_dir: Path = output_dir or Settings.OUTPUT_DIR
        self.template_path: Path = template_path or Settings.PAGE_TEMPLATE
        self.output_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(
            "FileManager initialised — output_dir=%s template=%s",
            self.output_dir,
            self.template_path,
        )

    def load_template(self) -> BeautifulSoup:
        """Parse the page template that carries the mount points."""
        with open(self.template_path, encoding="utf-8") as f:
            return BeautifulSoup(f.read(), "lxml")

    def write_page(self, document: BeautifulSoup, filename: str) -> Path:
        """Write a materialised page and return its path."""
        filepath = self.output_dir / filename
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(str(document))
        logger.info("Wrote catalog page to %s", filepath)
        return filepath

    def write_products_json(
        self, products: list[ProductRecord], filename: str = "products.json",
    ) -> Path:
        """Snapshot the loaded catalog next to the page.

        The snapshot has the fallback file's shape, so it can be
        deployed as the next local fallback.
        """
        filepath = self.output_dir / filename
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(
                [p.to_dict() for p in products],
                f,
                ensure_ascii=False,
                indent=2,
            )
        logger.info(
            "Saved %d products to %s", len(products), filepath
        )
        return filepath
