# src/services/catalog_controller.py

"""Presentation controller: load once, then re-derive on every interaction."""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum

from bs4 import BeautifulSoup, Tag

from src.config.settings import Settings
from src.filters.category_organizer import CategoryBucket, CategoryOrganizer
from src.filters.product_filter import FilterState, ProductFilter
from src.models.product import ProductRecord
from src.render import card_renderer
from src.services.catalog_resolver import CatalogResolver, Resolution

logger = logging.getLogger("catalog.controller")

PRODUCTS_MOUNT_ID = "products-container"
FILTER_MOUNT_ID = "category-filter"
SEARCH_MOUNT_ID = "search-input"


class ViewState(str, Enum):
    """Lifecycle of the catalog region."""

    LOADING = "loading"
    LOADED = "loaded"
    LOADED_WITH_ADVISORY = "loaded-with-advisory"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass
class FilterOption:
    """One category control: all (``None``) or a non-empty bucket."""

    value: str | None
    label: str
    count: int
    active: bool = False


@dataclass
class CatalogView:
    """Everything a materialiser needs to draw the catalog region."""

    state: ViewState
    buckets: list[CategoryBucket] = field(
        default_factory=lambda: list[CategoryBucket]()
    )
    filter_options: list[FilterOption] = field(
        default_factory=lambda: list[FilterOption]()
    )
    search_query: str = ""
    advisory: str | None = None
    message: str | None = None

    @property
    def visible_count(self) -> int:
        return sum(len(b) for b in self.buckets)


class CatalogController:
    """Owns the dataset and the single FilterState of a session.

    The controller is the only writer of its state.  Loading happens
    once; category and search changes never re-fetch, they re-run the
    filter and organiser over the already loaded products.
    """

    def __init__(
        self,
        resolver: CatalogResolver | None = None,
        category_order: list[str] | None = None,
        base_path: str | None = None,
    ) -> None:
        self.resolver = resolver or CatalogResolver()
        self.category_order = (
            list(Settings.CATEGORY_ORDER)
            if category_order is None
            else category_order
        )
        self.base_path = base_path
        self.filter_state = FilterState()
        self.products: list[ProductRecord] = []
        self.advisory: str | None = None
        self._load_state = ViewState.LOADING

    # ── Loading ──────────────────────────────────────────

    async def load(self) -> CatalogView:
        """Resolve the catalog off the event loop and apply the result."""
        self._load_state = ViewState.LOADING
        resolution = await asyncio.to_thread(self.resolver.resolve)
        return self.apply_resolution(resolution)

    def apply_resolution(self, resolution: Resolution) -> CatalogView:
        """Move out of Loading according to the resolver outcome."""
        if resolution.failed:
            self.products = []
            self.advisory = None
            self._load_state = ViewState.FAILED
            logger.error("Catalog unavailable, showing blocking error")
            return self.view()

        self.products = list(resolution.products)
        self.advisory = resolution.advisory
        self._load_state = (
            ViewState.LOADED_WITH_ADVISORY
            if resolution.advisory
            else ViewState.LOADED
        )
        logger.info(
            "Catalog loaded: %d products from %s",
            len(self.products),
            resolution.source.value if resolution.source else "?",
        )
        return self.view()

    # ── Interaction ──────────────────────────────────────

    def select_category(self, category: str | None) -> CatalogView:
        """Pin a category (``None`` for all) and re-derive the view."""
        self.filter_state.selected_category = category
        logger.debug("Category selected: %s", category)
        return self.view()

    def set_search(self, query: str) -> CatalogView:
        """Replace the search text and re-derive the view."""
        self.filter_state.search_query = query
        return self.view()

    def dismiss_advisory(self) -> CatalogView:
        self.advisory = None
        if self._load_state is ViewState.LOADED_WITH_ADVISORY:
            self._load_state = ViewState.LOADED
        return self.view()

    # ── Derivation ───────────────────────────────────────

    def filter_options(self) -> list[FilterOption]:
        """``All`` plus one option per non-empty bucket of the dataset."""
        selected = self.filter_state.selected_category
        options = [
            FilterOption(
                value=None,
                label=Settings.ALL_CATEGORIES_LABEL,
                count=len(self.products),
                active=selected is None,
            )
        ]
        for bucket in CategoryOrganizer.organize(
            self.products, self.category_order
        ):
            options.append(
                FilterOption(
                    value=bucket.name,
                    label=bucket.name,
                    count=len(bucket),
                    active=selected == bucket.name,
                )
            )
        return options

    def view(self) -> CatalogView:
        """Build the full view for the current state from scratch."""
        if self._load_state in (ViewState.LOADING, ViewState.FAILED):
            message = (
                Settings.LOADING_MESSAGE
                if self._load_state is ViewState.LOADING
                else Settings.ERROR_MESSAGE
            )
            return CatalogView(state=self._load_state, message=message)

        visible = ProductFilter.apply(self.products, self.filter_state)
        buckets = CategoryOrganizer.organize(visible, self.category_order)
        state = self._load_state if buckets else ViewState.EMPTY
        return CatalogView(
            state=state,
            buckets=buckets,
            filter_options=self.filter_options(),
            search_query=self.filter_state.search_query,
            advisory=self.advisory,
            message=Settings.EMPTY_MESSAGE if not buckets else None,
        )

    # ── Materialisation ──────────────────────────────────

    def render_products_html(self, view: CatalogView) -> str:
        """Markup for the products container in the given view."""
        if view.state is ViewState.LOADING:
            return card_renderer.render_loading()
        if view.state is ViewState.FAILED:
            return card_renderer.render_error(view.message or "")

        parts: list[str] = []
        if view.advisory:
            parts.append(card_renderer.render_advisory(view.advisory))
        if view.buckets:
            parts.append(
                card_renderer.render_sections(view.buckets, self.base_path)
            )
        else:
            parts.append(card_renderer.render_empty(view.message or ""))
        return "".join(parts)

    def materialize(
        self, document: BeautifulSoup, view: CatalogView | None = None,
    ) -> BeautifulSoup:
        """Write the view into the page's mount points, in place.

        Missing mount points are skipped; the corresponding feature
        simply does not appear on the page.
        """
        current = view or self.view()

        container = document.find(id=PRODUCTS_MOUNT_ID)
        if not isinstance(container, Tag):
            logger.debug("No #%s on page, skipping products", PRODUCTS_MOUNT_ID)
        else:
            _replace_children(container, self.render_products_html(current))

        filters = document.find(id=FILTER_MOUNT_ID)
        if not isinstance(filters, Tag):
            logger.debug("No #%s on page, skipping filters", FILTER_MOUNT_ID)
        else:
            _replace_children(
                filters,
                card_renderer.render_filter_controls(
                    [(o.value, o.label, o.count) for o in current.filter_options],
                    self.filter_state.selected_category,
                ),
            )

        # A static page has no search handler: the input gives way to a
        # note on the applied query, or goes away entirely.
        search = document.find(id=SEARCH_MOUNT_ID)
        if not isinstance(search, Tag):
            logger.debug("No #%s on page, skipping search", SEARCH_MOUNT_ID)
        elif current.search_query and current.state is not ViewState.FAILED:
            note = BeautifulSoup(
                card_renderer.render_search_summary(current.search_query),
                "html.parser",
            )
            search.replace_with(*[c.extract() for c in list(note.contents)])
        else:
            search.decompose()

        return document


def _replace_children(element: Tag, fragment: str) -> None:
    """Swap an element's children for a freshly parsed fragment."""
    element.clear()
    parsed = BeautifulSoup(fragment, "html.parser")
    for child in list(parsed.contents):
        element.append(child.extract())
