# src/ui/app.py

"""Terminal UI for browsing the product catalog."""

import logging
import webbrowser
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Static,
)

from src.models.product import ProductRecord
from src.render.card_renderer import contact_link
from src.services.catalog_controller import (
    CatalogController,
    CatalogView,
    ViewState,
)

logger = logging.getLogger("catalog.ui")


class CatalogApp(App[object]):
    """Terminal UI for browsing the product catalog."""

    CSS_PATH = "styles.css"
    TITLE = "Produktkatalog"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("d", "dismiss_advisory", "Hinweis schließen"),
    ]

    def __init__(self, controller: CatalogController | None = None) -> None:
        super().__init__()
        self.controller = controller or CatalogController()
        self.visible_products: list[ProductRecord] = []
        self._filter_values: dict[str, str | None] = {}

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        yield Header()
        yield Container(
            Static("🛋  Produktkatalog", id="title"),
            Input(placeholder="Produkte suchen...", id="search_input"),
            Horizontal(id="category_filter"),
            Horizontal(
                Static("", id="advisory_text"),
                Button("×", id="dismiss_advisory"),
                id="advisory_bar",
            ),
            Static("", id="status"),
            cast(
                DataTable[str | Text],
                DataTable(
                    id="results_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Show the loading state, then resolve the catalog in a worker."""
        table = self._table()
        table.add_columns("Kategorie", "Produkt", "Preis", "Hinweis", "")
        self.query_one("#advisory_bar").display = False
        self.apply_view(self.controller.view())
        self.run_worker(self.load_catalog(), exclusive=True)

    async def load_catalog(self) -> None:
        """Fetch once; all later interaction works on the loaded data."""
        try:
            view = await self.controller.load()
        except Exception:
            logger.critical("Catalog load crashed", exc_info=True)
            raise
        await self._build_filter_buttons(view)
        self.apply_view(view)

    async def _build_filter_buttons(self, view: CatalogView) -> None:
        bar = self.query_one("#category_filter", Horizontal)
        await bar.remove_children()
        self._filter_values = {}
        buttons: list[Button] = []
        for index, option in enumerate(view.filter_options):
            button_id = f"filter_{index}"
            self._filter_values[button_id] = option.value
            label = (
                option.label
                if option.value is None
                else f"{option.label} ({option.count})"
            )
            buttons.append(
                Button(
                    label,
                    id=button_id,
                    variant="primary" if option.active else "default",
                )
            )
        if buttons:
            await bar.mount(*buttons)

    def _table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#results_table", DataTable),
        )

    def apply_view(self, view: CatalogView) -> None:
        """Replace status, advisory, filter highlight and rows in full."""
        status = self.query_one("#status", Static)
        if view.state is ViewState.LOADING:
            status.update(f"⏳ {view.message}")
        elif view.state is ViewState.FAILED:
            status.update(Text(f"⚠️ {view.message}", style="bold red"))
        elif view.state is ViewState.EMPTY:
            status.update(f"❌ {view.message}")
        else:
            status.update(f"✅ {view.visible_count} Produkte")

        advisory_bar = self.query_one("#advisory_bar")
        advisory_bar.display = bool(view.advisory)
        if view.advisory:
            self.query_one("#advisory_text", Static).update(view.advisory)

        active = {o.value for o in view.filter_options if o.active}
        for button_id, value in self._filter_values.items():
            button = self.query_one(f"#{button_id}", Button)
            button.variant = "primary" if value in active else "default"

        self.populate_table(view)

    def populate_table(self, view: CatalogView) -> None:
        """Fill the results table in organised category order."""
        table = self._table()
        table.clear()
        self.visible_products = []
        for bucket in view.buckets:
            for product in bucket.products:
                self.visible_products.append(product)
                table.add_row(
                    bucket.name,
                    Text(
                        product.title[:60],
                        style="bold" if product.topseller else "",
                    ),
                    product.price,
                    product.summary[:60],
                    "⭐ Topseller" if product.topseller else "",
                )

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle filter and advisory buttons."""
        button_id = event.button.id or ""
        if button_id == "dismiss_advisory":
            self.action_dismiss_advisory()
        elif button_id in self._filter_values:
            self.apply_view(
                self.controller.select_category(
                    self._filter_values[button_id]
                )
            )

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-filter on every keystroke in the search box."""
        if event.input.id == "search_input":
            self.apply_view(self.controller.set_search(event.value))

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Open the messaging enquiry for the selected product."""
        if 0 <= event.cursor_row < len(self.visible_products):
            webbrowser.open(
                contact_link(self.visible_products[event.cursor_row])
            )

    def action_dismiss_advisory(self) -> None:
        """Hide the fallback advisory."""
        self.apply_view(self.controller.dismiss_advisory())
