# src/cli/runner.py

"""Headless catalog commands: build the page, list products, health check."""

import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from src.render.card_renderer import contact_link, filter_page_name
from src.services.catalog_controller import (
    CatalogController,
    CatalogView,
    ViewState,
)
from src.storage.file_manager import FileManager

logger = logging.getLogger("catalog.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


async def _load_filtered(
    controller: CatalogController,
    category: str | None,
    search: str | None,
) -> CatalogView:
    """Load the catalog, then apply the requested filter state."""
    _err.print("[dim]Loading catalog...[/dim]")
    view = await controller.load()
    if view.advisory:
        _err.print(f"[yellow]{view.advisory}[/yellow]")
    if view.state is ViewState.FAILED:
        return view
    if category:
        known = {o.value for o in view.filter_options if o.value is not None}
        if category not in known:
            _err.print(
                f"[yellow]Unknown category '{category}'. "
                f"Available: {', '.join(sorted(known))}[/yellow]"
            )
        view = controller.select_category(category)
    if search:
        view = controller.set_search(search)
    return view


async def build_page(
    search: str | None,
    output_dir: str | None,
    controller: CatalogController | None = None,
) -> int:
    """Render one page per filter option and write them out.

    The landing page shows every category; each category gets a sibling
    page that the filter links point to.  ``search`` narrows all pages
    alike.  When loading failed only the landing page is written (it
    then carries the blocking error); the exit code reports the failure.
    """
    controller = controller or CatalogController()
    file_manager = FileManager(
        output_dir=Path(output_dir) if output_dir else None
    )
    view = await _load_filtered(controller, None, search)

    if view.state is ViewState.FAILED:
        document = controller.materialize(file_manager.load_template(), view)
        path = file_manager.write_page(document, filter_page_name(None))
        _err.print(f"[dim]Saved page → {path}[/dim]")
        _err.print(f"[red]{view.message}[/red]")
        return 1

    for option in view.filter_options:
        page_view = controller.select_category(option.value)
        document = controller.materialize(
            file_manager.load_template(), page_view
        )
        path = file_manager.write_page(
            document, filter_page_name(option.value)
        )
        _err.print(f"[dim]Saved page → {path}[/dim]")
    controller.select_category(None)

    snapshot = file_manager.write_products_json(controller.products)
    _err.print(f"[dim]Saved products → {snapshot}[/dim]")
    _err.print(
        f"[green]✓ {view.visible_count} of {len(controller.products)} "
        f"products on {len(view.filter_options)} pages[/green]"
    )
    return 0


def _print_table(view: CatalogView) -> None:
    """Render a Rich table of the grouped catalog to stdout."""
    table = Table(
        title="Produktkatalog",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Kategorie", style="magenta")
    table.add_column("Produkt", max_width=50)
    table.add_column("Preis", justify="right", style="green")
    table.add_column("Hinweis", max_width=40, style="dim")
    table.add_column("Topseller", justify="center")

    for bucket in view.buckets:
        for p in bucket.products:
            table.add_row(
                bucket.name,
                p.title,
                p.price or "—",
                p.summary or "—",
                "⭐" if p.topseller else "",
            )

    Console().print(table)


def _view_to_dicts(view: CatalogView) -> list[dict[str, object]]:
    """Serialise the grouped view to plain dicts for JSON output."""
    return [
        {
            "category": bucket.name,
            "products": [
                {**p.to_dict(), "contact": contact_link(p)}
                for p in bucket.products
            ],
        }
        for bucket in view.buckets
    ]


async def list_catalog(
    category: str | None,
    search: str | None,
    output_format: str,
    controller: CatalogController | None = None,
) -> int:
    """Print the visible catalog; exit 1 when nothing could be shown."""
    controller = controller or CatalogController()
    view = await _load_filtered(controller, category, search)

    if view.state is ViewState.FAILED:
        _err.print(f"[red]{view.message}[/red]")
        return 1
    if view.state is ViewState.EMPTY:
        _err.print(f"[yellow]{view.message}[/yellow]")
        return 1

    if output_format == "table":
        _print_table(view)
    else:
        json.dump(
            _view_to_dicts(view),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")
    return 0


async def run_health_check() -> int:
    """Run connectivity health check on all configured sources."""
    from src.services.health_checker import HealthChecker

    _err.print("[bold]Running catalog source health check...[/bold]")
    checker = HealthChecker()
    results = await checker.check_all()

    table = Table(
        title="Catalog Source Health",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Source", style="bold")
    table.add_column("Location", overflow="fold", style="dim")
    table.add_column("Status", justify="center")
    table.add_column("Latency", justify="right")
    table.add_column("Notes", style="dim")

    any_down = False
    for r in results:
        if r.status == "ok":
            status = "[green]✅ OK[/green]"
        elif r.status == "slow":
            status = "[yellow]⚠️  SLOW[/yellow]"
        else:
            status = "[red]❌ DOWN[/red]"
            any_down = True

        table.add_row(
            r.source_id,
            r.location,
            status,
            f"{r.latency_ms:.0f}ms",
            r.message,
        )

    Console().print(table)
    return 1 if any_down else 0
