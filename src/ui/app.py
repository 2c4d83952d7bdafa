# src/ui/app.py

"""Terminal catalog browser for the ring_catalog service."""

import logging
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

from src.cli.runner import star_bar
from src.config.settings import Settings
from src.filters.criteria_parser import PARAM_NAMES, parse_filter_params
from src.models.product import PricedProduct
from src.services.catalog_service import CatalogService
from src.services.gold_price import GoldPriceRefresher

logger = logging.getLogger("ring_catalog.ui")

_PLACEHOLDERS: dict[str, str] = {
    "minPrice": "Min price $",
    "maxPrice": "Max price $",
    "minPopularity": "Min popularity 0-1",
    "maxPopularity": "Max popularity 0-1",
}


class CatalogBrowserApp(App[object]):
    """Browse and filter the gold-priced ring catalog."""

    CSS_PATH = "styles.css"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("c", "clear_filters", "Clear"),
        Binding("p", "sort_price", "Price Sort"),
        Binding("r", "sort_rating", "Rating Sort"),
        Binding("g", "refresh_gold", "Refresh Gold"),
    ]

    def __init__(self, service: CatalogService | None = None) -> None:
        super().__init__()
        self.service = service or CatalogService()
        self.refresher = GoldPriceRefresher(self.service.price_holder)
        self.products: list[PricedProduct] = []
        self.gold_price: float = self.service.price_holder.snapshot()
        self.selected: PricedProduct | None = None

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        yield Header()
        yield Container(
            Static("💍 Luxury Engagement Rings", id="title"),
            Horizontal(
                *[
                    Input(placeholder=_PLACEHOLDERS[key], id=f"filter_{key}")
                    for key in PARAM_NAMES
                ],
                Button("Apply", variant="primary", id="apply_btn"),
                Button("Clear", id="clear_btn"),
                id="filter_bar",
            ),
            Static("Loading...", id="status"),
            Horizontal(
                cast(
                    DataTable[str | Text],
                    DataTable(
                        id="results_table",
                        zebra_stripes=True,
                        cursor_type="row",
                    ),
                ),
                Static("", id="detail"),
                id="body",
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Set up columns, take the startup price and schedule refreshes."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#results_table", DataTable),
        )
        table.add_columns("Name", "Price", "Rating", "Weight")
        self.refresher.refresh()
        self.set_interval(
            Settings.GOLD_PRICE_REFRESH_INTERVAL, self._scheduled_refresh
        )
        self.load_catalog()

    def _scheduled_refresh(self) -> None:
        self.refresher.refresh()
        self.load_catalog()

    def _filter_values(self) -> dict[str, str]:
        return {
            key: self.query_one(f"#filter_{key}", Input).value
            for key in PARAM_NAMES
        }

    def load_catalog(self) -> None:
        """Fetch priced products for the current filter inputs."""
        status = self.query_one("#status", Static)
        criteria = parse_filter_params(self._filter_values())
        try:
            result = self.service.list_products(criteria)
        except Exception as e:
            logger.error("Failed to load catalog", exc_info=True)
            status.update(f"❌ Unable to load catalog: {e}")
            self.notify(f"Error: {e}", severity="error")
            return

        self.products = result.products
        self.gold_price = result.gold_price
        self.populate_table()

        if not self.products:
            status.update(
                f"No products found (gold ${self.gold_price:,.2f}/gram)"
                " — press c to clear filters"
            )
        else:
            status.update(
                f"✅ {result.total_products} products"
                f" · gold ${self.gold_price:,.2f}/gram"
            )

    def populate_table(self) -> None:
        """Fill the DataTable with the current products."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#results_table", DataTable),
        )
        table.clear()
        self.selected = None
        self.query_one("#detail", Static).update("")
        if not self.products:
            return

        min_price = min(p.price for p in self.products)
        for p in self.products:
            price_style = "bold green" if p.price == min_price else ""
            table.add_row(
                p.name,
                Text(f"${p.price:,.2f}", style=price_style),
                f"{p.star_rating:.1f}",
                f"{p.weight:g}g",
            )

    def show_detail(self, index: int) -> None:
        """Render the selected product in the detail panel."""
        if not 0 <= index < len(self.products):
            return
        p = self.selected = self.products[index]
        lines = [
            f"[b]{p.name}[/b]",
            f"${p.price:,.2f}",
            f"{star_bar(p.star_rating)} ({p.star_rating:.1f}) · {p.weight:g}g",
            "",
        ]
        lines.extend(
            f"{variant.title()} gold: {p.images[variant]}"
            for variant in Settings.IMAGE_VARIANTS
            if variant in p.images
        )
        self.query_one("#detail", Static).update("\n".join(lines))

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button click events."""
        if event.button.id == "apply_btn":
            self.load_catalog()
        elif event.button.id == "clear_btn":
            self.action_clear_filters()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in any filter input applies the filters."""
        self.load_catalog()

    def on_data_table_row_highlighted(
        self, event: DataTable.RowHighlighted
    ) -> None:
        self.show_detail(event.cursor_row)

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        self.show_detail(event.cursor_row)

    def action_clear_filters(self) -> None:
        """Reset all bounds and reload."""
        for key in PARAM_NAMES:
            self.query_one(f"#filter_{key}", Input).value = ""
        self.load_catalog()

    def action_sort_price(self) -> None:
        """Sort products by price, ascending."""
        self.products.sort(key=lambda p: p.price)
        self.populate_table()

    def action_sort_rating(self) -> None:
        """Sort products by star rating, descending."""
        self.products.sort(key=lambda p: p.star_rating, reverse=True)
        self.populate_table()

    def action_refresh_gold(self) -> None:
        """Pull a new gold price now and reprice the catalog."""
        if not self.refresher.refresh():
            self.notify("Gold price refresh failed", severity="warning")
        self.load_catalog()
