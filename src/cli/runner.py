# src/cli/runner.py

"""Headless catalog runners for scripting and quick checks."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from src.models.filter_criteria import FilterCriteria
from src.models.product import PricedProduct
from src.services.catalog_service import CatalogService
from src.services.gold_price import GoldPriceRefresher

logger = logging.getLogger("ring_catalog.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def star_bar(rating: float) -> str:
    """Render a 0–5 rating as full, half and empty stars."""
    full = int(rating)
    half = 1 if rating - full >= 0.5 else 0
    return "★" * full + "½" * half + "☆" * (5 - full - half)


def _print_table(products: list[PricedProduct], gold_price: float) -> None:
    """Render a Rich table of priced products to stdout."""
    table = Table(
        title=f"Engagement Rings (gold ${gold_price:,.2f}/gram)",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", max_width=40)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Rating", justify="center")
    table.add_column("Weight", justify="right")

    for idx, p in enumerate(products, 1):
        table.add_row(
            str(idx),
            p.name,
            f"${p.price:,.2f}",
            f"{star_bar(p.star_rating)} ({p.star_rating:.1f})",
            f"{p.weight:g}g",
        )

    Console().print(table)


def _prime_gold_price(service: CatalogService) -> None:
    """One-shot runs take a single startup refresh of the gold price."""
    GoldPriceRefresher(service.price_holder).refresh()


def cli_list(
    criteria: FilterCriteria,
    output_format: str = "json",
    service: CatalogService | None = None,
) -> int:
    """List the priced catalog and return an exit code."""
    service = service or CatalogService()
    _prime_gold_price(service)

    if not criteria.is_empty:
        bounds = ", ".join(
            f"{k}={v:g}" for k, v in criteria.to_params().items()
        )
        _err.print(f"[dim]Filters: {bounds}[/dim]")

    result = service.list_products(criteria)

    if not result.products:
        _err.print("[yellow]No products match the filters.[/yellow]")
    else:
        _err.print(
            f"[green]✓ {result.total_products} products"
            f" at ${result.gold_price:,.2f}/gram[/green]"
        )

    if output_format == "table":
        _print_table(result.products, result.gold_price)
    else:
        json.dump(result.to_payload(), sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")

    return 0


def run_gold_price(service: CatalogService | None = None) -> int:
    """Print the current gold price quote as JSON."""
    service = service or CatalogService()
    _prime_gold_price(service)
    json.dump(
        service.gold_price_quote().to_payload(),
        sys.stdout,
        ensure_ascii=False,
        indent=2,
    )
    sys.stdout.write("\n")
    return 0
