"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import InventoryStatus
from storefront.infrastructure.bootstrap import (
    Settings,
    build_storefront,
    parse_items_per_page,
)


def _settings(per_page: int | None) -> Settings:
    settings = Settings.from_env()
    if per_page is None:
        return settings
    return Settings(
        catalog_path=settings.catalog_path,
        items_per_page=parse_items_per_page(per_page),
    )


@click.command("list")
@click.option("--search", default="", help="Text to look for in name, description, code or category.")
@click.option("--category", default="", help="Exact category.")
@click.option(
    "--status",
    default=None,
    type=click.Choice([s.value for s in InventoryStatus]),
    help="Inventory status.",
)
@click.option("--min-price", type=float, default=None, help="Lowest price (inclusive).")
@click.option("--max-price", type=float, default=None, help="Highest price (inclusive).")
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True, help="Page number.")
@click.option("--per-page", type=int, default=None, help="Products per page.")
def catalog_list(
    search: str,
    category: str,
    status: str | None,
    min_price: float | None,
    max_price: float | None,
    page: int,
    per_page: int | None,
) -> None:
    """List one page of the filtered catalog."""
    try:
        storefront = build_storefront(_settings(per_page))
        storefront.catalog_filter.apply_filters(
            search_text=search,
            selected_category=category,
            selected_inventory_status=status or "",
            min_price=min_price,
            max_price=max_price,
        )
        storefront.catalog_filter.on_page_change(page - 1)
        dto = storefront.browse_catalog().handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.items:
        click.echo("No products found.")
    else:
        click.echo(f"{'ID':<6} {'Name':<24} {'Category':<16} {'Price':>10} {'Status':<14}")
        click.echo("-" * 74)
        for item in dto.items:
            click.echo(
                f"{item.id:<6} {item.name:<24} {item.category:<16} "
                f"{item.price:>10} {item.inventory_label:<14}"
            )
    click.echo(
        f"Page {dto.page + 1} of {max(dto.total_pages, 1)}  "
        f"({dto.total_records} matching products)"
    )


@click.command("categories")
def catalog_categories() -> None:
    """List the category filter options."""
    try:
        options = build_storefront().view_adapter.category_options()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for option in options:
        click.echo(option.label)


@click.command("statuses")
def catalog_statuses() -> None:
    """List the inventory status filter options."""
    try:
        options = build_storefront().view_adapter.inventory_status_options()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for option in options:
        if option.value:
            click.echo(f"{option.value:<12} {option.label}")
        else:
            click.echo(option.label)
