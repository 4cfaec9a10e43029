import logging

import click

from storefront.infrastructure.cli.cart_commands import cart_run
from storefront.infrastructure.cli.catalog_commands import (
    catalog_categories,
    catalog_list,
    catalog_statuses,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log every cart and filter change.")
def cli(verbose: bool) -> None:
    """Storefront: catalog browsing and cart"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


@cli.group()
def cart() -> None:
    """Work with a shopping cart."""


# Register subcommands
catalog.add_command(catalog_list)
catalog.add_command(catalog_categories)
catalog.add_command(catalog_statuses)
cart.add_command(cart_run)
