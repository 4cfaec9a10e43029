"""CLI commands for the shopping cart.

The cart lives only for the duration of one command: ``cart run`` applies
a sequence of actions to a fresh cart and prints the result.
"""

from __future__ import annotations

from dataclasses import dataclass

import click

from storefront.domain.exceptions import DomainException, EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.infrastructure.bootstrap import Storefront, build_storefront

_ACTIONS = {
    "add": (1, 2),  # add:ID[:QTY]
    "inc": (1, 1),
    "dec": (1, 1),
    "update": (2, 2),
    "remove": (1, 1),
    "clear": (0, 0),
}


@dataclass(frozen=True)
class CartAction:
    """One parsed ``name[:id[:qty]]`` token."""

    name: str
    product_id: int | None = None
    quantity: int | None = None


def _parse_actions(raw: tuple[str, ...]) -> list[CartAction]:
    """Parse ('add:1:2', 'dec:1', 'clear') into CartAction list."""
    actions: list[CartAction] = []
    for token in raw:
        name, *args = token.strip().split(":")
        if name not in _ACTIONS:
            raise click.BadParameter(
                f"Unknown action '{name}'. Expected one of: {', '.join(_ACTIONS)}."
            )
        low, high = _ACTIONS[name]
        if not low <= len(args) <= high:
            raise click.BadParameter(f"Invalid action format '{token}'.")
        try:
            numbers = [int(arg) for arg in args]
        except ValueError:
            raise click.BadParameter(f"Invalid number in action '{token}'.")
        actions.append(
            CartAction(
                name=name,
                product_id=numbers[0] if numbers else None,
                quantity=numbers[1] if len(numbers) > 1 else None,
            )
        )
    return actions


def _product(storefront: Storefront, product_id: int) -> Product:
    product = storefront.product_source.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError(f"Product not found: {product_id}")
    return product


def _apply(storefront: Storefront, action: CartAction) -> str:
    """Run one action and describe what happened to the cart."""
    store = storefront.cart_store
    adapter = storefront.view_adapter

    if action.name == "clear":
        store.clear_cart()
        return "Cart cleared"

    if action.name == "update":
        before = store.quantity_of(action.product_id)
        store.update_quantity(action.product_id, action.quantity)
        after = store.quantity_of(action.product_id)
        if before == 0:
            return f"#{action.product_id} not in cart"
        if after == 0:
            return f"#{action.product_id} removed"
        return f"#{action.product_id} quantity {after}"

    product = _product(storefront, action.product_id)
    if action.name == "add":
        change = adapter.add(product, action.quantity if action.quantity is not None else 1)
    elif action.name == "remove":
        change = adapter.remove(product)
    elif action.name == "inc":
        change = adapter.increase_quantity(product)
    else:
        change = adapter.decrease_quantity(product)
    return f"{product.name} {change.value.lower()} (in cart: {adapter.quantity_in_cart(product.id)})"


@click.command("run")
@click.argument("actions", nargs=-1, required=True)
def cart_run(actions: tuple[str, ...]) -> None:
    """Apply cart ACTIONS in order and show the resulting cart.

    Actions: add:ID[:QTY], inc:ID, dec:ID, update:ID:QTY, remove:ID, clear.
    """
    parsed = _parse_actions(actions)

    try:
        storefront = build_storefront()
        for action in parsed:
            click.echo(_apply(storefront, action))
        dto = storefront.show_cart().handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo()
    if not dto.items:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Items':<20} {dto.total_items:>5} {dto.total_price:>21}")
