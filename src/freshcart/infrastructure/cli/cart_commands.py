"""CLI commands for the shopping cart."""

from __future__ import annotations

import asyncio

import click

from freshcart.application.add_to_cart import AddToCartHandler
from freshcart.application.checkout import CheckoutHandler
from freshcart.application.receipt import render_receipt
from freshcart.domain.result import Failure, Result
from freshcart.infrastructure.bootstrap import App


def _unwrap(result: Result) -> object:
    """Turn a Failure into a ClickException, otherwise return the value."""
    if isinstance(result, Failure):
        raise click.ClickException(result.message)
    return result.value


def _display_cart(app: App) -> None:
    store = app.cart_store()
    lines = store.lines
    if not lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*55}")
    for line in lines:
        click.echo(
            f"  {line.id:<6} {line.name[:20]:<20} {line.quantity:>5} "
            f"{str(line.unit_price):>10} {str(line.line_total):>10}"
        )
    click.echo(f"  {'-'*55}")
    totals = store.totals
    click.echo(f"  {'Items':<27} {totals.total_item_count:>28}")
    click.echo(f"  {'Subtotal':<27} {str(totals.subtotal):>28}")


@click.command("add")
@click.option("--product", "product_ref", required=True, help="Product ID or name.")
@click.pass_obj
def cart_add(app: App, product_ref: str) -> None:
    """Add one unit of a product to the cart."""
    handler = AddToCartHandler(
        store=app.cart_store(),
        product_repo=app.product_repository(),
        low_stock_threshold=app.settings.low_stock_threshold,
    )
    _unwrap(handler.handle(product_ref))


@click.command("remove")
@click.option("--id", "line_id", required=True, help="Cart line ID.")
@click.pass_obj
def cart_remove(app: App, line_id: str) -> None:
    """Remove a line from the cart."""
    _unwrap(app.cart_store().remove_line(line_id))


@click.command("set")
@click.option("--id", "line_id", required=True, help="Cart line ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes the line).")
@click.pass_obj
def cart_set(app: App, line_id: str, quantity: int) -> None:
    """Set the quantity of a cart line."""
    _unwrap(app.cart_store().set_quantity(line_id, quantity))
    _display_cart(app)


@click.command("clear")
@click.pass_obj
def cart_clear(app: App) -> None:
    """Empty the cart."""
    _unwrap(app.cart_store().clear_cart())


@click.command("show")
@click.pass_obj
def cart_show(app: App) -> None:
    """Show the cart contents and totals."""
    _display_cart(app)


@click.command("checkout")
@click.option("--phone", default=None, help="Customer phone for the receipt.")
@click.option("--customer", "customer_id", default=None, help="Customer ID.")
@click.option("--address", default="", help="Delivery address.")
@click.pass_obj
def cart_checkout(app: App, phone: str | None, customer_id: str | None, address: str) -> None:
    """Place the order and print the receipt."""
    if customer_id is not None and app.customer_repository().get_by_id(customer_id) is None:
        raise click.ClickException(f"Customer '{customer_id}' not found")

    handler = CheckoutHandler(
        store=app.cart_store(),
        gateway=app.checkout_gateway(),
        order_repo=app.order_repository(),
        store_name=app.settings.store_name,
    )
    result = asyncio.run(
        handler.handle(phone=phone, customer_id=customer_id, delivery_address=address)
    )
    receipt = _unwrap(result)
    click.echo()
    click.echo(render_receipt(receipt))
