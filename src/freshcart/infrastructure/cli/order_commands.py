"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from freshcart.application.dto import OrderDTO
from freshcart.application.manage_orders import (
    ListOrdersHandler,
    ShowOrderHandler,
    UpdateOrderStatusHandler,
)
from freshcart.domain.exceptions import DomainException
from freshcart.domain.model.order import OrderStatus
from freshcart.infrastructure.bootstrap import App

_STATUSES = [s.value for s in OrderStatus]


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    if dto.order_number:
        click.echo(f"Receipt:  #{dto.order_number}")
    if dto.customer_id:
        click.echo(f"Customer: {dto.customer_id}")
    if dto.phone:
        click.echo(f"Phone:    {dto.phone}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name[:20]:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("list")
@click.option("--customer", "customer_id", default=None, help="Only this customer's orders.")
@click.option("--status", type=click.Choice(_STATUSES), default=None, help="Only this status.")
@click.pass_obj
def order_list(app: App, customer_id: str | None, status: str | None) -> None:
    """List orders, newest first."""
    orders = ListOrdersHandler(app.order_repository()).handle(
        customer_id=customer_id,
        status=OrderStatus(status) if status else None,
    )

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Receipt':<9} {'Status':<11} {'Total':>10}  Created")
    click.echo("-" * 60)
    for o in orders:
        click.echo(f"{o.id:<6} {o.order_number:<9} {o.status:<11} {o.total:>10}  {o.created_at}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(app: App, order_id: int) -> None:
    """Show details of an existing order."""
    try:
        dto = ShowOrderHandler(app.order_repository()).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.argument("status", type=click.Choice(_STATUSES))
@click.pass_obj
def order_status(app: App, order_id: int, status: str) -> None:
    """Move an order to a new status."""
    try:
        dto = UpdateOrderStatusHandler(app.order_repository()).handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")
