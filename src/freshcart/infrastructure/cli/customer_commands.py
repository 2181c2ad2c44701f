"""CLI commands for the Customer aggregate."""

from __future__ import annotations

import click

from freshcart.application.add_customer import AddCustomerHandler
from freshcart.application.manage_customers import (
    DeleteCustomerHandler,
    ListCustomersHandler,
    ShowCustomerHandler,
    UpdateCustomerHandler,
)
from freshcart.domain.exceptions import DomainException
from freshcart.infrastructure.bootstrap import App


@click.command("add")
@click.option("--email", required=True, help="Email address.")
@click.option("--name", "full_name", default=None, help="Full name.")
@click.option("--phone", default=None, help="Phone number.")
@click.option("--address", default=None, help="Delivery address.")
@click.pass_obj
def customer_add(
    app: App, email: str, full_name: str | None, phone: str | None, address: str | None
) -> None:
    """Register a customer."""
    handler = AddCustomerHandler(customer_repo=app.customer_repository())

    try:
        customer = handler.handle(email=email, full_name=full_name, phone=phone, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer.id} ({customer.display_name}) added")


@click.command("list")
@click.option("--search", default=None, help="Match name, email or phone.")
@click.pass_obj
def customer_list(app: App, search: str | None) -> None:
    """List customers, newest first."""
    customers = ListCustomersHandler(app.customer_repository()).handle(search=search)

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'Name':<22} {'Email':<28} {'Phone':<14} ID")
    click.echo("-" * 100)
    for c in customers:
        click.echo(f"{c.full_name[:22]:<22} {c.email[:28]:<28} {c.phone:<14} {c.id}")


@click.command("show")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.pass_obj
def customer_show(app: App, customer_id: str) -> None:
    """Show one customer."""
    try:
        c = ShowCustomerHandler(app.customer_repository()).handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {c.id}")
    click.echo(f"Name:    {c.full_name or '-'}")
    click.echo(f"Email:   {c.email}")
    click.echo(f"Phone:   {c.phone or '-'}")
    click.echo(f"Address: {c.address or '-'}")
    click.echo(f"Since:   {c.created_at}")


@click.command("update")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--email", default=None, help="New email address.")
@click.option("--name", "full_name", default=None, help="New full name.")
@click.option("--phone", default=None, help="New phone number.")
@click.option("--address", default=None, help="New address.")
@click.pass_obj
def customer_update(
    app: App,
    customer_id: str,
    email: str | None,
    full_name: str | None,
    phone: str | None,
    address: str | None,
) -> None:
    """Update a customer's contact details."""
    handler = UpdateCustomerHandler(app.customer_repository())
    try:
        handler.handle(
            customer_id, email=email, full_name=full_name, phone=phone, address=address
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer_id} updated.")


@click.command("delete")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.pass_obj
def customer_delete(app: App, customer_id: str) -> None:
    """Delete a customer."""
    try:
        DeleteCustomerHandler(app.customer_repository()).handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer_id} deleted.")
