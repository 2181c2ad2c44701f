import logging

import click

from freshcart.infrastructure.bootstrap import App
from freshcart.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
)
from freshcart.infrastructure.cli.customer_commands import (
    customer_add,
    customer_delete,
    customer_list,
    customer_show,
    customer_update,
)
from freshcart.infrastructure.cli.notifier import ClickNotifier
from freshcart.infrastructure.cli.order_commands import order_list, order_show, order_status
from freshcart.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
    product_upload_image,
)
from freshcart.infrastructure.config import load_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """FreshCart — organic produce shop"""
    try:
        settings = load_settings()
    except ValueError as exc:
        raise click.ClickException(str(exc))
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    ctx.obj = App(settings, notifier=ClickNotifier())


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_checkout)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
product.add_command(product_upload_image)
customer.add_command(customer_add)
customer.add_command(customer_delete)
customer.add_command(customer_list)
customer.add_command(customer_show)
customer.add_command(customer_update)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
