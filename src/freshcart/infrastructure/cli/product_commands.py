"""CLI commands for the Product aggregate."""

from __future__ import annotations

import mimetypes
from pathlib import Path

import click

from freshcart.application.add_product import AddProductHandler
from freshcart.application.delete_product import DeleteProductHandler
from freshcart.application.list_products import ListProductsHandler, ShowProductHandler
from freshcart.application.update_product import UpdateProductHandler
from freshcart.application.upload_product_image import UploadProductImageHandler
from freshcart.domain.exceptions import DomainException
from freshcart.domain.model.product import StockStatus
from freshcart.infrastructure.bootstrap import App

_STATUSES = [s.value for s in StockStatus]


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 4.99).")
@click.option("--stock", "stock_quantity", default=0, type=int, help="Units in stock.")
@click.option("--category", default=None, help="Category, e.g. Vegetables.")
@click.option("--unit", default=None, help="Selling unit, e.g. kg.")
@click.option("--description", default="", help="Short description.")
@click.option("--organic/--conventional", default=True, help="Certified organic.")
@click.pass_obj
def product_add(
    app: App,
    name: str,
    price: str,
    stock_quantity: int,
    category: str | None,
    unit: str | None,
    description: str,
    organic: bool,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=app.product_repository(),
        cache=app.catalog_cache,
        currency=app.settings.currency,
    )

    try:
        product = handler.handle(
            name=name,
            price=price,
            stock_quantity=stock_quantity,
            description=description,
            category=category,
            unit=unit,
            organic=organic,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--category", default=None, help="Only this category.")
@click.option("--organic-only", is_flag=True, default=False, help="Only organic products.")
@click.option("--status", type=click.Choice(_STATUSES), default=None, help="Stock status.")
@click.option("--search", default=None, help="Text to find in name or description.")
@click.pass_obj
def product_list(
    app: App,
    category: str | None,
    organic_only: bool,
    status: str | None,
    search: str | None,
) -> None:
    """List products in the catalog, newest first."""
    handler = ListProductsHandler(
        product_repo=app.product_repository(),
        cache=app.catalog_cache,
        low_stock_threshold=app.settings.low_stock_threshold,
    )
    products = handler.handle(
        category=category,
        organic_only=organic_only,
        status=StockStatus(status) if status else None,
        search=search,
    )

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7}  {'Status':<12} Category")
    click.echo("-" * 72)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name[:20]:<20} {p.price:>10} {p.stock_quantity:>7}  "
            f"{p.stock_status:<12} {p.category}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(app: App, product_id: str) -> None:
    """Show a single product."""
    handler = ShowProductHandler(
        app.product_repository(), low_stock_threshold=app.settings.low_stock_threshold
    )
    try:
        p = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id}: {p.name}")
    click.echo(f"Price:    {p.price}")
    click.echo(f"Stock:    {p.stock_quantity} ({p.stock_status})")
    click.echo(f"Category: {p.category or '-'}")
    click.echo(f"Organic:  {'yes' if p.organic else 'no'}")
    if p.image_url:
        click.echo(f"Image:    {p.image_url}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 5.49).")
@click.option("--stock", "stock_quantity", default=None, type=int, help="New stock level.")
@click.option("--category", default=None, help="New category.")
@click.option("--description", default=None, help="New description.")
@click.pass_obj
def product_update(
    app: App,
    product_id: str,
    price: str | None,
    stock_quantity: int | None,
    category: str | None,
    description: str | None,
) -> None:
    """Update a product's price, stock or details."""
    handler = UpdateProductHandler(product_repo=app.product_repository(), cache=app.catalog_cache)

    try:
        product = handler.handle(
            product_id=product_id,
            price=price,
            stock_quantity=stock_quantity,
            description=description,
            category=category,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated ({product.price}, {product.stock_quantity} in stock)")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(app: App, product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=app.product_repository(), cache=app.catalog_cache)
    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")


@click.command("upload-image")
@click.option("--id", "product_id", default=None, help="Attach the image to this product.")
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def product_upload_image(app: App, product_id: str | None, image: Path) -> None:
    """Upload a product image and print its public URL."""
    content_type = mimetypes.guess_type(image.name)[0] or "application/octet-stream"
    handler = UploadProductImageHandler(
        storage=app.file_storage(),
        product_repo=app.product_repository(),
        max_bytes=app.settings.max_upload_bytes,
        cache=app.catalog_cache,
    )

    try:
        url = handler.handle(image.name, image.read_bytes(), content_type, product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(url)
