"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from freshcart.domain.model.customer import Customer
from freshcart.domain.model.order import Order
from freshcart.domain.model.product import Product

DATE_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str  # formatted, e.g. "$4.99"
    stock_quantity: int
    stock_status: str
    category: str
    organic: bool
    image_url: str

    @staticmethod
    def from_product(product: Product, low_stock_threshold: int) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            stock_quantity=product.stock_quantity,
            stock_status=product.stock_status(low_stock_threshold).value,
            category=product.category or "",
            organic=product.organic,
            image_url=product.image_url or "",
        )


@dataclass(frozen=True)
class CustomerDTO:
    id: str
    full_name: str
    email: str
    phone: str
    address: str
    created_at: str

    @staticmethod
    def from_customer(customer: Customer) -> CustomerDTO:
        return CustomerDTO(
            id=customer.id,
            full_name=customer.full_name or "",
            email=customer.email,
            phone=customer.phone or "",
            address=customer.address or "",
            created_at=customer.created_at.strftime(DATE_FORMAT),
        )


@dataclass(frozen=True)
class OrderItemDTO:
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    order_number: str
    customer_id: str
    phone: str
    status: str
    items: list[OrderItemDTO]
    total: str
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            order_number=order.order_number,
            customer_id=order.customer_id or "",
            phone=order.phone or "",
            status=order.status.value,
            items=[
                OrderItemDTO(
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    unit_price=str(item.price_at_time),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total=str(order.total_amount),
            created_at=order.created_at.strftime(DATE_FORMAT),
        )
