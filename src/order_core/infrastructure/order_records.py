"""Persisted record layout for orders.

Currency amounts are stored as fixed-point decimal strings ("20.00"), never
floats, so the exact paid-amount comparison survives a storage round trip.
Timestamps are ISO-8601 strings in UTC.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from order_core.domain.entities import Order, OrderLineItem, PaymentResult, ShippingAddress
from order_core.domain.value_objects import Money, OrderId


def _timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value is not None else None


def order_to_record(order: Order) -> dict[str, Any]:
    payment_result = None
    if order.payment_result is not None:
        payment_result = {
            "id": order.payment_result.id,
            "status": order.payment_result.status,
            "update_time": order.payment_result.update_time,
            "email_address": order.payment_result.email_address,
        }

    return {
        "_id": str(order.id),
        "user": order.owner_id,
        "orderItems": [
            {
                "product": item.product_id,
                "name": item.name,
                "image": item.image,
                "price": str(item.price),
                "qty": item.qty,
            }
            for item in order.items
        ],
        "shippingAddress": {
            "address": order.shipping_address.address,
            "city": order.shipping_address.city,
            "postalCode": order.shipping_address.postal_code,
            "country": order.shipping_address.country,
        },
        "paymentMethod": order.payment_method,
        "paymentResult": payment_result,
        "itemsPrice": str(order.items_price),
        "taxPrice": str(order.tax_price),
        "shippingPrice": str(order.shipping_price),
        "totalPrice": str(order.total_price),
        "isPaid": order.is_paid,
        "paidAt": _timestamp(order.paid_at),
        "isDelivered": order.is_delivered,
        "deliveredAt": _timestamp(order.delivered_at),
        "createdAt": _timestamp(order.created_at),
    }


def order_from_record(record: dict[str, Any]) -> Order:
    payment_result = None
    if record.get("paymentResult") is not None:
        raw = record["paymentResult"]
        payment_result = PaymentResult(
            id=raw["id"],
            status=raw["status"],
            update_time=raw["update_time"],
            email_address=raw.get("email_address"),
        )

    address = record["shippingAddress"]
    return Order(
        id=OrderId.from_string(record["_id"]),
        owner_id=record["user"],
        items=tuple(
            OrderLineItem(
                product_id=item["product"],
                name=item["name"],
                image=item["image"],
                price=Money.of(item["price"]),
                qty=item["qty"],
            )
            for item in record["orderItems"]
        ),
        shipping_address=ShippingAddress(
            address=address["address"],
            city=address["city"],
            postal_code=address["postalCode"],
            country=address["country"],
        ),
        payment_method=record["paymentMethod"],
        items_price=Money.of(record["itemsPrice"]),
        tax_price=Money.of(record["taxPrice"]),
        shipping_price=Money.of(record["shippingPrice"]),
        total_price=Money.of(record["totalPrice"]),
        created_at=_parse_timestamp(record["createdAt"]),
        is_paid=record["isPaid"],
        paid_at=_parse_timestamp(record.get("paidAt")),
        payment_result=payment_result,
        is_delivered=record["isDelivered"],
        delivered_at=_parse_timestamp(record.get("deliveredAt")),
    )
