from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import HTTPException, status

from eclat.crud.base import transition_guard
from eclat.schemas import ORDER_TRANSITIONS, OrderStatus, OrderType
from eclat.schemas.order_schema import Customer, Order, OrderCreate, OrderLine, OrderTotals
from eclat.utils.helper import generate_order_number, new_id, utcnow
from eclat.utils.pricing import checkout_totals, line_subtotal

logger = logging.getLogger(__name__)


def _require_customer(payload: OrderCreate) -> None:
    c = payload.customer
    if not c or not c.first_name or not c.last_name or not c.email or not c.phone:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required customer information")


def _build_lines(stores, payload: OrderCreate) -> List[OrderLine]:
    lines = []
    for item in payload.items:
        category = item.category
        name = item.name
        if item.id is not None and (category is None or not name):
            # fill gaps from the catalog; admin stats need the category
            menu_item = stores.menu.get(item.id)
            if menu_item is not None:
                category = category or menu_item.category.value
                name = name or menu_item.name
        lines.append(
            OrderLine(
                id=item.id,
                name=name or "",
                price=item.price,
                quantity=item.quantity,
                subtotal=float(line_subtotal(item.price, item.quantity)),
                category=category,
            )
        )
    return lines


def list_orders(stores, status: Optional[str] = None, order_type: Optional[str] = None) -> List[Order]:
    return stores.orders.list({"status": status, "order_type": order_type})


def get_order(stores, order_id: str) -> Order:
    return stores.orders.get_or_404(order_id)


def create_order(stores, payload: OrderCreate, *, tax_rate: float, delivery_fee: float) -> Order:
    _require_customer(payload)
    if not payload.items:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Order must contain at least one item")

    lines = _build_lines(stores, payload)
    order_type = payload.order_type or OrderType.DELIVERY.value
    if payload.totals is not None:
        # totals are taken as submitted and never recomputed
        totals = payload.totals
    else:
        fee = delivery_fee if order_type == OrderType.DELIVERY.value else 0
        totals = OrderTotals.model_validate(
            checkout_totals([(line.price, line.quantity) for line in lines], tax_rate=tax_rate, delivery_fee=fee)
        )

    now = utcnow()
    c = payload.customer
    order = Order(
        id=new_id(),
        order_number=generate_order_number(now),
        customer=Customer(
            first_name=c.first_name,
            last_name=c.last_name,
            email=c.email,
            phone=c.phone,
            address=c.address or None,
            instructions=payload.special_instructions or "",
        ),
        items=lines,
        totals=totals,
        order_type=order_type,
        payment_method=payload.payment_method or "card",
        preferred_time=payload.preferred_time or "asap",
        status=OrderStatus.PENDING,
        created_at=now,
        updated_at=now,
    )
    stores.orders.add(order)
    logger.info("New order received: %s", order.order_number)
    return order


def parse_status(value: Optional[str]) -> OrderStatus:
    try:
        return OrderStatus(value)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status")


def update_order_status(stores, order_id: str, new_status: Optional[str], *, enforce_transitions: bool = False) -> Order:
    order_status = parse_status(new_status)
    guard = transition_guard(ORDER_TRANSITIONS, order_status, enforce_transitions)
    order = stores.orders.update(order_id, {"status": order_status, "updated_at": utcnow()}, guard=guard)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    logger.info("Order %s status -> %s", order.order_number, order_status.value)
    return order


def delete_order(stores, order_id: str) -> Order:
    order = stores.orders.remove(order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    logger.info("Order deleted: %s", order.order_number)
    return order


def orders_for_email(stores, email: str) -> List[Order]:
    """Case-insensitive match on customer email, insertion order."""
    needle = email.strip().lower()
    return [o for o in stores.orders.list() if (o.customer.email or "").lower() == needle]
