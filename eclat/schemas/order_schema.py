from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from . import CamelModel, OrderStatus


class Customer(CamelModel):
    first_name: str
    last_name: str
    email: str
    phone: str
    address: Optional[str] = None
    instructions: str = ""


class OrderLine(CamelModel):
    id: Optional[int] = None
    name: str = ""
    price: float
    quantity: int
    subtotal: float
    category: Optional[str] = None


class OrderTotals(CamelModel):
    subtotal: float = 0.0
    tax: float = 0.0
    delivery_fee: float = 0.0
    total: float = 0.0


class Order(CamelModel):
    id: str
    order_number: str
    customer: Customer
    items: List[OrderLine]
    totals: OrderTotals
    order_type: str = "delivery"
    payment_method: str = "card"
    preferred_time: str = "asap"
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime
    updated_at: datetime


# Checkout payload. Everything is optional so that missing fields surface as
# the readable 400 messages raised by the crud layer.
class CustomerIn(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class OrderLineIn(CamelModel):
    id: Optional[int] = None
    name: Optional[str] = None
    price: float = Field(0.0, ge=0)
    quantity: int = Field(1, ge=1)
    category: Optional[str] = None


class OrderCreate(CamelModel):
    customer: Optional[CustomerIn] = None
    items: Optional[List[OrderLineIn]] = None
    totals: Optional[OrderTotals] = None
    order_type: Optional[str] = None
    payment_method: Optional[str] = None
    special_instructions: Optional[str] = None
    preferred_time: Optional[str] = Field(None, alias="time")


class StatusUpdate(CamelModel):
    status: Optional[str] = None


class OrderResponse(CamelModel):
    success: bool = True
    order: Order
    message: str
