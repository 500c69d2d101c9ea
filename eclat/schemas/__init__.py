from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# Shared Pydantic base: snake_case in Python, camelCase on the wire
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# Enums shared across schemas
class MenuCategory(str, Enum):
    STARTERS = "starters"
    MAINS = "mains"
    DESSERTS = "desserts"
    DRINKS = "drinks"


class OrderStatus(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class ReservationStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class ContactStatus(str, Enum):
    NEW = "new"
    READ = "read"


class OrderType(str, Enum):
    DELIVERY = "delivery"
    PICKUP = "pickup"


class MembershipTier(str, Enum):
    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"


# Legal next states. Only consulted when ENFORCE_STATUS_TRANSITIONS is on.
ORDER_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PREPARING, OrderStatus.CANCELLED}),
    OrderStatus.PREPARING: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

RESERVATION_TRANSITIONS: Dict[ReservationStatus, FrozenSet[ReservationStatus]] = {
    ReservationStatus.PENDING: frozenset({ReservationStatus.CONFIRMED, ReservationStatus.CANCELLED, ReservationStatus.COMPLETED}),
    ReservationStatus.CONFIRMED: frozenset({ReservationStatus.COMPLETED, ReservationStatus.CANCELLED}),
    ReservationStatus.CANCELLED: frozenset(),
    ReservationStatus.COMPLETED: frozenset(),
}

ACTIVE_ORDER_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.PREPARING})


def can_transition(table: Dict, current, new) -> bool:
    if current == new:
        return True
    return new in table.get(current, frozenset())
