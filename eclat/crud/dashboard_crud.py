"""
Read-only aggregates over the order, reservation and contact stores.

Nothing here is cached: every call rescans the stores, which is fine for a
single restaurant's volume.
"""
from __future__ import annotations

import math
from collections import Counter
from decimal import Decimal
from typing import List, Optional, Tuple

from fastapi import HTTPException, status

from eclat.crud.order_crud import orders_for_email
from eclat.crud.reservation_crud import reservations_for_email
from eclat.schemas import ACTIVE_ORDER_STATUSES, ContactStatus, MembershipTier, OrderStatus, ReservationStatus
from eclat.schemas.dashboard_schema import (
    ActivityEntry,
    AdminStats,
    CustomerDashboard,
    DashboardStats,
    DashboardUser,
    MessageStats,
)
from eclat.schemas.order_schema import Order
from eclat.schemas.reservation_schema import Reservation
from eclat.utils.helper import today_iso

POINTS_PER_DOLLAR = 10
RECENT_ORDERS = 5
RECENT_ACTIVITY = 10

# (threshold, tier, next perk, next threshold); evaluated highest first
LOYALTY_TIERS: List[Tuple[int, MembershipTier, str, Optional[int]]] = [
    (5000, MembershipTier.PLATINUM, "Private Chef Experience", None),
    (2500, MembershipTier.GOLD, "Exclusive Wine Tasting Access", 5000),
    (1000, MembershipTier.SILVER, "Priority Weekend Booking", 2500),
    (0, MembershipTier.BRONZE, "Free Coffee on Sundays", 1000),
]


def tier_for_points(points: int) -> Tuple[MembershipTier, str, int]:
    """Return (tier, next perk, points still needed for the next tier)."""
    for threshold, tier, perk, next_threshold in LOYALTY_TIERS:
        if points >= threshold:
            to_next = max(0, next_threshold - points) if next_threshold is not None else 0
            return tier, perk, to_next
    # negative points cannot happen with non-negative totals
    _, tier, perk, next_threshold = LOYALTY_TIERS[-1]
    return tier, perk, next_threshold


def total_spent(orders: List[Order]) -> Decimal:
    return sum((Decimal(str(o.totals.total)) for o in orders), Decimal("0"))


def loyalty_points(spent: Decimal) -> int:
    return int(math.floor(spent * POINTS_PER_DOLLAR))


def guest_dashboard() -> CustomerDashboard:
    tier, perk, to_next = tier_for_points(0)
    return CustomerDashboard(
        user=DashboardUser(
            first_name="Guest",
            last_name="User",
            email="",
            membership_tier=tier,
            next_perk=perk,
            points_to_next=to_next,
            avatar="GU",
        ),
        stats=DashboardStats(),
    )


def _initials(first: str, last: str) -> str:
    return ((first[:1] or "G") + (last[:1] or "U")).upper()


def _activity(orders: List[Order], reservations: List[Reservation]) -> List[ActivityEntry]:
    entries = [
        ActivityEntry(
            type="order",
            message=f"Order {o.order_number} placed",
            date=o.created_at,
            points=loyalty_points(Decimal(str(o.totals.total))),
        )
        for o in orders
    ]
    entries += [
        ActivityEntry(
            type="reservation",
            message=f"Table for {r.details.adults} booked on {r.details.date} at {r.details.time}",
            date=r.created_at,
        )
        for r in reservations
    ]
    entries.sort(key=lambda e: e.date, reverse=True)
    return entries[:RECENT_ACTIVITY]


def get_dashboard(stores, email: Optional[str] = None) -> CustomerDashboard:
    if not email or not email.strip():
        return guest_dashboard()

    orders = orders_for_email(stores, email)
    reservations = reservations_for_email(stores, email)

    spent = total_spent(orders)
    points = loyalty_points(spent)
    tier, perk, to_next = tier_for_points(points)

    active = [o for o in orders if o.status in ACTIVE_ORDER_STATUSES]
    past = [o for o in orders if o.status not in ACTIVE_ORDER_STATUSES]

    today = today_iso()
    upcoming = sorted(
        (r for r in reservations if r.details.date >= today and r.status != ReservationStatus.CANCELLED),
        key=lambda r: r.details.date,
    )

    if orders:
        latest = orders[-1].customer
        first_name, last_name = latest.first_name, latest.last_name
    else:
        first_name, last_name = "Valued", "Guest"

    return CustomerDashboard(
        user=DashboardUser(
            first_name=first_name,
            last_name=last_name,
            email=email,
            membership_tier=tier,
            next_perk=perk,
            points_to_next=to_next,
            avatar=_initials(first_name, last_name),
        ),
        stats=DashboardStats(
            total_orders=len(orders),
            active_orders_count=len(active),
            total_reservations=len(reservations),
            upcoming_reservations=len(upcoming),
            loyalty_points=points,
            total_spent=float(spent),
        ),
        active_orders=active,
        past_orders=past[-RECENT_ORDERS:][::-1],
        orders=orders[-RECENT_ORDERS:][::-1],
        reservations=upcoming,
        recent_activity=_activity(orders, reservations),
    )


def customer_orders(stores, email: Optional[str]) -> List[Order]:
    if not email:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email parameter required")
    return sorted(orders_for_email(stores, email), key=lambda o: o.created_at, reverse=True)


def customer_reservations(stores, email: Optional[str]) -> List[Reservation]:
    if not email:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email parameter required")
    return sorted(reservations_for_email(stores, email), key=lambda r: r.details.date)


def popular_category(orders: List[Order]) -> str:
    """Most ordered line-item category by quantity; the first one seen wins a tie."""
    counts: Counter = Counter()
    for order in orders:
        for line in order.items:
            if line.category:
                counts[line.category] += line.quantity
    if not counts:
        return "None"
    best = max(counts.values())
    return next(category for category, count in counts.items() if count == best)


def admin_stats(stores) -> AdminStats:
    orders = stores.orders.list()
    reservations = stores.reservations.list()
    contacts = stores.contacts.list()
    today = today_iso()

    revenue = total_spent([o for o in orders if o.status != OrderStatus.CANCELLED])
    return AdminStats(
        total_revenue=float(revenue),
        total_orders=len(orders),
        total_reservations=len(reservations),
        pending_orders=sum(1 for o in orders if o.status == OrderStatus.PENDING),
        today_orders=sum(1 for o in orders if o.created_at.date().isoformat() == today),
        today_reservations=sum(1 for r in reservations if r.details.date == today),
        pending_reservations=sum(1 for r in reservations if r.status == ReservationStatus.PENDING),
        popular_category=popular_category(orders),
        messages=MessageStats(
            total=len(contacts),
            unread=sum(1 for c in contacts if c.status == ContactStatus.NEW),
        ),
    )
