from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from . import CamelModel, MembershipTier
from .order_schema import Order
from .reservation_schema import Reservation


class DashboardUser(CamelModel):
    first_name: str
    last_name: str
    email: str
    membership_tier: MembershipTier
    next_perk: Optional[str] = None
    points_to_next: int = 0
    avatar: str


class DashboardStats(CamelModel):
    total_orders: int = 0
    active_orders_count: int = 0
    total_reservations: int = 0
    upcoming_reservations: int = 0
    loyalty_points: int = 0
    total_spent: float = 0.0


class ActivityEntry(CamelModel):
    type: str
    message: str
    date: datetime
    points: int = 0


class CustomerDashboard(CamelModel):
    user: DashboardUser
    stats: DashboardStats
    active_orders: List[Order] = []
    past_orders: List[Order] = []
    orders: List[Order] = []
    reservations: List[Reservation] = []
    recent_activity: List[ActivityEntry] = []


class MessageStats(CamelModel):
    total: int = 0
    unread: int = 0


class AdminStats(CamelModel):
    total_revenue: float = 0.0
    total_orders: int = 0
    total_reservations: int = 0
    pending_orders: int = 0
    today_orders: int = 0
    today_reservations: int = 0
    pending_reservations: int = 0
    popular_category: str = "None"
    messages: MessageStats = MessageStats()
