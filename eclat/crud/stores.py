import logging
from dataclasses import dataclass

from eclat.crud.base import InMemoryRepository, Repository, SQLRepository
from eclat.database import build_engine, build_session_factory
from eclat.schemas.contact_schema import ContactMessage
from eclat.schemas.menu_schema import MenuItem
from eclat.schemas.order_schema import Order
from eclat.schemas.reservation_schema import Reservation

logger = logging.getLogger(__name__)


@dataclass
class Stores:
    menu: Repository
    orders: Repository
    reservations: Repository
    contacts: Repository


def memory_stores() -> Stores:
    return Stores(
        menu=InMemoryRepository(MenuItem, label="Item"),
        orders=InMemoryRepository(Order, label="Order"),
        reservations=InMemoryRepository(Reservation, label="Reservation"),
        contacts=InMemoryRepository(ContactMessage, label="Contact message"),
    )


def sql_stores(database_url: str) -> Stores:
    from eclat.model import ContactRecord, MenuItemRecord, OrderRecord, ReservationRecord

    engine = build_engine(database_url)
    session_factory = build_session_factory(engine)
    return Stores(
        menu=SQLRepository(
            MenuItemRecord, MenuItem, session_factory,
            columns={"category": "category"},
            label="Item",
        ),
        orders=SQLRepository(
            OrderRecord, Order, session_factory,
            columns={
                "order_number": "order_number",
                "status": "status",
                "order_type": "order_type",
                "customer.email": "email",
                "created_at": "created_at",
            },
            label="Order",
        ),
        reservations=SQLRepository(
            ReservationRecord, Reservation, session_factory,
            columns={
                "reservation_id": "reservation_id",
                "status": "status",
                "details.date": "date",
                "contact.email": "email",
                "created_at": "created_at",
            },
            label="Reservation",
        ),
        contacts=SQLRepository(
            ContactRecord, ContactMessage, session_factory,
            columns={"status": "status", "created_at": "created_at"},
            label="Contact message",
        ),
    )


def build_stores(settings) -> Stores:
    if settings.STORE_BACKEND == "memory":
        stores = memory_stores()
    elif settings.STORE_BACKEND == "sql":
        stores = sql_stores(settings.DATABASE_URL)
    else:
        raise ValueError(f"Unknown STORE_BACKEND: {settings.STORE_BACKEND!r}")

    if settings.SEED_MENU:
        from eclat.crud.menu_crud import seed_menu
        seeded = seed_menu(stores)
        logger.info("Seeded %s menu items into %s store", seeded, settings.STORE_BACKEND)
    return stores
