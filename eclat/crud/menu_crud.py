from __future__ import annotations

import logging
import time
from typing import List, Optional

from fastapi import HTTPException, status

from eclat.schemas.menu_schema import MenuItem, MenuItemCreate, MenuItemUpdate

logger = logging.getLogger(__name__)

DEFAULT_MENU = [
    # Starters
    {"id": 1, "name": "Yellowfin Tuna Tartare", "price": 24, "category": "starters",
     "description": "Fresh yellowfin tuna, avocado, cucumber, yuzu kosho, crispy shallots, served with sesame crackers.",
     "image": "/images/sahal-hameed-Nq9KlQTTEbQ-unsplash.jpg", "badge": "Chef's Signature"},
    {"id": 2, "name": "Burrata & Heirloom Tomatoes", "price": 22, "category": "starters",
     "description": "Creamy burrata, heritage tomatoes, basil oil, aged balsamic reduction, sourdough crostini.",
     "image": "/images/kobby-mendez-q54Oxq44MZs-unsplash.jpg"},
    {"id": 3, "name": "French Onion Soup", "price": 16, "category": "starters",
     "description": "Classic caramelized onion soup with Gruyère cheese, croutons, and fresh thyme.",
     "image": "/images/food-935391_1280.jpg"},
    {"id": 4, "name": "Beef Carpaccio", "price": 26, "category": "starters",
     "description": "Thinly sliced raw beef, arugula, capers, Parmesan shavings, lemon olive oil dressing.",
     "image": "/images/dani-ZLqxSzvVr7I-unsplash.jpg"},
    # Mains
    {"id": 5, "name": "Australian Wagyu Tenderloin", "price": 68, "category": "mains",
     "description": "8oz grass-fed wagyu, truffle mashed potatoes, glazed baby vegetables, red wine reduction.",
     "image": "/images/dani-ZLqxSzvVr7I-unsplash.jpg", "badge": "Most Popular"},
    {"id": 6, "name": "Atlantic Halibut", "price": 42, "category": "mains",
     "description": "Pan-seared halibut, saffron fennel puree, confit tomatoes, lemon beurre blanc, micro herbs.",
     "image": "/images/kobby-mendez-idTwDKt2j2o-unsplash.jpg"},
    {"id": 7, "name": "Duck Confit", "price": 38, "category": "mains",
     "description": "Slow-cooked duck leg, cherry gastrique, roasted root vegetables, potato gratin.",
     "image": "/images/eiliv-aceron-ZuIDLSz3XLg-unsplash.jpg"},
    {"id": 8, "name": "Lobster Risotto", "price": 52, "category": "mains",
     "description": "Butter-poached lobster tail, saffron risotto, green peas, finished with fresh herbs.",
     "image": "/images/pexels-guilhermealmeida-1858175.jpg", "badge": "Chef's Signature"},
    {"id": 9, "name": "Herb-Crusted Lamb Rack", "price": 56, "category": "mains",
     "description": "Roasted lamb rack, mint pesto, ratatouille, lamb jus reduction.",
     "image": "/images/rayul-_M6gy9oHgII-unsplash.jpg"},
    # Desserts
    {"id": 10, "name": "Grand Marnier Soufflé", "price": 18, "category": "desserts",
     "description": "Light orange soufflé with Grand Marnier, served warm with vanilla bean ice cream.",
     "image": "/images/food-935391_1280.jpg", "badge": "Must Order Ahead"},
    {"id": 11, "name": "Chocolate Lava Cake", "price": 16, "category": "desserts",
     "description": "Warm chocolate cake with molten center, raspberry coulis, whipped cream.",
     "image": "/images/pexels-alipazani-2787341.jpg"},
    {"id": 12, "name": "Crème Brûlée", "price": 14, "category": "desserts",
     "description": "Classic vanilla custard with caramelized sugar crust, fresh berries.",
     "image": "/images/food-935391_1280.jpg"},
    {"id": 13, "name": "Tiramisu", "price": 15, "category": "desserts",
     "description": "Espresso-soaked ladyfingers, mascarpone cream, cocoa powder, coffee liqueur.",
     "image": "/images/pexels-guilhermealmeida-1858175.jpg"},
    # Drinks
    {"id": 14, "name": "Éclat Signature Martini", "price": 18, "category": "drinks",
     "description": "Grey Goose vodka, Lillet Blanc, orange bitters, expressed lemon peel.",
     "image": "https://images.unsplash.com/photo-1514362545857-3bc16c4c7d1b?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&q=80",
     "badge": "Signature"},
    {"id": 15, "name": "Classic Old Fashioned", "price": 16, "category": "drinks",
     "description": "Bourbon, angostura bitters, orange peel, maraschino cherry.",
     "image": "https://images.unsplash.com/photo-1514362545857-3bc16c4c7d1b?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&q=80"},
    {"id": 16, "name": "Sparkling Water", "price": 8, "category": "drinks",
     "description": "San Pellegrino 750ml bottle.",
     "image": "/images/products-popular-global-soft-drink-brands-poznan-pol-oct-344374883.jpg"},
    {"id": 17, "name": "Fresh Lemonade", "price": 6, "category": "drinks",
     "description": "House-made lemonade with fresh mint and lemon wheels.",
     "image": "/images/Alcoholic-Drink-1.jpg"},
]


def seed_menu(stores) -> int:
    if stores.menu.count():
        return 0
    for raw in DEFAULT_MENU:
        stores.menu.add(MenuItem.model_validate(raw))
    return len(DEFAULT_MENU)


def list_menu(stores, category: Optional[str] = None) -> List[MenuItem]:
    if category and category != "all":
        return [item for item in stores.menu.list() if item.category.value == category]
    return stores.menu.list()


def get_menu_item(stores, item_id: int) -> MenuItem:
    return stores.menu.get_or_404(item_id)


def _next_id(stores) -> int:
    # millisecond timestamp, bumped past the current max if two creates share a tick
    candidate = int(time.time() * 1000)
    existing = [item.id for item in stores.menu.list()]
    if existing and candidate <= max(existing):
        candidate = max(existing) + 1
    return candidate


def create_menu_item(stores, obj_in: MenuItemCreate) -> MenuItem:
    item = MenuItem(id=_next_id(stores), **obj_in.model_dump())
    stores.menu.add(item)
    logger.info("Menu item created: %s (%s)", item.name, item.id)
    return item


def update_menu_item(stores, item_id: int, obj_in: MenuItemUpdate) -> MenuItem:
    # badge is the only field that may be cleared with null
    changes = {
        key: value
        for key, value in obj_in.model_dump(exclude_unset=True).items()
        if value is not None or key == "badge"
    }
    updated = stores.menu.update(item_id, changes)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return updated


def delete_menu_item(stores, item_id: int) -> Optional[MenuItem]:
    removed = stores.menu.remove(item_id)
    if removed is not None:
        logger.info("Menu item deleted: %s", item_id)
    return removed
