from __future__ import annotations

from typing import Optional

from pydantic import Field

from . import CamelModel, MenuCategory


class MenuItemBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""
    price: float = Field(..., ge=0)
    category: MenuCategory
    image: str = ""
    badge: Optional[str] = None


class MenuItemCreate(MenuItemBase):
    pass


class MenuItemUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[MenuCategory] = None
    image: Optional[str] = None
    badge: Optional[str] = None


class MenuItem(MenuItemBase):
    id: int
