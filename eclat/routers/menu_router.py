from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from eclat.database import get_stores
from eclat.crud import menu_crud
from eclat.schemas.menu_schema import MenuItem

router = APIRouter(prefix="/api/menu", tags=["Menu"])


@router.get("", response_model=List[MenuItem])
def get_menu(
    category: Optional[str] = Query(None, description="starters, mains, desserts, drinks or all"),
    stores=Depends(get_stores),
):
    return menu_crud.list_menu(stores, category)


@router.get("/{item_id}", response_model=MenuItem)
def get_menu_item(item_id: int, stores=Depends(get_stores)):
    return menu_crud.get_menu_item(stores, item_id)
