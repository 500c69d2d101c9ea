from sqlalchemy import BigInteger, Column, Integer, String, JSON, Index
from eclat.database import Base


class MenuItemRecord(Base):
    __tablename__ = "menu_items"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    # millisecond-timestamp ids for admin-created items exceed 32 bits
    id = Column(BigInteger, nullable=False, unique=True)
    category = Column(String(20), nullable=False)
    payload = Column(JSON, nullable=False)

    __table_args__ = (
        Index("ix_menu_items_category", "category"),
    )
