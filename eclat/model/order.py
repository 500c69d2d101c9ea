from sqlalchemy import Column, Integer, String, DateTime, JSON
from eclat.database import Base


class OrderRecord(Base):
    __tablename__ = "orders"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, index=True)
    order_number = Column(String(32), nullable=False, index=True)
    status = Column(String(20), nullable=False, index=True)
    order_type = Column(String(20), nullable=True)
    email = Column(String(255), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    # whole record as produced by Order.model_dump(mode="json")
    payload = Column(JSON, nullable=False)
