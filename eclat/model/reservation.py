from sqlalchemy import Column, Integer, String, DateTime, JSON
from eclat.database import Base


class ReservationRecord(Base):
    __tablename__ = "reservations"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, index=True)
    reservation_id = Column(String(16), nullable=False)
    status = Column(String(20), nullable=False, index=True)
    date = Column(String(10), nullable=False, index=True)
    email = Column(String(255), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    payload = Column(JSON, nullable=False)
