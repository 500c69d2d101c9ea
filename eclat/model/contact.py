from sqlalchemy import Column, Integer, String, DateTime, JSON
from eclat.database import Base


class ContactRecord(Base):
    __tablename__ = "contact_messages"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, index=True)
    status = Column(String(10), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    payload = Column(JSON, nullable=False)
