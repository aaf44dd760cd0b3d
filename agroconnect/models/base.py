from datetime import datetime
from sqlalchemy import Column, Integer, DateTime
from agroconnect.db.session import Base


def utcnow() -> datetime:
    return datetime.utcnow()


class BaseModel(Base):
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
