from sqlalchemy import Column, String, Integer, Enum, Float, ForeignKey
from sqlalchemy.orm import relationship
from agroconnect.models.base import BaseModel

RESOURCE_TYPES = ("equipment", "tool", "other")
RESOURCE_AVAILABILITY = ("available", "in_use", "maintenance")


class Resource(BaseModel):
    __tablename__ = "resources"

    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    type = Column(Enum(*RESOURCE_TYPES, name="resource_types"), nullable=False)
    availability = Column(
        Enum(*RESOURCE_AVAILABILITY, name="resource_availability"),
        nullable=False,
        default="available",
    )
    price_per_day = Column(Float, nullable=False)
    description = Column(String)

    owner = relationship("User", back_populates="resources")
    requests = relationship("ResourceRequest", back_populates="resource")
