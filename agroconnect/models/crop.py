from sqlalchemy import Column, String, Integer, Enum, Float, ForeignKey
from sqlalchemy.orm import relationship
from agroconnect.models.base import BaseModel

CROP_STATUSES = ("available", "sold", "reserved")


class Crop(BaseModel):
    __tablename__ = "crops"

    farmer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    quantity = Column(Float, nullable=False)
    unit = Column(String(20), nullable=False)
    price = Column(Float, nullable=False, index=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    description = Column(String)
    status = Column(Enum(*CROP_STATUSES, name="crop_statuses"), nullable=False, default="available", index=True)

    farmer = relationship("User", back_populates="crops")
