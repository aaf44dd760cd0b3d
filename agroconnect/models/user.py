from sqlalchemy import Column, String, Boolean, Enum
from sqlalchemy.orm import relationship
from agroconnect.models.base import BaseModel

USER_ROLES = ("farmer", "buyer")


class User(BaseModel):
    __tablename__ = "users"

    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    full_name = Column(String(100), nullable=False)
    role = Column(Enum(*USER_ROLES, name="user_roles"), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    crops = relationship("Crop", back_populates="farmer")
    resources = relationship("Resource", back_populates="owner")
