from sqlalchemy import Column, String, Integer, Enum, Float, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from agroconnect.models.base import BaseModel

# "completed" is a valid stored state but no operation moves a request into it.
REQUEST_STATUSES = ("pending", "accepted", "rejected", "completed")


class ResourceRequest(BaseModel):
    __tablename__ = "resource_requests"

    resource_id = Column(Integer, ForeignKey("resources.id"), nullable=False)
    requester_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    # Copied from the resource when the request is made
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    status = Column(Enum(*REQUEST_STATUSES, name="request_statuses"), nullable=False, default="pending")
    offer_amount = Column(Float, nullable=False)
    message = Column(String)

    resource = relationship("Resource", back_populates="requests")
    requester = relationship("User", foreign_keys=[requester_id])
    owner = relationship("User", foreign_keys=[owner_id])
