from datetime import datetime
from typing import List, Literal, Optional
from pydantic import Field
from agroconnect.schemas.base import BaseSchema, InputSchema, TimestampSchema
from agroconnect.schemas.user import UserSummary

ResourceType = Literal["equipment", "tool", "other"]
Availability = Literal["available", "in_use", "maintenance"]
RequestStatus = Literal["pending", "accepted", "rejected", "completed"]
RequestAnswer = Literal["accepted", "rejected"]


class ResourceCreate(InputSchema):
    name: str = Field(min_length=1, max_length=100)
    type: ResourceType
    price_per_day: float = Field(ge=0)
    description: Optional[str] = None
    availability: Availability = "available"


class Resource(TimestampSchema):
    id: int
    owner_id: int
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None
    name: str
    type: ResourceType
    availability: Availability
    price_per_day: float
    description: Optional[str] = None


class ResourceSummary(BaseSchema):
    id: int
    name: str
    type: ResourceType
    price_per_day: float


class ResourceRequestCreate(InputSchema):
    start_date: datetime
    end_date: datetime
    offer_amount: float = Field(ge=0)
    message: Optional[str] = None


class ResourceRequestRespond(InputSchema):
    status: RequestAnswer


class ResourceRequest(TimestampSchema):
    id: int
    resource_id: int
    requester_id: int
    owner_id: int
    start_date: datetime
    end_date: datetime
    status: RequestStatus
    offer_amount: float
    message: Optional[str] = None


class OwnerResourceRequest(TimestampSchema):
    """A request as seen by the resource owner, with resource and requester joined in."""

    id: int
    resource: ResourceSummary
    requester: UserSummary
    start_date: datetime
    end_date: datetime
    status: RequestStatus
    offer_amount: float
    message: Optional[str] = None


class ResourceRequestStatus(BaseSchema):
    id: int
    status: RequestStatus


class ResourceResponse(BaseSchema):
    success: bool = True
    resource: Resource


class ResourceListResponse(BaseSchema):
    success: bool = True
    resources: List[Resource]


class ResourceRequestResponse(BaseSchema):
    success: bool = True
    request: ResourceRequest


class OwnerRequestListResponse(BaseSchema):
    success: bool = True
    requests: List[OwnerResourceRequest]


class ResourceRequestStatusResponse(BaseSchema):
    success: bool = True
    request: ResourceRequestStatus
