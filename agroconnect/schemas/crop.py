from typing import List, Literal, Optional
from pydantic import Field
from agroconnect.schemas.base import BaseSchema, InputSchema, TimestampSchema

CropStatus = Literal["available", "sold", "reserved"]


class Location(InputSchema):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class CropCreate(InputSchema):
    name: str = Field(min_length=1, max_length=100)
    quantity: float = Field(ge=0)
    unit: str = Field(min_length=1, max_length=20)
    price: float = Field(ge=0)
    location: Location
    description: Optional[str] = None


class CropStatusUpdate(InputSchema):
    status: CropStatus


class Crop(TimestampSchema):
    id: int
    farmer_id: int
    farmer_name: Optional[str] = None
    farmer_email: Optional[str] = None
    name: str
    quantity: float
    unit: str
    price: float
    location: Location
    description: Optional[str] = None
    status: CropStatus
    # Only set when the listing was sorted against a reference point (km)
    distance: Optional[float] = None


class CropStatusOut(BaseSchema):
    id: int
    status: CropStatus


class CropResponse(BaseSchema):
    success: bool = True
    crop: Crop


class CropListResponse(BaseSchema):
    success: bool = True
    crops: List[Crop]


class CropStatusResponse(BaseSchema):
    success: bool = True
    crop: CropStatusOut
