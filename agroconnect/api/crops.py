from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from agroconnect.auth.security import get_current_active_user, is_farmer
from agroconnect.core.errors import ValidationError
from agroconnect.db.session import get_db
from agroconnect.models.user import User
from agroconnect.schemas.crop import (
    CropCreate,
    CropListResponse,
    CropResponse,
    CropStatusOut,
    CropStatusResponse,
    CropStatusUpdate,
)
from agroconnect.services import crops as crop_service
from agroconnect.services.geo import sort_by_distance

router = APIRouter()


@router.get(
    "",
    response_model=CropListResponse,
    response_model_exclude_none=True,
    summary="List crops for sale",
)
def read_crops(
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0, description="Minimum price (inclusive)"),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0, description="Maximum price (inclusive)"),
    latitude: Optional[float] = Query(None, ge=-90, le=90, description="Reference latitude for distance sort"),
    longitude: Optional[float] = Query(None, ge=-180, le=180, description="Reference longitude for distance sort"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """
    Retrieve crops with status ``available``, newest first.

    - **minPrice** / **maxPrice**: inclusive price bounds
    - **latitude** / **longitude**: when both are given, each crop gets a
      ``distance`` in km from that point and the list is sorted nearest first
    """
    if (latitude is None) != (longitude is None):
        raise ValidationError("latitude and longitude must be given together")

    crops = [crop_service.to_schema(c) for c in crop_service.list_available_crops(db, min_price, max_price)]
    crops = sort_by_distance(crops, latitude, longitude)
    return CropListResponse(crops=crops)


@router.post(
    "",
    response_model=CropResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a crop listing",
)
def create_crop(
    crop: CropCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(is_farmer),
):
    db_crop = crop_service.create_crop(db, current_user, crop)
    return CropResponse(crop=crop_service.to_schema(db_crop))


@router.patch("/{crop_id}/status", response_model=CropStatusResponse, summary="Change a crop's status")
def update_crop_status(
    crop_id: int,
    payload: CropStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    db_crop = crop_service.update_crop_status(db, crop_id, payload.status, current_user)
    return CropStatusResponse(crop=CropStatusOut(id=db_crop.id, status=db_crop.status))
