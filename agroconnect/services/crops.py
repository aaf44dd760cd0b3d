import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from agroconnect.auth.security import ensure_farmer
from agroconnect.core.errors import AuthorizationError, NotFoundError
from agroconnect.db.session import commit
from agroconnect.models.crop import Crop
from agroconnect.models.user import User
from agroconnect.schemas.crop import Crop as CropSchema, CropCreate, Location

logger = logging.getLogger(__name__)


def to_schema(crop: Crop) -> CropSchema:
    farmer = crop.farmer
    return CropSchema(
        id=crop.id,
        farmer_id=crop.farmer_id,
        farmer_name=farmer.full_name if farmer else None,
        farmer_email=farmer.email if farmer else None,
        name=crop.name,
        quantity=crop.quantity,
        unit=crop.unit,
        price=crop.price,
        location=Location(latitude=crop.latitude, longitude=crop.longitude),
        description=crop.description,
        status=crop.status,
        created_at=crop.created_at,
    )


def create_crop(db: Session, farmer: User, crop: CropCreate) -> Crop:
    ensure_farmer(farmer, "create crop listings")

    db_crop = Crop(
        farmer_id=farmer.id,
        name=crop.name,
        quantity=crop.quantity,
        unit=crop.unit,
        price=crop.price,
        latitude=crop.location.latitude,
        longitude=crop.location.longitude,
        description=crop.description,
        status="available",
    )
    db.add(db_crop)
    commit(db, db_crop)
    logger.info("Crop listing created", extra={"user_id": farmer.id})
    return db_crop


def list_available_crops(
    db: Session,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
) -> List[Crop]:
    """Crops currently for sale, newest first. Sold or reserved crops are never listed."""
    query = (
        db.query(Crop)
        .options(joinedload(Crop.farmer))
        .filter(Crop.status == "available")
    )

    if min_price is not None:
        query = query.filter(Crop.price >= min_price)
    if max_price is not None:
        query = query.filter(Crop.price <= max_price)

    return query.order_by(Crop.created_at.desc(), Crop.id.desc()).all()


def update_crop_status(db: Session, crop_id: int, new_status: str, caller: User) -> Crop:
    # No transition rules: the owner may set any known status
    db_crop = db.get(Crop, crop_id)
    if db_crop is None:
        raise NotFoundError("Crop not found")

    if db_crop.farmer_id != caller.id:
        raise AuthorizationError("Not authorized to update this crop")

    previous = db_crop.status
    db_crop.status = new_status
    commit(db, db_crop)
    logger.info(
        "Crop %s status changed from %s to %s", db_crop.id, previous, new_status,
        extra={"user_id": caller.id},
    )
    return db_crop
