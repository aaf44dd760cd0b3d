import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from agroconnect.auth.security import ensure_farmer
from agroconnect.db.session import commit
from agroconnect.models.resource import Resource
from agroconnect.models.user import User
from agroconnect.schemas.resource import Resource as ResourceSchema, ResourceCreate

logger = logging.getLogger(__name__)


def to_schema(resource: Resource) -> ResourceSchema:
    owner = resource.owner
    return ResourceSchema(
        id=resource.id,
        owner_id=resource.owner_id,
        owner_name=owner.full_name if owner else None,
        owner_email=owner.email if owner else None,
        name=resource.name,
        type=resource.type,
        availability=resource.availability,
        price_per_day=resource.price_per_day,
        description=resource.description,
        created_at=resource.created_at,
    )


def create_resource(db: Session, owner: User, resource: ResourceCreate) -> Resource:
    ensure_farmer(owner, "create resource listings")

    db_resource = Resource(owner_id=owner.id, **resource.model_dump())
    db.add(db_resource)
    commit(db, db_resource)
    logger.info("Resource listing created", extra={"user_id": owner.id})
    return db_resource


def list_resources(
    db: Session,
    type: Optional[str] = None,
    availability: Optional[str] = None,
    max_price: Optional[float] = None,
) -> List[Resource]:
    """Resources in every availability state unless ``availability`` narrows it, newest first."""
    query = db.query(Resource).options(joinedload(Resource.owner))

    if type:
        query = query.filter(Resource.type == type)
    if availability:
        query = query.filter(Resource.availability == availability)
    if max_price is not None:
        query = query.filter(Resource.price_per_day <= max_price)

    return query.order_by(Resource.created_at.desc(), Resource.id.desc()).all()
