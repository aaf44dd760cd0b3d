"""
Rental requests against resource listings.

A request starts out ``pending`` and the resource owner answers it once with
``accepted`` or ``rejected``. Accepting also marks the resource ``in_use``.
Nothing moves a request to ``completed`` and nothing puts an ``in_use``
resource back to ``available``.

The accept path does two separate writes (request, then resource) without a
compare-and-swap on availability: two pending requests for one resource can
both be accepted, the second simply re-marks the resource ``in_use``.
"""
import logging
from typing import List

from sqlalchemy.orm import Session, joinedload

from agroconnect.core.errors import AuthorizationError, ConflictError, NotFoundError
from agroconnect.db.session import commit
from agroconnect.models.resource import Resource
from agroconnect.models.resource_request import ResourceRequest
from agroconnect.models.user import User
from agroconnect.schemas.resource import (
    OwnerResourceRequest,
    ResourceRequestCreate,
    ResourceSummary,
)
from agroconnect.schemas.user import UserSummary

logger = logging.getLogger(__name__)


def create_request(db: Session, resource_id: int, requester: User, payload: ResourceRequestCreate) -> ResourceRequest:
    resource = db.get(Resource, resource_id)
    if resource is None:
        raise NotFoundError("Resource not found")

    if resource.availability != "available":
        raise ConflictError("Resource is not available")

    db_request = ResourceRequest(
        resource_id=resource.id,
        requester_id=requester.id,
        owner_id=resource.owner_id,
        start_date=payload.start_date,
        end_date=payload.end_date,
        offer_amount=payload.offer_amount,
        message=payload.message,
        status="pending",
    )
    db.add(db_request)
    commit(db, db_request)
    logger.info(
        "Request %s created for resource %s", db_request.id, resource.id,
        extra={"user_id": requester.id},
    )
    return db_request


def respond_to_request(db: Session, request_id: int, caller: User, new_status: str) -> ResourceRequest:
    db_request = db.get(ResourceRequest, request_id)
    if db_request is None:
        raise NotFoundError("Request not found")

    if db_request.owner_id != caller.id:
        raise AuthorizationError("Not authorized to respond to this request")

    db_request.status = new_status
    commit(db, db_request)

    if new_status == "accepted":
        resource = db.get(Resource, db_request.resource_id)
        if resource is not None:
            resource.availability = "in_use"
            commit(db, resource)
            logger.info("Resource %s marked in_use", resource.id, extra={"user_id": caller.id})

    logger.info(
        "Request %s %s", db_request.id, new_status,
        extra={"user_id": caller.id},
    )
    return db_request


def list_requests_for_owner(db: Session, owner: User) -> List[ResourceRequest]:
    return (
        db.query(ResourceRequest)
        .options(joinedload(ResourceRequest.resource), joinedload(ResourceRequest.requester))
        .filter(ResourceRequest.owner_id == owner.id)
        .order_by(ResourceRequest.created_at.desc(), ResourceRequest.id.desc())
        .all()
    )


def to_owner_view(request: ResourceRequest) -> OwnerResourceRequest:
    resource = request.resource
    requester = request.requester
    return OwnerResourceRequest(
        id=request.id,
        resource=ResourceSummary(
            id=resource.id,
            name=resource.name,
            type=resource.type,
            price_per_day=resource.price_per_day,
        ),
        requester=UserSummary(id=requester.id, name=requester.full_name, email=requester.email),
        start_date=request.start_date,
        end_date=request.end_date,
        status=request.status,
        offer_amount=request.offer_amount,
        message=request.message,
        created_at=request.created_at,
    )
