from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from agroconnect.auth.security import get_current_active_user, is_farmer
from agroconnect.db.session import get_db
from agroconnect.models.user import User
from agroconnect.schemas.resource import (
    Availability,
    OwnerRequestListResponse,
    ResourceCreate,
    ResourceListResponse,
    ResourceRequest as ResourceRequestSchema,
    ResourceRequestCreate,
    ResourceRequestRespond,
    ResourceRequestResponse,
    ResourceRequestStatus,
    ResourceRequestStatusResponse,
    ResourceResponse,
    ResourceType,
)
from agroconnect.services import resource_requests as request_service
from agroconnect.services import resources as resource_service

router = APIRouter()


@router.get("", response_model=ResourceListResponse, summary="List resources")
def read_resources(
    type: Optional[ResourceType] = Query(None, description="Exact resource type"),
    availability: Optional[Availability] = Query(None, description="Exact availability state"),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0, description="Maximum price per day (inclusive)"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    resources = resource_service.list_resources(db, type=type, availability=availability, max_price=max_price)
    return ResourceListResponse(resources=[resource_service.to_schema(r) for r in resources])


@router.get("/requests", response_model=OwnerRequestListResponse, summary="Requests for my resources")
def read_owner_requests(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    requests = request_service.list_requests_for_owner(db, current_user)
    return OwnerRequestListResponse(requests=[request_service.to_owner_view(r) for r in requests])


@router.post(
    "",
    response_model=ResourceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a resource listing",
)
def create_resource(
    resource: ResourceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(is_farmer),
):
    db_resource = resource_service.create_resource(db, current_user, resource)
    return ResourceResponse(resource=resource_service.to_schema(db_resource))


@router.post(
    "/{resource_id}/request",
    response_model=ResourceRequestResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Request to rent a resource",
)
def request_resource(
    resource_id: int,
    payload: ResourceRequestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    db_request = request_service.create_request(db, resource_id, current_user, payload)
    return ResourceRequestResponse(request=ResourceRequestSchema.model_validate(db_request))


@router.patch(
    "/requests/{request_id}/respond",
    response_model=ResourceRequestStatusResponse,
    summary="Accept or reject a request",
)
def respond_to_request(
    request_id: int,
    payload: ResourceRequestRespond,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    db_request = request_service.respond_to_request(db, request_id, current_user, payload.status)
    return ResourceRequestStatusResponse(
        request=ResourceRequestStatus(id=db_request.id, status=db_request.status)
    )
