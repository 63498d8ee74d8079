"""Apartment API routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.dependencies import get_current_user
from app.core.database import get_db
from app.models.user import User
from app.schemas.apartment import (
    ApartmentCreateRequest,
    ApartmentResponse,
    ApartmentUpdateRequest,
)
from app.services import apartment as apartment_service

router = APIRouter(prefix="/apartments", tags=["apartments"])


@router.get("", response_model=list[ApartmentResponse])
def list_apartments(db: Session = Depends(get_db)) -> list[ApartmentResponse]:
    """List every apartment."""
    apartments = apartment_service.get_apartments(db)
    return [ApartmentResponse.model_validate(a) for a in apartments]


@router.post("", response_model=ApartmentResponse)
def create_apartment(
    body: ApartmentCreateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ApartmentResponse:
    """Create an apartment owned by the authenticated user."""
    apartment = apartment_service.create_apartment(db, current_user, body.apartment)
    return ApartmentResponse.model_validate(apartment)


@router.api_route("/{apartment_id}", methods=["PATCH", "PUT"], response_model=ApartmentResponse)
def update_apartment(
    apartment_id: int,
    body: ApartmentUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ApartmentResponse:
    """Update an apartment. No ownership check is made."""
    apartment = apartment_service.update_apartment(db, apartment_id, body.apartment)
    return ApartmentResponse.model_validate(apartment)
