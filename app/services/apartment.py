"""Apartment service for business logic."""

import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.core.errors import RecordInvalid
from app.models.apartment import Apartment
from app.models.user import User
from app.schemas.apartment import MAX_INTEGER, ApartmentCreate, ApartmentUpdate

logger = logging.getLogger(__name__)


def get_apartments(db: Session) -> list[Apartment]:
    """Get every apartment in persistence order."""
    return db.query(Apartment).order_by(Apartment.id).all()


def get_apartment(db: Session, apartment_id: int) -> Apartment:
    """Get an apartment by ID."""
    db_apartment = None
    if 1 <= apartment_id <= MAX_INTEGER:
        db_apartment = db.query(Apartment).filter(Apartment.id == apartment_id).first()
    if not db_apartment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Apartment not found",
        )
    return db_apartment


def create_apartment(db: Session, owner: User, apartment_data: ApartmentCreate) -> Apartment:
    """Create an apartment owned by ``owner``.

    A ``user_id`` supplied in the request is ignored.
    """
    db_apartment = Apartment(
        **apartment_data.model_dump(exclude={"user_id"}),
        owner=owner,
    )
    db.add(db_apartment)
    db.commit()
    db.refresh(db_apartment)
    logger.info(
        "Created apartment %s",
        db_apartment.id,
        extra={"apartment_id": db_apartment.id, "user_id": owner.id},
    )
    return db_apartment


def update_apartment(
    db: Session,
    apartment_id: int,
    apartment_data: ApartmentUpdate,
) -> Apartment:
    """Update the supplied fields of an apartment.

    Any authenticated user may update any apartment. Supplying ``user_id``
    transfers ownership to that user, who must exist.
    """
    db_apartment = get_apartment(db, apartment_id)

    update_data = apartment_data.model_dump(exclude_unset=True)
    if "user_id" in update_data and db.get(User, update_data["user_id"]) is None:
        raise RecordInvalid({"user": ["must exist"]})

    for field, value in update_data.items():
        setattr(db_apartment, field, value)

    db.commit()
    db.refresh(db_apartment)
    logger.info(
        "Updated apartment %s (%s)",
        db_apartment.id,
        ", ".join(sorted(update_data)) or "no changes",
        extra={"apartment_id": db_apartment.id},
    )
    return db_apartment
