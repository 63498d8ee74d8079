"""Apartment database model."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:
    from app.models.user import User


class Apartment(Base):
    """Apartment listing owned by the user who created it."""

    __tablename__ = "apartments"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    street: Mapped[str] = mapped_column(String(255))
    city: Mapped[str] = mapped_column(String(100))
    state: Mapped[str] = mapped_column(String(100))
    manager: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(100))
    price: Mapped[int]
    bedrooms: Mapped[int]
    bathrooms: Mapped[int]
    pets: Mapped[bool] = mapped_column(default=False)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    # Relationships
    owner: Mapped["User"] = relationship(back_populates="apartments")
