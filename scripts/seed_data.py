"""Seed script to populate the database with sample data."""

from sqlalchemy.orm import Session

from app.core.database import Base, SessionLocal, engine
from app.models.apartment import Apartment
from app.models.user import User
from app.services.auth import get_password_hash

SAMPLE_APARTMENTS = [
    {
        "street": "1 Main St",
        "city": "Metropolis",
        "state": "NY",
        "manager": "Alice",
        "email": "alice@example.com",
        "price": 1000,
        "bedrooms": 2,
        "bathrooms": 1,
        "pets": True,
    },
    {
        "street": "42 Harbor Ave",
        "city": "Gotham",
        "state": "NJ",
        "manager": "Bob",
        "email": "bob@example.com",
        "price": 1850,
        "bedrooms": 3,
        "bathrooms": 2,
        "pets": False,
    },
]


def seed_apartments(db: Session) -> int:
    """Add the demo user and sample apartments. Returns the number of apartments created."""
    # Check if data already exists
    if db.query(Apartment).first():
        print("Database already has data. Skipping seed.")
        return 0

    print("Seeding database...")

    owner = db.query(User).filter(User.username == "demo").first()
    if owner:
        print(f"Reusing user: {owner.username} (ID: {owner.id})")
    else:
        owner = User(
            username="demo",
            email="demo@example.com",
            hashed_password=get_password_hash("demopassword"),
        )
        db.add(owner)
        db.flush()
        print(f"Created user: {owner.username} (ID: {owner.id}, password: demopassword)")

    for data in SAMPLE_APARTMENTS:
        db.add(Apartment(**data, owner=owner))
    db.commit()

    print(f"Created {len(SAMPLE_APARTMENTS)} apartments")
    return len(SAMPLE_APARTMENTS)


def seed_database() -> None:
    """Seed the configured database with sample data."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_apartments(db)
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
