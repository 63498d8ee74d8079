"""Tests for the seed script."""

from app.models.apartment import Apartment
from app.models.user import User
from scripts.seed_data import SAMPLE_APARTMENTS, seed_apartments


def test_seed_creates_demo_user_and_apartments(test_db):
    assert seed_apartments(test_db) == len(SAMPLE_APARTMENTS)
    demo = test_db.query(User).filter(User.username == "demo").one()
    assert {a.user_id for a in test_db.query(Apartment)} == {demo.id}


def test_seed_reuses_existing_demo_user(test_db):
    existing = User(username="demo", email="demo@example.com", hashed_password="x")
    test_db.add(existing)
    test_db.commit()
    assert seed_apartments(test_db) == len(SAMPLE_APARTMENTS)
    assert test_db.query(User).count() == 1
    assert all(a.user_id == existing.id for a in test_db.query(Apartment))


def test_seed_skips_populated_database(test_db, apartment):
    assert seed_apartments(test_db) == 0
    assert test_db.query(Apartment).count() == 1
