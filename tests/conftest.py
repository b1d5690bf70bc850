import os

# settings import anında okunur; uygulama import edilmeden önce set edilmeli
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SEED_DEFAULT_DATA"] = "true"
os.environ["SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from restoadmin.core.security import hash_password
from restoadmin.db.base import Base
from restoadmin.db.init_db import seed_default_data
from restoadmin.db.session import SessionLocal, engine
from restoadmin.main import app
from restoadmin.models import CustomerUser, Restaurant


@pytest.fixture()
def db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db):
    seed_default_data(db)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def customer(db):
    user = CustomerUser(
        phone_number="+923001234567",
        name="Bilal",
        is_phone_verified=True
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def customer_with_password(db, customer):
    customer.password = hash_password("secret1")
    db.commit()
    return customer


@pytest.fixture()
def suspended_restaurant(db):
    restaurant = Restaurant(
        name="Closed Kitchen",
        slug="closed-kitchen",
        owner_name="Sara",
        owner_email="sara@closed.com",
        password_hash=hash_password("restaurant123"),
        status="suspended"
    )
    db.add(restaurant)
    db.commit()
    return restaurant
