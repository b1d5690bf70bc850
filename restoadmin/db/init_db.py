from sqlalchemy.orm import Session

from restoadmin.core.config import settings
from restoadmin.core.logger import logger
from restoadmin.core.roles import SUPER_ADMIN
from restoadmin.core.security import hash_password
from restoadmin.db.base import Base
from restoadmin.db.session import SessionLocal, engine
from restoadmin.models import AdminUser, Restaurant

DEFAULT_ADMIN = {
    "name": "Super Admin",
    "email": "admin@demo.com",
    "password": "password123",
    "role": SUPER_ADMIN,
}

DEFAULT_RESTAURANTS = [
    {
        "name": "Al-Baik Restaurant",
        "slug": "al-baik-restaurant",
        "owner_name": "Ahmed Khan",
        "owner_email": "ahmed@albaik.com",
        "owner_phone": "03001234567",
        "password": "restaurant123",
        "address": "Main Gulberg, Lahore",
        "city": "Lahore",
    },
    {
        "name": "Karachi Biryani House",
        "slug": "karachi-biryani-house",
        "owner_name": "Zain Ali",
        "owner_email": "zain@biryanihouse.com",
        "owner_phone": "03219876543",
        "password": "restaurant123",
        "address": "Defence Phase 2, Karachi",
        "city": "Karachi",
    },
]


def seed_default_data(db: Session) -> None:
    if db.query(AdminUser).first() is None:
        admin = dict(DEFAULT_ADMIN)
        db.add(AdminUser(
            name=admin["name"],
            email=admin["email"],
            role=admin["role"],
            password_hash=hash_password(admin["password"])
        ))
        logger.info(f"SEED | admin_user={admin['email']}")

    if db.query(Restaurant).first() is None:
        for data in DEFAULT_RESTAURANTS:
            data = dict(data)
            password = data.pop("password")
            db.add(Restaurant(
                **data,
                status="active",
                password_hash=hash_password(password)
            ))
        logger.info(f"SEED | restaurants={len(DEFAULT_RESTAURANTS)}")

    db.commit()


def init_db() -> None:
    logger.info("DB INIT STARTED")
    Base.metadata.create_all(bind=engine)
    logger.info("DB TABLES CREATED")

    if not settings.SEED_DEFAULT_DATA:
        return

    db = SessionLocal()
    try:
        seed_default_data(db)
    finally:
        db.close()
