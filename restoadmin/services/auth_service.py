from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as DBSession

from restoadmin.core.exceptions import AccountInactive, InvalidCredentials, PersistenceError
from restoadmin.core.logger import logger
from restoadmin.core.roles import RESTAURANT
from restoadmin.core.security import verify_password
from restoadmin.core.session import Session
from restoadmin.models import AdminUser, Restaurant


def authenticate_admin(db: DBSession, email: str, password: str) -> Session:
    try:
        admin = db.query(AdminUser).filter(AdminUser.email == email).first()
        if not admin or not admin.is_active or not verify_password(password, admin.password_hash):
            logger.warning(f"LOGIN FAILED | email={email}")
            raise InvalidCredentials("Invalid credentials")

        admin.last_login_at = datetime.now(timezone.utc)
        db.commit()

    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"LOGIN ERROR | email={email}")
        raise PersistenceError("Login failed")

    logger.info(f"LOGIN SUCCESS | admin_id={admin.id} | email={email}")

    return Session(
        id=str(admin.id),
        name=admin.name,
        email=admin.email,
        role=admin.role
    )


def authenticate_restaurant(db: DBSession, email: str, password: str) -> Session:
    try:
        restaurant = db.query(Restaurant).filter(Restaurant.owner_email == email).first()
        if not restaurant or not verify_password(password, restaurant.password_hash):
            logger.warning(f"RESTAURANT LOGIN FAILED | email={email}")
            raise InvalidCredentials("Invalid credentials")

        if restaurant.status != "active":
            logger.warning(f"RESTAURANT LOGIN BLOCKED | restaurant_id={restaurant.id} | status={restaurant.status}")
            raise AccountInactive("Restaurant account is not active")

    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"RESTAURANT LOGIN ERROR | email={email}")
        raise PersistenceError("Login failed")

    logger.info(f"RESTAURANT LOGIN SUCCESS | restaurant_id={restaurant.id}")

    return Session(
        id=str(restaurant.id),
        name=restaurant.owner_name,
        email=restaurant.owner_email,
        role=RESTAURANT,
        restaurant_id=str(restaurant.id),
        restaurant_name=restaurant.name,
        restaurant_slug=restaurant.slug
    )
