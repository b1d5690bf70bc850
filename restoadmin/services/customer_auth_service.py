from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from restoadmin.core.exceptions import InvalidCredentials, PersistenceError, UserNotFound
from restoadmin.core.logger import logger
from restoadmin.core.security import hash_password, verify_password
from restoadmin.models import CustomerUser


def find_by_phone(db: Session, phone_number: str):
    return (
        db.query(CustomerUser)
        .filter(CustomerUser.phone_number == phone_number)
        .limit(1)
        .first()
    )


def serialize_customer(user: CustomerUser) -> dict:
    # password alanı hiçbir zaman dışarı çıkmaz
    return {
        "id": str(user.id),
        "phoneNumber": user.phone_number,
        "name": user.name,
        "email": user.email,
        "isPhoneVerified": bool(user.is_phone_verified),
        "isActive": bool(user.is_active),
        "createdAt": user.created_at.isoformat() if user.created_at else None,
        "updatedAt": user.updated_at.isoformat() if user.updated_at else None,
    }


def set_password(db: Session, phone_number: str, password: str) -> None:
    """
    Kayıtlı müşterinin şifresini set eder.
    Kayıt yoksa yeni kullanıcı oluşturulmaz.
    """
    try:
        user = find_by_phone(db, phone_number)
        if user is None:
            logger.warning(f"SET PASSWORD FAILED | phone={phone_number} | reason=not_found")
            raise UserNotFound("User not found. Please register first.")

        hashed = hash_password(password)

        db.query(CustomerUser).filter(CustomerUser.id == user.id).update(
            {
                CustomerUser.password: hashed,
                CustomerUser.updated_at: datetime.now(timezone.utc),
            },
            synchronize_session="fetch"
        )
        db.commit()

    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"SET PASSWORD ERROR | phone={phone_number}")
        raise PersistenceError("Failed to set password")

    logger.info(f"SET PASSWORD SUCCESS | user_id={user.id}")


def password_login(db: Session, phone_number: str, password: str) -> dict:
    try:
        user = find_by_phone(db, phone_number)
        if user is None:
            raise UserNotFound("Phone number not registered. Please sign up first.")

        if not user.password:
            raise InvalidCredentials(
                "No password set for this account. Please use OTP login or set a password first.",
                status_code=400
            )

        if not verify_password(password, user.password):
            logger.warning(f"CUSTOMER LOGIN FAILED | phone={phone_number}")
            raise InvalidCredentials("Invalid password. Please try again.", status_code=400)

        user.updated_at = datetime.now(timezone.utc)
        db.commit()
        db.refresh(user)

    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"CUSTOMER LOGIN ERROR | phone={phone_number}")
        raise PersistenceError("Login failed")

    logger.info(f"CUSTOMER LOGIN SUCCESS | user_id={user.id}")
    return serialize_customer(user)
