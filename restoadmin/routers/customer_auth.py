from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from restoadmin.core.exceptions import ApiError, PersistenceError
from restoadmin.core.logger import logger
from restoadmin.db.session import get_db
from restoadmin.dependencies.body import json_body
from restoadmin.schemas.customer_auth import PasswordLoginRequest, SetPasswordRequest
from restoadmin.services import customer_auth_service


router = APIRouter(prefix="/api/customer-auth", tags=["Customer Auth"])


@router.post("/set-password")
def set_password(
    payload: SetPasswordRequest = Depends(json_body(SetPasswordRequest)),
    db: Session = Depends(get_db)
):
    try:
        customer_auth_service.set_password(db, payload.phone_number, payload.password)
    except ApiError:
        raise
    except Exception:
        logger.exception(f"SET PASSWORD ERROR | phone={payload.phone_number}")
        raise PersistenceError("Failed to set password")

    return {
        "success": True,
        "message": "Password set successfully"
    }


@router.post("/password-login")
def password_login(
    payload: PasswordLoginRequest = Depends(json_body(PasswordLoginRequest)),
    db: Session = Depends(get_db)
):
    try:
        user = customer_auth_service.password_login(db, payload.phone_number, payload.password)
    except ApiError:
        raise
    except Exception:
        logger.exception(f"CUSTOMER LOGIN ERROR | phone={payload.phone_number}")
        raise PersistenceError("Login failed")

    return {
        "success": True,
        "message": "Login successful",
        "user": user,
        "isNewUser": False
    }
