from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session as DBSession

from restoadmin.core.roles import ADMIN, SUPER_ADMIN, has_permission
from restoadmin.core.session import Session
from restoadmin.db.session import get_db
from restoadmin.dependencies.auth import require_roles, require_session
from restoadmin.models import CustomerUser
from restoadmin.services.customer_auth_service import serialize_customer


router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.get("/customers")
def get_all_customers(
    db: DBSession = Depends(get_db),
    session: Session = Depends(require_roles(SUPER_ADMIN, ADMIN))
):
    customers = db.query(CustomerUser).order_by(CustomerUser.created_at.desc()).all()
    return [serialize_customer(customer) for customer in customers]


@router.get("/permissions")
def check_permission(
    route: str = Query(...),
    session: Session = Depends(require_session)
):
    return {
        "route": route,
        "role": session.role,
        "allowed": has_permission(session, route)
    }
