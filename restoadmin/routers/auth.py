from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session as DBSession

from restoadmin.core.session import Session
from restoadmin.core.storage import CookieSessionStore
from restoadmin.db.session import get_db
from restoadmin.dependencies.auth import get_session_store, require_session
from restoadmin.dependencies.body import json_body
from restoadmin.schemas.auth import LoginRequest
from restoadmin.services.auth_service import authenticate_admin, authenticate_restaurant


router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _login_response(store: CookieSessionStore, session: Session) -> JSONResponse:
    store.set(session)
    response = JSONResponse({"user": session.to_dict()})
    return store.apply_to(response)


@router.post("/login")
def admin_login(
    payload: LoginRequest = Depends(json_body(LoginRequest)),
    db: DBSession = Depends(get_db),
    store: CookieSessionStore = Depends(get_session_store)
):
    session = authenticate_admin(db, payload.email, payload.password)
    return _login_response(store, session)


@router.post("/restaurant-login")
def restaurant_login(
    payload: LoginRequest = Depends(json_body(LoginRequest)),
    db: DBSession = Depends(get_db),
    store: CookieSessionStore = Depends(get_session_store)
):
    session = authenticate_restaurant(db, payload.email, payload.password)
    return _login_response(store, session)


@router.post("/logout")
def logout(store: CookieSessionStore = Depends(get_session_store)):
    store.clear()
    response = JSONResponse({"success": True})
    return store.apply_to(response)


@router.get("/me")
def me(session: Session = Depends(require_session)):
    return {"user": session.to_dict()}
