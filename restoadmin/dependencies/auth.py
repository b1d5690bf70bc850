from typing import Iterable

from fastapi import Depends, HTTPException, Request, status

from restoadmin.core.config import settings
from restoadmin.core.session import Session
from restoadmin.core.storage import CookieSessionStore


def get_session_store(request: Request) -> CookieSessionStore:
    # aynı istekte tek store; router'lar response'a apply_to ile yazar
    store = getattr(request.state, "session_store", None)
    if store is None:
        store = CookieSessionStore(request, key=settings.SESSION_KEY)
        request.state.session_store = store
    return store


def require_session(
    store: CookieSessionStore = Depends(get_session_store)
) -> Session:
    session = store.get()
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return session


def require_roles(*roles: str):
    allowed: Iterable[str] = tuple(roles)

    def dependency(
        session: Session = Depends(require_session)
    ) -> Session:
        if session.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access restricted"
            )
        return session

    return dependency
