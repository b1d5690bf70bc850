from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from restoadmin.core.auth_gate import decide
from restoadmin.core.storage import CookieSessionStore
from restoadmin.dependencies.auth import get_session_store


router = APIRouter(tags=["Auth Gate"])


@router.get("/")
def entry(store: CookieSessionStore = Depends(get_session_store)):
    decision = decide(store.init())

    response = RedirectResponse(decision.redirect_path, status_code=303)
    # bozuk session varsa cookie burada silinir
    return store.apply_to(response)
