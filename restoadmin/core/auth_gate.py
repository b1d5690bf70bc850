"""
Auth gate: korumalı bir sayfaya girişte session'a bakıp
sayfanın açılmasına ya da yönlendirmeye karar verir.

Karar fonksiyonu (decide) saf bir fonksiyondur; HTTP katmanı ya da
navigasyon callback'i kararı uygular.
"""
import enum
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

from restoadmin.core.config import settings
from restoadmin.core.logger import logger
from restoadmin.core.roles import RESTAURANT, has_role
from restoadmin.core.session import Session, SessionStore


class GateState(str, enum.Enum):
    UNCHECKED = "unchecked"
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class GateDecision:
    state: GateState
    redirect_path: Optional[str] = None
    role: Optional[str] = None

    @property
    def allowed(self) -> bool:
        return self.redirect_path is None


def landing_path(session: Session) -> str:
    if session.role == RESTAURANT and session.restaurant_slug:
        return f"/{session.restaurant_slug}/dashboard"
    return "/dashboard"


def decide(
    session: Optional[Session],
    allowed_roles: Optional[Union[str, Iterable[str]]] = None,
    login_path: Optional[str] = None,
) -> GateDecision:
    if session is None:
        return GateDecision(
            state=GateState.UNAUTHENTICATED,
            redirect_path=login_path or settings.LOGIN_PATH
        )

    if allowed_roles is not None and has_role(session, allowed_roles):
        return GateDecision(state=GateState.AUTHENTICATED, role=session.role)

    return GateDecision(
        state=GateState.AUTHENTICATED,
        redirect_path=landing_path(session),
        role=session.role
    )


class AuthGate:
    """
    Session store'u okuyup kararı navigate callback'i ile uygular.

    check() her çağrıldığında store tekrar okunur; karar yalnızca
    session değiştiyse (örn. başka yerde logout) yeniden verilir.
    """

    def __init__(
        self,
        store: SessionStore,
        navigate: Callable[[str], None],
        allowed_roles: Optional[Union[str, Iterable[str]]] = None,
    ):
        self.store = store
        self.navigate = navigate
        self.allowed_roles = allowed_roles
        self.state = GateState.UNCHECKED
        self.decision: Optional[GateDecision] = None
        self._last_session: Optional[Session] = None

    def check(self) -> GateDecision:
        session = self.store.get()

        if self.decision is not None and session == self._last_session:
            return self.decision

        decision = decide(session, self.allowed_roles)
        self._last_session = session
        self.decision = decision
        self.state = decision.state

        if decision.redirect_path is not None:
            logger.info(
                f"AUTH GATE REDIRECT | state={decision.state.value} | to={decision.redirect_path}"
            )
            self.navigate(decision.redirect_path)

        return decision
