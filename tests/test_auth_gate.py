from restoadmin.core.auth_gate import AuthGate, GateState, decide, landing_path
from restoadmin.core.session import Session, SessionStore
from restoadmin.core.storage import MemoryStorage


def _session(role, slug=None):
    return Session(id="1", name="User", email="u@demo.com", role=role, restaurant_slug=slug)


def test_absent_session_redirects_to_login():
    decision = decide(None)

    assert decision.state == GateState.UNAUTHENTICATED
    assert decision.redirect_path == "/login"
    assert not decision.allowed


def test_restaurant_with_slug_goes_to_its_dashboard():
    decision = decide(_session("restaurant", slug="foo"))

    assert decision.state == GateState.AUTHENTICATED
    assert decision.redirect_path == "/foo/dashboard"
    assert decision.role == "restaurant"


def test_restaurant_without_slug_goes_to_dashboard():
    assert decide(_session("restaurant")).redirect_path == "/dashboard"


def test_admin_goes_to_dashboard():
    assert decide(_session("admin")).redirect_path == "/dashboard"


def test_allowed_role_is_let_through():
    decision = decide(_session("chef"), allowed_roles=["chef", "admin"])

    assert decision.allowed
    assert decision.state == GateState.AUTHENTICATED


def test_disallowed_role_is_sent_to_landing_page():
    decision = decide(_session("restaurant", slug="foo"), allowed_roles=["admin"])

    assert decision.redirect_path == "/foo/dashboard"


def test_landing_path():
    assert landing_path(_session("super_admin")) == "/dashboard"
    assert landing_path(_session("restaurant", slug="bar")) == "/bar/dashboard"


class Navigator:
    def __init__(self):
        self.paths = []

    def __call__(self, path):
        self.paths.append(path)


def test_gate_starts_unchecked():
    gate = AuthGate(SessionStore(MemoryStorage()), Navigator())

    assert gate.state == GateState.UNCHECKED


def test_gate_redirects_unauthenticated():
    navigate = Navigator()
    gate = AuthGate(SessionStore(MemoryStorage()), navigate)

    gate.check()

    assert gate.state == GateState.UNAUTHENTICATED
    assert navigate.paths == ["/login"]


def test_gate_clears_corrupt_session():
    storage = MemoryStorage()
    storage.set_item("user", "{broken")
    navigate = Navigator()
    gate = AuthGate(SessionStore(storage), navigate)

    gate.check()

    assert navigate.paths == ["/login"]
    assert storage.get_item("user") is None


def test_gate_does_not_renavigate_for_same_session():
    store = SessionStore(MemoryStorage())
    store.set(_session("admin"))
    navigate = Navigator()
    gate = AuthGate(store, navigate)

    gate.check()
    gate.check()

    assert navigate.paths == ["/dashboard"]


def test_gate_reruns_after_logout_elsewhere():
    store = SessionStore(MemoryStorage())
    store.set(_session("admin"))
    navigate = Navigator()
    gate = AuthGate(store, navigate, allowed_roles=["admin"])

    first = gate.check()
    store.clear()
    second = gate.check()

    assert first.allowed
    assert gate.state == GateState.UNAUTHENTICATED
    assert second.redirect_path == "/login"
    assert navigate.paths == ["/login"]


def test_single_allowed_role_as_string():
    assert decide(_session("admin"), allowed_roles="admin").allowed
    # "a", "d", ... karakterleri rol sayılmamalı
    assert not decide(_session("a"), allowed_roles="admin").allowed


def test_gate_accepts_single_role_string():
    store = SessionStore(MemoryStorage())
    store.set(_session("chef"))
    navigate = Navigator()
    gate = AuthGate(store, navigate, allowed_roles="chef")

    assert gate.check().allowed
    assert navigate.paths == []
