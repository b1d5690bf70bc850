from restoadmin.core.security import verify_password
from restoadmin.models import CustomerUser

URL = "/api/customer-auth/set-password"


def _payload(**overrides):
    data = {
        "phoneNumber": "+923001234567",
        "password": "secret1",
        "confirmPassword": "secret1",
    }
    data.update(overrides)
    return data


def test_short_password_rejected(client, customer):
    response = client.post(URL, json=_payload(password="abc12", confirmPassword="abc12"))

    assert response.status_code == 400
    assert response.json() == {"error": "Password must be at least 6 characters"}


def test_mismatched_passwords_rejected(client, customer):
    response = client.post(URL, json=_payload(password="secret1", confirmPassword="secret2"))

    assert response.status_code == 400
    assert response.json() == {"error": "Passwords don't match"}


def test_length_error_reported_before_mismatch(client, customer):
    response = client.post(URL, json=_payload(password="abc", confirmPassword="xyz"))

    assert response.status_code == 400
    assert "at least 6" in response.json()["error"]


def test_empty_phone_rejected(client):
    response = client.post(URL, json=_payload(phoneNumber="  "))

    assert response.status_code == 400
    assert response.json() == {"error": "Phone number is required"}


def test_missing_field_rejected(client):
    response = client.post(URL, json={"phoneNumber": "+923001234567", "password": "secret1"})

    assert response.status_code == 400
    assert "error" in response.json()


def test_non_object_body_rejected(client):
    response = client.post(URL, json=["secret1"])

    assert response.status_code == 400
    assert response.json() == {"error": "Request body must be a JSON object"}


def test_invalid_json_rejected(client):
    response = client.post(URL, content=b"{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}


def test_unknown_phone_does_not_create_user(client, db):
    response = client.post(URL, json=_payload(phoneNumber="+923009999999"))

    assert response.status_code == 400
    assert response.json() == {"error": "User not found. Please register first."}
    db.expire_all()
    assert db.query(CustomerUser).count() == 0


def test_password_is_hashed_and_stored(client, db, customer):
    previous_updated_at = customer.updated_at

    response = client.post(URL, json=_payload())

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Password set successfully"}

    db.expire_all()
    stored = db.get(CustomerUser, customer.id)
    assert stored.password is not None
    assert stored.password != "secret1"
    assert verify_password("secret1", stored.password)
    assert stored.updated_at is not None
    assert stored.updated_at != previous_updated_at


def test_repeated_call_overwrites_hash(client, db, customer):
    client.post(URL, json=_payload())
    db.expire_all()
    first_hash = db.get(CustomerUser, customer.id).password

    response = client.post(URL, json=_payload(password="another1", confirmPassword="another1"))

    assert response.status_code == 200
    db.expire_all()
    second_hash = db.get(CustomerUser, customer.id).password
    assert second_hash != first_hash
    assert verify_password("another1", second_hash)


def test_persistence_failure_is_not_leaked(client, customer, monkeypatch):
    from sqlalchemy.exc import OperationalError
    from restoadmin.services import customer_auth_service

    def broken_lookup(db, phone_number):
        raise OperationalError("SELECT ...", {}, Exception("connection lost"))

    monkeypatch.setattr(customer_auth_service, "find_by_phone", broken_lookup)

    response = client.post(URL, json=_payload())

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to set password"}


def test_unexpected_failure_returns_generic_error(client, customer, monkeypatch):
    from restoadmin.services import customer_auth_service

    def broken_hash(password):
        raise RuntimeError("hasher exploded")

    monkeypatch.setattr(customer_auth_service, "hash_password", broken_hash)

    response = client.post(URL, json=_payload())

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to set password"}


def test_only_post_allowed(client):
    for method in ("get", "put", "delete", "patch"):
        response = getattr(client, method)(URL)
        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}
