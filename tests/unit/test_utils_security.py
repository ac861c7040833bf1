from unittest.mock import MagicMock
from fastapi import FastAPI, Depends
from fastapi.testclient import TestClient

from easyjatra.infra.supabase_client import get_store
from easyjatra.utils.security import (
    get_bearer_token,
    get_current_user,
    is_authorized,
    require_admin,
    require_vendor,
)

def _make_app(store):
    app = FastAPI()
    app.state.store = store

    @app.get("/me")
    def me(user=Depends(get_current_user)):
        return user

    @app.get("/admin")
    def admin(user=Depends(require_admin)):
        return {"ok": True, "role": user["role"]}

    @app.get("/vendor")
    def vendor(user=Depends(require_vendor)):
        return {"ok": True}

    return app

def _store_with_user(email="user@example.com"):
    store = MagicMock()
    store.auth.get_user.return_value = MagicMock(user={"id": "uid-1", "email": f" {email} "})
    return store

def test_is_authorized_requires_existing_row_and_exact_role():
    assert is_authorized({"role": "admin"}, "admin") is True
    assert is_authorized({"role": "vendor"}, "admin") is False
    assert is_authorized({"role": None}, "admin") is False
    assert is_authorized(None, "admin") is False

def test_get_bearer_token():
    req = MagicMock()
    req.headers = {"Authorization": "Bearer abc"}
    assert get_bearer_token(req) == "abc"
    req.headers = {"Authorization": "Basic abc"}
    assert get_bearer_token(req) is None
    req.headers = {}
    assert get_bearer_token(req) is None

def test_get_current_user_missing_token_401():
    client = TestClient(_make_app(_store_with_user()))
    r = client.get("/me")
    assert r.status_code == 401
    assert r.json()["detail"] == "Accès non autorisé"

def test_get_current_user_verified_identity():
    store = _store_with_user("user@example.com")
    client = TestClient(_make_app(store))
    r = client.get("/me", headers={"Authorization": "Bearer good-token"})
    assert r.status_code == 200
    assert r.json() == {"id": "uid-1", "email": "user@example.com", "token": "good-token"}
    store.auth.get_user.assert_called_once_with("good-token")

def test_get_current_user_rejected_token_401():
    store = MagicMock()
    store.auth.get_user.side_effect = Exception("invalid JWT")
    client = TestClient(_make_app(store))
    r = client.get("/me", headers={"Authorization": "Bearer bad"})
    assert r.status_code == 401

def test_get_current_user_without_email_401():
    store = MagicMock()
    store.auth.get_user.return_value = MagicMock(user=None)
    client = TestClient(_make_app(store))
    assert client.get("/me", headers={"Authorization": "Bearer t"}).status_code == 401

def test_require_admin_checks_users_row(db, seed_user):
    client = TestClient(_make_app(_store_with_user("boss@example.com")))
    headers = {"Authorization": "Bearer t"}

    # Aucun enregistrement users -> 403
    assert client.get("/admin", headers=headers).status_code == 403

    seed_user("boss@example.com", role="vendor")
    r = client.get("/admin", headers=headers)
    assert r.status_code == 403
    assert r.json()["detail"] == "Action réservée au rôle admin"
    assert client.get("/vendor", headers=headers).status_code == 200

    db.users[0]["role"] = "admin"
    r = client.get("/admin", headers=headers)
    assert r.status_code == 200
    assert r.json() == {"ok": True, "role": "admin"}

def test_store_not_configured_503():
    client = TestClient(_make_app(None))
    r = client.get("/me", headers={"Authorization": "Bearer t"})
    assert r.status_code == 503

def test_missing_token_401_even_without_store():
    client = TestClient(_make_app(None))
    r = client.get("/me")
    assert r.status_code == 401
    assert r.json()["detail"] == "Accès non autorisé"
    assert client.get("/admin").status_code == 401

def test_identity_email_is_lowercased():
    store = MagicMock()
    store.auth.get_user.return_value = MagicMock(user={"id": "uid-2", "email": "Alice@Example.COM"})
    client = TestClient(_make_app(store))
    r = client.get("/me", headers={"Authorization": "Bearer t"})
    assert r.json()["email"] == "alice@example.com"
