import stripe
from fastapi.testclient import TestClient

def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["rate_limit"]["enabled"] is False

def test_health_store_ok(client, store):
    r = client.get("/health/store")
    assert r.status_code == 200
    assert r.json() == {"connect_ok": True}
    store.table.assert_called_with("tickets")

def test_health_store_failure_503(client, store):
    store.table.side_effect = RuntimeError("connection refused")
    r = client.get("/health/store")
    assert r.status_code == 503
    assert r.json()["connect_ok"] is False
    assert "connection refused" in r.json()["error"]

def test_store_not_configured_503(gateway, monkeypatch):
    from easyjatra.app_setup.factory import create_app
    from easyjatra.app_setup import lifespan as lifespan_mod

    monkeypatch.setattr(lifespan_mod, "create_store_client", lambda: None)
    with TestClient(create_app(gateway=gateway)) as c:
        r = c.get("/tickets")
    assert r.status_code == 503
    assert r.json()["detail"] == "Base de données non configurée"

def test_stripe_error_maps_to_502(client, gateway, monkeypatch):
    def _down(**params):
        raise stripe.APIConnectionError("network down")

    monkeypatch.setattr(gateway, "create_session", _down)
    r = client.post("/create-checkout-session", json={
        "name": "Bus", "price": 10, "ticketId": "t1", "customer": {"email": "buyer@example.com"},
    })
    assert r.status_code == 502
    assert r.json()["detail"] == "Erreur du prestataire de paiement"

def test_unhandled_error_generic_500(app, db, monkeypatch):
    def _boom(client):
        raise RuntimeError("secret internals")

    monkeypatch.setattr("easyjatra.tickets.repository.list_tickets", _boom)
    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/tickets")
    assert r.status_code == 500
    assert r.json() == {"detail": "Erreur interne du serveur"}

def test_cors_allows_client_origin(client):
    from easyjatra.config import CORS_ORIGINS

    origin = CORS_ORIGINS[0]
    r = client.options(
        "/tickets",
        headers={"Origin": origin, "Access-Control-Request-Method": "GET"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == origin
