import pytest
import stripe
from typing import Any, Dict, Generator, List, Optional
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from easyjatra.app_setup.factory import create_app
from easyjatra.utils.security import get_current_user

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)


class FakeGateway:
    """Passerelle Stripe en mémoire: mêmes méthodes que StripeGateway, sans réseau."""

    def __init__(self, client_url: str = "http://front.test", currency: str = "usd"):
        self.client_url = client_url
        self.currency = currency
        self.sessions: Dict[str, Dict[str, Any]] = {}
        self.created: List[Dict[str, Any]] = []

    def success_url(self) -> str:
        return f"{self.client_url}/payment-success?session_id={{CHECKOUT_SESSION_ID}}"

    def cancel_url(self, ticket_id: str) -> str:
        return f"{self.client_url}/ticket/{ticket_id}"

    def create_session(self, **params) -> Dict[str, Any]:
        self.created.append(params)
        sid = f"cs_test_{len(self.created)}"
        return {"id": sid, "url": f"https://checkout.stripe.test/{sid}"}

    def get_session(self, session_id: str) -> Dict[str, Any]:
        if session_id not in self.sessions:
            raise stripe.InvalidRequestError(f"No such checkout.session: '{session_id}'", "id")
        return self.sessions[session_id]

    def add_session(
        self,
        session_id: str,
        *,
        status: str = "complete",
        payment_intent: Optional[str] = "pi_1",
        ticket_id: str = "t1",
        customer: str = "buyer@example.com",
        amount_total: int = 1995,
    ) -> Dict[str, Any]:
        session = {
            "id": session_id,
            "status": status,
            "payment_intent": payment_intent,
            "amount_total": amount_total,
            "metadata": {"ticketId": ticket_id, "customer": customer},
        }
        self.sessions[session_id] = session
        return session


class FakeDB:
    """
    Tables en mémoire qui remplacent les repositories Supabase.
    - Les contraintes UNIQUE (orders.transaction_id, users.email, vendor_requests.email)
      sont simulées: l'insert concurrent renvoie None comme le repository réel.
    """

    def __init__(self):
        self.tickets: List[Dict[str, Any]] = []
        self.orders: List[Dict[str, Any]] = []
        self.users: List[Dict[str, Any]] = []
        self.vendor_requests: List[Dict[str, Any]] = []
        self._seq = 0

    def _next_id(self, prefix: str) -> str:
        self._seq += 1
        return f"{prefix}{self._seq}"

    # tickets
    def list_tickets(self, client):
        return list(self.tickets)

    def get_ticket(self, client, ticket_id):
        return next((t for t in self.tickets if t["id"] == ticket_id), None)

    def create_ticket(self, client, data):
        row = {"id": self._next_id("t-"), **data}
        self.tickets.append(row)
        return row

    def list_vendor_tickets(self, client, email):
        return [t for t in self.tickets if (t.get("vendor") or {}).get("email") == email]

    def decrement_quantity(self, client, ticket_id):
        ticket = self.get_ticket(client, ticket_id)
        if ticket is not None:
            ticket["quantity"] = ticket["quantity"] - 1

    # orders
    def find_by_transaction(self, client, transaction_id):
        return next((o for o in self.orders if o["transaction_id"] == transaction_id), None)

    def insert_order(self, client, order):
        if self.find_by_transaction(client, order["transaction_id"]):
            return None
        row = {"id": self._next_id("o-"), **order}
        self.orders.append(row)
        return row

    def list_customer_orders(self, client, email):
        return [o for o in self.orders if o["customer"] == email]

    def list_vendor_orders(self, client, email):
        return [o for o in self.orders if (o.get("vendor") or {}).get("email") == email]

    # users
    def get_user_by_email(self, client, email):
        return next((u for u in self.users if u["email"] == email), None)

    def insert_user(self, client, data):
        if self.get_user_by_email(client, data["email"]):
            return None
        row = {"id": self._next_id("u-"), **data}
        self.users.append(row)
        return row

    def update_last_login(self, client, email, logged_in_at):
        rows = [u for u in self.users if u["email"] == email]
        for u in rows:
            u["last_logged_in"] = logged_in_at
        return rows

    def update_role(self, client, email, role):
        rows = [u for u in self.users if u["email"] == email]
        for u in rows:
            u["role"] = role
        return rows

    def list_users_except(self, client, email):
        return [u for u in self.users if u["email"] != email]

    # vendor_requests
    def get_request(self, client, email):
        return next((r for r in self.vendor_requests if r["email"] == email), None)

    def insert_request(self, client, email):
        if self.get_request(client, email):
            return None
        row = {"id": self._next_id("vr-"), "email": email}
        self.vendor_requests.append(row)
        return row

    def list_requests(self, client):
        return list(self.vendor_requests)

    def delete_request(self, client, email):
        removed = [r for r in self.vendor_requests if r["email"] == email]
        self.vendor_requests = [r for r in self.vendor_requests if r["email"] != email]
        return removed


_PATCHED = {
    "easyjatra.tickets.repository": [
        "list_tickets", "get_ticket", "create_ticket", "list_vendor_tickets", "decrement_quantity",
    ],
    "easyjatra.orders.repository": [
        "find_by_transaction", "insert_order", "list_customer_orders", "list_vendor_orders",
    ],
    "easyjatra.users.repository": [
        "get_user_by_email", "insert_user", "update_last_login", "update_role", "list_users_except",
    ],
    "easyjatra.vendors.repository": [
        "get_request", "insert_request", "list_requests", "delete_request",
    ],
}


@pytest.fixture(autouse=True)
def _test_env(monkeypatch):
    # Pas de Redis en tests: rate limiting désactivé sauf test dédié
    monkeypatch.setenv("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")
    monkeypatch.delenv("LOCAL_RATE_LIMIT_FALLBACK", raising=False)
    monkeypatch.delenv("USE_FAKE_REDIS_FOR_TESTS", raising=False)


@pytest.fixture
def db(monkeypatch) -> FakeDB:
    fake = FakeDB()
    for module, names in _PATCHED.items():
        for name in names:
            monkeypatch.setattr(f"{module}.{name}", getattr(fake, name))
    return fake


@pytest.fixture
def store() -> MagicMock:
    return MagicMock(name="supabase")


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def app(store, gateway):
    return create_app(store=store, gateway=gateway)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def login(app):
    """Authentifie les requêtes suivantes avec l'email donné (override de get_current_user)."""
    def _login(email: str = "test@example.com") -> Dict[str, Any]:
        user = {"id": f"id-{email}", "email": email, "token": "fake-token"}
        app.dependency_overrides[get_current_user] = lambda: user
        return user
    yield _login
    app.dependency_overrides.pop(get_current_user, None)


@pytest.fixture
def seed_user(db):
    def _seed(email: str, role: str = "customer") -> Dict[str, Any]:
        row = {"id": f"id-{email}", "email": email, "role": role}
        db.users.append(row)
        return row
    return _seed


@pytest.fixture
def seed_ticket(db):
    def _seed(ticket_id: str = "t1", quantity: int = 5, vendor_email: str = "vendor@example.com", **extra) -> Dict[str, Any]:
        row = {
            "id": ticket_id,
            "name": "Kathmandu - Pokhara",
            "category": "bus",
            "price": 19.95,
            "quantity": quantity,
            "vendor": {"email": vendor_email, "name": "Himalaya Travels"},
            "image": "https://img.test/bus.png",
            **extra,
        }
        db.tickets.append(row)
        return row
    return _seed
