"""
Adaptateur Stripe: centralise les appels Checkout.
- StripeGateway est construit une fois dans le lifespan (clé secrète explicite, pas de stripe.api_key global)
  puis injecté dans les vues via get_gateway.
"""
import stripe
from typing import Any, Dict, List, Optional
from fastapi import HTTPException, Request

# module easyjatra.payments.stripe_client
class StripeGateway:
    def __init__(self, api_key: str, client_url: str, currency: str = "usd"):
        self.api_key = api_key
        self.client_url = client_url.rstrip("/")
        self.currency = currency

    def success_url(self) -> str:
        return f"{self.client_url}/payment-success?session_id={{CHECKOUT_SESSION_ID}}"

    def cancel_url(self, ticket_id: str) -> str:
        return f"{self.client_url}/ticket/{ticket_id}"

    def create_session(
        self,
        *,
        line_items: List[Dict[str, Any]],
        customer_email: Optional[str],
        metadata: Dict[str, str],
        success_url: str,
        cancel_url: str,
    ) -> Dict[str, Any]:
        """
        Crée une session Stripe Checkout en mode "payment".
        Retour: dict session (ex: {"id": "cs_test_...", "url": "https://..."})
        """
        params: Dict[str, Any] = {
            "line_items": line_items,
            "mode": "payment",
            "metadata": metadata,
            "success_url": success_url,
            "cancel_url": cancel_url,
        }
        if customer_email:
            params["customer_email"] = customer_email
        session = stripe.checkout.Session.create(api_key=self.api_key, **params)
        # stripe retourne un objet; on le traite comme dict-compatible
        return dict(session)

    def get_session(self, session_id: str) -> Dict[str, Any]:
        """
        Récupère une session Checkout par son identifiant.
        Retour: dict incluant "status", "payment_intent", "metadata", "amount_total".
        """
        session = stripe.checkout.Session.retrieve(session_id, api_key=self.api_key)
        return dict(session)

def create_gateway(api_key: str, client_url: str, currency: str) -> Optional[StripeGateway]:
    if not api_key:
        return None
    return StripeGateway(api_key=api_key, client_url=client_url, currency=currency)

def get_gateway(request: Request) -> StripeGateway:
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        raise HTTPException(status_code=503, detail="Paiement non configuré (STRIPE_SECRET_KEY manquant)")
    return gateway
