import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr, Field, field_validator
from supabase import Client

from easyjatra.infra.supabase_client import get_store
from easyjatra.utils.rate_limit import optional_rate_limit
from easyjatra.payments.stripe_client import StripeGateway, get_gateway
from easyjatra.payments import service as payments_service
from easyjatra.utils.validators import normalize_email

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Payments"])

class CustomerInfo(BaseModel):
    email: EmailStr
    name: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, v: str) -> str:
        return normalize_email(v)

class CheckoutRequest(BaseModel):
    name: str = Field(min_length=1)
    image: Optional[str] = None
    description: Optional[str] = None
    price: float = Field(gt=0)
    quantity: int = Field(default=1, ge=1)
    ticketId: str = Field(min_length=1)
    customer: CustomerInfo

class PaymentSuccessRequest(BaseModel):
    sessionId: str = Field(min_length=1)

# module easyjatra.payments.views
@router.post("/create-checkout-session", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
def create_checkout_session(body: CheckoutRequest, gateway: StripeGateway = Depends(get_gateway)):
    """
    Crée une session Checkout Stripe pour un ticket.
    - Entrée JSON: {name, image, description, price, quantity, ticketId, customer: {email}}
    - Métadonnées de session: {ticketId, customer} pour la confirmation
    - Retour: {"url": "<url Stripe>"}
    """
    return payments_service.create_checkout(gateway, body.model_dump())

@router.post("/payment-success", dependencies=[Depends(optional_rate_limit(times=20, seconds=60))])
def payment_success(
    body: PaymentSuccessRequest,
    client: Client = Depends(get_store),
    gateway: StripeGateway = Depends(get_gateway),
):
    """
    Confirme la session Stripe et matérialise la commande (au plus une par paiement).
    - Retour: {"transactionId", "orderId"}
    - Erreurs: 404 session inconnue, 422 session non finalisée ou billet supprimé
    """
    return payments_service.confirm_payment(client, gateway, body.sessionId)
