"""
Cas d'usage 'payments': création de la session Checkout et matérialisation de la commande.

Confirmation (confirm_payment):
  1) lit la session Stripe (status, payment_intent, metadata, amount_total)
  2) lit le ticket référencé par metadata.ticketId
  3) cherche une commande existante pour payment_intent
  4) commande existante -> renvoyée telle quelle, aucune écriture
  5) session "complete" + ticket présent -> insert (UNIQUE transaction_id) puis décrément du stock
  6) sinon -> 422 explicite
L'insert et le décrément restent deux écritures distinctes (pas de transaction).
"""
import logging
from typing import Any, Dict

import stripe
from fastapi import HTTPException
from supabase import Client

from easyjatra.orders import repository as orders_repository
from easyjatra.orders.service import build_order
from easyjatra.tickets import repository as tickets_repository
from . import cart
from . import metadata as meta
from .stripe_client import StripeGateway

logger = logging.getLogger(__name__)

SESSION_COMPLETE = "complete"

def create_checkout(gateway: StripeGateway, checkout: Dict[str, Any]) -> Dict[str, Any]:
    """
    Prépare la session Stripe d'un achat de ticket.
    - checkout: {name, image, description, price, quantity, ticketId, customer: {email}}
    Retour: {"url": <url Stripe>}
    """
    ticket_id = str(checkout.get("ticketId") or "")
    customer_email = (checkout.get("customer") or {}).get("email") or ""
    session = gateway.create_session(
        line_items=cart.to_line_items(checkout, gateway.currency),
        customer_email=customer_email,
        metadata=cart.make_metadata(ticket_id, customer_email),
        success_url=gateway.success_url(),
        cancel_url=gateway.cancel_url(ticket_id),
    )
    logger.info("payments.checkout session=%s ticket=%s", session.get("id"), ticket_id)
    return {"url": session.get("url")}

def _retrieve_session(gateway: StripeGateway, session_id: str) -> Dict[str, Any]:
    try:
        return gateway.get_session(session_id)
    except stripe.InvalidRequestError:
        raise HTTPException(status_code=404, detail="Session de paiement introuvable")

def confirm_payment(client: Client, gateway: StripeGateway, session_id: str) -> Dict[str, Any]:
    """
    Transforme une session Checkout complétée en une commande unique.
    - Idempotent: plusieurs confirmations de la même session renvoient le même orderId
      et ne décrémentent le stock qu'une fois.
    Retour: {"transactionId", "orderId"}
    Erreurs: 404 session inconnue, 422 session non finalisée ou ticket supprimé.
    """
    session = _retrieve_session(gateway, session_id)
    transaction_id = session.get("payment_intent")
    ticket_id, customer = meta.extract_metadata_from_session(session)

    ticket = tickets_repository.get_ticket(client, ticket_id) if ticket_id else None
    existing = orders_repository.find_by_transaction(client, transaction_id)
    if existing:
        return {"transactionId": transaction_id, "orderId": existing.get("id")}

    if session.get("status") != SESSION_COMPLETE or not transaction_id:
        raise HTTPException(status_code=422, detail="Session de paiement non finalisée")
    if not ticket:
        raise HTTPException(status_code=422, detail="Billet introuvable pour cette session")

    order = build_order(session, ticket, ticket_id, customer)
    created = orders_repository.insert_order(client, order)
    if created is None:
        # Une confirmation concurrente a inséré la commande: pas de second décrément
        winner = orders_repository.find_by_transaction(client, transaction_id) or {}
        return {"transactionId": transaction_id, "orderId": winner.get("id")}

    tickets_repository.decrement_quantity(client, ticket_id)
    logger.info("payments.confirm order=%s transaction=%s ticket=%s", created.get("id"), transaction_id, ticket_id)
    return {"transactionId": transaction_id, "orderId": created.get("id")}
