"""Couche service des Commandes.
Rôles:
- Construire la commande à partir d'une session Stripe complétée et du ticket acheté.
- Lister les commandes d'un client ou d'un vendeur.
"""
from typing import Any, Dict, List
from fastapi import HTTPException
from supabase import Client
from easyjatra.payments.cart import from_unit_amount
from easyjatra.utils.validators import normalize_email
from . import repository

ORDER_STATUS_PENDING = "pending"

def build_order(session: Dict[str, Any], ticket: Dict[str, Any], ticket_id: str, customer: str) -> Dict[str, Any]:
    """Commande (quantité 1) issue de la session payée; le prix est le montant réellement encaissé."""
    return {
        "ticket_id": ticket_id,
        "transaction_id": session.get("payment_intent"),
        "customer": normalize_email(customer),
        "status": ORDER_STATUS_PENDING,
        "vendor": ticket.get("vendor"),
        "name": ticket.get("name"),
        "category": ticket.get("category"),
        "quantity": 1,
        "price": from_unit_amount(session.get("amount_total") or 0),
        "image": ticket.get("image"),
    }

def list_customer_orders(client: Client, email: str) -> List[Dict[str, Any]]:
    return repository.list_customer_orders(client, normalize_email(email))

def list_orders_for_email(client: Client, caller_email: str, email: str) -> List[Dict[str, Any]]:
    """Variante /my-orders/{email}: un client ne lit que ses propres commandes."""
    if normalize_email(email) != normalize_email(caller_email):
        raise HTTPException(status_code=403, detail="Accès interdit aux commandes d'un autre utilisateur")
    return repository.list_customer_orders(client, normalize_email(caller_email))

def list_vendor_orders(client: Client, email: str) -> List[Dict[str, Any]]:
    return repository.list_vendor_orders(client, normalize_email(email))
