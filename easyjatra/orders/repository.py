from typing import Any, Dict, List, Optional
import logging
from postgrest.exceptions import APIError
from supabase import Client
from easyjatra.infra.results import rows_of, first_row, is_unique_violation

logger = logging.getLogger(__name__)

TABLE = "orders"

def find_by_transaction(client: Client, transaction_id: str) -> Optional[Dict[str, Any]]:
    """Commande déjà enregistrée pour ce paiement (transaction_id = payment_intent Stripe)."""
    if not transaction_id:
        return None
    res = client.table(TABLE).select("*").eq("transaction_id", transaction_id).limit(1).execute()
    return first_row(res)

def insert_order(client: Client, order: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Insère une commande, gardée par la contrainte UNIQUE sur transaction_id.
    - Retourne la ligne créée.
    - Retourne None si une commande existe déjà pour ce transaction_id (insert concurrent gagnant).
    """
    try:
        res = client.table(TABLE).insert(order).execute()
    except APIError as e:
        if is_unique_violation(e):
            logger.info("orders.repository.insert_order duplicate transaction_id=%s", order.get("transaction_id"))
            return None
        raise
    return first_row(res)

def list_customer_orders(client: Client, email: str) -> List[Dict[str, Any]]:
    res = (
        client.table(TABLE)
        .select("*")
        .eq("customer", email)
        .order("created_at", desc=True)
        .execute()
    )
    return rows_of(res)

def list_vendor_orders(client: Client, email: str) -> List[Dict[str, Any]]:
    res = (
        client.table(TABLE)
        .select("*")
        .eq("vendor->>email", email)
        .order("created_at", desc=True)
        .execute()
    )
    return rows_of(res)
