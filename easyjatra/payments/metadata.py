"""
Lecture des métadonnées Stripe (ticketId, customer) d'une session Checkout.
"""
from typing import Any, Dict, Optional, Tuple

# module easyjatra.payments.metadata
def extract_metadata_from_session(session: Dict[str, Any]) -> Tuple[Optional[str], Optional[str]]:
    """
    Extrait (ticket_id, customer_email) depuis session["metadata"].
    - Retourne (None, None) si les métadonnées sont absentes.
    """
    meta = (session or {}).get("metadata") or {}
    ticket_id = meta.get("ticketId") or None
    customer = meta.get("customer") or (session or {}).get("customer_email") or None
    return ticket_id, customer
