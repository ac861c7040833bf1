"""
Accès aux données 'tickets' (table tickets).
- Lecture publique (catalogue, détail), écriture par les vendeurs.
- decrement_quantity passe par la fonction SQL decrement_ticket_quantity (quantity = quantity - 1, atomique, sans plancher).
"""
from typing import Any, Dict, List, Optional
import logging
from postgrest.exceptions import APIError
from supabase import Client
from easyjatra.infra.results import rows_of, first_row, is_invalid_identifier

logger = logging.getLogger(__name__)

TABLE = "tickets"

def list_tickets(client: Client) -> List[Dict[str, Any]]:
    res = client.table(TABLE).select("*").execute()
    return rows_of(res)

def get_ticket(client: Client, ticket_id: str) -> Optional[Dict[str, Any]]:
    """
    Récupère un ticket par id.
    - Retourne None si introuvable ou si l'id n'a pas un format valide.
    """
    if not ticket_id:
        return None
    try:
        res = client.table(TABLE).select("*").eq("id", ticket_id).limit(1).execute()
    except APIError as e:
        if is_invalid_identifier(e):
            return None
        raise
    return first_row(res)

def create_ticket(client: Client, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    res = client.table(TABLE).insert(data).execute()
    return first_row(res)

def list_vendor_tickets(client: Client, email: str) -> List[Dict[str, Any]]:
    """Tickets dont le vendeur embarqué (vendor->>email) correspond à l'email."""
    res = client.table(TABLE).select("*").eq("vendor->>email", email).execute()
    return rows_of(res)

def decrement_quantity(client: Client, ticket_id: str) -> None:
    client.rpc("decrement_ticket_quantity", {"ticket_id": ticket_id}).execute()
