from typing import Any, Dict, List, Optional
import logging
from postgrest.exceptions import APIError
from supabase import Client
from easyjatra.infra.results import rows_of, first_row, is_unique_violation

logger = logging.getLogger(__name__)

TABLE = "vendor_requests"

# module easyjatra.vendors.repository
def get_request(client: Client, email: str) -> Optional[Dict[str, Any]]:
    res = client.table(TABLE).select("*").eq("email", email).limit(1).execute()
    return first_row(res)

def insert_request(client: Client, email: str) -> Optional[Dict[str, Any]]:
    """
    Enregistre une demande vendeur (contrainte UNIQUE sur email).
    - Retourne None si une demande est déjà en attente pour cet email.
    """
    try:
        res = client.table(TABLE).insert({"email": email}).execute()
    except APIError as e:
        if is_unique_violation(e):
            logger.info("vendors.repository.insert_request duplicate email=%s", email)
            return None
        raise
    return first_row(res)

def list_requests(client: Client) -> List[Dict[str, Any]]:
    res = client.table(TABLE).select("*").execute()
    return rows_of(res)

def delete_request(client: Client, email: str) -> List[Dict[str, Any]]:
    res = client.table(TABLE).delete().eq("email", email).execute()
    return rows_of(res)
