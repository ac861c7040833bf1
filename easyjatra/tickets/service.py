from typing import Any, Dict, List
from fastapi import HTTPException
from supabase import Client
from easyjatra.infra.results import insert_result
from easyjatra.utils.validators import normalize_email
from . import repository

def list_tickets(client: Client) -> List[Dict[str, Any]]:
    return repository.list_tickets(client)

def get_ticket(client: Client, ticket_id: str) -> Dict[str, Any]:
    ticket = repository.get_ticket(client, ticket_id)
    if not ticket:
        raise HTTPException(status_code=404, detail="Billet introuvable")
    return ticket

def create_ticket(client: Client, data: Dict[str, Any], vendor_email: str) -> Dict[str, Any]:
    """
    Publie un ticket pour le vendeur connecté.
    - vendor.email vient toujours du token: un vendeur ne publie pas au nom d'un autre.
    - Retour: {acknowledged, insertedId}
    """
    payload = {k: v for k, v in data.items() if v is not None}
    vendor = {k: v for k, v in (payload.get("vendor") or {}).items() if v is not None}
    vendor["email"] = normalize_email(vendor_email)
    payload["vendor"] = vendor
    row = repository.create_ticket(client, payload)
    return insert_result(row)

def list_vendor_tickets(client: Client, email: str) -> List[Dict[str, Any]]:
    return repository.list_vendor_tickets(client, normalize_email(email))
