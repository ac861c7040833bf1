from typing import Any, Dict, List
from fastapi import HTTPException
from supabase import Client
from easyjatra.infra.results import insert_result
from easyjatra.utils.validators import normalize_email
from . import repository

PENDING_DETAIL = "Votre demande est en cours de traitement. Merci de patienter !"

def request_vendor(client: Client, email: str) -> Dict[str, Any]:
    """Demande à devenir vendeur; 409 si une demande est déjà en attente pour cet email."""
    email = normalize_email(email)
    if repository.get_request(client, email):
        raise HTTPException(status_code=409, detail=PENDING_DETAIL)
    row = repository.insert_request(client, email)
    if row is None:
        raise HTTPException(status_code=409, detail=PENDING_DETAIL)
    return insert_result(row)

def list_requests(client: Client) -> List[Dict[str, Any]]:
    return repository.list_requests(client)
