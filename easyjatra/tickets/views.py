"""
Endpoints Tickets: catalogue public, détail, publication et inventaire vendeur.
- Sécurité: POST /tickets et /my-inventory/{email} requièrent le rôle vendor (require_vendor).
"""
from typing import Any, Dict, List
from fastapi import APIRouter, Depends
from supabase import Client
from easyjatra.infra.supabase_client import get_store
from easyjatra.utils.security import require_vendor
from .models import TicketIn
from . import service

router = APIRouter(tags=["Tickets"])

@router.get("/tickets", response_model=List[Dict[str, Any]])
def list_tickets(client: Client = Depends(get_store)):
    return service.list_tickets(client)

@router.get("/tickets/{ticket_id}")
def get_ticket(ticket_id: str, client: Client = Depends(get_store)):
    """Détail d'un ticket. 404 si introuvable."""
    return service.get_ticket(client, ticket_id)

@router.post("/tickets")
def create_ticket(
    ticket: TicketIn,
    user: Dict[str, Any] = Depends(require_vendor),
    client: Client = Depends(get_store),
):
    """
    Publie un ticket (vendeur uniquement).
    - Retour: {acknowledged, insertedId}
    """
    return service.create_ticket(client, ticket.model_dump(), vendor_email=user["email"])

@router.get("/my-inventory/{email}", response_model=List[Dict[str, Any]])
def my_inventory(email: str, user: Dict[str, Any] = Depends(require_vendor), client: Client = Depends(get_store)):
    """Tickets publiés par le vendeur identifié par email."""
    return service.list_vendor_tickets(client, email)
