# module easyjatra.orders.views

"""Endpoints de consultation des commandes.
- /my-orders: commandes du client authentifié (email du token).
- /my-orders/{email}: même chose, l'email du chemin doit être celui du token.
- /vendor-orders/{email}: commandes reçues par un vendeur (public, comme le front l'utilise).
- /manage-orders/{email}: commandes reçues, réservé au rôle vendor.
"""
from typing import Any, Dict, List
from fastapi import APIRouter, Depends
from supabase import Client
from easyjatra.infra.supabase_client import get_store
from easyjatra.utils.security import require_user, require_vendor
from . import service

router = APIRouter(tags=["Orders"])

@router.get("/my-orders", response_model=List[Dict[str, Any]])
def my_orders(user: Dict[str, Any] = Depends(require_user), client: Client = Depends(get_store)):
    return service.list_customer_orders(client, user["email"])

@router.get("/my-orders/{email}", response_model=List[Dict[str, Any]])
def my_orders_by_email(email: str, user: Dict[str, Any] = Depends(require_user), client: Client = Depends(get_store)):
    return service.list_orders_for_email(client, user["email"], email)

@router.get("/vendor-orders/{email}", response_model=List[Dict[str, Any]])
def vendor_orders(email: str, client: Client = Depends(get_store)):
    return service.list_vendor_orders(client, email)

@router.get("/manage-orders/{email}", response_model=List[Dict[str, Any]])
def manage_orders(email: str, user: Dict[str, Any] = Depends(require_vendor), client: Client = Depends(get_store)):
    return service.list_vendor_orders(client, email)
