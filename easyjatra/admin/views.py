"""
Endpoints réservés aux administrateurs (require_admin).
- /vendor-request: demandes vendeur en attente
- /users: utilisateurs hors admin appelant
- /update-role: attribution d'un rôle (et suppression de la demande vendeur)
"""
from typing import Any, Dict, List, Literal
from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr, field_validator
from supabase import Client
from easyjatra.infra.supabase_client import get_store
from easyjatra.utils.security import require_admin
from easyjatra.utils.validators import normalize_email
from easyjatra.admin import service as admin_service

router = APIRouter(tags=["Admin"])

class RoleUpdate(BaseModel):
    email: EmailStr
    role: Literal["customer", "vendor", "admin"]

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, v: str) -> str:
        return normalize_email(v)

@router.get("/vendor-request", response_model=List[Dict[str, Any]])
def vendor_requests(user: dict = Depends(require_admin), client: Client = Depends(get_store)):
    return admin_service.list_vendor_requests(client)

@router.get("/users", response_model=List[Dict[str, Any]])
def list_users(user: dict = Depends(require_admin), client: Client = Depends(get_store)):
    return admin_service.list_users(client, user["email"])

@router.patch("/update-role")
def update_role(body: RoleUpdate, user: dict = Depends(require_admin), client: Client = Depends(get_store)):
    return admin_service.assign_role(client, body.email, body.role)
