# module easyjatra.users.views

"""Endpoints Utilisateurs.
- POST /user: synchronisation du profil à la connexion (création ou mise à jour du dernier login)
- GET /user/role: rôle de l'utilisateur authentifié
"""
from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr, field_validator
from supabase import Client
from easyjatra.infra.supabase_client import get_store
from easyjatra.utils.security import require_user
from easyjatra.utils.validators import normalize_email
from . import service

router = APIRouter(tags=["Users"])

class UserProfile(BaseModel):
    email: EmailStr
    name: Optional[str] = None
    image: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, v: str) -> str:
        return normalize_email(v)

@router.post("/user")
def sync_user(profile: UserProfile, client: Client = Depends(get_store)):
    return service.sync_user(client, profile.model_dump())

@router.get("/user/role")
def user_role(user: Dict[str, Any] = Depends(require_user), client: Client = Depends(get_store)):
    """Retour: {"role": <customer|vendor|admin|null>}"""
    return {"role": service.get_role(client, user["email"])}
