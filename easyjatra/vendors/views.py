from typing import Any, Dict
from fastapi import APIRouter, Depends
from supabase import Client
from easyjatra.infra.supabase_client import get_store
from easyjatra.utils.rate_limit import optional_rate_limit
from easyjatra.utils.security import require_user
from . import service

router = APIRouter(tags=["Vendors"])

@router.post("/become-vendor", dependencies=[Depends(optional_rate_limit(times=5, seconds=60))])
def become_vendor(user: Dict[str, Any] = Depends(require_user), client: Client = Depends(get_store)):
    """Demande vendeur pour l'email du token. 409 si une demande est déjà en attente."""
    return service.request_vendor(client, user["email"])
