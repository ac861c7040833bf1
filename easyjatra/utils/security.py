"""
Dépendances d'authentification et de contrôle d'accès.
- get_current_user: vérifie le Bearer token (Supabase Auth) -> {id, email, token}, 401 sinon.
- require_role(role): 403 sauf si la ligne users existe ET que son rôle vaut exactement `role`.
"""
import logging
from fastapi import Request, HTTPException, Depends
from typing import Optional, Dict, Any
from supabase import Client
from easyjatra.infra.supabase_client import get_store

logger = logging.getLogger(__name__)

UNAUTHORIZED_DETAIL = "Accès non autorisé"

def get_bearer_token(request: Request) -> Optional[str]:
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header[7:].strip() or None
    return None

def get_current_user(request: Request) -> Dict[str, Any]:
    token = get_bearer_token(request)
    if not token:
        raise HTTPException(status_code=401, detail=UNAUTHORIZED_DETAIL)
    # Client lu après le token: sans token, 401 même si la base n'est pas configurée
    client = get_store(request)

    try:
        # Délégué au service Auth
        from easyjatra.auth.service import get_identity_from_token
        user = get_identity_from_token(client, token)
    except Exception as e:
        logger.warning("security.get_current_user token rejected: %s", e)
        raise HTTPException(status_code=401, detail=UNAUTHORIZED_DETAIL)
    if not user.get("email"):
        raise HTTPException(status_code=401, detail=UNAUTHORIZED_DETAIL)
    return user

def require_user(user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
    return user

def is_authorized(user_row: Optional[Dict[str, Any]], role: str) -> bool:
    """Autorisé ssi l'utilisateur existe ET possède exactement le rôle requis."""
    return user_row is not None and user_row.get("role") == role

def require_role(role: str):
    def _dep(user: Dict[str, Any] = Depends(get_current_user), client: Client = Depends(get_store)) -> Dict[str, Any]:
        from easyjatra.users.repository import get_user_by_email
        row = get_user_by_email(client, user["email"])
        if not is_authorized(row, role):
            raise HTTPException(status_code=403, detail=f"Action réservée au rôle {role}")
        return {**user, "role": row.get("role")}
    return _dep

require_admin = require_role("admin")
require_vendor = require_role("vendor")
