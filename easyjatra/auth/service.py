from typing import Any, Dict
from supabase import Client
from easyjatra.utils.validators import normalize_email
from .repository import get_user_from_access_token as _repo_get_user_from_token

def get_identity_from_token(client: Client, access_token: str) -> Dict[str, Any]:
    """Vérifie le token auprès de Supabase Auth et renvoie l'identité vérifiée.
    - Retourne {id, email, token}; email vide si le token ne correspond à aucun utilisateur
    """
    raw = _repo_get_user_from_token(client, access_token)
    email = normalize_email(raw.get("email"))
    return {"id": raw.get("id"), "email": email, "token": access_token}
