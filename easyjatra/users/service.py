"""Couche service du domaine Utilisateurs.
Synchronisation du profil à chaque connexion côté front, et lecture du rôle.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional
import logging
from supabase import Client
from easyjatra.infra.results import insert_result, update_result
from easyjatra.utils.validators import normalize_email
from . import repository

logger = logging.getLogger(__name__)

ROLE_CUSTOMER = "customer"
ROLE_VENDOR = "vendor"
ROLE_ADMIN = "admin"
ROLES = (ROLE_CUSTOMER, ROLE_VENDOR, ROLE_ADMIN)

def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()

def sync_user(client: Client, profile: Dict[str, Any]) -> Dict[str, Any]:
    """Crée l'utilisateur au premier passage, sinon met à jour last_logged_in uniquement.
    - Le rôle n'est jamais lu depuis le body: "customer" à la création, inchangé ensuite.
    - L'email est stocké en minuscules: c'est la clé de lecture du rôle.
    - Retour: {acknowledged, insertedId} ou {acknowledged, matchedCount, modifiedCount}
    """
    email = normalize_email(profile["email"])
    now = _now_iso()
    if repository.get_user_by_email(client, email) is None:
        data = {k: v for k, v in profile.items() if v is not None and k != "role"}
        data["email"] = email
        data.update({"role": ROLE_CUSTOMER, "created_at": now, "last_logged_in": now})
        logger.info("users.sync creating user email=%s", email)
        row = repository.insert_user(client, data)
        if row is not None:
            return insert_result(row)
    logger.info("users.sync updating last login email=%s", email)
    return update_result(repository.update_last_login(client, email, now))

def get_role(client: Client, email: str) -> Optional[str]:
    row = repository.get_user_by_email(client, normalize_email(email))
    return (row or {}).get("role")
