"""Couche d'accès aux données (Supabase) pour le domaine Utilisateurs (table users).
Les erreurs de la base sont propagées, sauf la violation de contrainte UNIQUE sur email
qui est traduite en None (utilisateur déjà créé par une requête concurrente).
"""
from typing import Any, Dict, List, Optional
import logging
from postgrest.exceptions import APIError
from supabase import Client
from easyjatra.infra.results import rows_of, first_row, is_unique_violation
from easyjatra.utils.validators import normalize_email

logger = logging.getLogger(__name__)

TABLE = "users"

def get_user_by_email(client: Client, email: str) -> Optional[Dict[str, Any]]:
    """Récupère un utilisateur par email.
    - Retour: dict utilisateur ou None si introuvable
    """
    if not email:
        return None
    res = client.table(TABLE).select("*").eq("email", normalize_email(email)).limit(1).execute()
    return first_row(res)

def insert_user(client: Client, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    try:
        res = client.table(TABLE).insert(data).execute()
    except APIError as e:
        if is_unique_violation(e):
            logger.info("users.repository.insert_user already exists email=%s", data.get("email"))
            return None
        raise
    return first_row(res)

def update_last_login(client: Client, email: str, logged_in_at: str) -> List[Dict[str, Any]]:
    res = client.table(TABLE).update({"last_logged_in": logged_in_at}).eq("email", normalize_email(email)).execute()
    return rows_of(res)

def update_role(client: Client, email: str, role: str) -> List[Dict[str, Any]]:
    res = client.table(TABLE).update({"role": role}).eq("email", normalize_email(email)).execute()
    return rows_of(res)

def list_users_except(client: Client, email: str) -> List[Dict[str, Any]]:
    """Tous les utilisateurs sauf celui dont l'email est fourni (l'admin appelant)."""
    res = client.table(TABLE).select("*").neq("email", normalize_email(email)).execute()
    return rows_of(res)
