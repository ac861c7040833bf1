# module easyjatra.admin.service

from typing import Any, Dict, List
from supabase import Client
from easyjatra.infra.results import update_result
from easyjatra.users import repository as users_repository
from easyjatra.vendors import repository as vendors_repository
from easyjatra.utils.validators import normalize_email
import logging

logger = logging.getLogger(__name__)

def list_users(client: Client, admin_email: str) -> List[dict]:
    return users_repository.list_users_except(client, admin_email)

def list_vendor_requests(client: Client) -> List[dict]:
    return vendors_repository.list_requests(client)

def assign_role(client: Client, email: str, role: str) -> Dict[str, Any]:
    """
    Attribue un rôle puis supprime la demande vendeur en attente (deux écritures distinctes).
    - La suppression est faite même si aucun utilisateur ne correspond: la demande n'accorde aucun rôle.
    """
    email = normalize_email(email)
    rows = users_repository.update_role(client, email, role)
    vendors_repository.delete_request(client, email)
    logger.info("admin.assign_role email=%s role=%s matched=%s", email, role, len(rows))
    return update_result(rows)
