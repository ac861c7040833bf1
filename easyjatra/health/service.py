"""
Sondes de santé de la base de données.
"""
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

def store_health_info(client: Optional[Any]) -> Dict[str, Any]:
    """
    Vérifie la connectivité Supabase par une lecture minimale sur la table tickets.
    Retour: {"connect_ok": bool, "error"?: str}
    """
    if client is None:
        return {"connect_ok": False, "error": "Base de données non configurée"}
    try:
        client.table("tickets").select("id").limit(1).execute()
        return {"connect_ok": True}
    except Exception as e:
        logger.warning("Sonde Supabase en échec: %s", e)
        return {"connect_ok": False, "error": str(e)}
