"""
Client Supabase du processus.
- create_store_client: construit le client (clé service) au démarrage, dans le lifespan.
- close_store_client: libère la session HTTP PostgREST à l'arrêt.
- get_store: dépendance FastAPI qui injecte le client stocké sur app.state.
"""
import logging
from typing import Optional
from fastapi import HTTPException, Request
from supabase import create_client, Client
from easyjatra.config import SUPABASE_URL, SUPABASE_SERVICE_KEY

logger = logging.getLogger(__name__)

def create_store_client(url: str = SUPABASE_URL, key: str = SUPABASE_SERVICE_KEY) -> Optional[Client]:
    """
    Crée le client Supabase utilisé par les repositories.
    - Retourne None si l'URL ou la clé est absente (le serveur démarre, les routes DB répondent 503).
    """
    if not url or not key:
        logger.warning("SUPABASE_URL/SUPABASE_SERVICE_KEY manquants: base de données non configurée")
        return None
    return create_client(url, key)

def close_store_client(client: Optional[Client]) -> None:
    if client is None:
        return
    session = getattr(client.postgrest, "session", None)
    if session is not None:
        session.close()

def get_store(request: Request) -> Client:
    client = getattr(request.app.state, "store", None)
    if client is None:
        raise HTTPException(status_code=503, detail="Base de données non configurée")
    return client
