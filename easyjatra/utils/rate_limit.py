"""
Limitation de débit optionnelle.
- fastapi-limiter (Redis) si initialisé dans le lifespan.
- Fallback mémoire par processus si LOCAL_RATE_LIMIT_FALLBACK=1.
- Aucune limitation si app.state.rate_limit_enabled vaut False.
Clé: hash du Bearer token si présent, sinon IP, suffixée par le chemin.
"""
from typing import Dict, Any
from fastapi import Request, Response, HTTPException
import os
import time
import hashlib
from easyjatra.utils.security import get_bearer_token

def _user_key_from_request(req: Request) -> str:
    token = get_bearer_token(req)
    path = req.url.path
    if token:
        h = hashlib.sha256(token.encode("utf-8")).hexdigest()[:16]
        return f"user:{h}:{path}"
    ip = req.client.host if req.client else "local"
    return f"ip:{ip}:{path}"

def optional_rate_limit(times: int, seconds: int):
    async def _dep(request: Request, response: Response):
        # Forcer le fallback mémoire en DEV si demandé
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            now = time.time()
            key = _user_key_from_request(request)
            # store: clé -> (fenêtre en secondes, horodatages des hits)
            store = getattr(request.app.state, "_rl_store", {})
            # Purge des clés dont la fenêtre est écoulée (IP, token ou chemin inactifs)
            for stale in [k for k, (window, ts) in store.items() if not ts or now - ts[-1] >= window]:
                del store[stale]
            hits = [t for t in store.get(key, (seconds, []))[1] if now - t < seconds]
            request.app.state._rl_store = store
            if len(hits) >= times:
                store[key] = (seconds, hits)
                raise HTTPException(status_code=429, detail="Too Many Requests")
            hits.append(now)
            store[key] = (seconds, hits)
            return

        # Respecter le flag global (désactivé ou init Redis en échec)
        if not getattr(request.app.state, "rate_limit_enabled", False):
            return

        from fastapi_limiter.depends import RateLimiter
        async def _identifier(req: Request) -> str:
            return _user_key_from_request(req)
        await RateLimiter(times=times, seconds=seconds, identifier=_identifier)(request, response)
    return _dep

def rate_limit_health_info(request: Request) -> Dict[str, Any]:
    enabled = getattr(request.app.state, "rate_limit_enabled", None)

    from fastapi_limiter import FastAPILimiter
    limiter_ready = getattr(FastAPILimiter, "redis", None) is not None
    backend = "redis" if limiter_ready else None
    if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
        backend = "memory"

    return {
        "enabled": (bool(enabled) if enabled is not None else None),
        "ready": limiter_ready,
        "backend": backend,
    }
