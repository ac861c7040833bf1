"""
Lifespan FastAPI: initialisation/arrêt des ressources partagées.
- Client Supabase et passerelle Stripe: construits une fois au démarrage (sauf s'ils ont été
  injectés via create_app), stockés sur app.state, libérés à l'arrêt.
- FastAPILimiter (Redis) avec options de test (fakeredis).
- Variables d'environnement supportées:
  - DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS=1: désactive complètement le rate limiting (tests)
  - USE_FAKE_REDIS_FOR_TESTS=1: utilise fakeredis (tests)
  - LOCAL_RATE_LIMIT_FALLBACK=1: active un fallback local si l'init échoue
"""
import os
import logging
import redis.asyncio as redis
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi_limiter import FastAPILimiter
from easyjatra.config import STRIPE_SECRET_KEY, CLIENT_URL, STRIPE_CURRENCY, RATE_LIMIT_REDIS_URL
from easyjatra.infra.supabase_client import create_store_client, close_store_client
from easyjatra.payments.stripe_client import create_gateway

logger = logging.getLogger("uvicorn.error")

async def init_rate_limiter(app: FastAPI) -> None:
    """
    Configure le rate limiting et gère les fallbacks.
    - En cas d'échec de Redis et sans fallback, le rate limiting est désactivé proprement.
    """
    if os.getenv("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS") == "1":
        app.state.rate_limit_enabled = False
        logger.info("Rate limiting disabled by DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS")
        return
    try:
        if os.getenv("USE_FAKE_REDIS_FOR_TESTS") == "1":
            from fakeredis.aioredis import FakeRedis
            r = FakeRedis(decode_responses=True)
        else:
            r = redis.from_url(RATE_LIMIT_REDIS_URL, encoding="utf-8", decode_responses=True)
        await FastAPILimiter.init(r)
        app.state.rate_limit_enabled = True
        logger.info("Rate limiting enabled")
    except Exception as e:
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            app.state.rate_limit_enabled = True
            logger.warning("Rate limiting falling back to local in-memory due to init error: %s", e)
        else:
            app.state.rate_limit_enabled = False
            logger.warning("Rate limiting disabled due to init error: %s", e)

@asynccontextmanager
async def lifespan(app: FastAPI):
    owns_store = getattr(app.state, "store", None) is None
    if owns_store:
        app.state.store = create_store_client()
    if getattr(app.state, "gateway", None) is None:
        app.state.gateway = create_gateway(STRIPE_SECRET_KEY, CLIENT_URL, STRIPE_CURRENCY)
    logger.info(
        "EasyJatra ressources: store=%s gateway=%s",
        "ok" if app.state.store is not None else "absent",
        "ok" if app.state.gateway is not None else "absent",
    )
    await init_rate_limiter(app)

    yield

    if app.state.rate_limit_enabled and FastAPILimiter.redis is not None:
        await FastAPILimiter.close()
    if owns_store:
        close_store_client(app.state.store)
        app.state.store = None
    logger.info("EasyJatra ressources libérées")
