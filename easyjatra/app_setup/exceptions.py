"""
Gestionnaires d'exceptions de l'API.
- HTTPException: corps JSON standard {"detail": ...}.
- Erreurs Stripe non traitées par les services: 502 (prestataire de paiement).
- Toute autre exception: 500 générique, journalisée avec la trace.
"""
import logging
import stripe
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)

    @app.exception_handler(stripe.StripeError)
    async def stripe_error_handler(request: Request, exc: stripe.StripeError):
        logger.error("Erreur Stripe sur %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=502, content={"detail": "Erreur du prestataire de paiement"})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Erreur non gérée sur %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Erreur interne du serveur"})
