"""
Factory d'application utilisée par les entrypoints (easyjatra.app, easyjatra.asgi) et les tests.
Ordonne les étapes d'initialisation de manière lisible et testable.
"""
from typing import Any, Optional
from fastapi import FastAPI
from .lifespan import lifespan
from .middlewares import register_basic_middlewares
from .exceptions import register_exception_handlers
from .routes import register_routes
from .routers import register_routers

def create_app(store: Optional[Any] = None, gateway: Optional[Any] = None) -> FastAPI:
    """
    Construit l'app FastAPI avec le lifespan et enregistre:
      - CORS
      - gestionnaires d'exceptions et route de vie (/)
      - tous les routers (tickets, paiements, commandes, utilisateurs, vendeurs, admin, health)
    Paramètres:
      - store: client Supabase déjà construit (sinon créé au démarrage depuis la config)
      - gateway: passerelle Stripe déjà construite (sinon créée au démarrage)
    Retour:
      FastAPI prêt à être utilisé par le serveur ASGI.
    """
    app = FastAPI(title="EasyJatra API", lifespan=lifespan)
    app.state.store = store
    app.state.gateway = gateway
    register_basic_middlewares(app)
    register_exception_handlers(app)
    register_routes(app)
    register_routers(app)
    return app
