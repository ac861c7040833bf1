from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from easyjatra.config import CORS_ORIGINS

"""
Middlewares transverses de l'application.
- register_basic_middlewares: CORS limité à l'URL du client (credentials autorisés).
"""
def register_basic_middlewares(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
