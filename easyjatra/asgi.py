"""
ASGI entrypoint: expose `app` pour les process managers / déploiements.

- En production, un process manager (ex: uvicorn, gunicorn -k uvicorn.workers.UvicornWorker) importe
  `easyjatra.asgi:app`.
- Toute la configuration FastAPI est centralisée dans easyjatra.app_setup.factory.
"""

from easyjatra.app import app
