"""
Routes simples (hors routers): sonde de vie sur /.
"""
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

LIVENESS_MESSAGE = "EasyJatra server is running!"

def register_routes(app: FastAPI) -> None:
    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    def root():
        return LIVENESS_MESSAGE
