from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from easyjatra.health.service import store_health_info
from easyjatra.utils.rate_limit import rate_limit_health_info

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_root(request: Request):
    return {"ok": True, "rate_limit": rate_limit_health_info(request)}

@router.get("/store")
def health_store(request: Request):
    info = store_health_info(getattr(request.app.state, "store", None))
    return JSONResponse(info, status_code=200 if info["connect_ok"] else 503)
