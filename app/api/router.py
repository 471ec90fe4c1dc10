from fastapi import APIRouter

from app.api.health import router as health_router
from app.api.demo import router as demo_router
from app.api.emergency_cases import router as emergency_cases_router

api_router = APIRouter()

# -------------------------------------------------
# system / ops
# -------------------------------------------------
api_router.include_router(
    health_router,
    prefix="/health",
    tags=["health"],
)

# -------------------------------------------------
# demo / bootstrap
# -------------------------------------------------
api_router.include_router(
    demo_router,
    prefix="/demo",
    tags=["demo"],
)

# -------------------------------------------------
# core business
# -------------------------------------------------
api_router.include_router(
    emergency_cases_router,
    prefix="/emergency-cases",
    tags=["emergency-cases"],
)
