"""Module: api."""

# backend/medadherence/api/v1/api.py
from fastapi import APIRouter

# Operational routes.
from medadherence.api.v1.routes.health import router as health_router

# Domain routes used by the tracker UI.
from medadherence.api.v1.routes.medications import router as medications_router
from medadherence.api.v1.routes.doses import router as doses_router
from medadherence.api.v1.routes.home import router as home_router
from medadherence.api.v1.routes.stats import router as stats_router
from medadherence.api.v1.routes.preferences import router as preferences_router


api_router = APIRouter()

# Register operational endpoints first for service-level concerns.
api_router.include_router(health_router, prefix="/health", tags=["health"])

# Register business/domain endpoints consumed by the application UI.
api_router.include_router(medications_router, prefix="/medications", tags=["medications"])
api_router.include_router(doses_router, prefix="/doses", tags=["doses"])
api_router.include_router(home_router, prefix="/home", tags=["home"])
api_router.include_router(stats_router, prefix="/stats", tags=["stats"])
api_router.include_router(preferences_router, prefix="/settings", tags=["settings"])
