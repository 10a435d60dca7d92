"""API sub-routers assembled into a single api_router."""

from fastapi import APIRouter

from docverify.api.routers.health import router as health_router
from docverify.api.routers.verification import router as verification_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(verification_router, tags=["verification"])
