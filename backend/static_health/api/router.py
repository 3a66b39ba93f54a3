"""Route table, evaluated in registration order."""

from fastapi import APIRouter

from .endpoints import health, static

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
# Catch-all; must stay last.
api_router.include_router(static.router, tags=["static"])
