"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from fitcoach.api.v1.endpoints import mood, readiness, sessions, sleep, volume

api_router = APIRouter()

api_router.include_router(
    sleep.router, prefix="/users/{user_id}/sleep", tags=["Sleep"]
)
api_router.include_router(
    mood.router, prefix="/users/{user_id}/mood", tags=["Mood"]
)
api_router.include_router(
    readiness.router, prefix="/users/{user_id}", tags=["Readiness"]
)
api_router.include_router(
    volume.router, prefix="/users/{user_id}/volume", tags=["Volume landmarks"]
)
api_router.include_router(
    volume.catalog_router, prefix="/volume", tags=["Volume landmarks"]
)
api_router.include_router(
    sessions.router, prefix="/sessions", tags=["Session analysis"]
)
