"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import catalog, preferences, profile, schedule, state, stats, workouts

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    profile.router, prefix="/profile", tags=["Profile"]
)
api_router.include_router(
    workouts.router, prefix="/workouts", tags=["Workouts"]
)
api_router.include_router(
    schedule.router, prefix="/schedule", tags=["Schedule"]
)
api_router.include_router(
    preferences.router, prefix="/preferences", tags=["Machine preferences"]
)
api_router.include_router(
    stats.router, prefix="/stats", tags=["Statistics"]
)
api_router.include_router(
    state.router, prefix="/state", tags=["State import/export"]
)
api_router.include_router(
    catalog.router, prefix="/catalog", tags=["Machine catalog"]
)
