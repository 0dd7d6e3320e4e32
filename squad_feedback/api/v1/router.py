from fastapi import APIRouter

from squad_feedback.api.v1.endpoints import (
    analytics,
    events,
    forms,
    responses,
    templates,
    users,
)

api_v1_router = APIRouter()

api_v1_router.include_router(events.router, prefix="/events", tags=["events"])
api_v1_router.include_router(templates.router, prefix="/templates", tags=["templates"])
api_v1_router.include_router(forms.router, prefix="/forms", tags=["forms"])
api_v1_router.include_router(users.router, prefix="/users", tags=["users"])
api_v1_router.include_router(responses.router, prefix="/responses", tags=["responses"])
api_v1_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
