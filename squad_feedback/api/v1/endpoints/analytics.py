from fastapi import APIRouter

from squad_feedback.api.errors import guard
from squad_feedback.schemas.analytics import PreviewAnalytics
from squad_feedback.services.analytics import generate_mock_analytics

router = APIRouter()


@router.get("/preview", response_model=PreviewAnalytics)
def get_preview_analytics():
    """Synthetic results used by the dashboard before real responses exist."""
    with guard("Failed to generate analytics"):
        return generate_mock_analytics()
