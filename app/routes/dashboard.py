"""Dashboard endpoints: GET /api/dashboard, GET /api/lemonsqueezy/refund/reasons"""
from fastapi import APIRouter
from app.services.dashboard_service import get_dashboard_snapshot, list_refund_reasons

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard")
async def get_dashboard() -> dict:
    """Static revenue metrics and recent activity for the admin dashboard."""
    return get_dashboard_snapshot().model_dump(mode="json")


@router.get("/lemonsqueezy/refund/reasons")
async def get_refund_reasons() -> list[dict]:
    """Refund reason choices for the refund form."""
    return [r.model_dump(mode="json") for r in list_refund_reasons()]
