"""Refund endpoint: POST /api/lemonsqueezy/refund"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.clients.lemonsqueezy import LemonSqueezyClient
from app.config import LEMONSQUEEZY_API_BASE, LEMONSQUEEZY_TIMEOUT_SECONDS, get_lemonsqueezy_api_key
from app.models.refund import RefundIntent
from app.services.refund_service import RefundOrchestrator

router = APIRouter(prefix="/api/lemonsqueezy", tags=["refunds"])


def get_refund_orchestrator() -> RefundOrchestrator:
    """Build an orchestrator with the credential as configured right now."""
    client = LemonSqueezyClient(LEMONSQUEEZY_API_BASE, timeout=LEMONSQUEEZY_TIMEOUT_SECONDS)
    return RefundOrchestrator(api_key=get_lemonsqueezy_api_key(), client=client)


@router.post("/refund")
async def create_refund(
    body: RefundIntent,
    orchestrator: RefundOrchestrator = Depends(get_refund_orchestrator),
) -> JSONResponse:
    """Refund a paid Lemon Squeezy order, fully or by `amount` in major currency units.

    Always answers with `{success, message, refund?}`; the HTTP status reflects
    the outcome (400 invalid input or unpaid order, 404 unknown order, 500
    configuration or internal error, upstream status on a rejected refund).
    """
    result = await orchestrator.process_refund(body)
    return JSONResponse(content=result.to_response(), status_code=result.status_code)
