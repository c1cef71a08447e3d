"""
Refund service: orchestrates a refund against the Lemon Squeezy billing platform.

Flow: validate → check credential → look up order → check eligibility → create refund

Nothing is stored locally; the billing platform is the source of truth.
"""
import logging
from typing import Any, Optional

from app.clients.lemonsqueezy import BillingClient, upstream_error_detail
from app.engine.amounts import to_minor_units
from app.errors import (
    ConfigurationError,
    InternalError,
    RefundError,
    UpstreamNotFound,
    UpstreamRefundFailure,
)
from app.models.order import OrderRecord
from app.models.refund import RefundIntent, RefundResult, RefundSummary
from app.validators.refund_validator import validate_order_eligibility, validate_refund_intent

logger = logging.getLogger("refunds")

SUCCESS_MESSAGE = "Refund processed successfully"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class RefundOrchestrator:
    """
    Stateless refund pipeline over a BillingClient.

    Args:
        api_key: Bearer credential for the billing platform. None or empty
            means it is not configured.
        client: Outbound capability used for the order lookup and the refund.
    """

    def __init__(self, api_key: Optional[str], client: BillingClient):
        self._api_key = api_key
        self._client = client

    async def process_refund(self, intent: RefundIntent) -> RefundResult:
        """
        Process a refund request end-to-end. Never raises.

        Steps:
          1. Validate required fields (no network call on failure).
          2. Require a configured credential.
          3. Look up the order; any non-success status is reported as not found.
          4. Require the order to be paid.
          5. Submit the refund and copy the created refund back verbatim.

        Returns:
            A RefundResult whose status_code is the HTTP status to respond with.
        """
        try:
            summary = await self._run(intent)
        except RefundError as exc:
            logger.warning(
                "Refund rejected for order %s: %s (%s)",
                intent.order_id or "<missing>", exc.message, exc.code,
            )
            return RefundResult(success=False, message=exc.message, status_code=exc.http_status)
        except Exception:
            logger.exception("Refund failed unexpectedly for order %s", intent.order_id)
            error = InternalError(INTERNAL_ERROR_MESSAGE)
            return RefundResult(success=False, message=error.message, status_code=error.http_status)

        logger.info(
            "Refund %s created for order %s: amount=%s status=%s",
            summary.id, intent.order_id, summary.amount, summary.status,
        )
        return RefundResult(success=True, message=SUCCESS_MESSAGE, refund=summary)

    async def _run(self, intent: RefundIntent) -> RefundSummary:
        # Step 1: Validate
        validate_refund_intent(intent)

        # Step 2: Credential
        if not self._api_key:
            raise ConfigurationError("Lemon Squeezy API key not configured")

        # Step 3: Order lookup
        order = await self._fetch_order(intent.order_id)

        # Step 4: Eligibility
        validate_order_eligibility(order)

        # Step 5: Refund
        return await self._create_refund(intent)

    async def _fetch_order(self, order_id: str) -> OrderRecord:
        response = await self._client.get_order(order_id, self._api_key)
        if not response.ok:
            detail = upstream_error_detail(response.body) or "Invalid order ID"
            raise UpstreamNotFound(f"Order not found: {detail}")
        return OrderRecord.from_document(response.body)

    async def _create_refund(self, intent: RefundIntent) -> RefundSummary:
        response = await self._client.create_refund(build_refund_payload(intent), self._api_key)
        if not response.ok:
            detail = upstream_error_detail(response.body) or "Unknown error"
            raise UpstreamRefundFailure(f"Refund failed: {detail}", http_status=response.status_code)

        data = response.body["data"]
        attributes = data["attributes"]
        return RefundSummary(id=str(data["id"]), amount=attributes["amount"], status=attributes["status"])


def build_refund_payload(intent: RefundIntent) -> dict[str, Any]:
    """
    Build the JSON:API refund document.

    The amount attribute is omitted entirely when no amount was given, which
    the billing platform treats as a refund of the full order.
    """
    attributes: dict[str, Any] = {"reason": intent.effective_reason}
    if intent.amount is not None:
        attributes["amount"] = to_minor_units(intent.amount)

    return {
        "data": {
            "type": "refunds",
            "attributes": attributes,
            "relationships": {
                "order": {
                    "data": {"type": "orders", "id": intent.order_id},
                },
            },
        },
    }
