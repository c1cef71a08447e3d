"""
Local checks for refund requests.

Pure functions with no network access: they run before, or between, the
billing platform calls and raise on the first failing rule.
"""
import re
from decimal import InvalidOperation

from app.engine.amounts import to_minor_units
from app.errors import IneligibleState, ValidationError
from app.models.order import OrderRecord
from app.models.refund import RefundIntent

NOT_PAID_MESSAGE = "Order must be in 'paid' status to be refunded"
NOT_POSITIVE_MESSAGE = "Amount must be a positive number"

_ORDER_ID = re.compile(r"^[A-Za-z0-9_-]+$")


def validate_refund_intent(intent: RefundIntent) -> None:
    """
    Check required fields, the order ID format and the optional amount.

    The amount is checked in minor units, so a sub-cent amount that would
    round to zero is rejected rather than sent upstream.

    Raises:
        ValidationError: naming the missing field(s), or an invalid value.
    """
    missing_order = not intent.order_id
    missing_reason = not intent.effective_reason

    if missing_order and missing_reason:
        raise ValidationError("Order ID and reason are required")
    if missing_order:
        raise ValidationError("Order ID is required")
    if missing_reason:
        raise ValidationError("Reason is required")

    if not _ORDER_ID.match(intent.order_id):
        raise ValidationError("Order ID may only contain letters, digits, '-' and '_'")

    if intent.amount is not None:
        _validate_amount(intent)


def _validate_amount(intent: RefundIntent) -> None:
    if not intent.amount.is_finite():
        raise ValidationError(NOT_POSITIVE_MESSAGE)
    try:
        minor_units = to_minor_units(intent.amount)
    except InvalidOperation as exc:
        raise ValidationError("Amount is too large") from exc
    if minor_units < 1:
        raise ValidationError(NOT_POSITIVE_MESSAGE)


def validate_order_eligibility(order: OrderRecord) -> None:
    """Only paid orders can be refunded."""
    if not order.is_refundable:
        raise IneligibleState(NOT_PAID_MESSAGE)
