"""
Refund error taxonomy.

Every failure inside the orchestrator is raised as a RefundError subclass and
converted into a failed RefundResult at the orchestrator boundary.
"""


class RefundError(Exception):
    """Base class carrying the code, message and HTTP status surfaced to callers."""

    code = "REFUND_ERROR"
    http_status = 500

    def __init__(self, message: str, http_status: int | None = None):
        self.message = message
        if http_status is not None:
            self.http_status = http_status
        super().__init__(message)


class ValidationError(RefundError):
    """Missing or malformed input field(s)."""

    code = "VALIDATION_ERROR"
    http_status = 400


class ConfigurationError(RefundError):
    """The billing platform credential is not configured."""

    code = "CONFIGURATION_ERROR"
    http_status = 500


class UpstreamNotFound(RefundError):
    """Order lookup failed or the order does not exist."""

    code = "ORDER_NOT_FOUND"
    http_status = 404


class IneligibleState(RefundError):
    """Order exists but its status does not allow a refund."""

    code = "ORDER_NOT_REFUNDABLE"
    http_status = 400


class UpstreamRefundFailure(RefundError):
    """The billing platform rejected the refund; carries its status code."""

    code = "REFUND_REJECTED"
    http_status = 502


class InternalError(RefundError):
    """Unexpected failure; the detail is logged, never returned."""

    code = "INTERNAL_ERROR"
    http_status = 500
