from .order import OrderRecord
from .refund import RefundIntent, RefundResult, RefundSummary
from .dashboard import DashboardMetric, ActivityEntry, DashboardSnapshot, RefundReasonOption

__all__ = [
    "OrderRecord",
    "RefundIntent", "RefundResult", "RefundSummary",
    "DashboardMetric", "ActivityEntry", "DashboardSnapshot", "RefundReasonOption",
]
