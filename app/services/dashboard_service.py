"""
Dashboard service: static display figures for the admin dashboard.

These are placeholder numbers; there is no data pipeline behind them.
"""
from app.models.dashboard import ActivityEntry, DashboardMetric, DashboardSnapshot, RefundReasonOption

_METRICS = [
    DashboardMetric(title="Total Revenue", value="$45,231.89", change="+20.1% from last month"),
    DashboardMetric(title="Orders", value="+2350", change="+180.1% from last month"),
    DashboardMetric(title="Customers", value="+12,234", change="+19% from last month"),
    DashboardMetric(title="Refunds", value="23", change="-2% from last month"),
]

_RECENT_ACTIVITY = [
    ActivityEntry(kind="order", label="Order #12345", when="2 hours ago", amount="$29.99"),
    ActivityEntry(kind="refund", label="Refund #67890", when="5 hours ago", amount="-$19.99"),
    ActivityEntry(kind="order", label="Order #11111", when="1 day ago", amount="$49.99"),
]

REFUND_REASONS = [
    RefundReasonOption(value="duplicate", label="Duplicate charge"),
    RefundReasonOption(value="fraudulent", label="Fraudulent"),
    RefundReasonOption(value="requested_by_customer", label="Requested by customer"),
    RefundReasonOption(value="other", label="Other"),
]


def get_dashboard_snapshot() -> DashboardSnapshot:
    return DashboardSnapshot(metrics=list(_METRICS), recent_activity=list(_RECENT_ACTIVITY))


def list_refund_reasons() -> list[RefundReasonOption]:
    """Reason choices offered by the refund form; "other" takes a free-text reason."""
    return list(REFUND_REASONS)
