from typing import Literal
from pydantic import BaseModel


class DashboardMetric(BaseModel):
    title: str
    value: str
    change: str


class ActivityEntry(BaseModel):
    kind: Literal["order", "refund"]
    label: str
    when: str
    amount: str


class DashboardSnapshot(BaseModel):
    metrics: list[DashboardMetric]
    recent_activity: list[ActivityEntry]


class RefundReasonOption(BaseModel):
    value: str
    label: str
