from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

OTHER_REASON = "other"


class RefundIntent(BaseModel):
    """Refund request as submitted by the admin form."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", str_strip_whitespace=True)

    order_id: Optional[str] = Field(None, alias="orderId", max_length=100)
    amount: Optional[Decimal] = None
    reason: Optional[str] = Field(None, max_length=500)
    custom_reason: Optional[str] = Field(None, alias="customReason", max_length=500)

    @property
    def effective_reason(self) -> str:
        """The reason sent upstream; "other" defers to the free-text custom reason, which is then required."""
        if self.reason == OTHER_REASON:
            return self.custom_reason or ""
        return self.reason or ""


class RefundSummary(BaseModel):
    id: str
    amount: int
    status: str


class RefundResult(BaseModel):
    success: bool
    message: str
    refund: Optional[RefundSummary] = None
    status_code: int = Field(200, exclude=True)

    def to_response(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)
