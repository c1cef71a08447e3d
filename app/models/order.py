from typing import Any
from pydantic import BaseModel

PAID = "paid"


class OrderRecord(BaseModel):
    """Read-only view of a billing platform order."""

    id: str
    status: str

    @property
    def is_refundable(self) -> bool:
        return self.status == PAID

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "OrderRecord":
        """Build from a JSON:API document: {"data": {"id": ..., "attributes": {"status": ...}}}."""
        data = document["data"]
        return cls(id=str(data["id"]), status=data["attributes"]["status"])
