from typing import Any, Dict, Optional

from pydantic import BaseModel


class Bill(BaseModel):
    collection_id: str
    email: str
    mobile: Optional[str] = None
    name: str
    amount: int  # minor units, 10000 = RM 100.00
    callback_url: str
    description: str
    due_at: str
    redirect_url: Optional[str] = None
    deliver: Optional[bool] = None
    reference_1_label: Optional[str] = None
    reference_1: Optional[str] = None
    reference_2_label: Optional[str] = None
    reference_2: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        # upstream branches on key presence, so unset or None optionals must not be sent at all
        return self.model_dump(exclude_unset=True, exclude_none=True)


class BillResponse(BaseModel):
    model_config = {"extra": "allow"}

    id: Optional[str] = None
    collection_id: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    name: Optional[str] = None
    amount: Optional[int] = None
    callback_url: Optional[str] = None
    description: Optional[str] = None
    due_at: Optional[str] = None
    redirect_url: Optional[str] = None
    deliver: Optional[bool] = None
    reference_1_label: Optional[str] = None
    reference_1: Optional[str] = None
    reference_2_label: Optional[str] = None
    reference_2: Optional[str] = None
    paid: Optional[bool] = None
    state: Optional[str] = None
    paid_amount: Optional[int] = 0
    url: Optional[str] = None
    paid_at: Optional[str] = None
