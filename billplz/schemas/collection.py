from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class SplitPayment(BaseModel):
    """
    A cut of each bill paid into the collection, routed to another Billplz
    account. Only one of fixed_cut (cents) / variable_cut (percentage string)
    is expected to be set; stack_order decides which split applies first.
    """

    email: str
    fixed_cut: Optional[int] = None
    variable_cut: Optional[str] = None
    stack_order: int


class Collection(BaseModel):
    title: str
    split_header: Optional[bool] = None
    split_payments: Optional[List[SplitPayment]] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class SplitPaymentResponse(BaseModel):
    model_config = {"extra": "allow"}

    email: Optional[str] = None
    fixed_cut: Optional[int] = None
    variable_cut: Optional[str] = None
    stack_order: Optional[int] = None


class Logo(BaseModel):
    model_config = {"extra": "allow"}

    thumb_url: Optional[str] = None
    avatar_url: Optional[str] = None


class CollectionResponse(BaseModel):
    model_config = {"extra": "allow"}

    id: Optional[str] = None
    title: Optional[str] = None
    split_header: Optional[bool] = None
    split_payments: Optional[List[SplitPaymentResponse]] = None
    logo: Optional[Logo] = None
    status: Optional[str] = None
