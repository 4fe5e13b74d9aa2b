from typing import Any, Dict

from pydantic import BaseModel


class Payout(BaseModel):
    mass_payment_instruction_collection_id: str
    bank_code: str
    bank_account_number: str
    identity_number: str
    name: str
    description: str
    total: int

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()


class PayoutCollection(BaseModel):
    title: str

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()
