from typing import Any, Dict

from pydantic import BaseModel


class FpxBank(BaseModel):
    bank_code: str
    bank_name: str


class Bank(BaseModel):
    # bank account verification request
    name: str
    id_no: str
    acc_no: str
    code: str
    organization: bool = False

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()
