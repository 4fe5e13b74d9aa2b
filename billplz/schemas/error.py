from pydantic import BaseModel


class ErrorDetail(BaseModel):
    type: str
    message: str


class ErrorEnvelope(BaseModel):
    """{"error": {"type": "...", "message": "..."}}"""

    error: ErrorDetail
