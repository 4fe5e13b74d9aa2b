from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import ApiError, ParseError
from .schemas.error import ErrorEnvelope

M = TypeVar("M", bound=BaseModel)


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def parse_response(status_code: int, body: str, model: Type[M]) -> M:
    """
    Typed endpoints (collections, bills):
      - non-2xx with an {"error": {"type", "message"}} body -> ApiError
      - anything else is decoded into `model`; failure -> ParseError
    A non-2xx body that is not an error envelope still goes through the
    success decode, so the resulting ParseError carries the status code.
    """
    if not is_success(status_code):
        try:
            envelope = ErrorEnvelope.model_validate_json(body)
        except ValidationError:
            pass
        else:
            raise ApiError(envelope.error.type, envelope.error.message, status_code=status_code)

    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise ParseError(e, status_code=status_code) from e
