import json
from typing import Any

from pydantic import BaseModel


def output_json(value: Any, pretty: bool) -> str:
    """Render a model, a list of models or plain JSON data; None fields are dropped."""
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", exclude_none=True)
    elif isinstance(value, list):
        value = [v.model_dump(mode="json", exclude_none=True) if isinstance(v, BaseModel) else v for v in value]
    if pretty:
        return json.dumps(value, indent=2, ensure_ascii=False)
    return json.dumps(value, ensure_ascii=False)


def raw_to_json(text: str) -> Any:
    # passthrough bodies are usually JSON, but not guaranteed
    try:
        return json.loads(text)
    except ValueError:
        return text
