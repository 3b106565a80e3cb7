"""Request Decoding — raw body → schema model, one error class for every failure.

Invariants:
    - Empty body, invalid JSON, invalid UTF-8, runaway nesting and wrong shape
      all raise MalformedInputError with the caller's context phrase
    - Cause text names the first offending field when Pydantic reports one
"""

from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from snickers.core.errors import MalformedInputError

ModelT = TypeVar("ModelT", bound=BaseModel)


async def decode_body(
    request: Request, model: type[ModelT], context: str,
) -> ModelT:
    """Parse the request body as JSON and validate it into `model`."""
    raw = await request.body()
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedInputError(context, _describe_validation_error(e)) from e


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if first["type"] == "json_invalid":
        return f"invalid JSON: {first.get('ctx', {}).get('error', first['msg'])}"
    if first["type"] == "model_type" and not location:
        return "expected a JSON object"
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]
