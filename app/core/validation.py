"""
Schema validation helpers

Routes read the raw body with ``read_json`` and hand it to ``validate`` instead of
letting FastAPI bind it, so that authentication dependencies always run first
(even for undecodable bodies) and shape errors come back as a 400 carrying one
message per offending field.
"""

import json
from typing import Any, Dict, Iterable, List, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from app.core.exceptions import BadRequestError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def format_errors(errors: Iterable[Dict[str, Any]]) -> List[str]:
    """Turn pydantic error dicts into ``instance.<field>: <message>`` strings"""
    messages = []
    for error in errors:
        loc = ".".join(str(part) for part in error.get("loc", ()))
        prefix = f"instance.{loc}" if loc else "instance"
        msg = error["msg"]
        if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
            # drop pydantic's "Value error, " lead-in for our own validators
            msg = str(error["ctx"]["error"])
        messages.append(f"{prefix}: {msg}")
    return messages


def validate(schema: Type[SchemaT], data: Any) -> SchemaT:
    """
    Validate ``data`` against ``schema``.

    Args:
        schema: Pydantic model class describing the accepted shape
        data: Raw decoded JSON (or query mapping)

    Returns:
        The validated model instance

    Raises:
        BadRequestError: With the ordered list of validation messages
    """
    if not isinstance(data, dict):
        raise BadRequestError(["instance: is not of a type(s) object"])
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise BadRequestError(format_errors(e.errors()))


async def read_json(request: Request) -> Any:
    """Decode the request body as JSON; an empty body reads as None"""
    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        raise BadRequestError(["instance: is not valid JSON"])
