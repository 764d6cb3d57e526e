"""Response body decoding shared by single and paginated queries."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import TYPE_CHECKING, Any, get_origin

from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import HttpStatusError, JsonDecodeError, TypeMismatchError

if TYPE_CHECKING:
    from .rest.transport import RawResponse


@lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def decode_json(response: RawResponse) -> Any:
    """Decode the response body as JSON.

    Raises:
        JsonDecodeError: Body is empty, not UTF-8 or not JSON
    """
    try:
        return json.loads(response.body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise JsonDecodeError(
            f"invalid JSON in response body: {e}",
            status_code=response.status,
            body=response.body,
        ) from e


def status_error(response: RawResponse) -> HttpStatusError:
    """Build the error for a non-2xx response from its body."""
    try:
        payload = json.loads(response.body)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return HttpStatusError.from_body(response.status, response.body)
    return HttpStatusError.from_payload(response.status, payload)


def validate(data: Any, target: Any) -> Any:
    """Validate decoded JSON against ``target`` with pydantic.

    Raises:
        TypeMismatchError: The data does not have the target's shape
    """
    try:
        return _adapter(target).validate_python(data)
    except ValidationError as e:
        type_name = _type_name(target)
        raise TypeMismatchError(
            f"could not parse {type_name} from JSON: {e.error_count()} validation error(s)",
            type_name=type_name,
            errors=e.errors(include_url=False),
        ) from e


def validate_page(data: Any, item_type: Any) -> list[Any]:
    """Validate decoded JSON as a list of ``item_type``."""
    return validate(data, list[item_type])


def _type_name(target: Any) -> str:
    if get_origin(target) is not None:
        return repr(target)
    return getattr(target, "__name__", None) or repr(target)
