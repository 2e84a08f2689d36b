"""
Form and query-string encoding of parameter structures.

The remote API reads nested parameters in bracket notation::

    metadata[order_id]=6735&items[0][plan]=gold&items[0][quantity]=2

``None`` values are skipped at every level so that absent optional fields
never reach the wire.
"""

import json
import math
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel

from payapi.exceptions import ErrorKind, PaymentAPIError


def to_payload(
    params: BaseModel | dict[str, Any] | None, mode: str = "python"
) -> dict[str, Any]:
    """Dump a parameter structure to a plain dict without unset fields.

    ``mode="json"`` yields only JSON-compatible values, for JSON bodies.
    """
    if params is None:
        return {}
    if isinstance(params, BaseModel):
        return params.model_dump(mode=mode, exclude_none=True)
    if isinstance(params, dict):
        return {k: v for k, v in params.items() if v is not None}
    raise PaymentAPIError(
        f"Cannot encode parameters of type {type(params).__name__}",
        ErrorKind.ENCODING,
    )


def _scalar(key: str, value: Any) -> str:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _scalar(key, value.value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise PaymentAPIError(
                f"Cannot encode non-finite number for '{key}'",
                ErrorKind.ENCODING,
                param=key,
            )
        return repr(value)
    if isinstance(value, str):
        return value
    raise PaymentAPIError(
        f"Cannot encode value of type {type(value).__name__} for '{key}'",
        ErrorKind.ENCODING,
        param=key,
    )


def _flatten(prefix: str, value: Any, pairs: list[tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="python", exclude_none=True)
    if isinstance(value, dict):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, pairs)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{prefix}[{index}]", item, pairs)
    else:
        pairs.append((prefix, _scalar(prefix, value)))


def encode_pairs(params: BaseModel | dict[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten parameters into ordered ``(key, value)`` pairs."""
    pairs: list[tuple[str, str]] = []
    for key, value in to_payload(params).items():
        _flatten(key, value, pairs)
    return pairs


def to_query_string(params: BaseModel | dict[str, Any] | None) -> str:
    """Encode parameters as a URL query string (without the leading ``?``).

    Raises:
        PaymentAPIError: With kind ``encoding`` for values that have no
            wire representation.
    """
    return urlencode(encode_pairs(params), safe="[]")


def to_json(params: BaseModel | dict[str, Any] | None) -> str:
    """Encode parameters as a JSON document.

    Non-finite floats and values JSON cannot represent are rejected the same
    way the form encoder rejects them.

    Raises:
        PaymentAPIError: With kind ``encoding``.
    """
    try:
        return json.dumps(to_payload(params, mode="json"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise PaymentAPIError(
            f"Cannot encode parameters as JSON: {e}",
            ErrorKind.ENCODING,
        ) from e
