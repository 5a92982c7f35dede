"""
Canonical JSON encoding for token header and payload.

Signatures cover these exact bytes, so the output must be reproducible:
compact separators, mapping insertion order, UTF-8.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from ..domain.exceptions import SerializationError
from ..domain.value_objects import TokenHeader

_HEADER = TokenHeader()


def _dumps(value: Any) -> bytes:
    return json.dumps(
        value,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")


HEADER_JSON = _dumps(_HEADER.as_dict())


def encode_header() -> bytes:
    return HEADER_JSON


def _check_keys(value: Any, path: str, active: set[int]) -> None:
    # json.dumps coerces int/float/bool/None keys to strings without complaint
    if isinstance(value, Mapping):
        items = value.items()
    elif isinstance(value, (list, tuple)):
        items = enumerate(value)
    else:
        return

    if id(value) in active:
        raise SerializationError(f"Circular reference at {path}")
    active.add(id(value))

    for k, v in items:
        if isinstance(value, Mapping) and not isinstance(k, str):
            raise SerializationError(f"Payload keys must be strings: {k!r} at {path}")
        _check_keys(v, f"{path}[{k!r}]", active)

    active.discard(id(value))


def encode_payload(payload: Mapping[str, Any]) -> bytes:
    """
    Serialize a payload mapping to compact JSON bytes.

    Raises:
        SerializationError: the payload is not a string-keyed mapping (at any
        depth), or holds a value JSON cannot represent.
    """
    if not isinstance(payload, Mapping):
        raise SerializationError(
            f"Payload must be a mapping, got {type(payload).__name__}"
        )

    try:
        _check_keys(payload, "payload", set())
        return _dumps(dict(payload))
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(f"Payload is not JSON serializable: {exc}") from exc
