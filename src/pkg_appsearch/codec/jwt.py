"""
HS256 compact token codec.

    sign:   b64url(header) "." b64url(payload) "." b64url(HMAC-SHA256)
    verify: split, recompute the HMAC over the first two segments, compare,
            then decode the payload.

The header segment is signed but never interpreted on verify.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from . import hmac_engine
from .base64url import b64url_decode, b64url_encode
from .canonical import encode_header, encode_payload
from .hmac_engine import Secret
from ..domain.exceptions import DecodingError, InvalidSignatureError, MalformedTokenError
from ..domain.value_objects import SignedToken


def sign(secret: Secret, payload: Mapping[str, Any]) -> str:
    """
    Build a signed token for ``payload``.

    Raises:
        SerializationError
    """
    header_segment = b64url_encode(encode_header())
    payload_segment = b64url_encode(encode_payload(payload))

    unsigned = SignedToken(header_segment, payload_segment, "")
    signature = hmac_engine.compute(secret, unsigned.signing_input)

    return str(SignedToken(header_segment, payload_segment, b64url_encode(signature)))


def verify(secret: Secret, token: str) -> Dict[str, Any]:
    """
    Check the signature of ``token`` and return its payload.

    Raises:
        MalformedTokenError
        InvalidSignatureError
    """
    parsed = SignedToken.parse(token)

    try:
        candidate = b64url_decode(parsed.signature_segment)
    except DecodingError as exc:
        raise MalformedTokenError(f"Invalid signature segment: {exc}") from exc

    # only one textual form per digest is accepted
    if b64url_encode(candidate) != parsed.signature_segment:
        raise MalformedTokenError("Invalid signature segment: non-canonical encoding")

    if not hmac_engine.verify_signature(secret, parsed.signing_input, candidate):
        raise InvalidSignatureError("Signature verification failed")

    return _decode_payload(parsed.payload_segment)


def _decode_payload(segment: str) -> Dict[str, Any]:
    try:
        raw = b64url_decode(segment)
        payload = json.loads(raw.decode("utf-8"))
    except DecodingError as exc:
        raise MalformedTokenError(f"Invalid payload segment: {exc}") from exc
    except (UnicodeDecodeError, ValueError) as exc:
        raise MalformedTokenError(f"Invalid payload JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise MalformedTokenError("Invalid payload: must be a JSON object")
    return payload
