"""
pkg_appsearch.codec

HS256 signed-token core:

- canonical: header / payload JSON bytes
- base64url: unpadded segment encoding
- hmac_engine: HMAC-SHA256 compute + constant-time check
- jwt: sign / verify
"""

from __future__ import annotations

from .base64url import b64url_decode, b64url_encode
from .canonical import encode_header, encode_payload
from .hmac_engine import compute, verify_signature
from .jwt import sign, verify

__all__ = [
    "b64url_encode",
    "b64url_decode",
    "encode_header",
    "encode_payload",
    "compute",
    "verify_signature",
    "sign",
    "verify",
]
