from __future__ import annotations

import hashlib
import hmac

Secret = str | bytes


def _key_bytes(secret: Secret) -> bytes:
    if isinstance(secret, bytes):
        return secret
    return secret.encode("utf-8")


def compute(secret: Secret, message: bytes) -> bytes:
    """HMAC-SHA256 of ``message`` keyed by the secret's UTF-8 bytes."""
    return hmac.new(_key_bytes(secret), message, hashlib.sha256).digest()


def verify_signature(secret: Secret, message: bytes, candidate: bytes) -> bool:
    """Constant-time check of ``candidate`` against the expected signature."""
    return hmac.compare_digest(compute(secret, message), candidate)
