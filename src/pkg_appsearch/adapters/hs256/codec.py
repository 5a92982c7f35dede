from __future__ import annotations

from typing import Any, Dict, Mapping

from ...codec import jwt
from ...codec.hmac_engine import Secret
from ...domain.ports import TokenDecoder, TokenSigner


class HS256TokenCodec(TokenSigner, TokenDecoder):
    """
    Adapter implementing both token ports with the in-package HS256 codec.

    Holds the shared secret so callers can pass one object around instead of
    threading the key through every call. The secret never shows up in repr.
    """

    def __init__(self, secret: Secret) -> None:
        self._secret = secret

    def sign(self, payload: Mapping[str, Any]) -> str:
        return jwt.sign(self._secret, payload)

    def decode(self, token: str) -> Dict[str, Any]:
        return jwt.verify(self._secret, token)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(secret=***)"
