from __future__ import annotations

from typing import Protocol, Mapping, Any


class TokenSigner(Protocol):
    """
    Port for turning a payload into a signed token.
    """

    def sign(self, payload: Mapping[str, Any]) -> str:
        """
        Raises:
          - SerializationError
        """
        ...


class TokenDecoder(Protocol):
    """
    Port for verifying a signed token and returning its payload.

    Implementations live in the adapters layer (HS256 codec, PyJWT).
    """

    def decode(self, token: str) -> Mapping[str, Any]:
        """
        Verify the given token and decode its payload.

        Raises:
          - MalformedTokenError
          - InvalidSignatureError
        """
        ...
