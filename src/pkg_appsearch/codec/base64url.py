"""Unpadded base64url, as used in compact token segments."""

from __future__ import annotations

import base64
import binascii
import re

from ..domain.exceptions import DecodingError

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(text: str) -> bytes:
    """
    Decode unpadded base64url text.

    Raises:
        DecodingError: characters outside ``[A-Za-z0-9_-]`` or a length that
        no amount of stripped padding can explain.
    """
    if not isinstance(text, str) or _ALPHABET.fullmatch(text) is None:
        raise DecodingError("Invalid base64url characters")
    if len(text) % 4 == 1:
        raise DecodingError(f"Invalid base64url length: {len(text)}")

    padded = text + "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as exc:
        raise DecodingError(f"Invalid base64url: {exc}") from exc
