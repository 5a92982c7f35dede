# src/pkg_appsearch/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence, Union

from .constants import TOKEN_TYPE, SEGMENT_SEPARATOR, Algorithm, ApiKeyField
from .exceptions import MalformedTokenError


# --- JSON values ---------------------------------------------------------

JsonValue = Union[
    str,
    int,
    float,
    bool,
    None,
    Mapping[str, "JsonValue"],
    Sequence["JsonValue"],
]
JsonObject = Mapping[str, JsonValue]


# --- Token value objects -------------------------------------------------


@dataclass(frozen=True, slots=True)
class TokenHeader:
    """
    JOSE header of a signed search key.

    Only one shape is ever produced: ``{"typ": "JWT", "alg": "HS256"}``.
    """
    typ: str = TOKEN_TYPE
    alg: Algorithm = Algorithm.HS256

    def as_dict(self) -> Dict[str, str]:
        # typ first, alg second: the header bytes are part of the signature
        return {"typ": self.typ, "alg": self.alg.value}


@dataclass(frozen=True, slots=True)
class SignedToken:
    """
    A compact token split into its three base64url segments.

    Segments are kept as the literal text found in the token; nothing is
    decoded here.
    """
    header_segment: str
    payload_segment: str
    signature_segment: str

    @classmethod
    def parse(cls, token: str) -> "SignedToken":
        if not isinstance(token, str):
            raise MalformedTokenError(
                f"Token must be a string, got {type(token).__name__}"
            )
        segments = token.split(SEGMENT_SEPARATOR)
        if len(segments) != 3:
            raise MalformedTokenError(
                f"Token must have 3 segments, got {len(segments)}"
            )
        return cls(*segments)

    @property
    def signing_input(self) -> bytes:
        # well-formed segments are ASCII; anything else just fails the HMAC
        return SEGMENT_SEPARATOR.join(
            (self.header_segment, self.payload_segment)
        ).encode("utf-8")

    def __str__(self) -> str:
        return SEGMENT_SEPARATOR.join(
            (self.header_segment, self.payload_segment, self.signature_segment)
        )


# --- API key reference ---------------------------------------------------


@dataclass(frozen=True, slots=True)
class ApiKeyRef:
    """
    Identifies the API key a search key is scoped to, either by its unique
    name or by its id.
    """
    field: ApiKeyField
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError(f"Invalid {self.field.value}: {self.value!r}")

    @classmethod
    def by_name(cls, name: str) -> "ApiKeyRef":
        return cls(ApiKeyField.NAME, name)

    @classmethod
    def by_id(cls, key_id: str) -> "ApiKeyRef":
        return cls(ApiKeyField.ID, key_id)

    def as_item(self) -> tuple[str, Any]:
        return self.field.value, self.value

    def __str__(self) -> str:
        return self.value
