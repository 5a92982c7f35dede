"""
pkg_appsearch

Signed search keys for App Search: an HS256 compact-token codec with a
clean-architecture core, plus a thin API client and FastAPI integration.
"""

__version__ = "0.4.0"

from .domain.entities import SearchKeyScope
from .domain.constants import Algorithm, ApiKeyField
from .domain.exceptions import (
    TokenError,
    SerializationError,
    DecodingError,
    MalformedTokenError,
    InvalidSignatureError,
    ClientError,
    InvalidDocumentError,
    ConfigurationError,
)
from .domain.value_objects import (
    ApiKeyRef,
    SignedToken,
    TokenHeader,
    JsonValue,
)
from .domain.ports import TokenDecoder, TokenSigner

from .codec import sign, verify

from .application.use_cases.issue_search_key import (
    IssueSearchKeyUseCase,
    create_signed_search_key,
)
from .application.use_cases.verify_search_key import VerifySearchKeyUseCase

# adapters
from .adapters.hs256.codec import HS256TokenCodec
from .adapters.pyjwt.jwt_decoder import PyJWTTokenDecoder

from .client import AppSearchClient, ClientSettings, settings_from_env

__all__ = [
    "__version__",
    # domain core
    "SearchKeyScope",
    "Algorithm",
    "ApiKeyField",
    "ApiKeyRef",
    "SignedToken",
    "TokenHeader",
    "JsonValue",
    "TokenDecoder",
    "TokenSigner",
    # exceptions
    "TokenError",
    "SerializationError",
    "DecodingError",
    "MalformedTokenError",
    "InvalidSignatureError",
    "ClientError",
    "InvalidDocumentError",
    "ConfigurationError",
    # codec
    "sign",
    "verify",
    # use cases
    "IssueSearchKeyUseCase",
    "VerifySearchKeyUseCase",
    "create_signed_search_key",
    # adapters
    "HS256TokenCodec",
    "PyJWTTokenDecoder",
    # api client
    "AppSearchClient",
    "ClientSettings",
    "settings_from_env",
]
