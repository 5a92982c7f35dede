from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ...adapters.hs256.codec import HS256TokenCodec
from ...adapters.pyjwt.jwt_decoder import PyJWTTokenDecoder
from ...application.use_cases.issue_search_key import IssueSearchKeyUseCase
from ...application.use_cases.verify_search_key import VerifySearchKeyUseCase
from ...codec.hmac_engine import Secret
from ...domain.entities import SearchKeyScope
from ...domain.ports import TokenDecoder
from ...domain.value_objects import ApiKeyRef


@dataclass(slots=True)
class SearchKeyAuth:
    """
    Framework-agnostic signed search key facade.

    Integrations (FastAPI, etc.) adapt this to their own dependency systems.
    """

    issue_use_case: IssueSearchKeyUseCase
    verify_use_case: VerifySearchKeyUseCase

    # --- Core operations --------------------------------------------------

    def issue(self, scope: SearchKeyScope) -> str:
        """SearchKeyScope -> token."""
        return self.issue_use_case.execute(scope)

    def authenticate(self, token: str) -> SearchKeyScope:
        """Token -> SearchKeyScope (or raise token exceptions)."""
        return self.verify_use_case.execute(token)

    # --- Convenience helpers to build scopes -------------------------------

    def issue_for_name(self, api_key_name: str, options: Mapping[str, Any] | None = None) -> str:
        return self.issue(SearchKeyScope(ApiKeyRef.by_name(api_key_name), dict(options or {})))

    def issue_for_id(self, api_key_id: str, options: Mapping[str, Any] | None = None) -> str:
        return self.issue(SearchKeyScope(ApiKeyRef.by_id(api_key_id), dict(options or {})))


def create_search_key_auth(
        *,
        secret: Secret,
        strict: bool = False,
) -> SearchKeyAuth:
    """
    High-level factory: shared secret -> SearchKeyAuth.

    - signs with the in-package HS256 codec
    - verifies with the same codec, or with PyJWT pinned to HS256 when
      ``strict`` is set (rejects tokens whose header names another algorithm)
    """
    codec = HS256TokenCodec(secret)
    decoder: TokenDecoder = PyJWTTokenDecoder(secret) if strict else codec

    return SearchKeyAuth(
        issue_use_case=IssueSearchKeyUseCase(signer=codec),
        verify_use_case=VerifySearchKeyUseCase(token_decoder=decoder),
    )
