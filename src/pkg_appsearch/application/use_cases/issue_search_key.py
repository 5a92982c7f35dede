from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ...adapters.hs256.codec import HS256TokenCodec
from ...codec.hmac_engine import Secret
from ...domain.entities import SearchKeyScope
from ...domain.ports import TokenSigner
from ...domain.value_objects import ApiKeyRef


@dataclass(slots=True)
class IssueSearchKeyUseCase:
    """
    Application use case:
    - Turn a SearchKeyScope into a payload
    - Sign it via the TokenSigner port

    The resulting token can be handed to untrusted clients: the search
    service re-applies the signed options on every query.
    """

    signer: TokenSigner

    def execute(self, scope: SearchKeyScope) -> str:
        """
        Raises:
            SerializationError
        """
        return self.signer.sign(scope.to_payload())


def create_signed_search_key(
        api_key: Secret,
        api_key_name: str,
        options: Mapping[str, Any] | None = None,
) -> str:
    """
    Create a signed search key that enforces ``options`` for every search
    made with it.

    ``api_key`` is both the signing secret and the key the search key is
    derived from; ``api_key_name`` is that key's unique name.
    """
    scope = SearchKeyScope(
        api_key=ApiKeyRef.by_name(api_key_name),
        options=dict(options or {}),
    )
    return IssueSearchKeyUseCase(signer=HS256TokenCodec(api_key)).execute(scope)
