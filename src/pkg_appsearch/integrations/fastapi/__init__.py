from __future__ import annotations

from .deps import FastAPISearchKeyAuth
from ..common.auth_factory import create_search_key_auth, SearchKeyAuth
from ...codec.hmac_engine import Secret


def create_fastapi_search_key_auth(
    *,
    secret: Secret,
    strict: bool = False,
) -> FastAPISearchKeyAuth:
    """
    High-level helper for FastAPI apps:

    - Creates SearchKeyAuth from the shared secret
    - Wraps it in FastAPISearchKeyAuth, exposing:

        search_key_auth.get_search_scope
    """
    auth: SearchKeyAuth = create_search_key_auth(secret=secret, strict=strict)
    return FastAPISearchKeyAuth(auth=auth)


__all__ = ["FastAPISearchKeyAuth", "create_fastapi_search_key_auth"]
