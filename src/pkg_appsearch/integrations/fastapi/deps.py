from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import Depends, HTTPException, status, Request
from fastapi.security import HTTPAuthorizationCredentials

from .security import bearer_scheme, extract_token_from_request
from ..common.auth_factory import SearchKeyAuth
from ...domain.entities import SearchKeyScope
from ...domain.exceptions import InvalidSignatureError, TokenError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FastAPISearchKeyAuth:
    """
    FastAPI integration for signed search keys, built on top of the
    framework-agnostic SearchKeyAuth facade.
    """

    auth: SearchKeyAuth

    async def get_search_scope(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> SearchKeyScope:
        """Dependency: require a valid signed search key."""
        token = extract_token_from_request(request, credentials)
        try:
            return self.auth.authenticate(token)
        except InvalidSignatureError as exc:
            logger.warning("Rejected search key for %s: bad signature", request.url.path)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid search key signature",
            ) from exc
        except TokenError as exc:
            logger.warning("Rejected search key for %s: %s", request.url.path, exc)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(exc),
            ) from exc
