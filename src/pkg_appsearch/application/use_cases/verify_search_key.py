from __future__ import annotations

import logging
from dataclasses import dataclass

from ...domain.entities import SearchKeyScope
from ...domain.exceptions import InvalidSignatureError, MalformedTokenError, TokenError
from ...domain.ports import TokenDecoder

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class VerifySearchKeyUseCase:
    """
    Application use case:
    - Verify a signed search key via the TokenDecoder port
    - Map its payload -> SearchKeyScope
    """

    token_decoder: TokenDecoder

    def execute(self, token: str) -> SearchKeyScope:
        """
        Verify a search key and return the scope it grants.

        Raises:
            MalformedTokenError
            InvalidSignatureError
            TokenError
        """
        try:
            payload = self.token_decoder.decode(token)
        except (MalformedTokenError, InvalidSignatureError) as exc:
            # let callers distinguish these explicitly
            logger.debug("Search key rejected: %s", exc)
            raise
        except Exception as exc:
            raise TokenError(f"Search key validation failed: {exc}") from exc

        return SearchKeyScope.from_payload(payload)
