from typing import Any, Dict

import jwt
from jwt.exceptions import (
    DecodeError,
    InvalidSignatureError as JWTInvalidSignatureError,
    InvalidTokenError as JWTInvalidTokenError,
)

from ...codec.hmac_engine import Secret
from ...domain.constants import Algorithm
from ...domain.exceptions import InvalidSignatureError, MalformedTokenError
from ...domain.ports import TokenDecoder

# claims lifecycle (exp, nbf, ...) is not part of a search key
_OPTIONS = {
    "verify_signature": True,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
}


class PyJWTTokenDecoder(TokenDecoder):
    """
    Adapter implementing TokenDecoder port using PyJWT.

    Unlike the in-package codec this one reads the header and only accepts
    ``alg: HS256``, so a token re-labelled with another algorithm is refused.
    """

    def __init__(self, secret: Secret) -> None:
        self._secret = secret

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Decode and verify a signed search key.

        Raises:
            MalformedTokenError
            InvalidSignatureError
        """
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[Algorithm.HS256.value],
                options=_OPTIONS,
            )
        except JWTInvalidSignatureError as exc:
            raise InvalidSignatureError("Signature verification failed") from exc
        except (DecodeError, JWTInvalidTokenError) as exc:
            raise MalformedTokenError(f"Invalid token: {exc}") from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(secret=***)"
