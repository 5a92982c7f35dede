class TokenError(Exception):
    """Raised when a signed token cannot be produced or accepted."""
    pass


class SerializationError(TokenError):
    """Raised when a payload holds a value with no JSON representation."""
    pass


class DecodingError(TokenError):
    """Raised when text is not valid unpadded base64url."""
    pass


class MalformedTokenError(TokenError):
    """Raised when a token is not three well-formed segments."""
    pass


class InvalidSignatureError(TokenError):
    """Raised when a token signature does not match its contents."""
    pass


class ClientError(Exception):
    """Raised when an API request fails."""
    pass


class InvalidDocumentError(ClientError):
    """Raised when the API rejects an indexed document."""
    pass


class ConfigurationError(Exception):
    """Raised when required settings are missing."""
    pass
