from typing import Optional


class TokenAuthError(Exception):
    """Base class for errors raised by this package."""
    pass


class ConfigurationError(TokenAuthError):
    """Raised when strategy settings are missing or invalid."""
    pass


class InternalOAuthError(TokenAuthError):
    """
    Raised when a signed call to the provider fails.

    `oauth_error` keeps the underlying transport error (or HTTP response
    error) so callers can tell "provider unreachable" apart from other causes.
    """

    def __init__(self, message: str, oauth_error: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.oauth_error = oauth_error

    def __str__(self) -> str:
        base = super().__str__()
        if self.oauth_error is None:
            return base
        return f"{base}: {self.oauth_error}"
