"""Error kinds raised by the login bridge stages.

Every stage failure is terminal for the current request. The API layer
maps ``status_code``/``error_code`` onto the HTTP response.
"""

from typing import Any, Optional


class AuthBridgeError(Exception):
    """Base class for login bridge failures."""

    error_code = "auth_bridge_error"
    status_code = 502

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProviderError(AuthBridgeError):
    """OAuth provider call failed.

    Attributes:
        upstream_status: HTTP status returned by the provider (None on transport errors)
        upstream_body: Decoded JSON body or raw text returned by the provider
    """

    error_code = "provider_error"

    def __init__(
        self,
        message: str,
        upstream_status: Optional[int] = None,
        upstream_body: Any = None,
    ):
        super().__init__(message)
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body


class ProviderTokenError(ProviderError):
    """Authorization code exchange failed (bad code or provider outage)."""

    error_code = "provider_token_error"


class ProviderProfileError(ProviderError):
    """Profile fetch failed (bad/expired access token or malformed profile)."""

    error_code = "provider_profile_error"


class IdentityUpsertError(AuthBridgeError):
    """Identity platform rejected the account create/update."""

    error_code = "identity_upsert_error"


class TokenMintError(AuthBridgeError):
    """Identity platform rejected the custom token request."""

    error_code = "token_mint_error"
