"""Domain models for Auth Bridge"""

from auth_bridge.domain.models.api import ErrorResponse, VerifyTokenResponse
from auth_bridge.domain.models.errors import (
    AuthBridgeError,
    IdentityUpsertError,
    ProviderError,
    ProviderProfileError,
    ProviderTokenError,
    TokenMintError,
)
from auth_bridge.domain.models.identity import (
    ExternalProfile,
    Found,
    IdentityAccount,
    IdentityAccountParams,
    NotFound,
    UpdateOutcome,
    build_uid,
)

__all__ = [
    # Identity models
    "ExternalProfile",
    "IdentityAccountParams",
    "IdentityAccount",
    "Found",
    "NotFound",
    "UpdateOutcome",
    "build_uid",
    # Errors
    "AuthBridgeError",
    "ProviderError",
    "ProviderTokenError",
    "ProviderProfileError",
    "IdentityUpsertError",
    "TokenMintError",
    # API models
    "VerifyTokenResponse",
    "ErrorResponse",
]
