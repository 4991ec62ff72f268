"""OAuth provider abstraction layer.

Supports social-login providers via pluggable implementations:
- kakao: Kakao Login (default)
"""

from .provider import OAuthProvider, ProviderConfig
from .factory import get_oauth_provider

__all__ = [
    "OAuthProvider",
    "ProviderConfig",
    "get_oauth_provider",
]
