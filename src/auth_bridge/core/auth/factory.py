"""OAuth provider factory.

Selects and instantiates the configured social-login provider.
"""

import logging
from typing import Optional

from auth_bridge.config.settings import get_settings

from .provider import OAuthProvider, ProviderConfig

logger = logging.getLogger(__name__)

# Global provider instance (initialized on first call)
_provider_instance: Optional[OAuthProvider] = None


def get_oauth_provider() -> OAuthProvider:
    """Get the configured OAuth provider instance.

    Provider is selected via PROVIDER_NAME environment variable:
    - kakao: Kakao Login (default)

    Returns:
        Configured OAuthProvider instance

    Raises:
        ValueError: If PROVIDER_NAME is invalid
    """
    global _provider_instance

    # Return cached instance
    if _provider_instance is not None:
        return _provider_instance

    config = ProviderConfig.from_settings(get_settings())
    logger.info(f"Initializing OAuth provider: {config.name}")

    if config.name == "kakao":
        from .kakao import KakaoProvider
        if not config.client_id:
            logger.warning("KAKAO_CLIENT_ID is not set; Kakao login will be rejected")
        _provider_instance = KakaoProvider(config)

    else:
        raise ValueError(
            f"Unknown PROVIDER_NAME: {config.name}. "
            f"Valid options: kakao"
        )

    logger.info(f"OAuth provider initialized: {_provider_instance.__class__.__name__}")
    return _provider_instance


def reset_provider() -> None:
    """Reset the global provider instance (for testing)."""
    global _provider_instance
    _provider_instance = None
