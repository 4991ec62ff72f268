"""Abstract OAuth provider interface.

This module defines the contract that social-login providers must implement,
together with the explicit configuration struct each provider is built from.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from auth_bridge.config.settings import Settings
from auth_bridge.domain.models import ExternalProfile


@dataclass(frozen=True)
class ProviderConfig:
    """OAuth client configuration for a provider.

    Attributes:
        name: Provider name used for uid namespacing and route prefix (e.g. 'kakao')
        client_id: OAuth client id (Kakao REST API key)
        redirect_uri: Callback URL registered with the provider
        authorize_url: Provider authorization endpoint
        token_url: Provider token endpoint
        profile_url: Provider user profile endpoint
        scopes: Scopes requested at authorization time
        client_secret: Optional OAuth client secret
        timeout_seconds: Timeout applied to each outbound HTTP call
    """
    name: str
    client_id: str
    redirect_uri: str
    authorize_url: str
    token_url: str
    profile_url: str
    scopes: list[str] = field(default_factory=list)
    client_secret: Optional[str] = None
    timeout_seconds: float = 10.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProviderConfig":
        """Build provider configuration from application settings"""
        return cls(
            name=settings.provider_name.lower(),
            client_id=settings.kakao_client_id,
            redirect_uri=settings.kakao_redirect_uri,
            authorize_url=settings.kakao_authorize_url,
            token_url=settings.kakao_token_url,
            profile_url=settings.kakao_profile_url,
            scopes=list(settings.kakao_scopes),
            client_secret=settings.kakao_client_secret,
            timeout_seconds=settings.http_timeout_seconds,
        )


class OAuthProvider(ABC):
    """Abstract interface for social-login OAuth providers.

    Implementation is chosen at startup via PROVIDER_NAME environment variable.
    """

    def __init__(self, config: ProviderConfig):
        self.config = config

    @property
    def name(self) -> str:
        return self.config.name

    @abstractmethod
    def get_authorization_url(self) -> str:
        """Generate the URL the user is redirected to for login.

        Returns:
            Provider authorization URL including client id, redirect uri and scopes
        """
        pass

    @abstractmethod
    async def exchange_code(self, code: str) -> str:
        """Exchange an authorization code for an access token.

        Args:
            code: Authorization code from the provider callback

        Returns:
            Provider access token

        Raises:
            ProviderTokenError: If the exchange fails or the body has no access_token
        """
        pass

    @abstractmethod
    async def fetch_profile(self, access_token: str) -> ExternalProfile:
        """Fetch the user's profile with an access token.

        Args:
            access_token: Token returned by exchange_code

        Returns:
            ExternalProfile with optional fields left as None when absent

        Raises:
            ProviderProfileError: If the profile is missing or malformed
        """
        pass
