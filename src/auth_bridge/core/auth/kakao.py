"""Kakao Login OAuth provider.

Implements the authorization-code flow against Kakao:
- https://kauth.kakao.com/oauth/authorize (user consent)
- https://kauth.kakao.com/oauth/token (code exchange)
- https://kapi.kakao.com/v2/user/me (profile)
"""

import logging
from typing import Any, Optional
from urllib.parse import urlencode

import httpx

from auth_bridge.domain.models import ExternalProfile, ProviderProfileError, ProviderTokenError

from .provider import OAuthProvider, ProviderConfig

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded;charset=utf-8"


def _decode_body(response: httpx.Response) -> Any:
    """Return the JSON body, or the raw text if it is not JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text


class KakaoProvider(OAuthProvider):
    """Kakao OAuth 2.0 provider.

    Example Configuration:
        PROVIDER_NAME=kakao
        KAKAO_CLIENT_ID=<REST API key>
        KAKAO_REDIRECT_URI=http://localhost:8080/auth/kakao/callback
    """

    def __init__(
        self,
        config: ProviderConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Kakao provider.

        Args:
            config: OAuth client configuration
            transport: Optional httpx transport (used to stub the network in tests)
        """
        super().__init__(config)
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self._transport, timeout=self.config.timeout_seconds)

    def get_authorization_url(self) -> str:
        """Generate Kakao authorization URL."""
        params = {
            "client_id": self.config.client_id,
            "redirect_uri": self.config.redirect_uri,
            "response_type": "code",
            "scope": ",".join(self.config.scopes),
        }
        return f"{self.config.authorize_url}?{urlencode(params, safe=',')}"

    async def exchange_code(self, code: str) -> str:
        """Exchange authorization code for a Kakao access token."""
        data = {
            "grant_type": "authorization_code",
            "client_id": self.config.client_id,
            "redirect_uri": self.config.redirect_uri,
            "code": code,
        }
        if self.config.client_secret:
            data["client_secret"] = self.config.client_secret

        try:
            async with self._client() as client:
                response = await client.post(
                    self.config.token_url,
                    data=data,
                    headers={"Content-Type": FORM_CONTENT_TYPE},
                )
        except httpx.HTTPError as e:
            logger.error(f"Kakao token request failed: {e}")
            raise ProviderTokenError(f"Token exchange request failed: {e}") from e

        body = _decode_body(response)
        if not response.is_success:
            logger.error(f"Kakao token exchange failed: {response.status_code} {response.text}")
            raise ProviderTokenError(
                f"Token exchange failed: {response.status_code}",
                upstream_status=response.status_code,
                upstream_body=body,
            )

        access_token = body.get("access_token") if isinstance(body, dict) else None
        if not access_token:
            logger.error("Kakao token response has no access_token")
            raise ProviderTokenError(
                "Token response is missing access_token",
                upstream_status=response.status_code,
                upstream_body=body,
            )

        logger.info("Kakao access token obtained")
        return access_token

    async def fetch_profile(self, access_token: str) -> ExternalProfile:
        """Fetch Kakao user profile."""
        try:
            async with self._client() as client:
                response = await client.get(
                    self.config.profile_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except httpx.HTTPError as e:
            logger.error(f"Kakao profile request failed: {e}")
            raise ProviderProfileError(f"Profile request failed: {e}") from e

        body = _decode_body(response)
        if not response.is_success:
            logger.error(f"Kakao profile fetch failed: {response.status_code} {response.text}")
            raise ProviderProfileError(
                f"Profile fetch failed: {response.status_code}",
                upstream_status=response.status_code,
                upstream_body=body,
            )

        if not isinstance(body, dict) or body.get("id") is None:
            logger.error("Kakao profile response is missing or malformed")
            raise ProviderProfileError(
                "Kakao profile does not exist",
                upstream_status=response.status_code,
                upstream_body=body,
            )

        for key in ("properties", "kakao_account"):
            if body.get(key) is not None and not isinstance(body[key], dict):
                logger.error(f"Kakao profile field {key} is not an object")
                raise ProviderProfileError(
                    f"Kakao profile field {key} is malformed",
                    upstream_status=response.status_code,
                    upstream_body=body,
                )

        return self._to_profile(body)

    @staticmethod
    def _to_profile(body: dict) -> ExternalProfile:
        """Map a /v2/user/me body onto ExternalProfile.

        ``properties`` and ``kakao_account`` are both optional; any field they
        do not carry stays None.
        """
        properties = body.get("properties") or {}
        account = body.get("kakao_account") or {}

        email = body.get("kaccount_email") or account.get("email")

        return ExternalProfile(
            external_id=str(body["id"]),
            email=email or None,
            display_name=properties.get("nickname") or None,
            avatar_url=properties.get("profile_image") or None,
        )
