"""
Pytest configuration and fixtures for auth bridge tests.

Provides fixtures for:
- Kakao provider with a stubbed HTTP transport
- In-memory identity platform
- Test client for the FastAPI app
"""

import json
from typing import Any, AsyncGenerator, Callable, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from auth_bridge.api.routes.auth import get_identity_platform, get_provider
from auth_bridge.core.auth.kakao import KakaoProvider
from auth_bridge.core.auth.provider import ProviderConfig
from auth_bridge.core.identity import IdentityPlatform
from auth_bridge.domain.models import (
    Found,
    IdentityAccount,
    IdentityAccountParams,
    NotFound,
)
from auth_bridge.main import app

TOKEN_URL = "https://kauth.kakao.com/oauth/token"
PROFILE_URL = "https://kapi.kakao.com/v2/user/me?secure_resource=true"


class InMemoryIdentityPlatform(IdentityPlatform):
    """Identity platform keeping accounts in a dict.

    ``update_error``/``create_error``/``mint_error`` are raised from the
    matching operation when set.
    """

    def __init__(self):
        self.accounts: Dict[str, IdentityAccount] = {}
        self.update_calls: List[IdentityAccountParams] = []
        self.create_calls: List[IdentityAccountParams] = []
        self.mint_calls: List[tuple] = []
        self.update_error: Optional[Exception] = None
        self.create_error: Optional[Exception] = None
        self.mint_error: Optional[Exception] = None

    def _account(self, params: IdentityAccountParams) -> IdentityAccount:
        return IdentityAccount(uid=params.uid, **params.to_platform_kwargs())

    async def update_user(self, params):
        self.update_calls.append(params)
        if self.update_error:
            raise self.update_error
        if params.uid not in self.accounts:
            return NotFound(uid=params.uid)
        self.accounts[params.uid] = self._account(params)
        return Found(account=self.accounts[params.uid])

    async def create_user(self, params):
        self.create_calls.append(params)
        if self.create_error:
            raise self.create_error
        self.accounts[params.uid] = self._account(params)
        return self.accounts[params.uid]

    async def create_custom_token(self, uid, claims=None):
        self.mint_calls.append((uid, claims))
        if self.mint_error:
            raise self.mint_error
        return f"custom-token.{uid}.{json.dumps(claims, sort_keys=True)}"


def kakao_transport(
    token_status: int = 200,
    token_body: Any = None,
    profile_status: int = 200,
    profile_body: Any = None,
    requests: Optional[List[httpx.Request]] = None,
) -> httpx.MockTransport:
    """Build a MockTransport answering Kakao token and profile requests."""
    if token_body is None:
        token_body = {"access_token": "tok1", "token_type": "bearer", "expires_in": 21599}
    if profile_body is None:
        profile_body = {"id": 12345, "properties": {"nickname": "Alice"}}

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        if request.url.path == "/oauth/token":
            return _response(token_status, token_body)
        if request.url.path == "/v2/user/me":
            return _response(profile_status, profile_body)
        return httpx.Response(404, json={"msg": "not found"})

    return httpx.MockTransport(handler)


def _response(status: int, body: Any) -> httpx.Response:
    if isinstance(body, str):
        return httpx.Response(status, text=body)
    return httpx.Response(status, json=body)


@pytest.fixture
def provider_config() -> ProviderConfig:
    """Kakao provider configuration used across tests"""
    return ProviderConfig(
        name="kakao",
        client_id="test-client-id",
        redirect_uri="http://localhost:8080/auth/kakao/callback",
        authorize_url="https://kauth.kakao.com/oauth/authorize",
        token_url=TOKEN_URL,
        profile_url=PROFILE_URL,
        scopes=["profile_nickname", "profile_image", "account_email"],
    )


@pytest.fixture
def make_provider(provider_config) -> Callable[..., KakaoProvider]:
    """Factory for Kakao providers backed by kakao_transport"""

    def _make(**transport_kwargs) -> KakaoProvider:
        return KakaoProvider(provider_config, transport=kakao_transport(**transport_kwargs))

    return _make


@pytest.fixture
def identity_platform() -> InMemoryIdentityPlatform:
    """Empty in-memory identity platform"""
    return InMemoryIdentityPlatform()


@pytest_asyncio.fixture
async def client_factory(
    identity_platform, provider_config
) -> AsyncGenerator[Callable[..., AsyncClient], None]:
    """Build API clients whose provider answers with the given transport options."""
    clients: List[AsyncClient] = []

    def _make(**transport_kwargs) -> AsyncClient:
        provider = KakaoProvider(provider_config, transport=kakao_transport(**transport_kwargs))
        app.dependency_overrides[get_provider] = lambda: provider
        app.dependency_overrides[get_identity_platform] = lambda: identity_platform
        client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(client_factory) -> AsyncClient:
    """API client with a provider returning the default token and profile."""
    return client_factory()
