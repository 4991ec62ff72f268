"""Provider Login Routes

Purpose: FastAPI routes for the social-login to identity platform bridge

Key Endpoints:
- GET /auth/{provider}: Redirect to the provider login page
- GET /auth/{provider}/callback: Provider redirect target after login
- GET /auth/{provider}/verifyToken: Exchange an authorization code for a custom token
"""

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse

from auth_bridge.config.settings import get_settings
from auth_bridge.core.auth import OAuthProvider, get_oauth_provider
from auth_bridge.core.identity import IdentityPlatform, IdentityUpsert, TokenMinter
from auth_bridge.domain.models import (
    AuthBridgeError,
    ErrorResponse,
    ProviderError,
    VerifyTokenResponse,
)
from auth_bridge.domain.services.login_flow import LoginFlow
from auth_bridge.infrastructure.firebase.client import get_firebase_client
from auth_bridge.infrastructure.firebase.identity_platform import FirebaseIdentityPlatform

# Initialize router and logger
router = APIRouter(prefix=f"/auth/{get_settings().provider_name.lower()}", tags=["authentication"])
logger = logging.getLogger(__name__)


# Dependency injection functions
def get_provider() -> OAuthProvider:
    """Get OAuth provider instance"""
    return get_oauth_provider()


def get_identity_platform() -> IdentityPlatform:
    """Get identity platform instance"""
    return FirebaseIdentityPlatform(get_firebase_client().get_app())


def get_login_flow(
    provider: OAuthProvider = Depends(get_provider),
    platform: IdentityPlatform = Depends(get_identity_platform),
) -> LoginFlow:
    """Get login flow wired to the configured provider and platform"""
    settings = get_settings()
    return LoginFlow(
        provider=provider,
        upserter=IdentityUpsert(platform),
        minter=TokenMinter(platform, settings.provider_claim),
    )


def error_response(exc: AuthBridgeError, correlation_id: str) -> JSONResponse:
    """Build the JSON error response for a failed login stage.

    A provider 4xx with a JSON object body is passed through with its own
    status; everything else is reported as a bad gateway.
    """
    headers = {"X-Correlation-Id": correlation_id}

    if (
        isinstance(exc, ProviderError)
        and exc.upstream_status is not None
        and 400 <= exc.upstream_status < 500
        and isinstance(exc.upstream_body, dict)
    ):
        return JSONResponse(
            status_code=exc.upstream_status, content=exc.upstream_body, headers=headers
        )

    upstream = None
    if isinstance(exc, ProviderError) and isinstance(exc.upstream_body, dict):
        upstream = exc.upstream_body

    body = ErrorResponse(
        error=exc.error_code,
        message=exc.message,
        correlation_id=correlation_id,
        upstream=upstream,
    )
    return JSONResponse(
        status_code=exc.status_code, content=body.model_dump(exclude_none=True), headers=headers
    )


@router.get("", status_code=302)
async def login_redirect(provider: OAuthProvider = Depends(get_provider)) -> RedirectResponse:
    """Start the provider login

    Redirects the browser to the provider's authorization page.
    """
    authorization_url = provider.get_authorization_url()
    logger.info(f"Redirecting to {provider.name} login")
    return RedirectResponse(url=authorization_url, status_code=302)


@router.get("/callback", response_class=PlainTextResponse)
async def login_callback(
    code: Optional[str] = Query(None, description="Provider authorization code"),
) -> str:
    """Provider login callback

    Only acknowledges the login; the client passes the code from this URL
    to verifyToken.
    """
    if code:
        logger.info("Received provider authorization code on callback")
    return "Success! Use the user auth code in the callback URL to verify token"


@router.get(
    "/verifyToken",
    response_model=VerifyTokenResponse,
    responses={
        "4XX": {
            "description": "Provider rejected the request; the provider's JSON error body is returned unchanged",
            "content": {"application/json": {"schema": {"type": "object"}}},
        },
        502: {"model": ErrorResponse},
    },
)
async def verify_token(
    response: Response,
    code: str = Query(..., min_length=1, description="Provider authorization code"),
    login_flow: LoginFlow = Depends(get_login_flow),
):
    """Exchange a provider authorization code for a custom token

    Runs the full login flow and returns the identity platform token.
    """
    correlation_id = str(uuid.uuid4())

    try:
        token = await login_flow.complete_login(code, correlation_id=correlation_id)
    except AuthBridgeError as e:
        logger.warning(
            f"verifyToken failed: {e.error_code} (correlation: {correlation_id})",
            extra={"correlation_id": correlation_id},
        )
        return error_response(e, correlation_id)

    response.headers["X-Correlation-Id"] = correlation_id
    logger.info(f"Returning custom token to user (correlation: {correlation_id})")
    return VerifyTokenResponse(token=token)
