"""Unit tests for FirebaseIdentityPlatform

Tests the mapping between firebase-admin calls/exceptions and the
identity platform contract. firebase-admin auth functions are patched.
"""

from unittest.mock import MagicMock, patch

import pytest
from firebase_admin import auth
from firebase_admin.exceptions import InvalidArgumentError

from auth_bridge.domain.models import (
    Found,
    IdentityAccountParams,
    IdentityUpsertError,
    NotFound,
    TokenMintError,
)
from auth_bridge.infrastructure.firebase.identity_platform import FirebaseIdentityPlatform

AUTH = "auth_bridge.infrastructure.firebase.identity_platform.auth"


def user_record(uid="kakao:12345", email=None, display_name="Alice", photo_url=None):
    record = MagicMock()
    record.uid = uid
    record.email = email
    record.display_name = display_name
    record.photo_url = photo_url
    record.disabled = False
    return record


@pytest.fixture
def app():
    return MagicMock(name="firebase_app")


@pytest.fixture
def platform(app):
    return FirebaseIdentityPlatform(app)


@pytest.mark.unit
class TestUpdateUser:
    """Test update_user outcome mapping"""

    @pytest.mark.asyncio
    async def test_update_found(self, platform, app):
        """Happy path: SDK record is returned as Found"""
        params = IdentityAccountParams(uid="kakao:12345", display_name="Alice")

        with patch(f"{AUTH}.update_user", return_value=user_record()) as mock_update:
            outcome = await platform.update_user(params)

        assert isinstance(outcome, Found)
        assert outcome.account.uid == "kakao:12345"
        mock_update.assert_called_once_with("kakao:12345", app=app, display_name="Alice")

    @pytest.mark.asyncio
    async def test_update_not_found(self, platform):
        """UserNotFoundError becomes NotFound"""
        params = IdentityAccountParams(uid="kakao:12345", display_name="Alice")
        error = auth.UserNotFoundError("No user record found for the given identifier")

        with patch(f"{AUTH}.update_user", side_effect=error):
            outcome = await platform.update_user(params)

        assert outcome == NotFound(uid="kakao:12345")

    @pytest.mark.asyncio
    async def test_update_other_error(self, platform):
        """Other Firebase errors raise IdentityUpsertError with the cause chained"""
        params = IdentityAccountParams(uid="kakao:12345", email="taken@example.com")
        error = InvalidArgumentError("email already exists")

        with patch(f"{AUTH}.update_user", side_effect=error):
            with pytest.raises(IdentityUpsertError) as exc_info:
                await platform.update_user(params)

        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_update_invalid_argument(self, platform):
        """SDK argument validation errors raise IdentityUpsertError"""
        params = IdentityAccountParams(uid="kakao:12345", photo_url="not a url")

        with patch(f"{AUTH}.update_user", side_effect=ValueError("Malformed photo URL")):
            with pytest.raises(IdentityUpsertError, match="Malformed photo URL"):
                await platform.update_user(params)


@pytest.mark.unit
class TestCreateUser:
    """Test create_user"""

    @pytest.mark.asyncio
    async def test_create_omits_absent_fields(self, platform, app):
        """Only present fields are passed to the SDK"""
        params = IdentityAccountParams(uid="kakao:12345", display_name="Alice")

        with patch(f"{AUTH}.create_user", return_value=user_record()) as mock_create:
            account = await platform.create_user(params)

        assert account.uid == "kakao:12345"
        mock_create.assert_called_once_with(uid="kakao:12345", app=app, display_name="Alice")

    @pytest.mark.asyncio
    async def test_create_rejected(self, platform):
        """Firebase rejection raises IdentityUpsertError"""
        params = IdentityAccountParams(uid="kakao:12345", display_name="Alice")

        with patch(f"{AUTH}.create_user", side_effect=InvalidArgumentError("uid exists")):
            with pytest.raises(IdentityUpsertError):
                await platform.create_user(params)


@pytest.mark.unit
class TestCreateCustomToken:
    """Test create_custom_token"""

    @pytest.mark.asyncio
    async def test_token_decoded_to_str(self, platform, app):
        """SDK bytes token is returned as str"""
        with patch(f"{AUTH}.create_custom_token", return_value=b"signed.jwt.token") as mock_mint:
            token = await platform.create_custom_token("kakao:12345", {"provider": "KAKAO"})

        assert token == "signed.jwt.token"
        mock_mint.assert_called_once_with("kakao:12345", {"provider": "KAKAO"}, app=app)

    @pytest.mark.asyncio
    async def test_token_rejected_uid(self, platform):
        """Malformed uid raises TokenMintError"""
        with patch(f"{AUTH}.create_custom_token", side_effect=ValueError("Invalid uid")):
            with pytest.raises(TokenMintError, match="Invalid uid"):
                await platform.create_custom_token("", {"provider": "KAKAO"})

    @pytest.mark.asyncio
    async def test_token_sign_error(self, platform):
        """Signing failures raise TokenMintError"""
        error = auth.TokenSignError("Failed to sign custom token", cause=None)

        with patch(f"{AUTH}.create_custom_token", side_effect=error):
            with pytest.raises(TokenMintError):
                await platform.create_custom_token("kakao:12345", {"provider": "KAKAO"})
