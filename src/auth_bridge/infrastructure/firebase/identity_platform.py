"""Firebase Authentication identity platform

Implements IdentityPlatform over the firebase-admin SDK. The SDK is
blocking, so each call runs in a worker thread.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import firebase_admin
from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError

from auth_bridge.core.identity import IdentityPlatform
from auth_bridge.domain.models import (
    Found,
    IdentityAccount,
    IdentityAccountParams,
    IdentityUpsertError,
    NotFound,
    TokenMintError,
    UpdateOutcome,
)

logger = logging.getLogger(__name__)


def _to_account(record: auth.UserRecord) -> IdentityAccount:
    return IdentityAccount(
        uid=record.uid,
        email=record.email,
        display_name=record.display_name,
        photo_url=record.photo_url,
        disabled=record.disabled,
    )


class FirebaseIdentityPlatform(IdentityPlatform):
    """Firebase Authentication backed identity platform"""

    def __init__(self, app: firebase_admin.App):
        self.app = app

    async def update_user(self, params: IdentityAccountParams) -> UpdateOutcome:
        try:
            record = await asyncio.to_thread(
                auth.update_user, params.uid, app=self.app, **params.to_platform_kwargs()
            )
        except auth.UserNotFoundError:
            return NotFound(uid=params.uid)
        except (FirebaseError, ValueError) as e:
            logger.error(f"Firebase update_user failed for {params.uid}: {e}")
            raise IdentityUpsertError(f"Failed to update user {params.uid}: {e}") from e

        return Found(account=_to_account(record))

    async def create_user(self, params: IdentityAccountParams) -> IdentityAccount:
        try:
            record = await asyncio.to_thread(
                auth.create_user, uid=params.uid, app=self.app, **params.to_platform_kwargs()
            )
        except (FirebaseError, ValueError) as e:
            logger.error(f"Firebase create_user failed for {params.uid}: {e}")
            raise IdentityUpsertError(f"Failed to create user {params.uid}: {e}") from e

        return _to_account(record)

    async def create_custom_token(
        self, uid: str, claims: Optional[Dict[str, Any]] = None
    ) -> str:
        try:
            token = await asyncio.to_thread(
                auth.create_custom_token, uid, claims, app=self.app
            )
        except (FirebaseError, ValueError) as e:
            logger.error(f"Firebase create_custom_token failed for {uid}: {e}")
            raise TokenMintError(f"Failed to mint custom token for {uid}: {e}") from e

        return token.decode("utf-8") if isinstance(token, bytes) else token
