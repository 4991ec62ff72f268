"""Login Flow

Chains the provider login with the identity platform:

    exchange_code -> fetch_profile -> upsert -> mint

Each stage consumes only the previous stage's output. A failing stage
aborts the flow; nothing is retried and nothing already done is undone
(an account upserted before a mint failure stays in place and is simply
updated on the next login).
"""

import logging
from enum import Enum
from typing import Optional

from auth_bridge.core.auth import OAuthProvider
from auth_bridge.core.identity import IdentityUpsert, TokenMinter
from auth_bridge.domain.models import AuthBridgeError, IdentityAccountParams

logger = logging.getLogger(__name__)


class LoginStage(Enum):
    """Stages reached by a login flow"""
    TOKEN_EXCHANGED = "token_exchanged"
    PROFILE_FETCHED = "profile_fetched"
    ACCOUNT_UPSERTED = "account_upserted"
    TOKEN_MINTED = "token_minted"


class LoginFlow:
    """Exchanges a provider authorization code for a custom token"""

    def __init__(
        self,
        provider: OAuthProvider,
        upserter: IdentityUpsert,
        minter: TokenMinter,
    ):
        self.provider = provider
        self.upserter = upserter
        self.minter = minter

    async def complete_login(self, code: str, correlation_id: Optional[str] = None) -> str:
        """Run the full login flow for an authorization code.

        Args:
            code: Provider authorization code
            correlation_id: Request correlation id used in log messages

        Returns:
            Custom token for the upserted account

        Raises:
            AuthBridgeError: Subclass identifying the stage that failed
        """
        stage: Optional[LoginStage] = None
        try:
            access_token = await self.provider.exchange_code(code)
            stage = self._advance(LoginStage.TOKEN_EXCHANGED, correlation_id)

            profile = await self.provider.fetch_profile(access_token)
            stage = self._advance(LoginStage.PROFILE_FETCHED, correlation_id)

            params = IdentityAccountParams.from_profile(self.provider.name, profile)
            account = await self.upserter.upsert(params)
            stage = self._advance(LoginStage.ACCOUNT_UPSERTED, correlation_id)

            token = await self.minter.mint(account.uid)
            self._advance(LoginStage.TOKEN_MINTED, correlation_id)
            return token

        except AuthBridgeError as e:
            last = stage.value if stage else "started"
            logger.error(
                f"Login flow failed after {last}: {type(e).__name__}: {e.message}",
                extra={"correlation_id": correlation_id},
            )
            raise

    @staticmethod
    def _advance(stage: LoginStage, correlation_id: Optional[str]) -> LoginStage:
        logger.info(
            f"Login flow reached {stage.value} (correlation: {correlation_id})",
            extra={"correlation_id": correlation_id},
        )
        return stage
