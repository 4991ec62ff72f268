"""Identity upsert and custom token minting.

Both services are thin policies over an IdentityPlatform: the upsert
decides between update and create, the minter attaches the provider claim.
"""

import logging

from auth_bridge.domain.models import (
    Found,
    IdentityAccount,
    IdentityAccountParams,
    NotFound,
)

from .platform import IdentityPlatform

logger = logging.getLogger(__name__)


class IdentityUpsert:
    """Update-if-exists-else-create for identity accounts."""

    def __init__(self, platform: IdentityPlatform):
        self.platform = platform

    async def upsert(self, params: IdentityAccountParams) -> IdentityAccount:
        """Update the account for ``params.uid``, creating it if it does not exist.

        Only a NotFound outcome takes the creation path. Any other failure
        raised by the platform propagates unchanged.

        Args:
            params: Account parameters derived from the provider profile

        Returns:
            The updated or newly created account

        Raises:
            IdentityUpsertError: If the platform rejects the update or create
        """
        outcome = await self.platform.update_user(params)

        if isinstance(outcome, Found):
            logger.info(f"Updated identity account {params.uid}")
            return outcome.account

        if isinstance(outcome, NotFound):
            logger.info(f"No identity account for {params.uid}, creating one")
            account = await self.platform.create_user(params)
            logger.info(f"Created identity account {account.uid}")
            return account

        raise TypeError(f"Unexpected update outcome: {outcome!r}")


class TokenMinter:
    """Mints custom tokens scoped with the originating provider claim."""

    def __init__(self, platform: IdentityPlatform, provider_claim: str):
        self.platform = platform
        self.provider_claim = provider_claim

    async def mint(self, uid: str) -> str:
        """Mint a custom token for ``uid``.

        Raises:
            TokenMintError: If the platform rejects the uid
        """
        token = await self.platform.create_custom_token(uid, {"provider": self.provider_claim})
        logger.info(f"Minted custom token for {uid}")
        return token
