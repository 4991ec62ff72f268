"""Abstract identity platform interface.

The identity platform owns account records and signs custom tokens.
Implementations wrap a concrete backend (Firebase Authentication).
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from auth_bridge.domain.models import IdentityAccount, IdentityAccountParams, UpdateOutcome


class IdentityPlatform(ABC):
    """Account and custom-token operations of the identity platform."""

    @abstractmethod
    async def update_user(self, params: IdentityAccountParams) -> UpdateOutcome:
        """Update the account keyed by ``params.uid``.

        Returns:
            Found with the updated account, or NotFound if no account has that uid

        Raises:
            IdentityUpsertError: For any failure other than a missing account
        """
        pass

    @abstractmethod
    async def create_user(self, params: IdentityAccountParams) -> IdentityAccount:
        """Create an account with uid ``params.uid``.

        Raises:
            IdentityUpsertError: If the platform rejects the account
        """
        pass

    @abstractmethod
    async def create_custom_token(
        self, uid: str, claims: Optional[Dict[str, Any]] = None
    ) -> str:
        """Sign a custom token for ``uid`` carrying developer ``claims``.

        Raises:
            TokenMintError: If the platform rejects the uid or cannot sign
        """
        pass
