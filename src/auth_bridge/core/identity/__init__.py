"""Identity platform abstraction and the upsert/mint services built on it."""

from .platform import IdentityPlatform
from .service import IdentityUpsert, TokenMinter

__all__ = [
    "IdentityPlatform",
    "IdentityUpsert",
    "TokenMinter",
]
