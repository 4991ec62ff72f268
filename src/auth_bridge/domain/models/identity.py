"""Identity Data Models

Purpose: Define data structures flowing through the login bridge

This module provides the core data models for the Auth Bridge.

Key Components:
- ExternalProfile: User profile as reported by the OAuth provider
- IdentityAccountParams: Parameters for creating/updating a platform account
- IdentityAccount: Platform-owned account record
- Found / NotFound: Outcome of an update-by-uid attempt
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


def build_uid(provider_name: str, external_id: str) -> str:
    """Namespace a provider user id as ``<provider>:<external_id>``"""
    return f"{provider_name.lower()}:{external_id}"


@dataclass(frozen=True)
class ExternalProfile:
    """User profile fetched from the OAuth provider

    Attributes:
        external_id: Provider-assigned user id (string form)
        email: Account email, if the user consented to share it
        display_name: Provider nickname
        avatar_url: Provider profile image URL
    """
    external_id: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None


@dataclass(frozen=True)
class IdentityAccountParams:
    """Parameters used to create or update an identity platform account

    Attributes:
        uid: Namespaced account id (``<provider>:<external_id>``)
        display_name: Display name, falling back to email
        email: Email address (omitted when absent)
        photo_url: Avatar URL (omitted when absent)
    """
    uid: str
    display_name: Optional[str] = None
    email: Optional[str] = None
    photo_url: Optional[str] = None

    @classmethod
    def from_profile(cls, provider_name: str, profile: ExternalProfile) -> "IdentityAccountParams":
        """Derive account parameters from a provider profile"""
        return cls(
            uid=build_uid(provider_name, profile.external_id),
            display_name=profile.display_name or profile.email or None,
            email=profile.email or None,
            photo_url=profile.avatar_url or None,
        )

    def to_platform_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for the identity platform, without empty fields"""
        kwargs: Dict[str, Any] = {}
        if self.display_name:
            kwargs["display_name"] = self.display_name
        if self.email:
            kwargs["email"] = self.email
        if self.photo_url:
            kwargs["photo_url"] = self.photo_url
        return kwargs


@dataclass(frozen=True)
class IdentityAccount:
    """Account record owned by the identity platform"""
    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    disabled: bool = False


@dataclass(frozen=True)
class Found:
    """Update succeeded against an existing account"""
    account: IdentityAccount


@dataclass(frozen=True)
class NotFound:
    """No account exists for the uid"""
    uid: str


UpdateOutcome = Union[Found, NotFound]
