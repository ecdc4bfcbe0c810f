"""
Pydantic models for user accounts and their profile properties.

Accounts are owned by an external account store; these models only carry
what the profile resolution needs: property values and their privacy scope.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Property identifiers
# ---------------------------------------------------------------------------

PROPERTY_ADDRESS = "address"
PROPERTY_AVATAR = "avatar"
PROPERTY_BIOGRAPHY = "biography"
PROPERTY_DISPLAYNAME = "displayname"
PROPERTY_EMAIL = "email"
PROPERTY_HEADLINE = "headline"
PROPERTY_ORGANISATION = "organisation"
PROPERTY_PHONE = "phone"
PROPERTY_ROLE = "role"
PROPERTY_TWITTER = "twitter"
PROPERTY_WEBSITE = "website"


class Scope(str, Enum):
    """Privacy scope attached to an account property."""

    PRIVATE = "v2-private"
    LOCAL = "v2-local"
    FEDERATED = "v2-federated"
    PUBLISHED = "v2-published"


class PropertyDoesNotExistError(Exception):
    """Raised when an account has no property with the requested name."""


class User(BaseModel):
    """A user known to the system."""

    id: str = Field(description="Unique user identifier (uid)")
    display_name: Optional[str] = Field(default=None)


class AccountProperty(BaseModel):
    """A single account property value and its privacy scope."""

    name: str = Field(description="Property identifier, e.g. displayname")
    value: str = Field(default="", description="Raw value; empty when unset")
    scope: Optional[str] = Field(
        default=None, description="Privacy scope (see Scope); None when unscoped"
    )


class Account(BaseModel):
    """A user's account properties keyed by property name."""

    user: User
    properties: Dict[str, AccountProperty] = Field(default_factory=dict)

    def get_property(self, name: str) -> AccountProperty:
        try:
            return self.properties[name]
        except KeyError:
            raise PropertyDoesNotExistError(
                f"Account {self.user.id} has no property {name!r}"
            ) from None

    def get_value(self, name: str) -> Optional[str]:
        """Value of property ``name``, or None when the account lacks it."""
        prop = self.properties.get(name)
        return prop.value if prop is not None else None

    def get_scope(self, name: str) -> Optional[str]:
        """Scope of property ``name``, or None when the account lacks it."""
        prop = self.properties.get(name)
        return prop.scope if prop is not None else None
