"""
Account-side collaborators for profile resolution.

Provides user/account models with scoped properties and the provider
interfaces (accounts, apps, known users, localization) profiles consume.
"""

from .models import (
    PROPERTY_ADDRESS,
    PROPERTY_AVATAR,
    PROPERTY_BIOGRAPHY,
    PROPERTY_DISPLAYNAME,
    PROPERTY_EMAIL,
    PROPERTY_HEADLINE,
    PROPERTY_ORGANISATION,
    PROPERTY_PHONE,
    PROPERTY_ROLE,
    PROPERTY_TWITTER,
    PROPERTY_WEBSITE,
    Account,
    AccountProperty,
    PropertyDoesNotExistError,
    Scope,
    User,
)
from .providers import (
    AccountManager,
    AccountNotFoundError,
    AppManager,
    CatalogL10n,
    InMemoryAccountManager,
    InMemoryAppManager,
    InMemoryKnownUserService,
    InMemoryL10nFactory,
    KnownUserService,
    L10n,
    L10nFactory,
)

__all__ = [
    "PROPERTY_ADDRESS",
    "PROPERTY_AVATAR",
    "PROPERTY_BIOGRAPHY",
    "PROPERTY_DISPLAYNAME",
    "PROPERTY_EMAIL",
    "PROPERTY_HEADLINE",
    "PROPERTY_ORGANISATION",
    "PROPERTY_PHONE",
    "PROPERTY_ROLE",
    "PROPERTY_TWITTER",
    "PROPERTY_WEBSITE",
    "Account",
    "AccountProperty",
    "PropertyDoesNotExistError",
    "Scope",
    "User",
    "AccountManager",
    "AccountNotFoundError",
    "AppManager",
    "CatalogL10n",
    "InMemoryAccountManager",
    "InMemoryAppManager",
    "InMemoryKnownUserService",
    "InMemoryL10nFactory",
    "KnownUserService",
    "L10n",
    "L10nFactory",
]
