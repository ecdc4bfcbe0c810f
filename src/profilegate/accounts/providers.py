"""
Interfaces and in-memory implementations for the collaborators profile
resolution depends on: accounts, app enablement, known users and
localization.

All providers follow the ABC pattern for pluggable backends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional, Set, Tuple

from .models import Account, AccountProperty, User


class AccountNotFoundError(Exception):
    """Raised when no account exists for the requested user."""


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


class AccountManager(ABC):
    """Read access to user accounts and their scoped properties."""

    @abstractmethod
    def get_account(self, user: User) -> Account:
        """Return the account of ``user``; raises AccountNotFoundError."""
        ...


class InMemoryAccountManager(AccountManager):
    """Non-persistent, in-memory reference implementation."""

    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {}

    def add_account(
        self, user: User, properties: Iterable[AccountProperty] = ()
    ) -> Account:
        account = Account(user=user, properties={p.name: p for p in properties})
        self._accounts[user.id] = account
        return account

    def get_account(self, user: User) -> Account:
        account = self._accounts.get(user.id)
        if account is None:
            raise AccountNotFoundError(f"No account for user {user.id}")
        return account


# ---------------------------------------------------------------------------
# Apps
# ---------------------------------------------------------------------------


class AppManager(ABC):
    """Answers whether an application is enabled for a given user."""

    @abstractmethod
    def is_enabled_for_user(self, app_id: str, user: User) -> bool:
        ...


class InMemoryAppManager(AppManager):
    """Apps enabled globally or for an explicit set of user ids."""

    def __init__(self) -> None:
        # app id -> None (everyone) or the set of user ids
        self._apps: Dict[str, Optional[Set[str]]] = {}

    def enable_app(self, app_id: str, user_ids: Optional[Iterable[str]] = None) -> None:
        self._apps[app_id] = None if user_ids is None else set(user_ids)

    def disable_app(self, app_id: str) -> None:
        self._apps.pop(app_id, None)

    def is_enabled_for_user(self, app_id: str, user: User) -> bool:
        if app_id not in self._apps:
            return False
        allowed = self._apps[app_id]
        return allowed is None or user.id in allowed


# ---------------------------------------------------------------------------
# Known users
# ---------------------------------------------------------------------------


class KnownUserService(ABC):
    """Directed "target recognizes viewer" relationship."""

    @abstractmethod
    def is_known_to_user(self, known_to: str, contact_user_id: str) -> bool:
        """True when ``contact_user_id`` is known to the user ``known_to``."""
        ...


class InMemoryKnownUserService(KnownUserService):
    """Non-persistent, in-memory reference implementation."""

    def __init__(self) -> None:
        self._known: Set[Tuple[str, str]] = set()

    def add_known_user(self, known_to: str, contact_user_id: str) -> None:
        self._known.add((known_to, contact_user_id))

    def is_known_to_user(self, known_to: str, contact_user_id: str) -> bool:
        return (known_to, contact_user_id) in self._known


# ---------------------------------------------------------------------------
# Localization
# ---------------------------------------------------------------------------


class L10n(ABC):
    """Translator for a single localization domain."""

    @abstractmethod
    def translate(self, text: str, *args: object) -> str:
        """Translate ``text``; positional ``args`` fill %s placeholders."""
        ...


class L10nFactory(ABC):
    @abstractmethod
    def get(self, domain: str) -> L10n:
        ...


class CatalogL10n(L10n):
    """Looks strings up in a flat catalog, falling back to the source text."""

    def __init__(self, catalog: Optional[Dict[str, str]] = None) -> None:
        self._catalog = dict(catalog or {})

    def translate(self, text: str, *args: object) -> str:
        translated = self._catalog.get(text, text)
        if args:
            translated = translated % args
        return translated


class InMemoryL10nFactory(L10nFactory):
    """Serves CatalogL10n translators from per-domain catalogs."""

    def __init__(self, catalogs: Optional[Dict[str, Dict[str, str]]] = None) -> None:
        self._catalogs = dict(catalogs or {})

    def get(self, domain: str) -> L10n:
        return CatalogL10n(self._catalogs.get(domain))
