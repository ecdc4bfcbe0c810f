"""
Link actions shown on a profile (email, phone, website, social handles, ...).

A LinkAction is created fresh for every resolution pass, preloaded with the
target user's data and kept only when it ends up with a target.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from profilegate.accounts.models import (
    PROPERTY_DISPLAYNAME,
    PROPERTY_EMAIL,
    PROPERTY_PHONE,
    PROPERTY_TWITTER,
    PROPERTY_WEBSITE,
    User,
)
from profilegate.accounts.providers import AccountManager, L10nFactory

from .settings import CORE_APP_ID


class LinkAction(ABC):
    """A displayable contact/link entry on a profile."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Stable identifier, unique among registered actions."""
        ...

    @abstractmethod
    def preload(self, target_user: User) -> None:
        """Load whatever the action needs to know about ``target_user``."""
        ...

    @property
    @abstractmethod
    def target(self) -> Optional[str]:
        """Link target; None when the action does not apply to the user."""
        ...

    @property
    @abstractmethod
    def icon(self) -> str:
        ...

    @property
    @abstractmethod
    def title(self) -> str:
        ...

    @property
    @abstractmethod
    def display_id(self) -> str:
        """Localized label used in the profile configuration."""
        ...

    @property
    def app_id(self) -> str:
        return CORE_APP_ID

    @property
    def priority(self) -> int:
        """Sort key; lower values are displayed first."""
        return 100


# ---------------------------------------------------------------------------
# Account property backed actions
# ---------------------------------------------------------------------------


class AccountPropertyAction(LinkAction):
    """Base for core actions backed by a single account property.

    Subclasses set the property name, icon name and labels, and derive the
    target from the property value.
    """

    property_name: str = ""
    icon_name: str = ""
    display_label: str = ""
    title_template: str = ""
    action_priority: int = 100

    def __init__(
        self,
        account_manager: AccountManager,
        l10n_factory: L10nFactory,
        *,
        l10n_domain: str = "core",
        icon_base_url: str = "",
        core_app_id: str = CORE_APP_ID,
    ) -> None:
        self._accounts = account_manager
        self._app_id = core_app_id
        self._l10n = l10n_factory.get(l10n_domain)
        self._icon_base_url = icon_base_url.rstrip("/")
        self._value = ""
        self._display_name = ""

    @property
    def id(self) -> str:
        return self.property_name

    def preload(self, target_user: User) -> None:
        account = self._accounts.get_account(target_user)
        self._value = account.get_value(self.property_name) or ""
        self._display_name = (
            account.get_value(PROPERTY_DISPLAYNAME)
            or target_user.display_name
            or target_user.id
        )

    @property
    def target(self) -> Optional[str]:
        if not self._value:
            return None
        return self.build_target(self._value)

    def build_target(self, value: str) -> str:
        return value

    @property
    def icon(self) -> str:
        return f"{self._icon_base_url}/core/img/actions/{self.icon_name}.svg"

    @property
    def title(self) -> str:
        return self._l10n.translate(self.title_template, self._display_name)

    @property
    def display_id(self) -> str:
        return self._l10n.translate(self.display_label)

    @property
    def app_id(self) -> str:
        return self._app_id

    @property
    def priority(self) -> int:
        return self.action_priority


class EmailAction(AccountPropertyAction):
    property_name = PROPERTY_EMAIL
    icon_name = "mail"
    display_label = "Email"
    title_template = "Mail %s"
    action_priority = 20

    def build_target(self, value: str) -> str:
        return f"mailto:{value}"


class PhoneAction(AccountPropertyAction):
    property_name = PROPERTY_PHONE
    icon_name = "phone"
    display_label = "Phone"
    title_template = "Call %s"
    action_priority = 30

    def build_target(self, value: str) -> str:
        return f"tel:{value}"


class WebsiteAction(AccountPropertyAction):
    property_name = PROPERTY_WEBSITE
    icon_name = "timezone"
    display_label = "Website"
    title_template = "Visit %s"
    action_priority = 40


class TwitterAction(AccountPropertyAction):
    property_name = PROPERTY_TWITTER
    icon_name = "twitter"
    display_label = "Twitter"
    title_template = "View %s on Twitter"
    action_priority = 50

    def build_target(self, value: str) -> str:
        handle = value.lstrip("@")
        return f"https://twitter.com/{handle}"
