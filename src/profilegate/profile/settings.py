"""Configuration for profile resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple

from profilegate.accounts.models import (
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
)

from .models import Visibility

# Account properties displayed on the profile, in display order.
PROFILE_PROPERTIES: Tuple[str, ...] = (
    PROPERTY_ADDRESS,
    PROPERTY_BIOGRAPHY,
    PROPERTY_DISPLAYNAME,
    PROPERTY_HEADLINE,
    PROPERTY_ORGANISATION,
    PROPERTY_ROLE,
)

# Source strings for the labels of non-action fields (localized at bootstrap).
PROPERTY_LABELS: Dict[str, str] = {
    PROPERTY_ADDRESS: "Address",
    PROPERTY_AVATAR: "Avatar",
    PROPERTY_BIOGRAPHY: "About",
    PROPERTY_DISPLAYNAME: "Full name",
    PROPERTY_HEADLINE: "Headline",
    PROPERTY_ORGANISATION: "Organisation",
    PROPERTY_ROLE: "Role",
}

CORE_APP_ID = "core"


def _default_property_visibility() -> Dict[str, str]:
    return {
        PROPERTY_ADDRESS: Visibility.SHOW_USERS_ONLY.value,
        PROPERTY_AVATAR: Visibility.SHOW.value,
        PROPERTY_BIOGRAPHY: Visibility.SHOW.value,
        PROPERTY_DISPLAYNAME: Visibility.SHOW.value,
        PROPERTY_HEADLINE: Visibility.SHOW.value,
        PROPERTY_ORGANISATION: Visibility.SHOW.value,
        PROPERTY_ROLE: Visibility.SHOW.value,
    }


def _default_action_visibility() -> Dict[str, str]:
    return {
        PROPERTY_EMAIL: Visibility.SHOW_USERS_ONLY.value,
        PROPERTY_PHONE: Visibility.SHOW_USERS_ONLY.value,
        PROPERTY_TWITTER: Visibility.SHOW.value,
        PROPERTY_WEBSITE: Visibility.SHOW.value,
    }


@dataclass
class ProfileSettings:
    """Defaults used when bootstrapping and resolving profiles."""

    # Fallback for fields without an entry in the tables below.
    default_visibility: str = Visibility.SHOW.value
    property_visibility: Dict[str, str] = field(
        default_factory=_default_property_visibility
    )
    action_visibility: Dict[str, str] = field(
        default_factory=_default_action_visibility
    )
    # Actions owned by this app skip app-enablement checks.
    core_app_id: str = CORE_APP_ID
    l10n_domain: str = "core"
    builtin_action_ids: Sequence[str] = (
        PROPERTY_EMAIL,
        PROPERTY_PHONE,
        PROPERTY_WEBSITE,
        PROPERTY_TWITTER,
    )
    # Prefix for action icon URLs, e.g. https://cloud.example.com
    icon_base_url: str = ""

    def default_property_visibility(self, property_id: str) -> str:
        return self._lookup(self.property_visibility, property_id)

    def default_action_visibility(self, action_id: str) -> str:
        return self._lookup(self.action_visibility, action_id)

    def _lookup(self, table: Dict[str, str], field_id: str) -> str:
        visibility: Optional[str] = table.get(field_id)
        if visibility is None:
            return self.default_visibility
        return visibility
