"""
Profile config service: loads a user's profile config and materializes the
default one on first access.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Sequence

from profilegate.accounts.models import User
from profilegate.accounts.providers import L10nFactory

from .models import ProfileConfig, ProfileFieldConfig, Visibility
from .registry import ActionRegistry
from .settings import PROPERTY_LABELS, ProfileSettings
from .stores import ProfileConfigExistsError, ProfileConfigNotFoundError, ProfileConfigStore

logger = logging.getLogger(__name__)

_VALID_VISIBILITIES = tuple(v.value for v in Visibility)


class InvalidVisibilityError(ValueError):
    """Raised when a visibility update carries an unknown value."""


class ProfileConfigService:
    """Read access to profile configs with lazy default bootstrap."""

    def __init__(
        self,
        store: ProfileConfigStore,
        l10n_factory: L10nFactory,
        registry_factory: Callable[[Sequence[str]], ActionRegistry],
        *,
        settings: Optional[ProfileSettings] = None,
    ) -> None:
        self._store = store
        self._l10n = l10n_factory
        self._new_registry = registry_factory
        self._settings = settings or ProfileSettings()

    def get(
        self,
        target_user: User,
        visiting_user: Optional[User],
        queued_action_ids: Sequence[str] = (),
    ) -> ProfileConfig:
        """Return the stored config of ``target_user``, creating it if needed.

        ``queued_action_ids`` are the app actions queued for this request;
        they only matter when the default config has to be built. A stored
        config is returned as-is, even when properties or actions were added
        after it was created.
        """
        try:
            return self._store.get_by_user_id(target_user.id)
        except ProfileConfigNotFoundError:
            pass

        config = self.build_default(target_user, visiting_user, queued_action_ids)
        try:
            return self._store.insert(config)
        except ProfileConfigExistsError:
            # Another pass bootstrapped the same user first; theirs wins.
            logger.warning(
                "Profile config for %s was created concurrently, using stored one",
                target_user.id,
            )
            return self._store.get_by_user_id(target_user.id)

    def build_default(
        self,
        target_user: User,
        visiting_user: Optional[User],
        queued_action_ids: Sequence[str] = (),
    ) -> ProfileConfig:
        """Build (without persisting) the default config for ``target_user``."""
        l10n = self._l10n.get(self._settings.l10n_domain)
        fields: Dict[str, ProfileFieldConfig] = {}

        for property_id, label in PROPERTY_LABELS.items():
            fields[property_id] = ProfileFieldConfig(
                display_id=l10n.translate(label),
                visibility=self._settings.default_property_visibility(property_id),
            )

        registry = self._new_registry(queued_action_ids)
        for action in registry.list_ordered(target_user, visiting_user):
            fields[action.id] = ProfileFieldConfig(
                display_id=action.display_id,
                visibility=self._settings.default_action_visibility(action.id),
            )

        logger.debug(
            "Built default profile config for %s with %d fields",
            target_user.id,
            len(fields),
        )
        return ProfileConfig(user_id=target_user.id, config=fields)

    def update_visibility(
        self, target_user: User, visibility_map: Dict[str, str]
    ) -> ProfileConfig:
        """Apply ``field_id → visibility`` changes to the stored config.

        Unknown field ids are ignored. The config is bootstrapped first when
        the user has none yet, as seen by the user themselves.
        """
        for field_id, visibility in visibility_map.items():
            if visibility not in _VALID_VISIBILITIES:
                raise InvalidVisibilityError(
                    f"Invalid visibility {visibility!r} for field {field_id!r}"
                )

        config = self.get(target_user, target_user)
        config.set_visibility_map(
            {field_id: Visibility(v).value for field_id, v in visibility_map.items()}
        )
        return self._store.update(config)
