"""
Profile manager — answers what a visiting user may see of a profile.

Composes the account collaborators, the per-pass ActionRegistry, the
config service and the visibility rules into the parameter map consumed by
profile pages.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from profilegate.accounts.models import PROPERTY_AVATAR, User
from profilegate.accounts.providers import (
    AccountManager,
    AppManager,
    KnownUserService,
    L10nFactory,
)

from .actions import LinkAction
from .config import ProfileConfigService
from .models import ProfileAction, ProfileConfig
from .providers import ActionProvider
from .registry import ActionRegistry
from .settings import PROFILE_PROPERTIES, ProfileSettings
from .stores import ProfileConfigStore
from .visibility import is_visible

logger = logging.getLogger(__name__)


class ProfileManager:
    """Resolves visible profile parameters and profile configs."""

    def __init__(
        self,
        account_manager: AccountManager,
        app_manager: AppManager,
        config_store: ProfileConfigStore,
        action_provider: ActionProvider,
        known_user_service: KnownUserService,
        l10n_factory: L10nFactory,
        *,
        settings: Optional[ProfileSettings] = None,
    ) -> None:
        self._accounts = account_manager
        self._apps = app_manager
        self._actions = action_provider
        self._known_users = known_user_service
        self._settings = settings or ProfileSettings()
        self._pending_action_ids: List[str] = []
        self._config = ProfileConfigService(
            config_store,
            l10n_factory,
            self._new_registry,
            settings=self._settings,
        )

    @property
    def config_service(self) -> ProfileConfigService:
        return self._config

    def queue_action(self, action_identifier: str) -> None:
        """Queue an app-provided action for the next resolution request."""
        self._pending_action_ids.append(action_identifier)

    def _take_queued_actions(self) -> List[str]:
        queued, self._pending_action_ids = self._pending_action_ids, []
        return queued

    def _new_registry(self, queued_action_ids: Sequence[str] = ()) -> ActionRegistry:
        return ActionRegistry(
            self._actions,
            self._apps,
            builtin_action_ids=self._settings.builtin_action_ids,
            queued_action_ids=queued_action_ids,
            core_app_id=self._settings.core_app_id,
        )

    def get_actions(
        self, target_user: User, visiting_user: Optional[User]
    ) -> List[LinkAction]:
        """Return the registered actions of ``target_user`` ordered by priority.

        Consumes the actions queued since the previous request.
        """
        queued = self._take_queued_actions()
        return self._new_registry(queued).list_ordered(target_user, visiting_user)

    def get_profile_config(
        self, target_user: User, visiting_user: Optional[User]
    ) -> Dict[str, Dict[str, str]]:
        """Return ``{field_id: {"displayId": ..., "visibility": ...}}``."""
        queued = self._take_queued_actions()
        config = self._config.get(target_user, visiting_user, queued)
        return config.get_config_array()

    def get_profile_params(
        self, target_user: User, visiting_user: Optional[User]
    ) -> Dict[str, Any]:
        """Return the profile parameters of ``target_user`` as seen by the visitor.

        Hidden properties, and visible properties with an empty value, are
        None. Raises AccountNotFoundError when the target has no account.
        """
        account = self._accounts.get_account(target_user)
        queued = self._take_queued_actions()
        config = self._config.get(target_user, visiting_user, queued)

        params: Dict[str, Any] = {"userId": account.user.id}

        for property_id in PROFILE_PROPERTIES:
            scope = account.get_scope(property_id)
            if self._is_field_visible(
                config, target_user, visiting_user, property_id, scope
            ):
                params[property_id] = account.get_value(property_id) or None
            else:
                params[property_id] = None

        # The avatar and actions carry no privacy scope of their own
        params["isUserAvatarVisible"] = self._is_field_visible(
            config, target_user, visiting_user, PROPERTY_AVATAR, None
        )

        actions = self._new_registry(queued).list_ordered(target_user, visiting_user)
        params["actions"] = [
            ProfileAction(
                id=action.id,
                icon=action.icon,
                title=action.title,
                target=action.target,
            ).model_dump()
            for action in actions
            if self._is_field_visible(
                config, target_user, visiting_user, action.id, None
            )
        ]
        return params

    def _is_field_visible(
        self,
        config: ProfileConfig,
        target_user: User,
        visiting_user: Optional[User],
        field_id: str,
        scope: Optional[str],
    ) -> bool:
        visibility = config.get_visibility(field_id)
        if visibility is None:
            logger.debug(
                "No profile config entry for %s of %s, hiding it",
                field_id,
                target_user.id,
            )

        return is_visible(
            visibility,
            scope,
            visiting_user is not None,
            lambda: self._known_users.is_known_to_user(
                target_user.id, visiting_user.id
            ),
        )
