"""
Action Registry — collects the link actions of one profile resolution pass.

A registry is built fresh for every (target, visitor) resolution. It
resolves the built-in and queued action identifiers through an
ActionProvider, drops actions that do not apply, are not available to the
viewer or clash with an already registered id, and orders the rest by
priority. A bad action is logged and skipped; it never aborts the pass.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from profilegate.accounts.models import User
from profilegate.accounts.providers import AppManager

from .actions import LinkAction
from .providers import ActionLookupError, ActionProvider, ActionTypeError
from .settings import CORE_APP_ID

logger = logging.getLogger(__name__)


class ActionRegistry:
    """Per-pass registry of resolved link actions, keyed by action id."""

    def __init__(
        self,
        provider: ActionProvider,
        app_manager: AppManager,
        *,
        builtin_action_ids: Iterable[str] = (),
        queued_action_ids: Iterable[str] = (),
        core_app_id: str = CORE_APP_ID,
    ) -> None:
        self._provider = provider
        self._apps = app_manager
        self._core_app_id = core_app_id
        self._builtin_queue: List[str] = list(builtin_action_ids)
        self._app_queue: List[str] = list(queued_action_ids)
        self._actions: Dict[str, LinkAction] = {}

    def queue(self, action_identifier: str) -> None:
        """Queue an app-provided action for the next resolve()."""
        self._app_queue.append(action_identifier)

    def get(self, action_id: str) -> Optional[LinkAction]:
        return self._actions.get(action_id)

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._actions

    def __len__(self) -> int:
        return len(self._actions)

    def resolve(
        self, target_user: User, visiting_user: Optional[User]
    ) -> Dict[str, LinkAction]:
        """Resolve all queued identifiers and register the surviving actions."""
        for action_identifier in self._builtin_queue + self._app_queue:
            try:
                action = self._provider.resolve(action_identifier)
            except ActionTypeError as e:
                logger.error(
                    "%s is not a LinkAction instance", action_identifier,
                    exc_info=e,
                )
                continue
            except ActionLookupError as e:
                logger.error(
                    "Could not find profile action: %s", action_identifier,
                    exc_info=e,
                )
                continue

            try:
                action.preload(target_user)
                self._register(action, target_user, visiting_user)
            except TypeError as e:
                logger.error(
                    "%s is not a valid LinkAction", action_identifier, exc_info=e
                )
            except Exception as e:
                logger.error(
                    "Could not register profile action %s for user %s",
                    action_identifier,
                    target_user.id,
                    exc_info=e,
                )

        # Queues are single use
        self._builtin_queue = []
        self._app_queue = []
        return dict(self._actions)

    def list_ordered(
        self, target_user: User, visiting_user: Optional[User]
    ) -> List[LinkAction]:
        """Resolve, then return the actions in ascending priority order."""
        self.resolve(target_user, visiting_user)
        # sorted() is stable: equal priorities keep registration order
        return sorted(self._actions.values(), key=lambda a: a.priority)

    def _register(
        self, action: LinkAction, target_user: User, visiting_user: Optional[User]
    ) -> None:
        if not action.target:
            return

        app_id = action.app_id
        if app_id != self._core_app_id:
            if not self._apps.is_enabled_for_user(app_id, target_user):
                logger.info(
                    "App: %s cannot register actions as it is not enabled for the user: %s",
                    app_id,
                    target_user.id,
                )
                return
            if visiting_user is None:
                logger.info(
                    "App: %s cannot register actions as it is not available to non logged in users",
                    app_id,
                )
                return
            if not self._apps.is_enabled_for_user(app_id, visiting_user):
                logger.info(
                    "App: %s cannot register actions as it is not enabled for the visiting user: %s",
                    app_id,
                    visiting_user.id,
                )
                return

        if action.id in self._actions:
            logger.error("Cannot register duplicate action: %s", action.id)
            return

        self._actions[action.id] = action
