"""
Action providers: look up a LinkAction by its identifier.

Apps make their actions resolvable by registering a factory under an
identifier; the identifier is then queued on the ProfileManager.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional

from profilegate.accounts.providers import AccountManager, L10nFactory

from .actions import EmailAction, LinkAction, PhoneAction, TwitterAction, WebsiteAction
from .settings import ProfileSettings


class ActionLookupError(Exception):
    """Base class for failures to obtain an action from a provider."""


class ActionNotFoundError(ActionLookupError):
    """Raised when no action is registered under the identifier."""


class ActionTypeError(ActionLookupError):
    """Raised when the registered factory does not produce a LinkAction."""


ActionFactory = Callable[[], object]


class ActionProvider(ABC):
    """Instantiates actions by identifier."""

    @abstractmethod
    def resolve(self, action_identifier: str) -> LinkAction:
        """Return a fresh action instance.

        Raises:
            ActionNotFoundError: nothing is registered under the identifier.
            ActionTypeError: the registered object is not a LinkAction.
        """
        ...


class ContainerActionProvider(ActionProvider):
    """Resolves actions from a mapping of identifier → factory."""

    def __init__(self, factories: Optional[Dict[str, ActionFactory]] = None) -> None:
        self._factories: Dict[str, ActionFactory] = dict(factories or {})

    def register(self, action_identifier: str, factory: ActionFactory) -> None:
        self._factories[action_identifier] = factory

    def resolve(self, action_identifier: str) -> LinkAction:
        factory = self._factories.get(action_identifier)
        if factory is None:
            raise ActionNotFoundError(
                f"Could not find profile action: {action_identifier}"
            )
        try:
            action = factory()
        except Exception as e:
            raise ActionLookupError(
                f"Could not instantiate profile action: {action_identifier}"
            ) from e
        if not isinstance(action, LinkAction):
            raise ActionTypeError(
                f"{action_identifier} is not a LinkAction instance"
            )
        return action


def register_builtin_actions(
    provider: ContainerActionProvider,
    account_manager: AccountManager,
    l10n_factory: L10nFactory,
    *,
    settings: Optional[ProfileSettings] = None,
) -> ContainerActionProvider:
    """Register the account property backed core actions on ``provider``."""
    settings = settings or ProfileSettings()

    def factory_for(action_cls):
        def factory() -> LinkAction:
            return action_cls(
                account_manager,
                l10n_factory,
                l10n_domain=settings.l10n_domain,
                icon_base_url=settings.icon_base_url,
                core_app_id=settings.core_app_id,
            )

        return factory

    for action_cls in (EmailAction, PhoneAction, WebsiteAction, TwitterAction):
        provider.register(action_cls.property_name, factory_for(action_cls))
    return provider
