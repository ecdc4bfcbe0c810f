"""
Pytest configuration and shared fixtures for the profilegate test suite.
"""

from typing import Optional

import pytest

from profilegate.accounts import (
    AccountProperty,
    InMemoryAccountManager,
    InMemoryAppManager,
    InMemoryKnownUserService,
    InMemoryL10nFactory,
    User,
)
from profilegate.profile.actions import LinkAction
from profilegate.profile.manager import ProfileManager
from profilegate.profile.providers import (
    ContainerActionProvider,
    register_builtin_actions,
)
from profilegate.profile.stores import InMemoryProfileConfigStore


class StubAction(LinkAction):
    """Configurable LinkAction for registry and manager tests."""

    def __init__(
        self,
        action_id: str,
        *,
        target: Optional[str] = "https://example.com",
        priority: int = 100,
        app_id: str = "core",
        preload_error: Optional[Exception] = None,
    ) -> None:
        self._id = action_id
        self._target = target
        self._priority = priority
        self._app_id = app_id
        self._preload_error = preload_error
        self.preloaded_for: Optional[str] = None

    @property
    def id(self) -> str:
        return self._id

    def preload(self, target_user: User) -> None:
        if self._preload_error is not None:
            raise self._preload_error
        self.preloaded_for = target_user.id

    @property
    def target(self) -> Optional[str]:
        return self._target

    @property
    def icon(self) -> str:
        return f"/img/{self._id}.svg"

    @property
    def title(self) -> str:
        return f"Open {self._id}"

    @property
    def display_id(self) -> str:
        return self._id.capitalize()

    @property
    def app_id(self) -> str:
        return self._app_id

    @property
    def priority(self) -> int:
        return self._priority


@pytest.fixture
def make_action():
    return StubAction


@pytest.fixture
def alice():
    return User(id="alice", display_name="Alice")


@pytest.fixture
def bob():
    return User(id="bob", display_name="Bob")


@pytest.fixture
def account_manager(alice, bob):
    manager = InMemoryAccountManager()
    manager.add_account(
        alice,
        [
            AccountProperty(name="displayname", value="Alice", scope="v2-published"),
            AccountProperty(name="biography", value="", scope="v2-published"),
            AccountProperty(name="address", value="1 Main St", scope="v2-local"),
            AccountProperty(name="headline", value="Engineer", scope="v2-federated"),
            AccountProperty(name="organisation", value="", scope="v2-local"),
            AccountProperty(name="role", value="Lead", scope="v2-private"),
            AccountProperty(name="avatar", value="", scope="v2-local"),
            AccountProperty(name="email", value="a@x.com", scope="v2-federated"),
            AccountProperty(name="phone", value="", scope="v2-private"),
            AccountProperty(name="website", value="", scope="v2-local"),
            AccountProperty(name="twitter", value="", scope="v2-local"),
        ],
    )
    manager.add_account(
        bob, [AccountProperty(name="displayname", value="Bob", scope="v2-local")]
    )
    return manager


@pytest.fixture
def app_manager():
    return InMemoryAppManager()


@pytest.fixture
def known_users():
    return InMemoryKnownUserService()


@pytest.fixture
def l10n_factory():
    return InMemoryL10nFactory()


@pytest.fixture
def action_provider(account_manager, l10n_factory):
    return register_builtin_actions(
        ContainerActionProvider(), account_manager, l10n_factory
    )


@pytest.fixture
def config_store():
    return InMemoryProfileConfigStore()


@pytest.fixture
def profile_manager(
    account_manager, app_manager, config_store, action_provider, known_users, l10n_factory
):
    return ProfileManager(
        account_manager,
        app_manager,
        config_store,
        action_provider,
        known_users,
        l10n_factory,
    )
