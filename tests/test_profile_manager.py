"""End-to-end tests for ProfileManager."""

import logging

import pytest

from profilegate.accounts import AccountNotFoundError, AccountProperty, User
from profilegate.profile.manager import ProfileManager
from profilegate.profile.models import ProfileConfig, ProfileFieldConfig
from profilegate.profile.providers import ContainerActionProvider, register_builtin_actions
from profilegate.profile.settings import ProfileSettings
from profilegate.profile.stores import InMemoryProfileConfigStore


def _set_visibility(profile_manager, user, **visibility):
    profile_manager.config_service.update_visibility(user, visibility)


class TestProfileParams:
    def test_anonymous_visitor(self, profile_manager, alice):
        _set_visibility(profile_manager, alice, email="show")
        params = profile_manager.get_profile_params(alice, None)

        assert params["userId"] == "alice"
        assert params["displayname"] == "Alice"
        assert params["biography"] is None
        assert [a["id"] for a in params["actions"]] == ["email"]
        assert params["actions"][0] == {
            "id": "email",
            "icon": "/core/img/actions/mail.svg",
            "title": "Mail Alice",
            "target": "mailto:a@x.com",
        }

    def test_result_keys(self, profile_manager, alice):
        params = profile_manager.get_profile_params(alice, None)
        assert set(params) == {
            "userId", "address", "biography", "displayname", "headline",
            "organisation", "role", "isUserAvatarVisible", "actions",
        }

    def test_users_only_fields_hidden_from_anonymous(self, profile_manager, alice, bob):
        anonymous = profile_manager.get_profile_params(alice, None)
        assert anonymous["address"] is None
        assert anonymous["actions"] == []

        logged_in = profile_manager.get_profile_params(alice, bob)
        assert logged_in["address"] == "1 Main St"
        assert [a["id"] for a in logged_in["actions"]] == ["email"]

    def test_private_field_hidden_from_unknown_user(self, profile_manager, alice, bob):
        params = profile_manager.get_profile_params(alice, bob)
        assert params["role"] is None

    def test_private_field_shown_to_known_user(self, profile_manager, known_users, alice, bob):
        known_users.add_known_user("alice", "bob")
        params = profile_manager.get_profile_params(alice, bob)
        assert params["role"] == "Lead"

    def test_known_relationship_is_directed(self, profile_manager, known_users, alice, bob):
        known_users.add_known_user("bob", "alice")
        assert profile_manager.get_profile_params(alice, bob)["role"] is None

    def test_hidden_field(self, profile_manager, alice):
        _set_visibility(profile_manager, alice, displayname="hide", avatar="hide")
        params = profile_manager.get_profile_params(alice, None)
        assert params["displayname"] is None
        assert params["isUserAvatarVisible"] is False

    def test_avatar_visible_by_default(self, profile_manager, alice):
        assert profile_manager.get_profile_params(alice, None)["isUserAvatarVisible"] is True

    def test_missing_target_account(self, profile_manager, config_store):
        with pytest.raises(AccountNotFoundError):
            profile_manager.get_profile_params(User(id="ghost"), None)
        # no config is bootstrapped for unknown accounts
        assert config_store._configs == {}

    def test_stale_config_hides_new_fields(self, profile_manager, config_store, alice):
        config_store.insert(
            ProfileConfig(
                user_id="alice",
                config={
                    "displayname": ProfileFieldConfig(display_id="Full name", visibility="show")
                },
            )
        )
        params = profile_manager.get_profile_params(alice, None)
        assert params["displayname"] == "Alice"
        assert params["headline"] is None
        assert params["isUserAvatarVisible"] is False
        assert params["actions"] == []


class TestFieldScopes:
    @pytest.fixture
    def dave(self, account_manager):
        user = User(id="dave")
        account_manager.add_account(
            user,
            [
                AccountProperty(name="displayname", value="Dave", scope="v2-published"),
                AccountProperty(name="email", value="d@x.com", scope="v2-private"),
                AccountProperty(name="avatar", value="", scope="v2-private"),
            ],
        )
        return user

    def test_actions_and_avatar_ignore_property_scope(self, profile_manager, dave):
        _set_visibility(profile_manager, dave, email="show", avatar="show")
        params = profile_manager.get_profile_params(dave, None)
        assert [a["id"] for a in params["actions"]] == ["email"]
        assert params["isUserAvatarVisible"] is True

    def test_properties_keep_their_scope(
        self, profile_manager, account_manager, known_users, dave, bob
    ):
        account = account_manager.get_account(dave)
        account.properties["role"] = AccountProperty(
            name="role", value="Ops", scope="v2-private"
        )
        assert profile_manager.get_profile_params(dave, None)["role"] is None
        known_users.add_known_user("dave", "bob")
        assert profile_manager.get_profile_params(dave, bob)["role"] == "Ops"


class TestCoreAppSetting:
    def test_builtins_follow_configured_core_app(
        self, account_manager, app_manager, known_users, l10n_factory, alice
    ):
        settings = ProfileSettings(core_app_id="builtin")
        provider = register_builtin_actions(
            ContainerActionProvider(), account_manager, l10n_factory, settings=settings
        )
        manager = ProfileManager(
            account_manager, app_manager, InMemoryProfileConfigStore(),
            provider, known_users, l10n_factory, settings=settings,
        )
        manager.config_service.update_visibility(alice, {"email": "show"})
        params = manager.get_profile_params(alice, None)
        assert [a["id"] for a in params["actions"]] == ["email"]


class TestAppActions:
    @pytest.fixture
    def talk(self, action_provider, app_manager, make_action):
        app_manager.enable_app("spreed")
        action_provider.register(
            "talk",
            lambda: make_action("talk", target="https://talk/alice", priority=10, app_id="spreed"),
        )
        return "talk"

    def test_app_action_ordered_by_priority(self, profile_manager, talk, alice, bob):
        profile_manager.queue_action(talk)
        assert profile_manager.get_profile_config(alice, alice)["talk"]["visibility"] == "show"

        profile_manager.queue_action(talk)
        params = profile_manager.get_profile_params(alice, bob)
        assert [a["id"] for a in params["actions"]] == ["talk", "email"]

    def test_app_action_hidden_from_anonymous(self, profile_manager, talk, alice):
        profile_manager.queue_action(talk)
        profile_manager.get_profile_config(alice, alice)

        profile_manager.queue_action(talk)
        assert profile_manager.get_profile_params(alice, None)["actions"] == []

    def test_queue_is_consumed_per_request(self, profile_manager, talk, alice, bob):
        profile_manager.get_profile_config(alice, bob)
        profile_manager.queue_action(talk)
        first = profile_manager.get_actions(alice, bob)
        second = profile_manager.get_actions(alice, bob)
        assert [a.id for a in first] == ["talk", "email"]
        assert [a.id for a in second] == ["email"]

    def test_requeueing_each_request_logs_no_duplicates(
        self, profile_manager, talk, alice, bob, caplog
    ):
        with caplog.at_level(logging.ERROR):
            for _ in range(3):
                profile_manager.queue_action(talk)
                params = profile_manager.get_profile_params(alice, bob)
                assert [a["id"] for a in params["actions"]] == ["talk", "email"]
        assert "Cannot register duplicate action" not in caplog.text

    def test_bootstrap_and_actions_share_one_queue(self, profile_manager, talk, alice, bob):
        profile_manager.queue_action(talk)
        params = profile_manager.get_profile_params(alice, bob)
        assert "talk" in profile_manager.get_profile_config(alice, bob)
        assert [a["id"] for a in params["actions"]] == ["talk", "email"]

    def test_broken_app_action_does_not_break_profile(
        self, profile_manager, action_provider, make_action, alice
    ):
        action_provider.register("broken", lambda: make_action("broken", preload_error=TypeError()))
        _set_visibility(profile_manager, alice, email="show")
        profile_manager.queue_action("broken")
        profile_manager.queue_action("missing")
        params = profile_manager.get_profile_params(alice, None)
        assert [a["id"] for a in params["actions"]] == ["email"]
