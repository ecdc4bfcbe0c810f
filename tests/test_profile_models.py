"""Tests for profile and account Pydantic models."""

import pytest

from profilegate.accounts import Account, AccountProperty, PropertyDoesNotExistError, User
from profilegate.profile.models import ProfileConfig, ProfileFieldConfig, Visibility


class TestProfileFieldConfig:
    def test_alias_roundtrip(self):
        field = ProfileFieldConfig.model_validate({"displayId": "Role", "visibility": "show"})
        assert field.display_id == "Role"
        assert field.model_dump(by_alias=True) == {"displayId": "Role", "visibility": "show"}

    def test_unknown_visibility_is_preserved(self):
        field = ProfileFieldConfig(display_id="Role", visibility="legacy")
        assert field.visibility == "legacy"


class TestProfileConfig:
    def test_visibility_map(self):
        config = ProfileConfig(
            user_id="u1",
            config={
                "role": ProfileFieldConfig(display_id="Role", visibility="show"),
                "email": ProfileFieldConfig(display_id="Email", visibility="hide"),
            },
        )
        assert config.get_visibility_map() == {"role": "show", "email": "hide"}
        config.set_visibility_map({"role": Visibility.SHOW_USERS_ONLY.value, "x": "show"})
        assert config.get_visibility("role") == "show_users_only"
        assert config.get_visibility("x") is None

    def test_json_roundtrip(self):
        config = ProfileConfig(
            user_id="u1",
            config={"role": ProfileFieldConfig(display_id="Role", visibility="show")},
        )
        data = config.model_dump(mode="json", by_alias=True)
        assert ProfileConfig.model_validate(data).get_config_array() == config.get_config_array()


class TestAccount:
    def test_get_property(self):
        account = Account(
            user=User(id="u1"),
            properties={"role": AccountProperty(name="role", value="Lead", scope="v2-local")},
        )
        assert account.get_property("role").value == "Lead"
        with pytest.raises(PropertyDoesNotExistError):
            account.get_property("headline")

    def test_value_and_scope_of_missing_property(self):
        account = Account(
            user=User(id="u1"),
            properties={"biography": AccountProperty(name="biography", value="")},
        )
        assert account.get_value("biography") == ""
        assert account.get_scope("biography") is None
        assert account.get_value("headline") is None
        assert account.get_scope("headline") is None
