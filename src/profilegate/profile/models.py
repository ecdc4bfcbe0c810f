"""
Pydantic models for profile configuration and resolved profile output.

A ProfileConfig holds, per target user, the display label and visibility
of every profile field (account properties and link actions).
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Visibility(str, Enum):
    """Per-field display policy."""

    HIDE = "hide"
    SHOW = "show"
    SHOW_USERS_ONLY = "show_users_only"


class ProfileFieldConfig(BaseModel):
    """Display label and visibility of one profile field."""

    model_config = ConfigDict(populate_by_name=True)

    display_id: str = Field(alias="displayId", description="Localized label")
    # Kept as a plain string: unrecognized stored values must survive
    # loading so they can be denied at evaluation time.
    visibility: str = Field(description="One of the Visibility values")


class ProfileConfig(BaseModel):
    """Persisted visibility configuration of one user's profile."""

    user_id: str = Field(description="Owner of the profile")
    config: Dict[str, ProfileFieldConfig] = Field(
        default_factory=dict, description="Field id → field config"
    )
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def get_config_array(self) -> Dict[str, Dict[str, str]]:
        """Return ``{field_id: {"displayId": ..., "visibility": ...}}``."""
        return {
            field_id: field.model_dump(by_alias=True)
            for field_id, field in self.config.items()
        }

    def get_visibility(self, field_id: str) -> Optional[str]:
        field = self.config.get(field_id)
        return field.visibility if field is not None else None

    def get_visibility_map(self) -> Dict[str, str]:
        return {field_id: f.visibility for field_id, f in self.config.items()}

    def set_visibility_map(self, visibility_map: Dict[str, str]) -> None:
        """Overwrite visibilities of existing fields; unknown ids are ignored."""
        for field_id, visibility in visibility_map.items():
            field = self.config.get(field_id)
            if field is not None:
                field.visibility = visibility


class ProfileAction(BaseModel):
    """Serializable projection of a visible link action."""

    id: str
    icon: str
    title: str
    target: str
