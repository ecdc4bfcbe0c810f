"""
Storage interface and in-memory implementation for profile configs.

Stores follow the ABC pattern for pluggable backends and must enforce one
config per user id.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict

from .models import ProfileConfig


class ProfileConfigNotFoundError(Exception):
    """Raised when no config is stored for the user."""


class ProfileConfigExistsError(Exception):
    """Raised when inserting a config for a user that already has one."""


class ProfileConfigStore(ABC):
    """Persistent store for per-user profile configs."""

    @abstractmethod
    def get_by_user_id(self, user_id: str) -> ProfileConfig:
        """Load the config of ``user_id``; raises ProfileConfigNotFoundError."""
        ...

    @abstractmethod
    def insert(self, config: ProfileConfig) -> ProfileConfig:
        """Persist a new config; raises ProfileConfigExistsError."""
        ...

    @abstractmethod
    def update(self, config: ProfileConfig) -> ProfileConfig:
        """Overwrite a stored config; raises ProfileConfigNotFoundError."""
        ...


class InMemoryProfileConfigStore(ProfileConfigStore):
    """Non-persistent, in-memory reference implementation."""

    def __init__(self) -> None:
        self._configs: Dict[str, ProfileConfig] = {}

    def get_by_user_id(self, user_id: str) -> ProfileConfig:
        config = self._configs.get(user_id)
        if config is None:
            raise ProfileConfigNotFoundError(f"No profile config for user {user_id}")
        return config.model_copy(deep=True)

    def insert(self, config: ProfileConfig) -> ProfileConfig:
        if config.user_id in self._configs:
            raise ProfileConfigExistsError(
                f"Profile config for user {config.user_id} already exists"
            )
        self._configs[config.user_id] = config.model_copy(deep=True)
        return config

    def update(self, config: ProfileConfig) -> ProfileConfig:
        if config.user_id not in self._configs:
            raise ProfileConfigNotFoundError(
                f"No profile config for user {config.user_id}"
            )
        config.updated_at = datetime.now(timezone.utc)
        self._configs[config.user_id] = config.model_copy(deep=True)
        return config
