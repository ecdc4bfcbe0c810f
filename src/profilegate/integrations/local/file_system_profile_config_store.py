"""
File system profile config store implementation.

This module provides a file-based implementation of the ProfileConfigStore
interface that persists one JSON document per user.
"""

import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict

from profilegate.profile.models import ProfileConfig
from profilegate.profile.stores import (
    ProfileConfigExistsError,
    ProfileConfigNotFoundError,
    ProfileConfigStore,
)

logger = logging.getLogger(__name__)


def _write_temp_json(directory: Path, prefix: str, payload: Dict) -> Path:
    """Write JSON to a synced temp file in ``directory`` and return its path."""

    directory.mkdir(parents=True, exist_ok=True)

    tmp = tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        delete=False,
        dir=str(directory),
        prefix=prefix,
        suffix=".tmp",
    )
    tmp_path = Path(tmp.name)
    try:
        with tmp:
            json.dump(payload, tmp, indent=2)
            tmp.flush()
            os.fsync(tmp.fileno())
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise
    return tmp_path


class FileSystemProfileConfigStore(ProfileConfigStore):
    """File system-based profile config store.

    Stores configs as individual files:
    profile_configs/{user_id}.json
    """

    def __init__(self, base_dir: str = "profile_configs") -> None:
        """Initialize the file system profile config store.

        Args:
            base_dir: Base directory for storing profile configs
        """
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _get_config_path(self, user_id: str) -> Path:
        """Get the file path for a user's config."""
        path = (self.base_dir / f"{user_id}.json").resolve()
        if path.parent != self.base_dir.resolve():
            raise ValueError(f"Invalid user id for file storage: {user_id!r}")
        return path

    def get_by_user_id(self, user_id: str) -> ProfileConfig:
        path = self._get_config_path(user_id)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise ProfileConfigNotFoundError(
                f"No profile config for user {user_id}"
            ) from None
        return ProfileConfig.model_validate(data)

    def insert(self, config: ProfileConfig) -> ProfileConfig:
        path = self._get_config_path(config.user_id)
        tmp_path = _write_temp_json(
            path.parent, path.name, config.model_dump(mode="json", by_alias=True)
        )
        try:
            # link() refuses to overwrite, so concurrent inserts cannot both win
            os.link(tmp_path, path)
        except FileExistsError:
            logger.warning("Profile config for %s already exists", config.user_id)
            raise ProfileConfigExistsError(
                f"Profile config for user {config.user_id} already exists"
            ) from None
        finally:
            tmp_path.unlink()
        return config

    def update(self, config: ProfileConfig) -> ProfileConfig:
        path = self._get_config_path(config.user_id)
        if not path.exists():
            raise ProfileConfigNotFoundError(
                f"No profile config for user {config.user_id}"
            )
        config.updated_at = datetime.now(timezone.utc)
        tmp_path = _write_temp_json(
            path.parent, path.name, config.model_dump(mode="json", by_alias=True)
        )
        os.replace(tmp_path, path)
        return config
