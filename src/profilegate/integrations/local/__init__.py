"""Local (file system) storage backends."""

from .file_system_profile_config_store import FileSystemProfileConfigStore

__all__ = ["FileSystemProfileConfigStore"]
