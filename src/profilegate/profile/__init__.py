"""
Profile visibility subsystem.

Decides which profile fields and link actions a visiting user may see,
orders the actions, and bootstraps per-user profile configs.
"""

from .actions import (
    AccountPropertyAction,
    EmailAction,
    LinkAction,
    PhoneAction,
    TwitterAction,
    WebsiteAction,
)
from .config import InvalidVisibilityError, ProfileConfigService
from .manager import ProfileManager
from .models import ProfileAction, ProfileConfig, ProfileFieldConfig, Visibility
from .providers import (
    ActionLookupError,
    ActionNotFoundError,
    ActionProvider,
    ActionTypeError,
    ContainerActionProvider,
    register_builtin_actions,
)
from .registry import ActionRegistry
from .settings import PROFILE_PROPERTIES, ProfileSettings
from .stores import (
    InMemoryProfileConfigStore,
    ProfileConfigExistsError,
    ProfileConfigNotFoundError,
    ProfileConfigStore,
)
from .visibility import is_visible

__all__ = [
    "AccountPropertyAction",
    "EmailAction",
    "LinkAction",
    "PhoneAction",
    "TwitterAction",
    "WebsiteAction",
    "InvalidVisibilityError",
    "ProfileConfigService",
    "ProfileManager",
    "ProfileAction",
    "ProfileConfig",
    "ProfileFieldConfig",
    "Visibility",
    "ActionLookupError",
    "ActionNotFoundError",
    "ActionProvider",
    "ActionTypeError",
    "ContainerActionProvider",
    "register_builtin_actions",
    "ActionRegistry",
    "PROFILE_PROPERTIES",
    "ProfileSettings",
    "InMemoryProfileConfigStore",
    "ProfileConfigExistsError",
    "ProfileConfigNotFoundError",
    "ProfileConfigStore",
    "is_visible",
]
