"""
profilegate — profile field and link action visibility.

Resolves what a visiting user may see of another user's profile and
manages the per-user profile visibility configuration.
"""

from .accounts import User
from .profile import ProfileManager, ProfileSettings, Visibility

__all__ = ["ProfileManager", "ProfileSettings", "User", "Visibility"]
