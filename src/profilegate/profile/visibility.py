"""
Visibility decision for a single profile field.

Combines the field's configured visibility with the privacy scope of the
backing account property and what is known about the viewer. Anything not
explicitly allowed is denied.
"""

from __future__ import annotations

from typing import Callable, Optional

from profilegate.accounts.models import Scope

from .models import Visibility

_PUBLIC_SCOPES = (Scope.LOCAL.value, Scope.FEDERATED.value, Scope.PUBLISHED.value)


def is_visible(
    visibility: Optional[str],
    scope: Optional[str],
    viewer_authenticated: bool,
    is_known: Callable[[], bool],
) -> bool:
    """Return whether a field is visible to the viewer.

    Args:
        visibility: Configured field visibility; None (no config entry) hides.
        scope: Privacy scope of the backing property; empty means unscoped.
        viewer_authenticated: Whether there is a logged-in visiting user.
        is_known: Lazily answers whether the viewer is known to the target.
            Only called for private-scoped fields of authenticated viewers.
    """
    if visibility == Visibility.SHOW_USERS_ONLY.value:
        public_result = viewer_authenticated
    elif visibility == Visibility.SHOW.value:
        public_result = True
    else:
        return False

    if not scope:
        return public_result
    if scope == Scope.PRIVATE.value:
        return viewer_authenticated and is_known()
    if scope in _PUBLIC_SCOPES:
        return public_result
    return False
