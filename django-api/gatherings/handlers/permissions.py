"""Authorization gate for event endpoints.

Reads need an authenticated caller; writes to events need a staff caller.
"""

from rest_framework.permissions import SAFE_METHODS, BasePermission

from gatherings.domain import Caller


class IsStaffOrReadOnly(BasePermission):
    """Authenticated callers may read; only staff may create, update or delete."""

    def has_permission(self, request, view) -> bool:
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return request.method in SAFE_METHODS or user.is_staff


def caller_from(request) -> Caller:
    user = request.user
    return Caller(
        user_id=user.pk,
        is_elevated=user.is_staff,
        email=user.email or "",
        name=user.get_full_name() or user.get_username(),
    )
