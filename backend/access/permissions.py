"""
Request-time permission checks backed by the role_permissions table
"""
import logging

from django.core.cache import cache
from rest_framework.permissions import BasePermission

from backend.core.cache_utils import ROLE_PERMISSIONS_CACHE_TTL, role_permissions_cache_key
from .models import Role, RolePermission
from .registry import ADMIN_ROLE, is_registered

logger = logging.getLogger('backend.access')


def get_role_permission_set(role_name):
    """
    Return the set of (resource, action) pairs granted to a role.

    Returns None when the role does not exist or is inactive.
    """
    cache_key = role_permissions_cache_key(role_name)
    cached = cache.get(cache_key)
    if cached is not None:
        return cached

    role = Role.objects.filter(name=role_name, is_active=True).first()
    if role is None:
        return None

    pairs = set(
        RolePermission.objects.filter(role=role).values_list('resource', 'action')
    )
    cache.set(cache_key, pairs, ROLE_PERMISSIONS_CACHE_TTL)
    return pairs


def check_permission(user, resource, action):
    """
    Check a user against a (resource, action) pair.

    Returns a tuple (allowed, error_message). The admin role and superusers
    are always allowed.
    """
    if not user or not user.is_authenticated:
        return False, 'Authentication required'

    if user.is_superuser or user.role == ADMIN_ROLE:
        return True, None

    if not user.role:
        return False, 'User has no assigned role'

    pairs = get_role_permission_set(user.role)
    if pairs is None:
        return False, 'Role not found in system'

    if (resource, action) not in pairs:
        return False, f"You don't have permission to {action} {resource}"
    return True, None


def user_has_permission(user, resource, action):
    allowed, _ = check_permission(user, resource, action)
    return allowed


def HasResourcePermission(resource, action):
    """
    Build a DRF permission class requiring `action` on `resource`.

    Usage:
        @permission_classes([IsAuthenticated, HasResourcePermission('roles', 'view')])
    """
    if not is_registered(resource, action):
        raise ValueError(f"Unregistered permission {resource}:{action}")

    class _HasResourcePermission(BasePermission):
        message = f"You don't have permission to {action} {resource}"

        def has_permission(self, request, view):
            allowed, error = check_permission(request.user, resource, action)
            if not allowed:
                self.message = error
                logger.warning(f"Permission denied for {request.user}: {resource}:{action} ({error})")
            return allowed

    _HasResourcePermission.__name__ = f"Has_{resource}_{action}"
    return _HasResourcePermission


class HasAnyRole(BasePermission):
    """Allow only users whose role is in `roles` (superusers always pass)"""
    roles = ()
    message = 'Your role is not allowed to perform this action'

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return user.is_superuser or user.role in self.roles


def RoleRequired(*roles):
    return type('RoleRequired', (HasAnyRole,), {'roles': roles})


METHOD_ACTIONS = {
    'GET': 'view',
    'HEAD': 'view',
    'OPTIONS': 'view',
    'POST': 'create',
    'PUT': 'edit',
    'PATCH': 'edit',
    'DELETE': 'delete',
}


def HasResourceAccess(resource, method_actions=None):
    """
    Build a DRF permission class that maps the HTTP method to an action on
    `resource` (GET -> view, POST -> create, PUT/PATCH -> edit, DELETE -> delete).
    """
    actions = dict(METHOD_ACTIONS)
    actions.update(method_actions or {})
    for action in set(actions.values()):
        if not is_registered(resource, action):
            raise ValueError(f"Unregistered permission {resource}:{action}")

    class _HasResourceAccess(BasePermission):
        message = f"You don't have permission to access {resource}"

        def has_permission(self, request, view):
            action = actions.get(request.method, 'manage')
            allowed, error = check_permission(request.user, resource, action)
            if not allowed:
                self.message = error
                logger.warning(f"Permission denied for {request.user}: {resource}:{action} ({error})")
            return allowed

    _HasResourceAccess.__name__ = f"HasAccess_{resource}"
    return _HasResourceAccess
