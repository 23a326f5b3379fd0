"""
Cache invalidation signals
Automatically invalidate cache when data changes
"""
from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver
import logging
import threading
from contextlib import contextmanager

from .cache_utils import invalidate_dashboard_cache, invalidate_role_permissions_cache

logger = logging.getLogger('backend.core')

# Thread-local storage to track signal suspension
_thread_locals = threading.local()

# Models whose writes change the dashboard counters
DASHBOARD_MODELS = {
    'YouthProfile', 'BusinessProfile', 'Mentor', 'MentorBusinessRelationship', 'YouthTraining',
}


@contextmanager
def suspend_cache_signals():
    """
    Context manager to temporarily suspend cache invalidation signals.
    Useful for bulk operations to prevent excessive cache clearing.
    Remember to manually invalidate cache after the block!
    """
    try:
        _thread_locals.suspended = True
        yield
    finally:
        _thread_locals.suspended = False


def is_suspended():
    return getattr(_thread_locals, 'suspended', False)


# --- Signal Handlers ---

@receiver([post_save, post_delete])
def invalidate_dashboard_stats(sender, instance, **kwargs):
    """Invalidate dashboard stats when youth, businesses, mentors or enrolments change"""
    if is_suspended() or sender.__name__ not in DASHBOARD_MODELS:
        return
    invalidate_dashboard_cache()


@receiver([post_save, post_delete])
def invalidate_role_permissions(sender, instance, **kwargs):
    """Drop cached permission sets when a role or its grants change"""
    if is_suspended():
        return

    model_name = sender.__name__
    if model_name == 'RolePermission':
        role_model = instance._meta.get_field('role').related_model
        role_name = role_model.objects.filter(pk=instance.role_id).values_list('name', flat=True).first()
        invalidate_role_permissions_cache(role_name)
    elif model_name == 'Role':
        invalidate_role_permissions_cache(instance.name)
