"""
Caching utilities for expensive queries
Uses Redis when configured, otherwise the local-memory cache
"""
from django.core.cache import cache
import hashlib
import logging

logger = logging.getLogger('backend.core')

# Cache TTLs (in seconds)
DASHBOARD_STATS_CACHE_TTL = 300  # 5 minutes
ROLE_PERMISSIONS_CACHE_TTL = 600  # 10 minutes

DASHBOARD_STATS_KEY = 'dashboard_stats'
ROLE_PERMISSIONS_PREFIX = 'role_permissions'


def make_cache_key(prefix, *args, **kwargs):
    """Generate a unique cache key from arguments"""
    key_data = f"{prefix}:{args}:{sorted(kwargs.items())}"
    # Hash it to keep key length reasonable
    key_hash = hashlib.md5(key_data.encode()).hexdigest()
    return f"{prefix}:{key_hash}"


def invalidate_cache_pattern(pattern):
    """
    Invalidate all cache keys matching a pattern
    Needs the Redis backend (SCAN); other backends are cleared entirely
    """
    try:
        from django_redis import get_redis_connection
        redis_conn = get_redis_connection("default")
    except NotImplementedError:
        # Not a redis backend (locmem in development and tests)
        cache.clear()
        logger.debug(f"Cleared local cache for pattern: {pattern}")
        return
    except Exception as e:
        logger.warning(f"Could not invalidate cache pattern {pattern}: {str(e)}")
        return

    try:
        keys = []
        cursor = 0
        while True:
            cursor, partial_keys = redis_conn.scan(cursor, match=f"*{pattern}*", count=100)
            keys.extend(partial_keys)
            if cursor == 0:
                break

        if keys:
            redis_conn.delete(*keys)
            logger.info(f"Invalidated {len(keys)} cache keys matching pattern: {pattern}")
    except Exception as e:
        logger.warning(f"Could not invalidate cache pattern {pattern}: {str(e)}")


def role_permissions_cache_key(role_name):
    return make_cache_key(ROLE_PERMISSIONS_PREFIX, role_name)


def invalidate_role_permissions_cache(role_name=None):
    """Drop cached permission sets for one role, or for every role"""
    if role_name:
        cache.delete(role_permissions_cache_key(role_name))
        logger.debug(f"Invalidated permission cache for role {role_name}")
    else:
        invalidate_cache_pattern(ROLE_PERMISSIONS_PREFIX)


def invalidate_dashboard_cache():
    """Invalidate dashboard statistics cache"""
    cache.delete(DASHBOARD_STATS_KEY)
    logger.debug("Invalidated dashboard cache")
