"""Cache keys and invalidation for the public event catalog."""

from django.conf import settings
from django.core.cache import cache

LIST_VERSION_KEY = "events:list:version"


def detail_key(event_id) -> str:
    return f"events:{event_id}"


def list_key(page: int, limit: int, search: str | None) -> str:
    version = cache.get_or_set(LIST_VERSION_KEY, 1, timeout=None)
    return f"events:list:v{version}:{page}:{limit}:{search or ''}"


def timeout() -> int:
    return settings.EVENTS_CACHE_TIMEOUT


def invalidate_event(event_id) -> None:
    """Drop the cached detail of one event and every cached list page."""
    cache.delete(detail_key(event_id))
    invalidate_lists()


def invalidate_lists() -> None:
    try:
        cache.incr(LIST_VERSION_KEY)
    except ValueError:
        cache.set(LIST_VERSION_KEY, 2, timeout=None)
