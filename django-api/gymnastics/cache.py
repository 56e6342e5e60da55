"""Cache keys for read-mostly data.

Only events are cached. Catalog state is never cached because stale
counts would defeat the capacity and duplicate checks.
"""

from django.core.cache import cache

EVENTS_LIST_KEY = "events:list"


def invalidate_events() -> None:
    cache.delete(EVENTS_LIST_KEY)
