"""Django signals for cache invalidation."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from gymnastics.cache import invalidate_events
from gymnastics.models import Event


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate the events list when an event is saved or deleted."""
    invalidate_events()
