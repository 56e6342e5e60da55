from gymnastics.stores.django_store import DjangoCatalogStore, DjangoEventStore
from gymnastics.stores.interfaces import CatalogStore, EventStore

__all__ = ["CatalogStore", "DjangoCatalogStore", "DjangoEventStore", "EventStore"]
