"""Catalog service - read-only views of the class catalogs.

Signee lists are always collapsed to counts here; personal data never
leaves this layer through the catalog overview.
"""

from gymnastics.domain import CatalogKind, CatalogOverview, CatalogSummary
from gymnastics.domain.errors import CatalogNotFoundError
from gymnastics.stores.interfaces import CatalogStore


class CatalogService:
    """Service for class catalog operations."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    def get_summary(self, kind: CatalogKind) -> CatalogSummary:
        """Return one catalog with signee counts.

        Raises:
            CatalogNotFoundError: If the catalog has not been seeded.
        """
        summary = self._store.get_catalog_summary(kind)
        if summary is None:
            raise CatalogNotFoundError(kind)
        return summary

    def get_overview(self) -> CatalogOverview:
        """Return both the signups and the upcoming catalog.

        Raises:
            CatalogNotFoundError: If either catalog has not been seeded.
        """
        return CatalogOverview(
            signups=self.get_summary(CatalogKind.SIGNUPS),
            upcoming=self.get_summary(CatalogKind.UPCOMING),
        )
