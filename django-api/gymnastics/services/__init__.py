"""Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from gymnastics.services.catalog_service import CatalogService
from gymnastics.services.event_service import EventService
from gymnastics.services.registration_service import RegistrationService

__all__ = ["CatalogService", "EventService", "RegistrationService"]
