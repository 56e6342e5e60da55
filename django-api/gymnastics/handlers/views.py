"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let domain errors propagate to the exception handler
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.core.cache import cache
from rest_framework import exceptions
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from gymnastics.cache import EVENTS_LIST_KEY
from gymnastics.domain import Signee
from gymnastics.domain.errors import InvalidSignupError
from gymnastics.handlers.serializers import (
    CatalogOverviewSerializer,
    ClassSignupSerializer,
    EventSerializer,
)
from gymnastics.services import CatalogService, EventService, RegistrationService
from gymnastics.stores import DjangoCatalogStore, DjangoEventStore
from gymnastics.throttling import SignupRateThrottle

THROTTLED_MESSAGE = "Too many signup attempts. Please try again later."


class ClassCatalogView(APIView):
    """Handler for GET /classes"""

    def get_service(self) -> CatalogService:
        return CatalogService(DjangoCatalogStore())

    def get(self, request: Request) -> Response:
        overview = self.get_service().get_overview()
        return Response(CatalogOverviewSerializer(overview).data)


class EventListView(APIView):
    """Handler for GET /events"""

    def get_service(self) -> EventService:
        return EventService(DjangoEventStore())

    def get(self, request: Request) -> Response:
        data = cache.get(EVENTS_LIST_KEY)
        if data is None:
            events = self.get_service().list_events()
            data = list(EventSerializer(events, many=True).data)
            cache.set(EVENTS_LIST_KEY, data, settings.EVENTS_CACHE_TIMEOUT)
        return Response(data)


class ClassSignupView(APIView):
    """Handler for POST /class-signup"""

    throttle_classes = [SignupRateThrottle]

    def get_service(self) -> RegistrationService:
        return RegistrationService(DjangoCatalogStore())

    def throttled(self, request: Request, wait: float | None) -> None:
        raise exceptions.Throttled(wait=wait, detail=THROTTLED_MESSAGE)

    def post(self, request: Request) -> Response:
        serializer = ClassSignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            signee = Signee.create(**data["signee"])
        except ValueError as exc:
            raise InvalidSignupError({"signee": [str(exc)]}) from exc

        result = self.get_service().register(
            class_name=data["class_name"],
            day=data["day"],
            time=data["time"],
            signee=signee,
        )
        return Response({"message": result.message})
