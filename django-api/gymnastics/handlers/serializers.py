"""Serializers for request validation and domain-to-response transformation."""

from rest_framework import serializers

from gymnastics.domain.value_objects import (
    CLASS_NAME_MAX_LENGTH,
    PERSON_NAME_MAX_LENGTH,
    SLOT_FIELD_MAX_LENGTH,
    is_valid_phone_number,
)


class SigneeInputSerializer(serializers.Serializer):
    """Validates the nested signee object of a signup request."""

    childFirstName = serializers.CharField(
        source="child_first_name", max_length=PERSON_NAME_MAX_LENGTH
    )
    childLastName = serializers.CharField(
        source="child_last_name", max_length=PERSON_NAME_MAX_LENGTH
    )
    parentFirstName = serializers.CharField(
        source="parent_first_name", max_length=PERSON_NAME_MAX_LENGTH
    )
    parentLastName = serializers.CharField(
        source="parent_last_name", max_length=PERSON_NAME_MAX_LENGTH
    )
    parentPhoneNumber = serializers.CharField(source="parent_phone_number", max_length=32)

    def validate_parentPhoneNumber(self, value: str) -> str:
        if not is_valid_phone_number(value):
            raise serializers.ValidationError("Invalid phone number")
        return value


class ClassSignupSerializer(serializers.Serializer):
    """Validates POST /class-signup bodies."""

    className = serializers.CharField(source="class_name", max_length=CLASS_NAME_MAX_LENGTH)
    day = serializers.CharField(max_length=SLOT_FIELD_MAX_LENGTH)
    time = serializers.CharField(max_length=SLOT_FIELD_MAX_LENGTH)
    signee = SigneeInputSerializer()


class SessionSummarySerializer(serializers.Serializer):
    """Serializer for SessionSummary; signees is the count, never the list."""

    id = serializers.UUIDField(source="id.value")
    day = serializers.CharField()
    time = serializers.CharField()
    maxSignups = serializers.IntegerField(source="max_signups")
    price = serializers.DecimalField(
        source="price.amount", max_digits=10, decimal_places=2, coerce_to_string=False
    )
    signees = serializers.IntegerField(source="signee_count")


class ClassSummarySerializer(serializers.Serializer):
    """Serializer for ClassSummary."""

    id = serializers.CharField(source="slug")
    name = serializers.CharField()
    sessions = SessionSummarySerializer(many=True)


class CatalogSummarySerializer(serializers.Serializer):
    """Serializer for CatalogSummary."""

    season = serializers.CharField()
    classes = ClassSummarySerializer(many=True)


class CatalogOverviewSerializer(serializers.Serializer):
    """Serializer for the GET /classes payload."""

    signups = CatalogSummarySerializer()
    upcoming = CatalogSummarySerializer()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    date = serializers.DateTimeField()
    duration = serializers.FloatField(allow_null=True)
