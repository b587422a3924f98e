"""Serializers for transforming domain models to API responses."""

from django.utils import timezone
from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.SerializerMethodField()
    name = serializers.CharField()
    description = serializers.CharField()
    starts_at = serializers.DateTimeField()
    location = serializers.CharField()
    image_url = serializers.CharField()
    price = serializers.SerializerMethodField()
    total = serializers.IntegerField(source="inventory.total")
    available = serializers.IntegerField(source="inventory.available")
    promoter_id = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_id(self, obj) -> str:
        return str(obj.id)

    def get_price(self, obj) -> str:
        return str(obj.price)

    def get_promoter_id(self, obj) -> str:
        return str(obj.promoter_id)


class EventPageSerializer(serializers.Serializer):
    """Serializer for a page of the event listing."""

    data = EventSerializer(source="events", many=True)
    pagination = serializers.SerializerMethodField()

    def get_pagination(self, obj) -> dict:
        return {"page": obj.page, "limit": obj.limit, "total": obj.total, "pages": obj.pages}


class EventListQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=100, default=10)
    search = serializers.CharField(required=False, allow_blank=True, max_length=200)


class EventInputSerializer(serializers.Serializer):
    """Input for creating an event; with ``partial=True`` for edits."""

    name = serializers.CharField(min_length=3, max_length=200)
    description = serializers.CharField(min_length=10, max_length=1000)
    starts_at = serializers.DateTimeField()
    location = serializers.CharField(min_length=5, max_length=300)
    image_url = serializers.URLField(max_length=500)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    total = serializers.IntegerField(min_value=1)

    def validate_starts_at(self, value):
        if value <= timezone.now():
            raise serializers.ValidationError("Event date must be in the future")
        return value
