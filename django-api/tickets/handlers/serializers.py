"""Serializers for transforming ticket domain models to API responses."""

from rest_framework import serializers


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.SerializerMethodField()
    code = serializers.CharField()
    event_id = serializers.SerializerMethodField()
    buyer_id = serializers.SerializerMethodField()
    purchased_at = serializers.DateTimeField()

    def get_id(self, obj) -> str:
        return str(obj.id)

    def get_event_id(self, obj) -> str:
        return str(obj.event_id)

    def get_buyer_id(self, obj) -> str:
        return str(obj.buyer_id)


class EventSummarySerializer(serializers.Serializer):
    id = serializers.SerializerMethodField()
    name = serializers.CharField()
    starts_at = serializers.DateTimeField()
    location = serializers.CharField()
    price = serializers.SerializerMethodField()

    def get_id(self, obj) -> str:
        return str(obj.id)

    def get_price(self, obj) -> str:
        return str(obj.price)


class TicketViewSerializer(serializers.Serializer):
    """Serializer for TicketView read model."""

    ticket = TicketSerializer()
    event = EventSummarySerializer()
    event_elapsed = serializers.BooleanField()


class RedemptionCodeSerializer(serializers.Serializer):
    code = serializers.CharField(min_length=5, max_length=40, trim_whitespace=True)
