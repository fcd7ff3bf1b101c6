"""
Request serializers for the event callables.

Serializers only check shapes; merge rules and preconditions live in
EventService so that every caller gets the same error kinds.
"""

from rest_framework import serializers

# Upper bound of the integer columns the values end up in
INT_FIELD_MAX = 2147483647

# =============================================================================
# EVENT SERIALIZERS
# =============================================================================


class EventDateField(serializers.JSONField):
    """``[year, month, day, hour, minute, second, time_shift]`` or the same as an object"""

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        if value is not None and not isinstance(value, list | dict):
            raise serializers.ValidationError('Date must be a list or an object.')
        return value


class EventCreateSerializer(serializers.Serializer):
    """Create a new event or update the one named by ``force_update_id``"""

    force_update_id = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    authority_id = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    title = serializers.CharField(required=False, allow_blank=True, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    categories = serializers.ListField(child=serializers.CharField(), required=False, allow_null=True)
    private = serializers.BooleanField(required=False)
    images = serializers.ListField(child=serializers.CharField(max_length=200), required=False, allow_null=True)
    main_image = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=200)
    country = serializers.CharField(required=False, allow_blank=True, max_length=100)
    city = serializers.CharField(required=False, allow_blank=True, max_length=100)
    external_url = serializers.CharField(required=False, allow_blank=True, max_length=2048)
    max_attendees = serializers.FloatField(required=False, allow_null=True, max_value=INT_FIELD_MAX)

    location = serializers.ListField(
        child=serializers.FloatField(), min_length=2, max_length=2, required=False, allow_null=True
    )
    date = EventDateField(required=False, allow_null=True)
    duration = serializers.FloatField(required=False, allow_null=True, max_value=INT_FIELD_MAX)

    def to_internal_value(self, data):
        # Older clients send the camel-cased key
        if hasattr(data, 'get') and 'forceUpdateID' in data and 'force_update_id' not in data:
            data = {**data, 'force_update_id': data.get('forceUpdateID')}
        return super().to_internal_value(data)


class EventCreatedResponseSerializer(serializers.Serializer):
    link = serializers.CharField()
    id = serializers.CharField()


class EventIdSerializer(serializers.Serializer):
    event_id = serializers.CharField()


class AuthorityIdSerializer(serializers.Serializer):
    authority_id = serializers.CharField()


class TicketVerificationSerializer(serializers.Serializer):
    user_id = serializers.CharField()
    event_id = serializers.CharField()


class EventSummarySerializer(serializers.Serializer):
    title = serializers.CharField()
    id = serializers.CharField()


class AttendeeSerializer(serializers.Serializer):
    display_name = serializers.CharField()
    email = serializers.CharField(allow_blank=True)


class TicketStatusSerializer(serializers.Serializer):
    ticket_exists = serializers.BooleanField()
    ticket_valid = serializers.BooleanField()
