from rest_framework import serializers


class UserProfileUpdateSerializer(serializers.Serializer):
    """Fields are applied only when present and non-empty"""

    display_name = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=255)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    messaging_token_ios = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class UserProfileResponseSerializer(serializers.Serializer):
    displayName = serializers.CharField()
    email = serializers.CharField(allow_blank=True)
    disabled = serializers.BooleanField()


class ChangeAuthoritySerializer(serializers.Serializer):
    user_id = serializers.CharField()
    authority_id = serializers.CharField()
    # Integer-ness is checked by the service so floats and strings get the same error
    level = serializers.JSONField(required=False, default=0)


class AuthoritySerializer(serializers.Serializer):
    display_name = serializers.CharField()
    image_id = serializers.CharField(allow_blank=True)
    authority_id = serializers.CharField()


class EmailActiveSerializer(serializers.Serializer):
    email_active = serializers.BooleanField(required=False, allow_null=True, default=None)


class CacheInfoSerializer(serializers.Serializer):
    cacheValid = serializers.BooleanField()


class UserDataSerializer(serializers.Serializer):
    user_rating = serializers.IntegerField()
