import logging

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated

from apps.accounts.serializers import AuthoritySerializer
from apps.accounts.serializers import CacheInfoSerializer
from apps.accounts.serializers import ChangeAuthoritySerializer
from apps.accounts.serializers import EmailActiveSerializer
from apps.accounts.serializers import UserDataSerializer
from apps.accounts.serializers import UserProfileResponseSerializer
from apps.accounts.serializers import UserProfileUpdateSerializer
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.base.base_api_view import ok_envelope
from apps.shared.container import get_authority_service
from apps.shared.container import get_user_service

logger = logging.getLogger(__name__)


class BaseUserAPIView(BaseAPIView):
    """Base view for the caller's own profile"""

    permission_classes = [IsAuthenticated]

    def get_service(self):
        return get_user_service()


class BaseAuthorityAPIView(BaseAPIView):
    permission_classes = [IsAuthenticated]

    def get_service(self):
        return get_authority_service()


@extend_schema(tags=['Users'])
class UserProfileUpdateAPIView(BaseUserAPIView):
    """Update display name, email and the iOS messaging token"""

    serializer_class = UserProfileUpdateSerializer

    @extend_schema(
        summary='Update profile',
        request=UserProfileUpdateSerializer,
        responses={200: ok_envelope('UserProfileEnvelope', UserProfileResponseSerializer())},
    )
    def post(self, request):
        serializer = UserProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = self.get_service().update_profile(
            user_id=request.user.id,
            display_name=data.get('display_name'),
            email=data.get('email'),
            messaging_token_ios=data.get('messaging_token_ios'),
        )
        return self.ok(result)


@extend_schema(tags=['Users'])
class ChangeAuthoritiesAPIView(BaseAuthorityAPIView):
    """Grant, change or remove another user's authority level"""

    serializer_class = ChangeAuthoritySerializer

    @extend_schema(
        summary='Change authorities',
        request=ChangeAuthoritySerializer,
        responses={200: ok_envelope('AuthorityChangedEnvelope')},
    )
    def post(self, request):
        serializer = ChangeAuthoritySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        self.get_service().change_authorities(
            provoker_id=request.user.id,
            user_id=data['user_id'],
            authority_id=data['authority_id'],
            level=data.get('level', 0),
        )
        return self.ok()


@extend_schema(tags=['Users'])
class UserAuthoritiesAPIView(BaseAuthorityAPIView):
    """Organizers the caller may publish events as"""

    @extend_schema(
        summary='List authorities',
        request=None,
        responses={200: ok_envelope('AuthorityListEnvelope', AuthoritySerializer(many=True))},
    )
    def post(self, request):
        return self.ok(self.get_service().fetch_user_authorities(request.user.id))


@extend_schema(tags=['Users'])
class CacheInfoAPIView(BaseUserAPIView):
    @extend_schema(
        summary='Client cache freshness',
        request=None,
        responses={200: ok_envelope('CacheInfoEnvelope', CacheInfoSerializer())},
    )
    def post(self, request):
        return self.ok(self.get_service().fetch_cache_info(request.user.id))


@extend_schema(tags=['Users'])
class EmailActiveAPIView(BaseUserAPIView):
    """Read, and optionally set, the email opt-in flag"""

    serializer_class = EmailActiveSerializer

    @extend_schema(
        summary='Email opt-in',
        request=EmailActiveSerializer,
        responses={200: ok_envelope('EmailActiveEnvelope', EmailActiveSerializer())},
    )
    def post(self, request):
        serializer = EmailActiveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().set_email_active(
            request.user.id, serializer.validated_data.get('email_active')
        )
        return self.ok(result)


@extend_schema(tags=['Users'])
class UserDataAPIView(BaseUserAPIView):
    @extend_schema(
        summary='Current user data',
        request=None,
        responses={200: ok_envelope('UserDataEnvelope', UserDataSerializer())},
    )
    def post(self, request):
        return self.ok(self.get_service().fetch_user_data(request.user.id))
