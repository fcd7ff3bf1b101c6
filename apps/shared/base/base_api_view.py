from drf_spectacular.utils import inline_serializer
from rest_framework import serializers
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.authentication import JWTAuthentication


def ok_envelope(name: str, payload=None):
    """OpenAPI schema of the success envelope wrapping ``payload``."""
    return inline_serializer(
        name=name,
        fields={
            'status': serializers.CharField(default='ok'),
            'response': payload if payload is not None else serializers.JSONField(allow_null=True, default=None),
        },
    )


class BaseAPIView(APIView):
    """
    Unified base class for all callable endpoints.

    Features:
    - JWT-only authentication
    - Service layer integration
    - ``{"status": "ok", "response": ...}`` success envelope

    Note: Exception handling is centralized in the DRF exception handler.
    """

    authentication_classes = (JWTAuthentication,)

    def get_service(self):
        """
        Subclasses must implement this to return appropriate service instance.

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError('Subclasses must implement get_service()')

    def ok(self, payload=None, status_code: int = status.HTTP_200_OK) -> Response:
        return Response({'status': 'ok', 'response': payload}, status=status_code)
