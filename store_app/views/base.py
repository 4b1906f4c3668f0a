from typing import Any, Dict

from drf_yasg import openapi
from rest_framework.views import APIView

from core.exceptions import ValidationError


def query_param(name: str, description: str, type_=openapi.TYPE_STRING, required: bool = False, **kwargs):
    return openapi.Parameter(
        name=name,
        in_=openapi.IN_QUERY,
        type=type_,
        description=description,
        required=required,
        **kwargs,
    )


class ServiceAPIView(APIView):
    """APIView bound to one store service.

    Request bodies and query strings are validated with DRF serializers and
    services receive ``validated_data``. Service errors propagate to the
    envelope exception handler, so handlers only deal with the success path.
    ``required_message`` replaces the generic message when a request is
    rejected for a missing or empty field.
    """

    service_class = None
    database_alias = "default"
    required_message = None

    def get_service(self):
        return self.service_class(using=self.database_alias)

    def get_validated_data(self, request, serializer_class, partial: bool = False) -> Dict[str, Any]:
        if not isinstance(request.data, dict):
            raise ValidationError("Request body must be a JSON object")
        serializer = serializer_class(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        return dict(serializer.validated_data)

    def get_validated_query(self, request, serializer_class) -> Dict[str, Any]:
        serializer = serializer_class(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        return dict(serializer.validated_data)
