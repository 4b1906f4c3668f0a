"""Swagger and ReDoc documentation endpoints."""

import os

from django.urls import path, re_path
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions

schema_view = get_schema_view(
    openapi.Info(
        title="Storefront API",
        default_version="v1",
        description="""
        # Storefront API Documentation

        Products, variants, bundles and reviews for the storefront backend.

        Every endpoint answers with the envelope
        `{"success": bool, "message": str, "data": ..., "pagination": ...}`.

        ## API Organization

        - **Products** - registration, slug resolution, catalogue queries
        - **Variants** - priced/stocked specialisations of a product and their groups
        - **Combinations** - bundles of a parent product with required child products
        - **Reviews** - one review per user and product, reactions, replies, statistics
        - **Profiles** - user and vendor profiles referenced by the catalogue
        """,
        license=openapi.License(name="BSD License"),
    ),
    url=os.getenv("SWAGGER_DEFAULT_API_URL", "http://localhost"),
    public=True,
    permission_classes=[permissions.AllowAny],
)

urlpatterns = [
    path("api/doc/", schema_view.with_ui("swagger", cache_timeout=0), name="schema-swagger-ui"),
    path("api/redoc/", schema_view.with_ui("redoc", cache_timeout=0), name="schema-redoc"),
    re_path(r"^api/doc(?P<format>\.json|\.yaml)$", schema_view.without_ui(cache_timeout=0), name="schema-json"),
]
