from drf_yasg.utils import swagger_auto_schema
from rest_framework import status

from core.responses import envelope
from store_app.serializers import (
    ProductVariantGroupSerializer,
    ProductVariantSerializer,
    VariantCreateRequestSerializer,
    VariantGroupCreateRequestSerializer,
    VariantUpdateRequestSerializer,
)
from store_app.services.variants import VariantService

from .base import ServiceAPIView

class VariantCreateView(ServiceAPIView):
    service_class = VariantService
    required_message = "Parent product ID, variant name, variant type, price and quantity are required"

    @swagger_auto_schema(
        operation_summary="Create variant",
        operation_description=(
            "Create a variant of an existing product. The slug is derived from the parent "
            "slug and the variant name; discount_price is computed from discount_percent."
        ),
        tags=["Variants"],
        request_body=VariantCreateRequestSerializer,
        responses={201: ProductVariantSerializer, 400: "Invalid input", 404: "Parent product not found"},
    )
    def post(self, request):
        arguments = self.get_validated_data(request, VariantCreateRequestSerializer)
        variant = self.get_service().create_variant(**arguments)
        return envelope(
            "Product variant created successfully",
            ProductVariantSerializer(variant).data,
            status=status.HTTP_201_CREATED,
        )


class VariantDetailView(ServiceAPIView):
    service_class = VariantService

    @swagger_auto_schema(
        operation_summary="Retrieve variant",
        tags=["Variants"],
        responses={200: ProductVariantSerializer, 404: "Variant not found"},
    )
    def get(self, request, variant_id):
        variant = self.get_service().get_variant(variant_id)
        return envelope("Product variant retrieved successfully", ProductVariantSerializer(variant).data)

    @swagger_auto_schema(
        operation_summary="Update variant",
        operation_description="Partial update. The slug stays the same when the variant is renamed.",
        tags=["Variants"],
        request_body=VariantUpdateRequestSerializer,
        responses={200: ProductVariantSerializer, 400: "Empty or invalid update", 404: "Variant not found"},
    )
    def patch(self, request, variant_id):
        fields = self.get_validated_data(request, VariantUpdateRequestSerializer, partial=True)
        variant = self.get_service().update_variant(variant_id, fields)
        return envelope(
            f"Variant with ID {variant_id} updated successfully.",
            ProductVariantSerializer(variant).data,
        )

    @swagger_auto_schema(
        operation_summary="Delete variant",
        tags=["Variants"],
        responses={200: "Deleted", 404: "Variant not found"},
    )
    def delete(self, request, variant_id):
        deleted = self.get_service().delete_variant(variant_id)
        return envelope(f"Variant with ID {variant_id} deleted successfully.", deleted_count=deleted)


class ProductVariantListView(ServiceAPIView):
    service_class = VariantService

    @swagger_auto_schema(
        operation_summary="Active variants of a product",
        tags=["Variants"],
        responses={200: ProductVariantSerializer(many=True), 404: "Parent product not found"},
    )
    def get(self, request, product_id):
        variants = self.get_service().list_variants(product_id)
        data = ProductVariantSerializer(variants, many=True).data
        return envelope("Product variants retrieved successfully", data, count=len(data))


class VariantGroupCreateView(ServiceAPIView):
    service_class = VariantService
    required_message = "Parent product ID, group name and group type are required"

    @swagger_auto_schema(
        operation_summary="Create variant group",
        tags=["Variants"],
        request_body=VariantGroupCreateRequestSerializer,
        responses={201: ProductVariantGroupSerializer, 404: "Parent product not found"},
    )
    def post(self, request):
        arguments = self.get_validated_data(request, VariantGroupCreateRequestSerializer)
        group = self.get_service().create_group(**arguments)
        return envelope(
            "Variant group created successfully",
            ProductVariantGroupSerializer(group).data,
            status=status.HTTP_201_CREATED,
        )


class ProductVariantGroupListView(ServiceAPIView):
    service_class = VariantService

    @swagger_auto_schema(
        operation_summary="Variant groups of a product",
        tags=["Variants"],
        responses={200: ProductVariantGroupSerializer(many=True)},
    )
    def get(self, request, product_id):
        groups = self.get_service().list_groups(product_id)
        data = ProductVariantGroupSerializer(groups, many=True).data
        return envelope("Variant groups retrieved successfully", data, count=len(data))
