from drf_yasg.utils import swagger_auto_schema
from rest_framework import status

from core.responses import envelope
from store_app.serializers import (
    CombinationBulkCreateRequestSerializer,
    CombinationCreateRequestSerializer,
    CombinationUpdateRequestSerializer,
    ProductCombinationSerializer,
)
from store_app.services.combinations import REQUIRED_MESSAGE, CombinationService

from .base import ServiceAPIView, query_param


def _combination_list(message, combinations):
    data = ProductCombinationSerializer(combinations, many=True).data
    return envelope(message, data, count=len(data))


class CombinationCreateView(ServiceAPIView):
    service_class = CombinationService
    required_message = REQUIRED_MESSAGE

    @swagger_auto_schema(
        operation_summary="Create combination",
        operation_description="Bundle a parent product with child products. Every referenced product must exist.",
        tags=["Combinations"],
        request_body=CombinationCreateRequestSerializer,
        responses={201: ProductCombinationSerializer, 400: "Invalid input", 404: "Missing products"},
    )
    def post(self, request):
        arguments = self.get_validated_data(request, CombinationCreateRequestSerializer)
        combination = self.get_service().create(**arguments)
        return envelope(
            "Product combination created successfully!",
            ProductCombinationSerializer(combination).data,
            status=status.HTTP_201_CREATED,
        )


class CombinationBulkCreateView(ServiceAPIView):
    service_class = CombinationService

    @swagger_auto_schema(
        operation_summary="Bulk create combinations",
        operation_description="All entries are validated first; either every combination is stored or none is.",
        tags=["Combinations"],
        request_body=CombinationBulkCreateRequestSerializer,
        responses={201: ProductCombinationSerializer(many=True), 400: "Invalid input", 404: "Missing products"},
    )
    def post(self, request):
        payload = self.get_validated_data(request, CombinationBulkCreateRequestSerializer)
        combinations = self.get_service().bulk_create(payload["combinations"])
        data = ProductCombinationSerializer(combinations, many=True).data
        return envelope(
            f"{len(data)} product combinations created successfully!",
            data,
            status=status.HTTP_201_CREATED,
            count=len(data),
        )


class CombinationListView(ServiceAPIView):
    service_class = CombinationService

    @swagger_auto_schema(
        operation_summary="List combinations",
        tags=["Combinations"],
        manual_parameters=[
            query_param("parent_product_id", "Only bundles of this parent product."),
            query_param("combination_name", "Case-insensitive name fragment."),
        ],
        responses={200: ProductCombinationSerializer(many=True)},
    )
    def get(self, request):
        params = request.query_params
        combinations = self.get_service().list_combinations(
            parent_product_id=params.get("parent_product_id"),
            combination_name=params.get("combination_name"),
        )
        return _combination_list("Product combinations retrieved successfully", combinations)


class CombinationDetailView(ServiceAPIView):
    service_class = CombinationService

    @swagger_auto_schema(
        operation_summary="Retrieve combination",
        tags=["Combinations"],
        responses={200: ProductCombinationSerializer, 404: "Product combination not found"},
    )
    def get(self, request, combination_id):
        combination = self.get_service().get(combination_id)
        return envelope("Product combination retrieved successfully", ProductCombinationSerializer(combination).data)

    @swagger_auto_schema(
        operation_summary="Update combination",
        tags=["Combinations"],
        request_body=CombinationUpdateRequestSerializer,
        responses={200: ProductCombinationSerializer, 404: "Combination or products not found"},
    )
    def patch(self, request, combination_id):
        fields = self.get_validated_data(request, CombinationUpdateRequestSerializer)
        combination = self.get_service().update(combination_id, fields)
        return envelope("Product combination updated successfully!", ProductCombinationSerializer(combination).data)

    @swagger_auto_schema(
        operation_summary="Delete combination",
        tags=["Combinations"],
        responses={200: "Deleted", 404: "Product combination not found"},
    )
    def delete(self, request, combination_id):
        deleted = self.get_service().delete(combination_id)
        return envelope("Product combination deleted successfully!", deleted_count=deleted)


class ProductCombinationListView(ServiceAPIView):
    service_class = CombinationService

    @swagger_auto_schema(
        operation_summary="Combinations of a parent product",
        tags=["Combinations"],
        responses={200: ProductCombinationSerializer(many=True), 404: "Parent product not found"},
    )
    def get(self, request, product_id):
        return _combination_list(
            "Product combinations retrieved successfully",
            self.get_service().list_by_parent(product_id),
        )

    @swagger_auto_schema(
        operation_summary="Delete all combinations of a parent product",
        tags=["Combinations"],
        responses={200: "Deleted", 404: "Parent product not found"},
    )
    def delete(self, request, product_id):
        deleted = self.get_service().delete_all_for_parent(product_id)
        return envelope(f"{deleted} product combinations deleted successfully!", deleted_count=deleted)


class CombinationsContainingView(ServiceAPIView):
    service_class = CombinationService

    @swagger_auto_schema(
        operation_summary="Combinations containing a product",
        operation_description="Bundles that list the product as a child.",
        tags=["Combinations"],
        responses={200: ProductCombinationSerializer(many=True)},
    )
    def get(self, request, product_id):
        return _combination_list(
            "Product combinations retrieved successfully",
            self.get_service().list_containing(product_id),
        )
