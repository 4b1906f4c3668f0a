from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg import openapi
from drf_yasg.inspectors import SwaggerAutoSchema
from drf_yasg.utils import swagger_auto_schema
from rest_framework import filters, generics, status

from core.responses import envelope
from store_app.filters import ProductFilter
from store_app.pagination import EnvelopePagination
from store_app.serializers import (
    MinDiscountQuerySerializer,
    PriceRangeQuerySerializer,
    ProductSerializer,
    ProductUpdateSerializer,
    ProductWriteSerializer,
    product_with_variants,
)
from store_app.services.products import ProductService

from .base import ServiceAPIView, query_param


class ProductListSchema(SwaggerAutoSchema):
    def get_query_parameters(self):
        params = list(super().get_query_parameters())

        ordering_enum = []
        for field in getattr(self.view, "ordering_fields", []) or []:
            ordering_enum.append(field)
            ordering_enum.append(f"-{field}")

        updated = []
        for p in params:
            if p.name == "ordering":
                updated.append(
                    openapi.Parameter(
                        name="ordering",
                        in_=openapi.IN_QUERY,
                        type=openapi.TYPE_STRING,
                        description=p.description or "Ordering of results.",
                        required=False,
                        enum=ordering_enum or None,
                    )
                )
                continue

            if p.name == "page_size":
                updated.append(
                    openapi.Parameter(
                        name="page_size",
                        in_=openapi.IN_QUERY,
                        type=openapi.TYPE_INTEGER,
                        description=p.description or "Number of items per page.",
                        required=False,
                        enum=[10, 20, 50, 100],
                    )
                )
                continue

            updated.append(p)

        return updated


def _product_list(message, products):
    data = ProductSerializer(products, many=True).data
    return envelope(message, data, count=len(data))


class ProductCreateView(ServiceAPIView):
    service_class = ProductService
    required_message = "Please provide all required fields"

    @swagger_auto_schema(
        operation_summary="Create product",
        operation_description=(
            "Register a product. product_id, slug, title, category, description, "
            "about_in_bullets, price, brand and vendor_id are required."
        ),
        tags=["Products"],
        request_body=ProductWriteSerializer,
        responses={201: ProductSerializer, 400: "Missing or invalid fields", 409: "Duplicate product_id or slug"},
    )
    def post(self, request):
        fields = self.get_validated_data(request, ProductWriteSerializer)
        product = self.get_service().create_product(fields)
        return envelope(
            "Product created successfully",
            ProductSerializer(product).data,
            status=status.HTTP_201_CREATED,
        )


class ProductListView(generics.ListAPIView):
    """
    List products with filtering, ordering and pagination.

    Filtering:
    - Search: /?search=query (title, description, brand, category)
    - Price range: /?min_price=100&max_price=1000
    - Exact fields: /?category=shoes&vendor=VEN-1&featured=true

    Ordering:
    - /?ordering=price, /?ordering=-rating

    Pagination:
    - /?page=2&page_size=50
    """

    serializer_class = ProductSerializer
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_class = ProductFilter
    pagination_class = EnvelopePagination
    ordering_fields = ["title", "price", "rating", "discount_percent", "created_at"]
    ordering = ["-created_at"]
    swagger_schema = ProductListSchema
    list_message = "Products retrieved successfully"
    database_alias = "default"

    def get_queryset(self):
        return ProductService(using=self.database_alias).list_products()

    @swagger_auto_schema(
        operation_summary="List products",
        operation_description="List products with filtering, ordering and pagination.",
        tags=["Products"],
        responses={200: ProductSerializer(many=True)},
    )
    def get(self, *args, **kwargs):  # type: ignore[override]
        return super().get(*args, **kwargs)


class ProductDetailView(ServiceAPIView):
    service_class = ProductService

    @swagger_auto_schema(
        operation_summary="Retrieve product",
        tags=["Products"],
        responses={200: ProductSerializer, 404: "Product not found"},
    )
    def get(self, request, product_id):
        product = self.get_service().get_product(product_id)
        return envelope("Product retrieved successfully", ProductSerializer(product).data)


class ProductUpdateView(ServiceAPIView):
    service_class = ProductService

    @swagger_auto_schema(
        operation_summary="Update product",
        operation_description=(
            "Partial update. product_id cannot change. discount_price is recomputed "
            "when price and discount_percent are sent together."
        ),
        tags=["Products"],
        request_body=ProductUpdateSerializer,
        responses={200: ProductSerializer, 400: "Empty or invalid update", 404: "Product not found"},
    )
    def patch(self, request, product_id):
        fields = self.get_validated_data(request, ProductUpdateSerializer, partial=True)
        product = self.get_service().update_product(product_id, fields)
        return envelope(
            f"Product with ID {product_id} updated successfully.",
            ProductSerializer(product).data,
        )


class ProductDeleteView(ServiceAPIView):
    service_class = ProductService

    @swagger_auto_schema(
        operation_summary="Delete product",
        operation_description="Delete a product together with its variants, bundles and reviews.",
        tags=["Products"],
        responses={200: "Deleted", 404: "Product not found"},
    )
    def delete(self, request, product_id):
        deleted = self.get_service().delete_product(product_id)
        return envelope(f"Product with ID {product_id} deleted successfully.", deleted_count=deleted)


class ProductBySlugView(ServiceAPIView):
    service_class = ProductService

    @swagger_auto_schema(
        operation_summary="Get product by slug",
        operation_description=(
            "Resolve a product slug, or a variant slug. Variant slugs return the parent "
            "product with selected_variant and current_variant_slug set."
        ),
        tags=["Products"],
        responses={200: "Product with active variants", 404: "No product or variant with this slug"},
    )
    def get(self, request, slug):
        resolution = self.get_service().get_by_slug(slug)
        return envelope("Product retrieved successfully", product_with_variants(resolution))


class ProductsByVendorView(ServiceAPIView):
    service_class = ProductService

    @swagger_auto_schema(operation_summary="Products of a vendor", tags=["Products"])
    def get(self, request, vendor_id):
        return _product_list("Products retrieved successfully", self.get_service().by_vendor(vendor_id))


class TopRatedByVendorView(ServiceAPIView):
    service_class = ProductService

    @swagger_auto_schema(operation_summary="Top rated products of a vendor", tags=["Products"])
    def get(self, request, vendor_id):
        return _product_list(
            "Top rated products retrieved successfully",
            self.get_service().top_rated_by_vendor(vendor_id),
        )


class ProductsByCategoryView(ServiceAPIView):
    service_class = ProductService

    @swagger_auto_schema(operation_summary="Products in a category", tags=["Products"])
    def get(self, request, category):
        return _product_list("Products retrieved successfully", self.get_service().by_category(category))


class FeaturedProductsView(ServiceAPIView):
    service_class = ProductService

    @swagger_auto_schema(
        operation_summary="Featured products",
        tags=["Products"],
        manual_parameters=[query_param("category", "Restrict to one category.")],
    )
    def get(self, request):
        products = self.get_service().featured(request.query_params.get("category"))
        return _product_list("Featured products retrieved successfully", products)


class MinDiscountProductsView(ServiceAPIView):
    service_class = ProductService
    required_message = "discount is required"

    @swagger_auto_schema(
        operation_summary="Products by minimum discount",
        operation_description="The four products with the highest discount_percent at or above the threshold.",
        tags=["Products"],
        query_serializer=MinDiscountQuerySerializer,
    )
    def get(self, request):
        params = self.get_validated_query(request, MinDiscountQuerySerializer)
        products = self.get_service().by_min_discount(params["discount"])
        return _product_list("Discounted products retrieved successfully", products)


class PriceRangeProductsView(ServiceAPIView):
    service_class = ProductService
    required_message = "min_price is required"

    @swagger_auto_schema(
        operation_summary="Products by price",
        operation_description="Products priced at or above min_price (and at or below max_price), cheapest first.",
        tags=["Products"],
        query_serializer=PriceRangeQuerySerializer,
    )
    def get(self, request):
        params = self.get_validated_query(request, PriceRangeQuerySerializer)
        products = self.get_service().by_price_range(params.get("min_price"), params.get("max_price"))
        return _product_list("Products retrieved successfully", products)
