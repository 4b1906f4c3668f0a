from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

from django.db.models import QuerySet

from core.exceptions import ConflictError, NotFoundError, ValidationError
from store_app.common.decorators import translate_storage_errors
from store_app.common.utils import compute_discount_price
from store_app.models import Product, ProductCombination, ProductVariant

from .base import BaseService

REQUIRED_FIELDS = (
    "product_id",
    "slug",
    "title",
    "category",
    "description",
    "about_in_bullets",
    "price",
    "brand",
    "vendor_id",
)
OPTIONAL_FIELDS = (
    "content_description",
    "content_shipping_delivery",
    "image_gallery",
    "discount_percent",
    "discount_price",
    "rating",
    "review_count",
    "quantity",
    "featured",
    "variant_state",
)
DEFAULTS = {"rating": 0, "review_count": 0, "quantity": 0, "featured": False, "variant_state": False}

TOP_LIMIT = 4


@dataclass
class SlugResolution:
    """Outcome of resolving a slug against the product and variant namespaces."""

    product: Product
    variants: List[ProductVariant] = field(default_factory=list)
    selected_variant: Optional[ProductVariant] = None

    @property
    def has_variants(self) -> bool:
        return bool(self.variants)

    @property
    def current_variant_slug(self) -> Optional[str]:
        return self.selected_variant.slug if self.selected_variant else None


class ProductService(BaseService):
    """Product registration, slug resolution, partial updates and catalogue queries."""

    def queryset(self) -> QuerySet:
        return Product.objects.using(self.using).all()

    @translate_storage_errors("A product with this ID or slug already exists")
    def create_product(self, fields: Mapping[str, Any]) -> Product:
        self.require_fields(fields, REQUIRED_FIELDS, "Please provide all required fields")

        payload: Dict[str, Any] = {
            name: fields[name] for name in REQUIRED_FIELDS + OPTIONAL_FIELDS if name in fields
        }
        for name, default in DEFAULTS.items():
            if payload.get(name) is None:
                payload[name] = default
        if payload.get("image_gallery") is None:
            payload["image_gallery"] = []

        if self.product_exists(payload["product_id"]):
            raise ConflictError("A product with this ID already exists")
        if self._slug_taken(payload["slug"]):
            raise ConflictError("A product with this slug already exists")

        with self.atomic():
            product = Product.objects.using(self.using).create(**payload)
        self.logger.info("Created product %s (slug=%s)", product.product_id, product.slug)
        return product

    def get_product(self, product_id: str) -> Product:
        product = self.queryset().filter(product_id=product_id).first()
        if product is None:
            raise NotFoundError("Product not found")
        return product

    def list_products(self) -> QuerySet:
        return self.queryset().order_by("-created_at", "-id")

    def get_by_slug(self, slug: str) -> SlugResolution:
        """Resolve ``slug`` as a product slug first, then as an active variant slug."""

        slug = (slug or "").strip()
        if not slug:
            raise ValidationError("Slug is required")

        product = self.queryset().filter(slug=slug).first()
        if product is not None:
            return SlugResolution(product=product, variants=self._active_variants(product.product_id))

        variant = (
            ProductVariant.objects.using(self.using)
            .filter(slug=slug, is_active=True)
            .select_related("parent_product")
            .first()
        )
        if variant is None:
            raise NotFoundError("Product not found")

        parent = variant.parent_product
        return SlugResolution(
            product=parent,
            variants=self._active_variants(parent.product_id),
            selected_variant=variant,
        )

    @translate_storage_errors("A product with this slug already exists")
    def update_product(self, product_id: str, fields: Mapping[str, Any]) -> Product:
        accepted = self.pick_update_fields(
            fields,
            allowed=REQUIRED_FIELDS + OPTIONAL_FIELDS,
            immutable=("product_id",),
        )
        changes = dict(accepted)
        for name in REQUIRED_FIELDS:
            if name in changes and changes[name] in (None, "", []):
                raise ValidationError(f"{name} cannot be empty.")

        with self.atomic():
            product = self.queryset().select_for_update().filter(product_id=product_id).first()
            if product is None:
                raise NotFoundError(f"No product found with ID {product_id}")

            if "slug" in changes and changes["slug"] != product.slug and self._slug_taken(changes["slug"]):
                raise ConflictError("A product with this slug already exists")

            if "price" in changes and "discount_percent" in changes:
                changes["discount_price"] = compute_discount_price(changes["price"], changes["discount_percent"])

            for name, value in changes.items():
                setattr(product, name, value)
            product.save(using=self.using, update_fields=[*changes, "updated_at"])

        self.logger.info("Updated product %s fields=%s", product_id, sorted(changes))
        return product

    @translate_storage_errors()
    def delete_product(self, product_id: str) -> int:
        """Delete one product with its variants, groups, reviews and bundles.

        Bundles that list the product as a child are removed as well. Returns
        the number of products deleted.
        """

        with self.atomic():
            if not self.product_exists(product_id):
                raise NotFoundError(f"No product found with ID {product_id}")

            orphaned = [
                combination.pk
                for combination in ProductCombination.objects.using(self.using).only("id", "child_products")
                if any(child.get("product_id") == product_id for child in combination.child_products or [])
            ]
            if orphaned:
                ProductCombination.objects.using(self.using).filter(pk__in=orphaned).delete()

            _, per_model = self.queryset().filter(product_id=product_id).delete()

        deleted = per_model.get(Product._meta.label, 0)
        self.logger.info(
            "Deleted product %s (bundles listing it as a child: %d)", product_id, len(orphaned)
        )
        return deleted

    def by_vendor(self, vendor_id: str) -> List[Product]:
        products = list(self.queryset().filter(vendor_id=vendor_id).order_by("-created_at", "-id"))
        if not products:
            raise NotFoundError("No products found for this vendor")
        return products

    def by_category(self, category: str) -> List[Product]:
        products = list(self.queryset().filter(category=category).order_by("-created_at", "-id"))
        if not products:
            raise NotFoundError("No products found in this category")
        return products

    def featured(self, category: Optional[str] = None) -> List[Product]:
        queryset = self.queryset().filter(featured=True)
        if category:
            queryset = queryset.filter(category=category)
        products = list(queryset.order_by("-created_at", "-id"))
        if not products:
            raise NotFoundError("No featured products found")
        return products

    def by_min_discount(self, discount: Optional[Decimal]) -> List[Product]:
        """Top products whose discount is at least ``discount``, highest first."""

        if discount is None:
            raise ValidationError("discount is required")
        products = list(
            self.queryset()
            .filter(discount_percent__gte=discount)
            .order_by("-discount_percent", "-created_at", "-id")[:TOP_LIMIT]
        )
        if not products:
            raise NotFoundError("No products found with the requested discount")
        return products

    def top_rated_by_vendor(self, vendor_id: str) -> List[Product]:
        products = list(
            self.queryset().filter(vendor_id=vendor_id).order_by("-rating", "-created_at", "-id")[:TOP_LIMIT]
        )
        if not products:
            raise NotFoundError("No products found for this vendor")
        return products

    def by_price_range(self, min_price: Optional[Decimal], max_price: Optional[Decimal] = None) -> List[Product]:
        if min_price is None:
            raise ValidationError("min_price is required")
        if max_price is not None and max_price < min_price:
            raise ValidationError("max_price must not be lower than min_price")

        queryset = self.queryset().filter(price__gte=min_price)
        if max_price is not None:
            queryset = queryset.filter(price__lte=max_price)
        products = list(queryset.order_by("price", "id"))
        if not products:
            raise NotFoundError("No products found in this price range")
        return products

    def _active_variants(self, product_id: str) -> List[ProductVariant]:
        return list(
            ProductVariant.objects.using(self.using)
            .filter(parent_product_id=product_id, is_active=True)
            .order_by("created_at", "id")
        )

    def _slug_taken(self, slug: str) -> bool:
        return (
            self.queryset().filter(slug=slug).exists()
            or ProductVariant.objects.using(self.using).filter(slug=slug).exists()
        )
