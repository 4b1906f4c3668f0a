from decimal import Decimal
from typing import Any, List, Mapping, Optional

from core.exceptions import NotFoundError, ValidationError
from store_app.common.decorators import translate_storage_errors
from store_app.common.utils import compute_discount_price, normalise_space
from store_app.models import Product, ProductVariant, ProductVariantGroup

from .base import BaseService
from .identifiers import derive_slug, ensure_unique, new_id

UPDATABLE_FIELDS = (
    "variant_name",
    "variant_type",
    "price",
    "quantity",
    "discount_percent",
    "discount_price",
    "image_gallery",
    "description",
    "is_active",
)
IMMUTABLE_FIELDS = ("variant_id", "parent_product_id", "parent_product", "slug")


def _check_percent(percent: Optional[Decimal]) -> None:
    if percent is not None and not Decimal(0) <= percent <= Decimal(100):
        raise ValidationError("discount_percent must be between 0 and 100.")


class VariantService(BaseService):
    """Variants of a product and the variant groups that describe their axes."""

    @translate_storage_errors("A variant with this ID or slug already exists")
    def create_variant(
        self,
        parent_product_id: str,
        variant_name: str,
        variant_type: str,
        price: Decimal,
        quantity: int,
        discount_percent: Optional[Decimal] = None,
        image_gallery: Optional[List[str]] = None,
        description: Optional[str] = None,
        is_active: bool = True,
    ) -> ProductVariant:
        variant_name = normalise_space(variant_name)
        variant_type = normalise_space(variant_type)
        if not parent_product_id or not variant_name or not variant_type or price is None or quantity is None:
            raise ValidationError("Parent product ID, variant name, variant type, price and quantity are required")

        _check_percent(discount_percent)

        parent = Product.objects.using(self.using).filter(product_id=parent_product_id).first()
        if parent is None:
            raise NotFoundError("Parent product not found")

        base_slug = derive_slug(parent.slug, variant_name)
        if not base_slug:
            raise ValidationError("Variant name must contain at least one letter or digit")
        slug = ensure_unique(base_slug, self._slug_taken)

        with self.atomic():
            variant = ProductVariant.objects.using(self.using).create(
                variant_id=new_id("VAR"),
                parent_product=parent,
                slug=slug,
                variant_name=variant_name,
                variant_type=variant_type,
                price=price,
                quantity=quantity,
                discount_percent=discount_percent,
                discount_price=compute_discount_price(price, discount_percent),
                image_gallery=image_gallery or [],
                description=description,
                is_active=is_active,
            )
            if not parent.variant_state:
                Product.objects.using(self.using).filter(pk=parent.pk).update(variant_state=True)

        self.logger.info("Created variant %s (slug=%s) for %s", variant.variant_id, slug, parent_product_id)
        return variant

    def get_variant(self, variant_id: str, include_inactive: bool = False) -> ProductVariant:
        queryset = ProductVariant.objects.using(self.using).filter(variant_id=variant_id)
        if not include_inactive:
            queryset = queryset.filter(is_active=True)
        variant = queryset.first()
        if variant is None:
            raise NotFoundError("Variant not found")
        return variant

    def list_variants(self, parent_product_id: str) -> List[ProductVariant]:
        if not self.product_exists(parent_product_id):
            raise NotFoundError("Parent product not found")
        return list(
            ProductVariant.objects.using(self.using)
            .filter(parent_product_id=parent_product_id, is_active=True)
            .order_by("created_at", "id")
        )

    @translate_storage_errors()
    def update_variant(self, variant_id: str, fields: Mapping[str, Any]) -> ProductVariant:
        """Apply a partial update. The slug never changes, even on rename."""

        accepted = self.pick_update_fields(fields, UPDATABLE_FIELDS, IMMUTABLE_FIELDS)

        changes = dict(accepted)
        for name in ("variant_name", "variant_type"):
            if name in changes:
                changes[name] = normalise_space(changes[name])
                if not changes[name]:
                    raise ValidationError(f"{name} cannot be empty.")
        for name in ("price", "quantity"):
            if name in changes and changes[name] is None:
                raise ValidationError(f"{name} cannot be empty.")
        _check_percent(changes.get("discount_percent"))

        with self.atomic():
            variant = ProductVariant.objects.using(self.using).select_for_update().filter(variant_id=variant_id).first()
            if variant is None:
                raise NotFoundError(f"No variant found with ID {variant_id}")

            if "price" in changes and "discount_percent" in changes:
                changes["discount_price"] = compute_discount_price(changes["price"], changes["discount_percent"])

            for name, value in changes.items():
                setattr(variant, name, value)
            variant.save(using=self.using, update_fields=[*changes, "updated_at"])

        self.logger.info("Updated variant %s fields=%s", variant_id, sorted(changes))
        return variant

    @translate_storage_errors()
    def delete_variant(self, variant_id: str) -> int:
        with self.atomic():
            variant = ProductVariant.objects.using(self.using).filter(variant_id=variant_id).first()
            if variant is None:
                raise NotFoundError(f"No variant found with ID {variant_id}")
            parent_id = variant.parent_product_id
            deleted, _ = ProductVariant.objects.using(self.using).filter(pk=variant.pk).delete()

            if not ProductVariant.objects.using(self.using).filter(parent_product_id=parent_id).exists():
                Product.objects.using(self.using).filter(product_id=parent_id).update(variant_state=False)

        self.logger.info("Deleted variant %s of %s", variant_id, parent_id)
        return deleted

    @translate_storage_errors("A variant group with this ID already exists")
    def create_group(
        self,
        parent_product_id: str,
        group_name: str,
        group_type: str,
        is_required: bool = True,
    ) -> ProductVariantGroup:
        group_name = normalise_space(group_name)
        group_type = normalise_space(group_type)
        if not parent_product_id or not group_name or not group_type:
            raise ValidationError("Parent product ID, group name and group type are required")
        if not self.product_exists(parent_product_id):
            raise NotFoundError("Parent product not found")

        group = ProductVariantGroup.objects.using(self.using).create(
            group_id=new_id("VGRP"),
            parent_product_id=parent_product_id,
            group_name=group_name,
            group_type=group_type,
            is_required=is_required,
        )
        self.logger.info("Created variant group %s for %s", group.group_id, parent_product_id)
        return group

    def list_groups(self, parent_product_id: str) -> List[ProductVariantGroup]:
        if not self.product_exists(parent_product_id):
            raise NotFoundError("Parent product not found")
        return list(
            ProductVariantGroup.objects.using(self.using)
            .filter(parent_product_id=parent_product_id)
            .order_by("created_at", "id")
        )

    def _slug_taken(self, slug: str) -> bool:
        return (
            ProductVariant.objects.using(self.using).filter(slug=slug).exists()
            or Product.objects.using(self.using).filter(slug=slug).exists()
        )
