from decimal import Decimal

from rest_framework import serializers

from core.enums import ReviewSortOrder
from core.serializers import BaseModelSerializer, StrictFieldsMixin

from .models import (
    Product,
    ProductCombination,
    ProductReview,
    ProductVariant,
    ProductVariantGroup,
    UserProfile,
    VendorProfile,
)


class ProductSerializer(BaseModelSerializer):
    class Meta(BaseModelSerializer.Meta):
        model = Product
        fields = [
            "id",
            "product_id",
            "slug",
            "title",
            "description",
            "content_description",
            "content_shipping_delivery",
            "category",
            "about_in_bullets",
            "image_gallery",
            "price",
            "discount_percent",
            "discount_price",
            "brand",
            "vendor_id",
            "rating",
            "review_count",
            "quantity",
            "featured",
            "variant_state",
            "created_at",
            "updated_at",
        ]


class ProductVariantSerializer(BaseModelSerializer):
    parent_product_id = serializers.CharField(read_only=True)

    class Meta(BaseModelSerializer.Meta):
        model = ProductVariant
        fields = [
            "id",
            "variant_id",
            "parent_product_id",
            "slug",
            "variant_name",
            "variant_type",
            "price",
            "quantity",
            "discount_percent",
            "discount_price",
            "image_gallery",
            "description",
            "is_active",
            "created_at",
            "updated_at",
        ]


class ProductVariantGroupSerializer(BaseModelSerializer):
    parent_product_id = serializers.CharField(read_only=True)

    class Meta(BaseModelSerializer.Meta):
        model = ProductVariantGroup
        fields = ["id", "group_id", "parent_product_id", "group_name", "group_type", "is_required", "created_at"]


class ProductCombinationSerializer(BaseModelSerializer):
    parent_product_id = serializers.CharField(read_only=True)

    class Meta(BaseModelSerializer.Meta):
        model = ProductCombination
        fields = [
            "id",
            "combination_id",
            "parent_product_id",
            "combination_name",
            "description",
            "child_products",
            "created_at",
            "updated_at",
        ]


class ProductReviewSerializer(BaseModelSerializer):
    product_id = serializers.CharField(read_only=True)
    user_uuid = serializers.CharField(source="user_id", read_only=True)

    class Meta(BaseModelSerializer.Meta):
        model = ProductReview
        fields = [
            "id",
            "review_id",
            "product_id",
            "user_uuid",
            "comments",
            "rating",
            "likes",
            "dislikes",
            "liked_by",
            "disliked_by",
            "replies",
            "created_at",
            "updated_at",
        ]


class UserProfileSerializer(BaseModelSerializer):
    class Meta(BaseModelSerializer.Meta):
        model = UserProfile
        fields = [
            "id",
            "uuid",
            "full_name",
            "email",
            "avatar_url",
            "phone",
            "address",
            "city",
            "state",
            "pincode",
            "bio",
            "created_at",
            "updated_at",
        ]


class VendorProfileSerializer(BaseModelSerializer):
    user_uuid = serializers.CharField(source="user_id", read_only=True)

    class Meta(BaseModelSerializer.Meta):
        model = VendorProfile
        fields = [
            "id",
            "user_uuid",
            "slug",
            "name",
            "description",
            "contact_email",
            "contact_phone",
            "rating",
            "is_verified",
            "status",
            "created_at",
            "updated_at",
        ]


def product_with_variants(resolution) -> dict:
    """Render a slug lookup: the product, its active variants and the requested variant."""

    data = ProductSerializer(resolution.product).data
    data["variants"] = ProductVariantSerializer(resolution.variants, many=True).data
    data["has_variants"] = resolution.has_variants
    if resolution.selected_variant is not None:
        data["selected_variant"] = ProductVariantSerializer(resolution.selected_variant).data
        data["current_variant_slug"] = resolution.current_variant_slug
    return data


# Request bodies. Views validate every write with one of these and hand
# ``validated_data`` to the services, so services only see typed values.

PERCENT_BOUNDS = {"min_value": Decimal("0"), "max_value": Decimal("100")}
RATING_BOUNDS = {"min_value": Decimal("0"), "max_value": Decimal("5")}
NON_NEGATIVE = {"min_value": 0}


class ProductWriteSerializer(StrictFieldsMixin, BaseModelSerializer):
    about_in_bullets = serializers.ListField(child=serializers.CharField(), allow_empty=False)
    image_gallery = serializers.ListField(child=serializers.CharField(), required=False)

    class Meta(BaseModelSerializer.Meta):
        model = Product
        fields = [
            "product_id",
            "slug",
            "title",
            "category",
            "description",
            "about_in_bullets",
            "price",
            "brand",
            "vendor_id",
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
        ]
        # Duplicate ids and slugs are conflicts raised by the service.
        extra_kwargs = {
            **getattr(BaseModelSerializer.Meta, "extra_kwargs", {}),
            "product_id": {"validators": []},
            "slug": {"validators": []},
            "price": {"min_value": Decimal("0")},
            "discount_percent": PERCENT_BOUNDS,
            "discount_price": {"min_value": Decimal("0")},
            "rating": RATING_BOUNDS,
            "review_count": NON_NEGATIVE,
            "quantity": NON_NEGATIVE,
        }


class ProductUpdateSerializer(ProductWriteSerializer):
    frozen_fields = ("product_id",)


class ChildProductRequestSerializer(serializers.Serializer):
    product_id = serializers.CharField()
    quantity = serializers.IntegerField(min_value=1)


class VariantCreateRequestSerializer(StrictFieldsMixin, serializers.Serializer):
    parent_product_id = serializers.CharField()
    variant_name = serializers.CharField()
    variant_type = serializers.CharField(help_text="Variant axis, e.g. size or colour.")
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    quantity = serializers.IntegerField(min_value=0)
    discount_percent = serializers.DecimalField(
        max_digits=5, decimal_places=2, required=False, allow_null=True, **PERCENT_BOUNDS
    )
    image_gallery = serializers.ListField(child=serializers.CharField(), required=False)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    is_active = serializers.BooleanField(required=False, default=True)


class VariantUpdateRequestSerializer(StrictFieldsMixin, serializers.Serializer):
    frozen_fields = ("variant_id", "parent_product_id", "slug")

    variant_id = serializers.CharField(required=False)
    parent_product_id = serializers.CharField(required=False)
    slug = serializers.CharField(required=False)
    variant_name = serializers.CharField(required=False)
    variant_type = serializers.CharField(required=False)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"), required=False)
    quantity = serializers.IntegerField(min_value=0, required=False)
    discount_percent = serializers.DecimalField(
        max_digits=5, decimal_places=2, required=False, allow_null=True, **PERCENT_BOUNDS
    )
    discount_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), required=False, allow_null=True
    )
    image_gallery = serializers.ListField(child=serializers.CharField(), required=False)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    is_active = serializers.BooleanField(required=False)


class VariantGroupCreateRequestSerializer(StrictFieldsMixin, serializers.Serializer):
    parent_product_id = serializers.CharField()
    group_name = serializers.CharField()
    group_type = serializers.CharField()
    is_required = serializers.BooleanField(required=False, default=True)


class CombinationCreateRequestSerializer(StrictFieldsMixin, serializers.Serializer):
    parent_product_id = serializers.CharField()
    combination_name = serializers.CharField()
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    child_products = ChildProductRequestSerializer(many=True, allow_empty=False)


class CombinationUpdateRequestSerializer(StrictFieldsMixin, serializers.Serializer):
    frozen_fields = ("combination_id",)

    combination_id = serializers.CharField(required=False)
    parent_product_id = serializers.CharField(required=False)
    combination_name = serializers.CharField(required=False)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    child_products = ChildProductRequestSerializer(many=True, allow_empty=False, required=False)


class CombinationBulkCreateRequestSerializer(serializers.Serializer):
    combinations = CombinationCreateRequestSerializer(many=True, allow_empty=False)


class ReplyEntrySerializer(serializers.Serializer):
    user_uuid = serializers.CharField()
    comment = serializers.CharField()
    created_at = serializers.CharField()


class ReviewCreateRequestSerializer(StrictFieldsMixin, serializers.Serializer):
    product_id = serializers.CharField()
    user_uuid = serializers.CharField()
    comments = serializers.CharField(help_text="At least 10 characters.")
    rating = serializers.IntegerField(required=False, default=0, help_text="0 to 5, 0 means unrated.")
    replies = ReplyEntrySerializer(many=True, required=False)


class ReviewUpdateRequestSerializer(StrictFieldsMixin, serializers.Serializer):
    comments = serializers.CharField(required=False)
    rating = serializers.IntegerField(required=False)


class ReactionRequestSerializer(serializers.Serializer):
    user_uuid = serializers.CharField()


class ReplyRequestSerializer(serializers.Serializer):
    user_uuid = serializers.CharField()
    comment = serializers.CharField(help_text="At least 5 characters.")


class ReviewBulkDeleteRequestSerializer(serializers.Serializer):
    review_ids = serializers.ListField(child=serializers.CharField(), allow_empty=False)


class ReviewListQuerySerializer(serializers.Serializer):
    sortBy = serializers.ChoiceField(
        choices=[order.value for order in ReviewSortOrder],
        required=False,
        default=ReviewSortOrder.NEWEST.value,
    )
    page = serializers.IntegerField(min_value=1, required=False, default=1)
    limit = serializers.IntegerField(min_value=1, required=False, default=10, help_text="Capped at 50.")


class RecentReviewsQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(required=False, default=10, help_text="Between 1 and 100.")
    offset = serializers.IntegerField(required=False, default=0)


class MinDiscountQuerySerializer(serializers.Serializer):
    discount = serializers.DecimalField(max_digits=5, decimal_places=2, help_text="Minimum discount percent.")


class PriceRangeQuerySerializer(serializers.Serializer):
    min_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    max_price = serializers.DecimalField(max_digits=10, decimal_places=2, required=False, allow_null=True)


USER_WRITE_FIELDS = ["uuid", "full_name", "email", "avatar_url", "phone", "address", "city", "state", "pincode", "bio"]


class UserProfileWriteSerializer(StrictFieldsMixin, BaseModelSerializer):
    class Meta(BaseModelSerializer.Meta):
        model = UserProfile
        fields = USER_WRITE_FIELDS
        extra_kwargs = {"uuid": {"validators": []}}


class UserProfileUpdateSerializer(UserProfileWriteSerializer):
    frozen_fields = ("uuid",)


class VendorRegisterRequestSerializer(StrictFieldsMixin, BaseModelSerializer):
    user_uuid = serializers.CharField()

    class Meta(BaseModelSerializer.Meta):
        model = VendorProfile
        fields = [
            "user_uuid",
            "slug",
            "name",
            "description",
            "contact_email",
            "contact_phone",
            "rating",
            "is_verified",
            "status",
        ]
        extra_kwargs = {
            "slug": {"required": False, "validators": [], "help_text": "Derived from the name when omitted."},
            "rating": RATING_BOUNDS,
        }


class VendorUpdateRequestSerializer(VendorRegisterRequestSerializer):
    frozen_fields = ("slug", "user_uuid")
