from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from core.models import TimeStampedModel


class UserProfile(TimeStampedModel):
    uuid = models.CharField(max_length=64, unique=True)
    full_name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    avatar_url = models.URLField(max_length=1000, null=True, blank=True)
    phone = models.CharField(max_length=32, null=True, blank=True)
    address = models.CharField(max_length=500, null=True, blank=True)
    city = models.CharField(max_length=100, null=True, blank=True)
    state = models.CharField(max_length=100, null=True, blank=True)
    pincode = models.CharField(max_length=20, null=True, blank=True)
    bio = models.TextField(null=True, blank=True)

    class Meta(TimeStampedModel.Meta):
        db_table = "userProfiles"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.full_name} ({self.uuid})"


class VendorProfile(TimeStampedModel):
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        APPROVED = "approved", "Approved"
        SUSPENDED = "suspended", "Suspended"

    user = models.OneToOneField(
        UserProfile,
        to_field="uuid",
        db_column="user_uuid",
        on_delete=models.CASCADE,
        related_name="vendor_profile",
    )
    slug = models.CharField(max_length=255, unique=True)
    name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    contact_email = models.EmailField(max_length=255)
    contact_phone = models.CharField(max_length=32, null=True, blank=True)
    rating = models.DecimalField(max_digits=3, decimal_places=2, default=Decimal("0"))
    is_verified = models.BooleanField(default=False)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)

    class Meta(TimeStampedModel.Meta):
        db_table = "vendorProfiles"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.name


class Product(TimeStampedModel):
    product_id = models.CharField(max_length=64, unique=True)
    slug = models.CharField(max_length=255, unique=True)
    title = models.CharField(max_length=500)
    description = models.TextField()
    content_description = models.TextField(null=True, blank=True)
    content_shipping_delivery = models.TextField(null=True, blank=True)
    category = models.CharField(max_length=200, db_index=True)
    about_in_bullets = models.JSONField(default=list)
    image_gallery = models.JSONField(default=list, blank=True)

    price = models.DecimalField(max_digits=10, decimal_places=2)
    discount_percent = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True)
    discount_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)

    brand = models.CharField(max_length=200)
    vendor_id = models.CharField(max_length=64, db_index=True)

    rating = models.DecimalField(max_digits=3, decimal_places=2, default=Decimal("0"))
    review_count = models.PositiveIntegerField(default=0)
    quantity = models.PositiveIntegerField(default=0)

    featured = models.BooleanField(default=False)
    variant_state = models.BooleanField(default=False)

    class Meta(TimeStampedModel.Meta):
        db_table = "products"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["vendor_id", "rating"], name="products_vendor_rating_idx"),
            models.Index(fields=["featured", "category"], name="products_featured_cat_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.title} ({self.product_id})"


class ProductVariantGroup(TimeStampedModel):
    group_id = models.CharField(max_length=64, unique=True)
    parent_product = models.ForeignKey(
        Product,
        to_field="product_id",
        on_delete=models.CASCADE,
        related_name="variant_groups",
    )
    group_name = models.CharField(max_length=200)
    group_type = models.CharField(max_length=100)
    is_required = models.BooleanField(default=True)

    class Meta(TimeStampedModel.Meta):
        db_table = "productVariantGroups"
        ordering = ["created_at", "id"]


class ProductVariant(TimeStampedModel):
    variant_id = models.CharField(max_length=64, unique=True)
    parent_product = models.ForeignKey(
        Product,
        to_field="product_id",
        on_delete=models.CASCADE,
        related_name="variants",
    )
    slug = models.CharField(max_length=300, unique=True)
    variant_name = models.CharField(max_length=255)
    variant_type = models.CharField(max_length=100)

    price = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.PositiveIntegerField(default=0)
    discount_percent = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True)
    discount_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)

    image_gallery = models.JSONField(default=list, blank=True)
    description = models.TextField(null=True, blank=True)
    is_active = models.BooleanField(default=True)

    class Meta(TimeStampedModel.Meta):
        db_table = "productVariants"
        ordering = ["created_at", "id"]
        indexes = [models.Index(fields=["parent_product", "is_active"], name="variants_parent_active_idx")]

    def __str__(self) -> str:
        return f"{self.variant_name} ({self.slug})"


class ProductCombination(TimeStampedModel):
    combination_id = models.CharField(max_length=64, unique=True)
    parent_product = models.ForeignKey(
        Product,
        to_field="product_id",
        on_delete=models.CASCADE,
        related_name="combinations",
    )
    combination_name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    # Ordered list of {"product_id": str, "quantity": int}.
    child_products = models.JSONField(default=list)

    class Meta(TimeStampedModel.Meta):
        db_table = "productCombinations"
        ordering = ["created_at", "id"]

    def __str__(self) -> str:
        return self.combination_name


class ProductReview(TimeStampedModel):
    review_id = models.CharField(max_length=64, unique=True)
    product = models.ForeignKey(
        Product,
        to_field="product_id",
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    user = models.ForeignKey(
        UserProfile,
        to_field="uuid",
        db_column="user_uuid",
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    comments = models.TextField()
    rating = models.PositiveSmallIntegerField(
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
    )

    likes = models.PositiveIntegerField(default=0)
    dislikes = models.PositiveIntegerField(default=0)
    liked_by = models.JSONField(default=list)
    disliked_by = models.JSONField(default=list)
    replies = models.JSONField(default=list)

    class Meta(TimeStampedModel.Meta):
        db_table = "productReviews"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(fields=["product", "user"], name="unique_review_per_user_product"),
        ]
        indexes = [models.Index(fields=["product", "created_at"], name="reviews_product_created_idx")]

    def __str__(self) -> str:
        return f"Review {self.review_id} on {self.product_id}"
