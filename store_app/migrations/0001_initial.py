from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="UserProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("uuid", models.CharField(max_length=64, unique=True)),
                ("full_name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=255)),
                ("avatar_url", models.URLField(blank=True, max_length=1000, null=True)),
                ("phone", models.CharField(blank=True, max_length=32, null=True)),
                ("address", models.CharField(blank=True, max_length=500, null=True)),
                ("city", models.CharField(blank=True, max_length=100, null=True)),
                ("state", models.CharField(blank=True, max_length=100, null=True)),
                ("pincode", models.CharField(blank=True, max_length=20, null=True)),
                ("bio", models.TextField(blank=True, null=True)),
            ],
            options={
                "db_table": "userProfiles",
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("product_id", models.CharField(max_length=64, unique=True)),
                ("slug", models.CharField(max_length=255, unique=True)),
                ("title", models.CharField(max_length=500)),
                ("description", models.TextField()),
                ("content_description", models.TextField(blank=True, null=True)),
                ("content_shipping_delivery", models.TextField(blank=True, null=True)),
                ("category", models.CharField(db_index=True, max_length=200)),
                ("about_in_bullets", models.JSONField(default=list)),
                ("image_gallery", models.JSONField(blank=True, default=list)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("discount_percent", models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True)),
                ("discount_price", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("brand", models.CharField(max_length=200)),
                ("vendor_id", models.CharField(db_index=True, max_length=64)),
                ("rating", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=3)),
                ("review_count", models.PositiveIntegerField(default=0)),
                ("quantity", models.PositiveIntegerField(default=0)),
                ("featured", models.BooleanField(default=False)),
                ("variant_state", models.BooleanField(default=False)),
            ],
            options={
                "db_table": "products",
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [
                    models.Index(fields=["vendor_id", "rating"], name="products_vendor_rating_idx"),
                    models.Index(fields=["featured", "category"], name="products_featured_cat_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="VendorProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("slug", models.CharField(max_length=255, unique=True)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                ("contact_email", models.EmailField(max_length=255)),
                ("contact_phone", models.CharField(blank=True, max_length=32, null=True)),
                ("rating", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=3)),
                ("is_verified", models.BooleanField(default=False)),
                (
                    "status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("approved", "Approved"), ("suspended", "Suspended")],
                        default="pending",
                        max_length=20,
                    ),
                ),
                (
                    "user",
                    models.OneToOneField(
                        db_column="user_uuid",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="vendor_profile",
                        to="store_app.userprofile",
                        to_field="uuid",
                    ),
                ),
            ],
            options={
                "db_table": "vendorProfiles",
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="ProductVariantGroup",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("group_id", models.CharField(max_length=64, unique=True)),
                ("group_name", models.CharField(max_length=200)),
                ("group_type", models.CharField(max_length=100)),
                ("is_required", models.BooleanField(default=True)),
                (
                    "parent_product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="variant_groups",
                        to="store_app.product",
                        to_field="product_id",
                    ),
                ),
            ],
            options={
                "db_table": "productVariantGroups",
                "ordering": ["created_at", "id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="ProductVariant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("variant_id", models.CharField(max_length=64, unique=True)),
                ("slug", models.CharField(max_length=300, unique=True)),
                ("variant_name", models.CharField(max_length=255)),
                ("variant_type", models.CharField(max_length=100)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("quantity", models.PositiveIntegerField(default=0)),
                ("discount_percent", models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True)),
                ("discount_price", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("image_gallery", models.JSONField(blank=True, default=list)),
                ("description", models.TextField(blank=True, null=True)),
                ("is_active", models.BooleanField(default=True)),
                (
                    "parent_product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="variants",
                        to="store_app.product",
                        to_field="product_id",
                    ),
                ),
            ],
            options={
                "db_table": "productVariants",
                "ordering": ["created_at", "id"],
                "abstract": False,
                "indexes": [
                    models.Index(fields=["parent_product", "is_active"], name="variants_parent_active_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ProductCombination",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("combination_id", models.CharField(max_length=64, unique=True)),
                ("combination_name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                ("child_products", models.JSONField(default=list)),
                (
                    "parent_product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="combinations",
                        to="store_app.product",
                        to_field="product_id",
                    ),
                ),
            ],
            options={
                "db_table": "productCombinations",
                "ordering": ["created_at", "id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="ProductReview",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("review_id", models.CharField(max_length=64, unique=True)),
                ("comments", models.TextField()),
                (
                    "rating",
                    models.PositiveSmallIntegerField(
                        default=0,
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(5),
                        ],
                    ),
                ),
                ("likes", models.PositiveIntegerField(default=0)),
                ("dislikes", models.PositiveIntegerField(default=0)),
                ("liked_by", models.JSONField(default=list)),
                ("disliked_by", models.JSONField(default=list)),
                ("replies", models.JSONField(default=list)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="reviews",
                        to="store_app.product",
                        to_field="product_id",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        db_column="user_uuid",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="reviews",
                        to="store_app.userprofile",
                        to_field="uuid",
                    ),
                ),
            ],
            options={
                "db_table": "productReviews",
                "ordering": ["-created_at", "-id"],
                "abstract": False,
                "indexes": [
                    models.Index(fields=["product", "created_at"], name="reviews_product_created_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("product", "user"), name="unique_review_per_user_product"),
                ],
            },
        ),
    ]
