from decimal import Decimal

import pytest
from django.db import DatabaseError
from django.urls import reverse

from core.exceptions import InternalError
from store_app.models import Product, ProductCombination, ProductReview, ProductVariant, UserProfile, VendorProfile
from store_app.services.products import ProductService
from store_app.services.variants import VariantService

COMMENT = "Comfortable and sturdy, fits well."


@pytest.mark.django_db
def test_products_list_empty(api_client):
    resp = api_client.get(reverse("product-list"))

    assert resp.status_code == 200
    assert resp.data["success"] is True
    assert resp.data["data"] == []
    assert resp.data["pagination"]["count"] == 0


@pytest.mark.django_db
def test_product_create_and_retrieve(api_client, product_payload):
    create_resp = api_client.post(reverse("product-create"), data=product_payload, format="json")

    assert create_resp.status_code == 201
    assert create_resp.data["success"] is True
    assert create_resp.data["message"] == "Product created successfully"
    assert create_resp.data["data"]["product_id"] == "PROD-RUNNER1"
    assert "id" not in create_resp.data["data"]

    detail_resp = api_client.get(reverse("product-detail", kwargs={"product_id": "PROD-RUNNER1"}))
    assert detail_resp.status_code == 200
    assert detail_resp.data["data"]["slug"] == "trail-runner"
    assert detail_resp.data["data"]["rating"] == 0


@pytest.mark.django_db
def test_product_create_missing_fields(api_client, product_payload):
    product_payload.pop("price")

    resp = api_client.post(reverse("product-create"), data=product_payload, format="json")

    assert resp.status_code == 400
    assert resp.data["success"] is False
    assert resp.data["message"] == "Please provide all required fields"
    assert "price" in resp.data["errors"]


@pytest.mark.django_db
def test_product_create_duplicate_is_conflict(api_client, product_payload):
    api_client.post(reverse("product-create"), data=product_payload, format="json")

    resp = api_client.post(reverse("product-create"), data=product_payload, format="json")

    assert resp.status_code == 409
    assert resp.data["success"] is False


@pytest.mark.django_db
def test_product_create_rejects_non_object_body(api_client):
    resp = api_client.post(reverse("product-create"), data=["not", "an", "object"], format="json")

    assert resp.status_code == 400
    assert resp.data["message"] == "Request body must be a JSON object"


@pytest.mark.django_db
def test_products_list_with_pagination_and_filters(api_client, product_factory):
    for price in ["10", "20", "30"]:
        product_factory(price=Decimal(price), category="shoes")
    product_factory(price=Decimal("40"), category="hats")

    resp = api_client.get(reverse("product-list"), data={"page_size": 2, "ordering": "price"})
    assert resp.status_code == 200
    assert resp.data["pagination"]["count"] == 4
    assert resp.data["pagination"]["total_pages"] == 2
    assert [item["price"] for item in resp.data["data"]] == [Decimal("10.00"), Decimal("20.00")]

    filtered = api_client.get(reverse("product-list"), data={"category": "hats"})
    assert filtered.data["pagination"]["count"] == 1


@pytest.mark.django_db
def test_product_update_and_delete(api_client, product_factory):
    product = product_factory()

    update_resp = api_client.patch(
        reverse("product-update", kwargs={"product_id": product.product_id}),
        data={"price": "200", "discount_percent": "25"},
        format="json",
    )
    assert update_resp.status_code == 200
    assert update_resp.data["data"]["discount_price"] == Decimal("150.00")

    empty_resp = api_client.patch(
        reverse("product-update", kwargs={"product_id": product.product_id}), data={}, format="json"
    )
    assert empty_resp.status_code == 400

    delete_resp = api_client.delete(reverse("product-delete", kwargs={"product_id": product.product_id}))
    assert delete_resp.status_code == 200
    assert delete_resp.data["deleted_count"] == 1

    missing_resp = api_client.delete(reverse("product-delete", kwargs={"product_id": product.product_id}))
    assert missing_resp.status_code == 404


@pytest.mark.django_db
def test_product_catalogue_queries(api_client, product_factory):
    for percent in [25, 30, 15, 50, 22]:
        product_factory(discount_percent=Decimal(percent), vendor_id="VEN-7", featured=True)

    discount_resp = api_client.get(reverse("product-min-discount"), data={"discount": 20})
    assert discount_resp.status_code == 200
    assert discount_resp.data["count"] == 4
    assert discount_resp.data["data"][0]["discount_percent"] == Decimal("50.00")

    assert api_client.get(reverse("product-min-discount"), data={"discount": 90}).status_code == 404
    assert api_client.get(reverse("product-featured")).data["count"] == 5
    assert api_client.get(reverse("product-by-vendor", kwargs={"vendor_id": "VEN-7"})).status_code == 200
    assert api_client.get(reverse("product-by-category", kwargs={"category": "hats"})).status_code == 404
    assert api_client.get(reverse("product-price-range"), data={"min_price": 50}).status_code == 200
    assert api_client.get(reverse("product-price-range"), data={"min_price": 50, "max_price": 10}).status_code == 400


@pytest.mark.django_db
def test_product_by_variant_slug(api_client, product_factory):
    product = product_factory(slug="trail-runner")
    create_resp = api_client.post(
        reverse("variant-create"),
        data={
            "parent_product_id": product.product_id,
            "variant_name": "Large",
            "variant_type": "size",
            "price": 120,
            "quantity": 5,
            "discount_percent": 10,
        },
        format="json",
    )

    assert create_resp.status_code == 201
    assert create_resp.data["data"]["discount_price"] == Decimal("108.00")
    assert create_resp.data["data"]["slug"] == "trail-runner-large"

    resp = api_client.get(reverse("product-by-slug", kwargs={"slug": "trail-runner-large"}))
    assert resp.status_code == 200
    assert resp.data["data"]["product_id"] == product.product_id
    assert resp.data["data"]["has_variants"] is True
    assert resp.data["data"]["current_variant_slug"] == "trail-runner-large"
    assert [item["slug"] for item in resp.data["data"]["variants"]] == ["trail-runner-large"]


@pytest.mark.django_db
def test_variant_endpoints(api_client, product_factory):
    product = product_factory()

    missing_resp = api_client.post(reverse("variant-create"), data={"variant_name": "Large"}, format="json")
    assert missing_resp.status_code == 400

    create_resp = api_client.post(
        reverse("variant-create"),
        data={
            "parent_product_id": product.product_id,
            "variant_name": "Blue",
            "variant_type": "colour",
            "price": "30",
            "quantity": 2,
        },
        format="json",
    )
    variant_id = create_resp.data["data"]["variant_id"]

    list_resp = api_client.get(reverse("variant-list", kwargs={"product_id": product.product_id}))
    assert list_resp.data["count"] == 1

    patch_resp = api_client.patch(
        reverse("variant-detail", kwargs={"variant_id": variant_id}), data={"quantity": 9}, format="json"
    )
    assert patch_resp.data["data"]["quantity"] == 9

    delete_resp = api_client.delete(reverse("variant-detail", kwargs={"variant_id": variant_id}))
    assert delete_resp.data["deleted_count"] == 1
    assert api_client.get(reverse("variant-detail", kwargs={"variant_id": variant_id})).status_code == 404


@pytest.mark.django_db
def test_combination_endpoints(api_client, product_factory):
    parent, first, second = product_factory(), product_factory(), product_factory()
    entries = [
        {
            "parent_product_id": parent.product_id,
            "combination_name": f"Kit {index}",
            "child_products": [{"product_id": child.product_id, "quantity": 1}],
        }
        for index, child in enumerate([first, second])
    ]

    bulk_resp = api_client.post(reverse("combination-bulk-create"), data={"combinations": entries}, format="json")
    assert bulk_resp.status_code == 201
    assert bulk_resp.data["count"] == 2

    create_resp = api_client.post(
        reverse("combination-create"),
        data={
            "parent_product_id": parent.product_id,
            "combination_name": "Broken",
            "child_products": [{"product_id": "PROD-GHOST", "quantity": 1}],
        },
        format="json",
    )
    assert create_resp.status_code == 404
    assert create_resp.data["message"] == "Child products not found: PROD-GHOST"

    containing = api_client.get(reverse("combination-containing", kwargs={"product_id": first.product_id}))
    assert containing.data["count"] == 1

    delete_resp = api_client.delete(reverse("combination-by-parent", kwargs={"product_id": parent.product_id}))
    assert delete_resp.data["deleted_count"] == 2
    assert api_client.get(reverse("combination-list")).data["count"] == 0


@pytest.mark.django_db
def test_review_reactions(api_client, product_factory, user_factory):
    product = product_factory()
    author, reader = user_factory(), user_factory()

    create_resp = api_client.post(
        reverse("review-create"),
        data={"product_id": product.product_id, "user_uuid": author.uuid, "comments": COMMENT, "rating": 4},
        format="json",
    )
    assert create_resp.status_code == 201
    review_id = create_resp.data["data"]["review_id"]
    assert create_resp.data["data"]["user_uuid"] == author.uuid

    duplicate_resp = api_client.post(
        reverse("review-create"),
        data={"product_id": product.product_id, "user_uuid": author.uuid, "comments": COMMENT},
        format="json",
    )
    assert duplicate_resp.status_code == 409

    like_url = reverse("review-like", kwargs={"review_id": review_id})
    assert api_client.post(like_url, data={"user_uuid": reader.uuid}, format="json").status_code == 200
    assert api_client.post(like_url, data={"user_uuid": reader.uuid}, format="json").status_code == 409

    dislike_resp = api_client.post(
        reverse("review-dislike", kwargs={"review_id": review_id}), data={"user_uuid": reader.uuid}, format="json"
    )
    assert dislike_resp.data["message"] == "Review disliked successfully!"
    assert dislike_resp.data["data"]["likes"] == 0
    assert dislike_resp.data["data"]["disliked_by"] == [reader.uuid]

    remove_url = reverse("review-remove-reaction", kwargs={"review_id": review_id})
    assert api_client.post(remove_url, data={"user_uuid": reader.uuid}, format="json").status_code == 200
    assert api_client.post(remove_url, data={"user_uuid": reader.uuid}, format="json").status_code == 400


@pytest.mark.django_db
def test_review_listing_and_stats(api_client, product_factory, user_factory):
    product = product_factory()
    for _ in range(3):
        api_client.post(
            reverse("review-create"),
            data={"product_id": product.product_id, "user_uuid": user_factory().uuid, "comments": COMMENT},
            format="json",
        )

    list_resp = api_client.get(
        reverse("review-by-product", kwargs={"product_id": product.product_id}),
        data={"sortBy": "oldest", "page": 1, "limit": 2},
    )
    assert list_resp.status_code == 200
    assert list_resp.data["pagination"] == {"page": 1, "limit": 2, "count": 2, "total": 3}

    stats_resp = api_client.get(reverse("review-stats", kwargs={"product_id": product.product_id}))
    assert stats_resp.data["data"]["total_reviews"] == 3

    recent_resp = api_client.get(reverse("review-recent"), data={"limit": 500})
    assert recent_resp.status_code == 400


@pytest.mark.django_db
def test_review_bulk_delete_and_unknown_review(api_client):
    assert api_client.get(reverse("review-detail", kwargs={"review_id": "REV-MISSING"})).status_code == 404

    resp = api_client.post(reverse("review-bulk-delete"), data={"review_ids": ["REV-MISSING"]}, format="json")

    assert resp.status_code == 404
    assert resp.data["message"] == "Reviews not found: REV-MISSING"


@pytest.mark.django_db
def test_profile_endpoints(api_client):
    create_resp = api_client.post(
        reverse("user-create"),
        data={"uuid": "u-100", "full_name": "Grace Hopper", "email": "grace@example.com"},
        format="json",
    )
    assert create_resp.status_code == 201

    vendor_resp = api_client.post(
        reverse("vendor-register"),
        data={"user_uuid": "u-100", "name": "Hopper Gear", "contact_email": "gear@example.com"},
        format="json",
    )
    assert vendor_resp.status_code == 201
    assert vendor_resp.data["data"]["slug"] == "hopper-gear"

    assert api_client.get(reverse("user-detail", kwargs={"uuid": "u-100"})).status_code == 200
    assert api_client.get(reverse("vendor-detail", kwargs={"slug": "hopper-gear"})).status_code == 200
    assert api_client.delete(reverse("vendor-delete", kwargs={"slug": "hopper-gear"})).status_code == 200
    assert api_client.get(reverse("vendor-detail", kwargs={"slug": "hopper-gear"})).status_code == 404


@pytest.mark.django_db
def test_storage_failure_is_hidden_behind_500(api_client, mocker):
    mocker.patch.object(ProductService, "get_product", side_effect=DatabaseError("connection reset"))

    resp = api_client.get(reverse("product-detail", kwargs={"product_id": "PROD-1"}))

    assert resp.status_code == 500
    assert resp.data == {"success": False, "message": InternalError.default_message}


@pytest.mark.django_db
def test_constraint_race_becomes_conflict(api_client, product_factory, mocker):
    product = product_factory()
    mocker.patch.object(ProductService, "_slug_taken", return_value=False)

    resp = api_client.patch(
        reverse("product-update", kwargs={"product_id": product_factory().product_id}),
        data={"slug": product.slug},
        format="json",
    )

    assert resp.status_code == 409
    assert resp.data["success"] is False


@pytest.mark.django_db
@pytest.mark.parametrize("request_format", ["json", "multipart"])
def test_product_update_parses_false_strings(api_client, product_factory, request_format):
    product = product_factory(featured=True, variant_state=True)

    resp = api_client.patch(
        reverse("product-update", kwargs={"product_id": product.product_id}),
        data={"featured": "false", "variant_state": "0"},
        format=request_format,
    )

    assert resp.status_code == 200
    assert resp.data["data"]["featured"] is False
    assert resp.data["data"]["variant_state"] is False
    product.refresh_from_db()
    assert product.featured is False
    assert product.variant_state is False


@pytest.mark.django_db
@pytest.mark.parametrize("request_format", ["json", "multipart"])
def test_variant_update_false_string_hides_variant(api_client, product_factory, request_format):
    parent = product_factory()
    variant = VariantService().create_variant(parent.product_id, "Large", "size", Decimal("20"), 1)

    resp = api_client.patch(
        reverse("variant-detail", kwargs={"variant_id": variant.variant_id}),
        data={"is_active": "false"},
        format=request_format,
    )

    assert resp.status_code == 200
    assert resp.data["data"]["is_active"] is False
    assert ProductVariant.objects.get(pk=variant.pk).is_active is False
    assert api_client.get(reverse("variant-list", kwargs={"product_id": parent.product_id})).data["count"] == 0


@pytest.mark.django_db
def test_product_update_rejects_non_boolean(api_client, product_factory):
    product = product_factory(featured=True)

    resp = api_client.patch(
        reverse("product-update", kwargs={"product_id": product.product_id}),
        data={"featured": "sometimes"},
        format="json",
    )

    assert resp.status_code == 400
    assert "featured" in resp.data["errors"]
    assert Product.objects.get(pk=product.pk).featured is True


@pytest.mark.django_db
@pytest.mark.parametrize("price", ["1e12", "12345678901", "-5", "ten", "NaN"])
def test_variant_create_rejects_price_outside_column(api_client, product_factory, price):
    parent = product_factory()

    resp = api_client.post(
        reverse("variant-create"),
        data={
            "parent_product_id": parent.product_id,
            "variant_name": "Large",
            "variant_type": "size",
            "price": price,
            "quantity": 1,
        },
        format="json",
    )

    assert resp.status_code == 400
    assert resp.data["message"] == "Invalid input."
    assert "price" in resp.data["errors"]
    assert ProductVariant.objects.count() == 0


@pytest.mark.django_db
@pytest.mark.parametrize("discount_percent", ["1000", "100.01", "-1"])
def test_product_create_rejects_discount_outside_range(api_client, product_payload, discount_percent):
    resp = api_client.post(
        reverse("product-create"),
        data={**product_payload, "discount_percent": discount_percent},
        format="json",
    )

    assert resp.status_code == 400
    assert "discount_percent" in resp.data["errors"]
    assert Product.objects.count() == 0


@pytest.mark.django_db
def test_product_update_rejects_rating_outside_column(api_client, product_factory):
    product = product_factory()

    resp = api_client.patch(
        reverse("product-update", kwargs={"product_id": product.product_id}),
        data={"rating": "12.5"},
        format="json",
    )

    assert resp.status_code == 400
    assert "rating" in resp.data["errors"]


@pytest.mark.django_db
def test_product_update_rejects_unknown_and_frozen_fields(api_client, product_factory):
    product = product_factory()
    url = reverse("product-update", kwargs={"product_id": product.product_id})

    unknown_resp = api_client.patch(url, data={"title": "New", "colour": "red"}, format="json")
    frozen_resp = api_client.patch(url, data={"product_id": "PROD-NEW"}, format="json")

    assert unknown_resp.status_code == 400
    assert unknown_resp.data["errors"] == {"colour": ["Unknown field."]}
    assert frozen_resp.status_code == 400
    assert frozen_resp.data["errors"] == {"product_id": ["This field cannot be updated."]}
    assert Product.objects.get(pk=product.pk).title == product.title


@pytest.mark.django_db
def test_user_create_rejects_invalid_email(api_client):
    resp = api_client.post(
        reverse("user-create"),
        data={"uuid": "u-1", "full_name": "Ada Lovelace", "email": "not-an-email"},
        format="json",
    )

    assert resp.status_code == 400
    assert resp.data["message"] == "Invalid input."
    assert "email" in resp.data["errors"]
    assert UserProfile.objects.count() == 0


@pytest.mark.django_db
def test_user_create_and_update_messages(api_client, user_factory):
    missing_resp = api_client.post(reverse("user-create"), data={"uuid": "u-2", "full_name": "No Email"}, format="json")
    user = user_factory()
    update_resp = api_client.patch(
        reverse("user-update", kwargs={"uuid": user.uuid}), data={"email": "still-not-an-email"}, format="json"
    )

    assert missing_resp.status_code == 400
    assert missing_resp.data["message"] == "Required fields: uuid, full_name, email"
    assert update_resp.status_code == 400
    assert "email" in update_resp.data["errors"]


@pytest.mark.django_db
@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"contact_email": "nope"}, "contact_email"),
        ({"rating": "7"}, "rating"),
        ({"rating": "4.567"}, "rating"),
        ({"status": "closed"}, "status"),
        ({"is_verified": "maybe"}, "is_verified"),
    ],
)
def test_vendor_register_rejects_invalid_fields(api_client, user_factory, overrides, field):
    user = user_factory()

    resp = api_client.post(
        reverse("vendor-register"),
        data={"user_uuid": user.uuid, "name": "Acme", "contact_email": "shop@acme.test", **overrides},
        format="json",
    )

    assert resp.status_code == 400
    assert field in resp.data["errors"]
    assert VendorProfile.objects.count() == 0


@pytest.mark.django_db
def test_vendor_update_parses_form_boolean(api_client, user_factory):
    user = user_factory()
    api_client.post(
        reverse("vendor-register"),
        data={"user_uuid": user.uuid, "name": "Acme", "contact_email": "shop@acme.test", "is_verified": True},
        format="json",
    )

    resp = api_client.patch(
        reverse("vendor-update", kwargs={"slug": "acme"}),
        data={"is_verified": "false", "rating": "4.5"},
        format="multipart",
    )

    assert resp.status_code == 200
    vendor = VendorProfile.objects.get(slug="acme")
    assert vendor.is_verified is False
    assert vendor.rating == Decimal("4.50")


@pytest.mark.django_db
@pytest.mark.parametrize("paging", [{"page": 0}, {"limit": 0}, {"page": -2}, {"limit": "many"}])
def test_review_listing_rejects_non_positive_paging(api_client, product_factory, paging):
    product = product_factory()

    resp = api_client.get(reverse("review-by-product", kwargs={"product_id": product.product_id}), data=paging)

    assert resp.status_code == 400
    assert resp.data["success"] is False


@pytest.mark.django_db
@pytest.mark.parametrize(
    "children",
    [
        [{"product_id": "PROD-1", "quantity": 0}],
        [{"product_id": "PROD-1", "quantity": True}],
        [{"product_id": "PROD-1", "quantity": 1.5}],
        [{"product_id": "", "quantity": 1}],
        [{"quantity": 1}],
        ["PROD-1"],
        "PROD-1",
    ],
)
def test_combination_create_rejects_malformed_children(api_client, product_factory, children):
    parent = product_factory()

    resp = api_client.post(
        reverse("combination-create"),
        data={"parent_product_id": parent.product_id, "combination_name": "Kit", "child_products": children},
        format="json",
    )

    assert resp.status_code == 400
    assert "child_products" in resp.data["errors"]
    assert ProductCombination.objects.count() == 0


@pytest.mark.django_db
def test_combination_create_without_children_uses_required_message(api_client, product_factory):
    parent = product_factory()

    resp = api_client.post(
        reverse("combination-create"),
        data={"parent_product_id": parent.product_id, "combination_name": "Kit", "child_products": []},
        format="json",
    )

    assert resp.status_code == 400
    assert resp.data["message"] == "Parent product ID, combination name, and child products are required"


@pytest.mark.django_db
def test_review_create_rejects_malformed_replies_and_rating(api_client, product_factory, user_factory):
    product = product_factory()
    user = user_factory()
    base = {"product_id": product.product_id, "user_uuid": user.uuid, "comments": COMMENT}

    replies_resp = api_client.post(
        reverse("review-create"), data={**base, "replies": [{"user_uuid": "u", "comment": "hi"}]}, format="json"
    )
    rating_resp = api_client.post(reverse("review-create"), data={**base, "rating": "four"}, format="json")
    range_resp = api_client.post(reverse("review-create"), data={**base, "rating": 9}, format="json")

    assert replies_resp.status_code == 400
    assert "replies" in replies_resp.data["errors"]
    assert rating_resp.status_code == 400
    assert range_resp.status_code == 400
    assert range_resp.data["message"] == "Rating must be an integer between 0 and 5"
    assert ProductReview.objects.count() == 0


@pytest.mark.django_db
def test_catalogue_queries_reject_non_numeric_parameters(api_client):
    missing_resp = api_client.get(reverse("product-min-discount"))
    discount_resp = api_client.get(reverse("product-min-discount"), data={"discount": "lots"})
    price_resp = api_client.get(reverse("product-price-range"), data={"min_price": "cheap"})
    recent_resp = api_client.get(reverse("review-recent"), data={"offset": "x"})

    assert missing_resp.status_code == 400
    assert missing_resp.data["message"] == "discount is required"
    assert discount_resp.status_code == 400
    assert price_resp.status_code == 400
    assert recent_resp.status_code == 400
