from decimal import Decimal

import pytest

from core.exceptions import ConflictError, NotFoundError, ValidationError
from store_app.models import Product, ProductCombination, ProductReview, ProductVariant
from store_app.services.products import ProductService
from store_app.services.variants import VariantService


@pytest.fixture()
def service():
    return ProductService()


@pytest.mark.django_db
def test_create_product_applies_defaults(service, product_payload):
    product = service.create_product({**product_payload, "price": Decimal("100.00")})

    assert product.product_id == "PROD-RUNNER1"
    assert product.price == Decimal("100.00")
    assert product.rating == 0
    assert product.review_count == 0
    assert product.quantity == 0
    assert product.featured is False
    assert product.variant_state is False


@pytest.mark.django_db
def test_create_product_passes_discount_fields_through(service, product_payload):
    product = service.create_product(
        {**product_payload, "discount_percent": Decimal("10"), "discount_price": Decimal("50")}
    )

    product.refresh_from_db()
    assert product.discount_percent == Decimal("10")
    assert product.discount_price == Decimal("50")


@pytest.mark.django_db
@pytest.mark.parametrize("missing", ["product_id", "slug", "title", "about_in_bullets", "price", "vendor_id"])
def test_create_product_requires_fields(service, product_payload, missing):
    product_payload.pop(missing)

    with pytest.raises(ValidationError) as exc_info:
        service.create_product(product_payload)

    assert exc_info.value.message == "Please provide all required fields"
    assert Product.objects.count() == 0


@pytest.mark.django_db
def test_create_product_rejects_duplicates(service, product_payload):
    service.create_product(product_payload)

    with pytest.raises(ConflictError):
        service.create_product({**product_payload, "slug": "another-slug"})
    with pytest.raises(ConflictError):
        service.create_product({**product_payload, "product_id": "PROD-OTHER"})
    assert Product.objects.count() == 1


@pytest.mark.django_db
def test_get_by_slug_returns_product_with_active_variants(service, product_factory):
    product = product_factory(slug="trail-runner")
    variants = VariantService()
    large = variants.create_variant(product.product_id, "Large", "size", Decimal("120"), 3)
    hidden = variants.create_variant(product.product_id, "Small", "size", Decimal("90"), 1, is_active=False)

    resolution = service.get_by_slug("trail-runner")

    assert resolution.product.product_id == product.product_id
    assert [variant.variant_id for variant in resolution.variants] == [large.variant_id]
    assert hidden.variant_id not in [variant.variant_id for variant in resolution.variants]
    assert resolution.has_variants is True
    assert resolution.selected_variant is None
    assert resolution.current_variant_slug is None


@pytest.mark.django_db
def test_get_by_slug_resolves_variant_slug(service, product_factory):
    product = product_factory(slug="trail-runner")
    variants = VariantService()
    large = variants.create_variant(product.product_id, "Large", "size", Decimal("120"), 3)
    small = variants.create_variant(product.product_id, "Small", "size", Decimal("90"), 2)

    resolution = service.get_by_slug("trail-runner-small")

    assert resolution.product.product_id == product.product_id
    assert [variant.variant_id for variant in resolution.variants] == [large.variant_id, small.variant_id]
    assert resolution.selected_variant.variant_id == small.variant_id
    assert resolution.current_variant_slug == "trail-runner-small"


@pytest.mark.django_db
def test_get_by_slug_has_no_variants_when_all_inactive(service, product_factory):
    product = product_factory(slug="plain", variant_state=True)
    VariantService().create_variant(product.product_id, "Red", "colour", Decimal("10"), 1, is_active=False)

    resolution = service.get_by_slug("plain")

    assert resolution.has_variants is False


@pytest.mark.django_db
def test_get_by_slug_ignores_inactive_variant_slug(service, product_factory):
    product = product_factory(slug="trail-runner")
    VariantService().create_variant(product.product_id, "Large", "size", Decimal("120"), 3, is_active=False)

    with pytest.raises(NotFoundError):
        service.get_by_slug("trail-runner-large")


@pytest.mark.django_db
def test_get_by_slug_unknown(service):
    with pytest.raises(NotFoundError):
        service.get_by_slug("nothing-here")


@pytest.mark.django_db
def test_update_product_recomputes_discount_price(service, product_factory):
    product = product_factory()

    updated = service.update_product(product.product_id, {"price": Decimal("200"), "discount_percent": Decimal("25")})

    updated.refresh_from_db()
    assert updated.price == Decimal("200.00")
    assert updated.discount_price == Decimal("150.00")


@pytest.mark.django_db
def test_update_product_price_alone_keeps_discount_price(service, product_factory):
    product = product_factory(discount_percent=Decimal("10"), discount_price=Decimal("90"))

    service.update_product(product.product_id, {"price": Decimal("300")})

    product.refresh_from_db()
    assert product.price == Decimal("300.00")
    assert product.discount_price == Decimal("90.00")


@pytest.mark.django_db
def test_update_product_errors(service, product_factory):
    product = product_factory()

    with pytest.raises(NotFoundError):
        service.update_product("PROD-MISSING", {"title": "New"})
    with pytest.raises(ValidationError):
        service.update_product(product.product_id, {})
    with pytest.raises(ValidationError):
        service.update_product(product.product_id, {"product_id": "PROD-NEW"})
    with pytest.raises(ValidationError):
        service.update_product(product.product_id, {"colour": "red"})


@pytest.mark.django_db
def test_update_product_rejects_taken_slug(service, product_factory):
    product_factory(slug="taken")
    product = product_factory()

    with pytest.raises(ConflictError):
        service.update_product(product.product_id, {"slug": "taken"})


@pytest.mark.django_db
def test_delete_product_reports_count_and_cascades(service, product_factory, user_factory):
    product = product_factory()
    other = product_factory()
    user = user_factory()
    VariantService().create_variant(product.product_id, "Large", "size", Decimal("120"), 3)
    ProductReview.objects.create(
        review_id="REV-1", product=product, user=user, comments="Great shoes for running."
    )
    ProductCombination.objects.create(
        combination_id="COMB-1",
        parent_product=other,
        combination_name="Kit",
        child_products=[{"product_id": product.product_id, "quantity": 1}],
    )

    assert service.delete_product(product.product_id) == 1

    assert not Product.objects.filter(product_id=product.product_id).exists()
    assert ProductVariant.objects.count() == 0
    assert ProductReview.objects.count() == 0
    assert ProductCombination.objects.count() == 0
    with pytest.raises(NotFoundError):
        service.delete_product(product.product_id)


@pytest.mark.django_db
def test_by_min_discount_returns_top_four(service, product_factory):
    for percent in [25, 30, 15, 50, 22]:
        product_factory(discount_percent=Decimal(percent))

    products = service.by_min_discount(Decimal("20"))

    assert [product.discount_percent for product in products] == [
        Decimal("50"),
        Decimal("30"),
        Decimal("25"),
        Decimal("22"),
    ]


@pytest.mark.django_db
def test_by_min_discount_empty_is_not_found(service, product_factory):
    product_factory(discount_percent=Decimal("5"))

    with pytest.raises(NotFoundError):
        service.by_min_discount(Decimal("20"))
    with pytest.raises(ValidationError):
        service.by_min_discount(None)


@pytest.mark.django_db
def test_top_rated_by_vendor(service, product_factory):
    for rating in ["4.5", "3.0", "5.0", "2.0", "4.0"]:
        product_factory(vendor_id="VEN-9", rating=Decimal(rating))
    product_factory(vendor_id="VEN-2", rating=Decimal("5.0"))

    products = service.top_rated_by_vendor("VEN-9")

    assert [product.rating for product in products] == [
        Decimal("5.00"),
        Decimal("4.50"),
        Decimal("4.00"),
        Decimal("3.00"),
    ]


@pytest.mark.django_db
def test_by_price_range(service, product_factory):
    for price in ["300", "50", "120", "80"]:
        product_factory(price=Decimal(price))

    assert [product.price for product in service.by_price_range(Decimal("60"))] == [
        Decimal("80.00"),
        Decimal("120.00"),
        Decimal("300.00"),
    ]
    assert [product.price for product in service.by_price_range(Decimal("60"), Decimal("150"))] == [
        Decimal("80.00"),
        Decimal("120.00"),
    ]
    with pytest.raises(ValidationError):
        service.by_price_range(Decimal("100"), Decimal("10"))
    with pytest.raises(NotFoundError):
        service.by_price_range(Decimal("1000"))


@pytest.mark.django_db
def test_catalogue_queries_raise_when_empty(service, product_factory):
    product_factory(category="shoes", featured=True, vendor_id="VEN-1")

    assert len(service.by_vendor("VEN-1")) == 1
    assert len(service.by_category("shoes")) == 1
    assert len(service.featured()) == 1
    assert len(service.featured("shoes")) == 1
    with pytest.raises(NotFoundError):
        service.by_vendor("VEN-404")
    with pytest.raises(NotFoundError):
        service.by_category("hats")
    with pytest.raises(NotFoundError):
        service.featured("hats")
