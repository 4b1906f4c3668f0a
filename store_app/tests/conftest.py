import uuid
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from store_app.models import Product, UserProfile


@pytest.fixture()
def api_client():
    return APIClient()


@pytest.fixture()
def product_payload():
    return {
        "product_id": "PROD-RUNNER1",
        "slug": "trail-runner",
        "title": "Trail Runner",
        "description": "A light running shoe for rough terrain.",
        "category": "shoes",
        "about_in_bullets": ["Lightweight", "Waterproof"],
        "price": "100.00",
        "brand": "Acme",
        "vendor_id": "VEN-1",
    }


@pytest.fixture()
def product_factory():
    def _create(**overrides):
        suffix = uuid.uuid4().hex[:6]
        defaults = {
            "product_id": f"PROD-{suffix.upper()}",
            "slug": f"factory-product-{suffix}",
            "title": f"Factory product {suffix}",
            "description": "Factory made product.",
            "category": "shoes",
            "about_in_bullets": ["Comfortable"],
            "price": Decimal("100.00"),
            "brand": "Acme",
            "vendor_id": "VEN-1",
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _create


@pytest.fixture()
def user_factory():
    def _create(**overrides):
        suffix = uuid.uuid4().hex[:6]
        defaults = {
            "uuid": f"user-{suffix}",
            "full_name": f"Factory user {suffix}",
            "email": f"{suffix}@example.com",
        }
        defaults.update(overrides)
        return UserProfile.objects.create(**defaults)

    return _create
