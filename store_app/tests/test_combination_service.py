import pytest

from core.exceptions import NotFoundError, ValidationError
from store_app.models import ProductCombination
from store_app.services.combinations import CombinationService


@pytest.fixture()
def service():
    return CombinationService()


@pytest.fixture()
def catalogue(product_factory):
    return [product_factory() for _ in range(4)]


@pytest.mark.django_db
def test_create_keeps_child_order(service, catalogue):
    parent, first, second, _ = catalogue

    combination = service.create(
        parent.product_id,
        "Starter kit",
        [
            {"product_id": second.product_id, "quantity": 2},
            {"product_id": first.product_id, "quantity": 1},
        ],
        description="Everything to get going",
    )

    stored = ProductCombination.objects.get(combination_id=combination.combination_id)
    assert combination.combination_id.startswith("COMB-")
    assert stored.parent_product_id == parent.product_id
    assert stored.child_products == [
        {"product_id": second.product_id, "quantity": 2},
        {"product_id": first.product_id, "quantity": 1},
    ]


@pytest.mark.django_db
def test_create_with_missing_child_persists_nothing(service, catalogue):
    parent, first, _, _ = catalogue

    with pytest.raises(NotFoundError) as exc_info:
        service.create(
            parent.product_id,
            "Broken kit",
            [
                {"product_id": first.product_id, "quantity": 1},
                {"product_id": "PROD-GHOST", "quantity": 1},
            ],
        )

    assert exc_info.value.message == "Child products not found: PROD-GHOST"
    assert ProductCombination.objects.count() == 0


@pytest.mark.django_db
def test_create_requires_existing_parent(service, catalogue):
    with pytest.raises(NotFoundError) as exc_info:
        service.create("PROD-GHOST", "Kit", [{"product_id": catalogue[1].product_id, "quantity": 1}])

    assert exc_info.value.message == "Parent product not found"


@pytest.mark.django_db
def test_create_requires_children(service, catalogue):
    with pytest.raises(ValidationError) as exc_info:
        service.create(catalogue[0].product_id, "Kit", [])

    assert exc_info.value.message == "Parent product ID, combination name, and child products are required"
    assert ProductCombination.objects.count() == 0


@pytest.mark.django_db
def test_create_rejects_parent_as_child(service, catalogue):
    parent = catalogue[0]

    with pytest.raises(ValidationError):
        service.create(parent.product_id, "Loop", [{"product_id": parent.product_id, "quantity": 1}])


@pytest.mark.django_db
def test_bulk_create_inserts_every_entry(service, catalogue):
    parent, first, second, third = catalogue
    entries = [
        {
            "parent_product_id": parent.product_id,
            "combination_name": f"Kit {index}",
            "child_products": [{"product_id": child.product_id, "quantity": index + 1}],
        }
        for index, child in enumerate([first, second, third])
    ]

    created = service.bulk_create(entries)

    assert len(created) == 3
    assert len({combination.combination_id for combination in created}) == 3
    assert ProductCombination.objects.count() == 3


@pytest.mark.django_db
def test_bulk_create_is_all_or_nothing(service, catalogue):
    parent, first, _, _ = catalogue
    entries = [
        {
            "parent_product_id": parent.product_id,
            "combination_name": "Good",
            "child_products": [{"product_id": first.product_id, "quantity": 1}],
        },
        {
            "parent_product_id": parent.product_id,
            "combination_name": "Bad",
            "child_products": [{"product_id": "PROD-GHOST", "quantity": 1}],
        },
    ]

    with pytest.raises(NotFoundError) as exc_info:
        service.bulk_create(entries)

    assert "PROD-GHOST" in exc_info.value.message
    assert ProductCombination.objects.count() == 0


@pytest.mark.django_db
def test_bulk_create_reports_missing_parents_first(service, catalogue):
    entries = [
        {
            "parent_product_id": "PROD-NOPE",
            "combination_name": "Kit",
            "child_products": [{"product_id": "PROD-GHOST", "quantity": 1}],
        }
    ]

    with pytest.raises(NotFoundError) as exc_info:
        service.bulk_create(entries)

    assert exc_info.value.message == "Parent products not found: PROD-NOPE"


@pytest.mark.django_db
def test_bulk_create_names_invalid_entry(service, catalogue):
    parent, first, _, _ = catalogue
    entries = [
        {
            "parent_product_id": parent.product_id,
            "combination_name": "Good",
            "child_products": [{"product_id": first.product_id, "quantity": 1}],
        },
        {
            "parent_product_id": parent.product_id,
            "combination_name": "Loop",
            "child_products": [{"product_id": parent.product_id, "quantity": 1}],
        },
    ]

    with pytest.raises(ValidationError) as exc_info:
        service.bulk_create(entries)

    assert exc_info.value.message == (
        "Combination at index 1: A combination cannot include its parent product as a child"
    )
    with pytest.raises(ValidationError):
        service.bulk_create([])


@pytest.mark.django_db
def test_listing_by_parent_and_containing(service, catalogue):
    parent, first, second, third = catalogue
    kit = service.create(parent.product_id, "Kit", [{"product_id": first.product_id, "quantity": 1}])
    other = service.create(second.product_id, "Other", [{"product_id": first.product_id, "quantity": 3}])
    service.create(second.product_id, "Unrelated", [{"product_id": third.product_id, "quantity": 1}])

    assert [item.combination_id for item in service.list_by_parent(parent.product_id)] == [kit.combination_id]
    assert [item.combination_id for item in service.list_containing(first.product_id)] == [
        kit.combination_id,
        other.combination_id,
    ]
    assert service.list_containing(parent.product_id) == []
    assert len(service.list_combinations(combination_name="kit")) == 1
    with pytest.raises(NotFoundError):
        service.list_by_parent("PROD-GHOST")


@pytest.mark.django_db
def test_update_replaces_children(service, catalogue):
    parent, first, second, _ = catalogue
    kit = service.create(parent.product_id, "Kit", [{"product_id": first.product_id, "quantity": 1}])

    updated = service.update(
        kit.combination_id,
        {"combination_name": "Bigger kit", "child_products": [{"product_id": second.product_id, "quantity": 4}]},
    )

    assert updated.combination_name == "Bigger kit"
    assert ProductCombination.objects.get(pk=kit.pk).child_products == [
        {"product_id": second.product_id, "quantity": 4}
    ]
    with pytest.raises(NotFoundError):
        service.update(kit.combination_id, {"child_products": [{"product_id": "PROD-GHOST", "quantity": 1}]})
    with pytest.raises(ValidationError):
        service.update(kit.combination_id, {"parent_product_id": second.product_id})
    with pytest.raises(NotFoundError):
        service.update("COMB-MISSING", {"combination_name": "x"})


@pytest.mark.django_db
def test_get_delete_and_delete_all(service, catalogue):
    parent, first, second, _ = catalogue
    kit = service.create(parent.product_id, "Kit", [{"product_id": first.product_id, "quantity": 1}])
    service.create(parent.product_id, "Kit 2", [{"product_id": second.product_id, "quantity": 1}])
    service.create(parent.product_id, "Kit 3", [{"product_id": second.product_id, "quantity": 2}])

    assert service.get(kit.combination_id).combination_name == "Kit"
    assert service.delete(kit.combination_id) == 1
    with pytest.raises(NotFoundError):
        service.get(kit.combination_id)
    with pytest.raises(NotFoundError):
        service.delete(kit.combination_id)

    assert service.delete_all_for_parent(parent.product_id) == 2
    assert ProductCombination.objects.count() == 0
