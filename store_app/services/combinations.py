from typing import Any, Dict, List, Mapping, Optional, Sequence

from core.exceptions import NotFoundError, ValidationError
from core.schemas import ChildProduct, serialize_children
from store_app.common.decorators import translate_storage_errors
from store_app.common.utils import normalise_space
from store_app.models import ProductCombination

from .base import BaseService
from .identifiers import new_id

REQUIRED_MESSAGE = "Parent product ID, combination name, and child products are required"
SELF_REFERENCE_MESSAGE = "A combination cannot include its parent product as a child"
UPDATABLE_FIELDS = ("parent_product_id", "combination_name", "description", "child_products")


def parse_children(raw: Sequence[Mapping[str, Any]]) -> List[ChildProduct]:
    """Build the ordered child list. An empty list is rejected."""

    if not raw:
        raise ValidationError(REQUIRED_MESSAGE)
    return [ChildProduct.from_mapping(entry) for entry in raw]


class CombinationService(BaseService):
    """Bundles: a parent product grouped with child products and quantities.

    Bundles are flat. A bundle may not list its own parent as a child, but
    bundles referencing each other's products are allowed.
    """

    @translate_storage_errors("A combination with this ID already exists")
    def create(
        self,
        parent_product_id: str,
        combination_name: str,
        child_products: Sequence[Mapping[str, Any]],
        description: Optional[str] = None,
    ) -> ProductCombination:
        combination_name = normalise_space(combination_name)
        if not parent_product_id or not combination_name or not child_products:
            raise ValidationError(REQUIRED_MESSAGE)
        children = parse_children(child_products)
        self._check_self_reference(parent_product_id, children)

        if not self.product_exists(parent_product_id):
            raise NotFoundError("Parent product not found")
        missing = self.missing_product_ids(child.product_id for child in children)
        if missing:
            raise NotFoundError.for_ids("Child products", missing)

        with self.atomic():
            combination = ProductCombination.objects.using(self.using).create(
                combination_id=new_id("COMB"),
                parent_product_id=parent_product_id,
                combination_name=combination_name,
                description=description,
                child_products=serialize_children(children),
            )
        self.logger.info(
            "Created combination %s for %s with %d children",
            combination.combination_id,
            parent_product_id,
            len(children),
        )
        return combination

    @translate_storage_errors("A combination with this ID already exists")
    def bulk_create(self, combinations: Sequence[Mapping[str, Any]]) -> List[ProductCombination]:
        """Validate every entry, then insert all of them in one transaction."""

        if not combinations:
            raise ValidationError("Combinations array is required and must not be empty")

        prepared: List[Dict[str, Any]] = []
        for index, entry in enumerate(combinations):
            parent_product_id = entry.get("parent_product_id")
            combination_name = normalise_space(entry.get("combination_name") or "")
            if not parent_product_id or not combination_name or not entry.get("child_products"):
                raise ValidationError(f"Combination at index {index}: {REQUIRED_MESSAGE}")
            try:
                children = parse_children(entry.get("child_products"))
                self._check_self_reference(parent_product_id, children)
            except ValidationError as exc:
                raise ValidationError(f"Combination at index {index}: {exc.message}") from exc
            prepared.append(
                {
                    "parent_product_id": parent_product_id,
                    "combination_name": combination_name,
                    "description": entry.get("description"),
                    "children": children,
                }
            )

        missing_parents = self.missing_product_ids(item["parent_product_id"] for item in prepared)
        if missing_parents:
            raise NotFoundError.for_ids("Parent products", missing_parents)
        missing_children = self.missing_product_ids(
            child.product_id for item in prepared for child in item["children"]
        )
        if missing_children:
            raise NotFoundError.for_ids("Child products", missing_children)

        rows = [
            ProductCombination(
                combination_id=new_id("COMB"),
                parent_product_id=item["parent_product_id"],
                combination_name=item["combination_name"],
                description=item["description"],
                child_products=serialize_children(item["children"]),
            )
            for item in prepared
        ]
        with self.atomic():
            ProductCombination.objects.using(self.using).bulk_create(rows)

        self.logger.info("Bulk created %d combinations", len(rows))
        return rows

    @translate_storage_errors()
    def update(self, combination_id: str, fields: Mapping[str, Any]) -> ProductCombination:
        accepted = self.pick_update_fields(fields, UPDATABLE_FIELDS, immutable=("combination_id",))

        with self.atomic():
            combination = (
                ProductCombination.objects.using(self.using)
                .select_for_update()
                .filter(combination_id=combination_id)
                .first()
            )
            if combination is None:
                raise NotFoundError("Product combination not found")

            changes: Dict[str, Any] = {}
            if "combination_name" in accepted:
                name = normalise_space(accepted["combination_name"] or "")
                if not name:
                    raise ValidationError("combination_name cannot be empty.")
                changes["combination_name"] = name
            if "description" in accepted:
                changes["description"] = accepted["description"]

            parent_product_id = accepted.get("parent_product_id", combination.parent_product_id)
            if "parent_product_id" in accepted:
                if not parent_product_id or not self.product_exists(parent_product_id):
                    raise NotFoundError("Parent product not found")
                changes["parent_product_id"] = parent_product_id

            if "child_products" in accepted:
                children = parse_children(accepted["child_products"])
                missing = self.missing_product_ids(child.product_id for child in children)
                if missing:
                    raise NotFoundError.for_ids("Child products", missing)
                changes["child_products"] = serialize_children(children)
            else:
                children = [ChildProduct.from_mapping(child) for child in combination.child_products]
            self._check_self_reference(parent_product_id, children)

            for name, value in changes.items():
                setattr(combination, name, value)
            combination.save(using=self.using, update_fields=[*changes, "updated_at"])

        self.logger.info("Updated combination %s fields=%s", combination_id, sorted(changes))
        return combination

    @translate_storage_errors()
    def delete(self, combination_id: str) -> int:
        deleted, _ = ProductCombination.objects.using(self.using).filter(combination_id=combination_id).delete()
        if not deleted:
            raise NotFoundError("Product combination not found")
        self.logger.info("Deleted combination %s", combination_id)
        return deleted

    def get(self, combination_id: str) -> ProductCombination:
        combination = ProductCombination.objects.using(self.using).filter(combination_id=combination_id).first()
        if combination is None:
            raise NotFoundError("Product combination not found")
        return combination

    def list_combinations(
        self,
        parent_product_id: Optional[str] = None,
        combination_name: Optional[str] = None,
    ) -> List[ProductCombination]:
        queryset = ProductCombination.objects.using(self.using).all()
        if parent_product_id:
            queryset = queryset.filter(parent_product_id=parent_product_id)
        if combination_name:
            queryset = queryset.filter(combination_name__icontains=combination_name)
        return list(queryset.order_by("created_at", "id"))

    def list_by_parent(self, product_id: str) -> List[ProductCombination]:
        if not self.product_exists(product_id):
            raise NotFoundError("Parent product not found")
        return self.list_combinations(parent_product_id=product_id)

    def list_containing(self, product_id: str) -> List[ProductCombination]:
        """Bundles listing ``product_id`` as a child.

        Scans every bundle, so the cost grows with the total bundle count.
        """

        return [
            combination
            for combination in ProductCombination.objects.using(self.using).order_by("created_at", "id")
            if any(child.get("product_id") == product_id for child in combination.child_products or [])
        ]

    @translate_storage_errors()
    def delete_all_for_parent(self, product_id: str) -> int:
        if not self.product_exists(product_id):
            raise NotFoundError("Parent product not found")
        with self.atomic():
            deleted, _ = ProductCombination.objects.using(self.using).filter(parent_product_id=product_id).delete()
        self.logger.info("Deleted %d combinations of %s", deleted, product_id)
        return deleted

    @staticmethod
    def _check_self_reference(parent_product_id: str, children: Sequence[ChildProduct]) -> None:
        if any(child.product_id == parent_product_id for child in children):
            raise ValidationError(SELF_REFERENCE_MESSAGE)
