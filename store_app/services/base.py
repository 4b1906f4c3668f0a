from typing import Any, Dict, Iterable, List, Mapping, Sequence

from django.db import transaction

from core.exceptions import ValidationError
from core.logging import configure_logger
from store_app.models import Product, UserProfile, VendorProfile


class BaseService:
    """Shared plumbing for store services.

    Every service is bound to one database alias and routes all reads and
    writes through it, so callers (and tests) choose the storage explicitly.
    """

    def __init__(self, using: str = "default") -> None:
        self.using = using
        self.logger = configure_logger(f"store.{self.__class__.__name__}")

    def atomic(self):
        return transaction.atomic(using=self.using)

    def product_exists(self, product_id: str) -> bool:
        return Product.objects.using(self.using).filter(product_id=product_id).exists()

    def user_exists(self, user_uuid: str) -> bool:
        return UserProfile.objects.using(self.using).filter(uuid=user_uuid).exists()

    def vendor_exists(self, slug: str) -> bool:
        return VendorProfile.objects.using(self.using).filter(slug=slug).exists()

    def missing_product_ids(self, product_ids: Iterable[str]) -> List[str]:
        """Return the ids from ``product_ids`` with no stored product, in input order."""

        wanted = list(dict.fromkeys(product_ids))
        if not wanted:
            return []
        found = set(
            Product.objects.using(self.using)
            .filter(product_id__in=wanted)
            .values_list("product_id", flat=True)
        )
        return [product_id for product_id in wanted if product_id not in found]

    @staticmethod
    def require_fields(payload: Mapping[str, Any], names: Sequence[str], message: str) -> None:
        missing = [name for name in names if payload.get(name) in (None, "", [])]
        if missing:
            raise ValidationError(message)

    @staticmethod
    def pick_update_fields(
        fields: Mapping[str, Any],
        allowed: Iterable[str],
        immutable: Iterable[str] = (),
    ) -> Dict[str, Any]:
        """Validate a partial update payload and return the accepted fields."""

        if not fields:
            raise ValidationError("At least one field to update is required.")
        frozen = sorted(set(fields) & set(immutable))
        if frozen:
            raise ValidationError(f"Fields cannot be updated: {', '.join(frozen)}")
        allowed = set(allowed)
        unknown = sorted(set(fields) - allowed)
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(unknown)}")
        return dict(fields)
