from typing import Any, Dict, List, Mapping

from core.exceptions import ConflictError, NotFoundError, ValidationError
from store_app.common.decorators import translate_storage_errors
from store_app.models import UserProfile, VendorProfile

from .base import BaseService
from .identifiers import derive_slug, ensure_unique

USER_FIELDS = ("uuid", "full_name", "email", "avatar_url", "phone", "address", "city", "state", "pincode", "bio")
VENDOR_FIELDS = (
    "slug",
    "name",
    "description",
    "contact_email",
    "contact_phone",
    "rating",
    "is_verified",
    "status",
)


def _strip_strings(payload: Mapping[str, Any]) -> Dict[str, Any]:
    return {name: value.strip() if isinstance(value, str) else value for name, value in payload.items()}


class ProfileService(BaseService):
    """User and vendor profiles referenced by products and reviews."""

    @translate_storage_errors("A profile with this UUID already exists")
    def create_user(self, fields: Mapping[str, Any]) -> UserProfile:
        payload = _strip_strings({name: fields[name] for name in USER_FIELDS if name in fields})
        self.require_fields(payload, ("uuid", "full_name", "email"), "Required fields: uuid, full_name, email")
        if self.user_exists(payload["uuid"]):
            raise ConflictError("A profile with this UUID already exists")

        profile = UserProfile.objects.using(self.using).create(**payload)
        self.logger.info("Created user profile %s", profile.uuid)
        return profile

    def get_user(self, user_uuid: str) -> UserProfile:
        profile = UserProfile.objects.using(self.using).filter(uuid=user_uuid).first()
        if profile is None:
            raise NotFoundError("User not found")
        return profile

    def list_users(self) -> List[UserProfile]:
        return list(UserProfile.objects.using(self.using).order_by("-created_at", "-id"))

    @translate_storage_errors()
    def update_user(self, user_uuid: str, fields: Mapping[str, Any]) -> UserProfile:
        changes = _strip_strings(self.pick_update_fields(fields, USER_FIELDS, immutable=("uuid",)))
        for name in ("full_name", "email"):
            if name in changes and not changes[name]:
                raise ValidationError(f"{name} cannot be empty.")

        with self.atomic():
            profile = UserProfile.objects.using(self.using).select_for_update().filter(uuid=user_uuid).first()
            if profile is None:
                raise NotFoundError(f"No profile found with UUID {user_uuid}")
            for name, value in changes.items():
                setattr(profile, name, value)
            profile.save(using=self.using, update_fields=[*changes, "updated_at"])
        return profile

    @translate_storage_errors("A vendor with this slug or user already exists")
    def register_vendor(self, user_uuid: str, fields: Mapping[str, Any]) -> VendorProfile:
        payload = _strip_strings({name: fields[name] for name in VENDOR_FIELDS if name in fields})
        if not user_uuid or not payload.get("name") or not payload.get("contact_email"):
            raise ValidationError("Required fields: user_uuid, name, contact_email")

        if not self.user_exists(user_uuid):
            raise NotFoundError("User not found")
        if VendorProfile.objects.using(self.using).filter(user_id=user_uuid).exists():
            raise ConflictError("User is already registered as a vendor")

        if payload.get("slug"):
            payload["slug"] = derive_slug(payload["slug"])
            if self.vendor_exists(payload["slug"]):
                raise ConflictError("A vendor with this slug already exists")
        else:
            payload["slug"] = ensure_unique(derive_slug(payload["name"]), self.vendor_exists)
        if not payload["slug"]:
            raise ValidationError("Vendor slug must contain at least one letter or digit")

        vendor = VendorProfile.objects.using(self.using).create(user_id=user_uuid, **payload)
        self.logger.info("Registered vendor %s for %s", vendor.slug, user_uuid)
        return vendor

    def get_vendor(self, slug: str) -> VendorProfile:
        vendor = VendorProfile.objects.using(self.using).filter(slug=slug).first()
        if vendor is None:
            raise NotFoundError("Vendor not found")
        return vendor

    @translate_storage_errors()
    def update_vendor(self, slug: str, fields: Mapping[str, Any]) -> VendorProfile:
        accepted = self.pick_update_fields(fields, VENDOR_FIELDS, immutable=("slug", "user_uuid"))
        changes = _strip_strings(accepted)
        for name in ("name", "contact_email"):
            if name in changes and not changes[name]:
                raise ValidationError(f"{name} cannot be empty.")

        with self.atomic():
            vendor = VendorProfile.objects.using(self.using).select_for_update().filter(slug=slug).first()
            if vendor is None:
                raise NotFoundError(f"No vendor found with slug {slug}")
            for name, value in changes.items():
                setattr(vendor, name, value)
            vendor.save(using=self.using, update_fields=[*changes, "updated_at"])
        return vendor

    @translate_storage_errors()
    def delete_vendor(self, slug: str) -> int:
        deleted, _ = VendorProfile.objects.using(self.using).filter(slug=slug).delete()
        if not deleted:
            raise NotFoundError(f"No vendor found with slug {slug}")
        self.logger.info("Deleted vendor %s", slug)
        return deleted
