from drf_yasg.utils import swagger_auto_schema
from rest_framework import status

from core.responses import envelope
from store_app.serializers import (
    UserProfileSerializer,
    UserProfileUpdateSerializer,
    UserProfileWriteSerializer,
    VendorProfileSerializer,
    VendorRegisterRequestSerializer,
    VendorUpdateRequestSerializer,
)
from store_app.services.profiles import ProfileService

from .base import ServiceAPIView


class UserProfileCreateView(ServiceAPIView):
    service_class = ProfileService
    required_message = "Required fields: uuid, full_name, email"

    @swagger_auto_schema(
        operation_summary="Create user profile",
        tags=["Profiles"],
        request_body=UserProfileWriteSerializer,
        responses={201: UserProfileSerializer, 400: "Missing or invalid fields", 409: "Duplicate UUID"},
    )
    def post(self, request):
        fields = self.get_validated_data(request, UserProfileWriteSerializer)
        profile = self.get_service().create_user(fields)
        return envelope(
            "Profile created successfully",
            UserProfileSerializer(profile).data,
            status=status.HTTP_201_CREATED,
        )


class UserProfileListView(ServiceAPIView):
    service_class = ProfileService

    @swagger_auto_schema(
        operation_summary="List user profiles",
        tags=["Profiles"],
        responses={200: UserProfileSerializer(many=True)},
    )
    def get(self, request):
        data = UserProfileSerializer(self.get_service().list_users(), many=True).data
        return envelope("Profiles retrieved successfully", data, count=len(data))


class UserProfileDetailView(ServiceAPIView):
    service_class = ProfileService

    @swagger_auto_schema(
        operation_summary="Retrieve user profile",
        tags=["Profiles"],
        responses={200: UserProfileSerializer, 404: "User not found"},
    )
    def get(self, request, uuid):
        profile = self.get_service().get_user(uuid)
        return envelope("Profile retrieved successfully", UserProfileSerializer(profile).data)


class UserProfileUpdateView(ServiceAPIView):
    service_class = ProfileService

    @swagger_auto_schema(
        operation_summary="Update user profile",
        tags=["Profiles"],
        request_body=UserProfileUpdateSerializer,
        responses={200: UserProfileSerializer, 400: "Empty or invalid update", 404: "User not found"},
    )
    def patch(self, request, uuid):
        fields = self.get_validated_data(request, UserProfileUpdateSerializer, partial=True)
        profile = self.get_service().update_user(uuid, fields)
        return envelope(f"Profile with UUID {uuid} updated successfully.", UserProfileSerializer(profile).data)


class VendorRegisterView(ServiceAPIView):
    service_class = ProfileService
    required_message = "Required fields: user_uuid, name, contact_email"

    @swagger_auto_schema(
        operation_summary="Register vendor",
        tags=["Profiles"],
        request_body=VendorRegisterRequestSerializer,
        responses={201: VendorProfileSerializer, 400: "Missing or invalid fields", 404: "User not found", 409: "Already a vendor or slug taken"},
    )
    def post(self, request):
        fields = self.get_validated_data(request, VendorRegisterRequestSerializer)
        vendor = self.get_service().register_vendor(fields.pop("user_uuid"), fields)
        return envelope(
            "Vendor registered successfully",
            VendorProfileSerializer(vendor).data,
            status=status.HTTP_201_CREATED,
        )


class VendorDetailView(ServiceAPIView):
    service_class = ProfileService

    @swagger_auto_schema(
        operation_summary="Retrieve vendor",
        tags=["Profiles"],
        responses={200: VendorProfileSerializer, 404: "Vendor not found"},
    )
    def get(self, request, slug):
        vendor = self.get_service().get_vendor(slug)
        return envelope("Vendor retrieved successfully", VendorProfileSerializer(vendor).data)


class VendorUpdateView(ServiceAPIView):
    service_class = ProfileService

    @swagger_auto_schema(
        operation_summary="Update vendor",
        tags=["Profiles"],
        request_body=VendorUpdateRequestSerializer,
        responses={200: VendorProfileSerializer, 400: "Empty or invalid update", 404: "Vendor not found"},
    )
    def patch(self, request, slug):
        fields = self.get_validated_data(request, VendorUpdateRequestSerializer, partial=True)
        vendor = self.get_service().update_vendor(slug, fields)
        return envelope(f"Vendor {slug} updated successfully.", VendorProfileSerializer(vendor).data)


class VendorDeleteView(ServiceAPIView):
    service_class = ProfileService

    @swagger_auto_schema(
        operation_summary="Delete vendor",
        tags=["Profiles"],
        responses={200: "Deleted", 404: "Vendor not found"},
    )
    def delete(self, request, slug):
        deleted = self.get_service().delete_vendor(slug)
        return envelope(f"Vendor {slug} deleted successfully.", deleted_count=deleted)
