from drf_yasg.utils import swagger_auto_schema
from rest_framework import status

from core.responses import envelope
from store_app.serializers import (
    ProductReviewSerializer,
    ReactionRequestSerializer,
    RecentReviewsQuerySerializer,
    ReplyRequestSerializer,
    ReviewBulkDeleteRequestSerializer,
    ReviewCreateRequestSerializer,
    ReviewListQuerySerializer,
    ReviewUpdateRequestSerializer,
)
from store_app.services.reviews import ReviewService

from .base import ServiceAPIView


class ReviewCreateView(ServiceAPIView):
    service_class = ReviewService
    required_message = "Product ID, user UUID, and comments are required"

    @swagger_auto_schema(
        operation_summary="Create review",
        operation_description="One review per user and product.",
        tags=["Reviews"],
        request_body=ReviewCreateRequestSerializer,
        responses={
            201: ProductReviewSerializer,
            400: "Invalid input",
            404: "Product or user not found",
            409: "User has already reviewed this product",
        },
    )
    def post(self, request):
        arguments = self.get_validated_data(request, ReviewCreateRequestSerializer)
        review = self.get_service().create_review(**arguments)
        return envelope(
            "Product review created successfully!",
            ProductReviewSerializer(review).data,
            status=status.HTTP_201_CREATED,
        )


class ReviewDetailView(ServiceAPIView):
    service_class = ReviewService

    @swagger_auto_schema(
        operation_summary="Retrieve review",
        tags=["Reviews"],
        responses={200: ProductReviewSerializer, 404: "Product review not found"},
    )
    def get(self, request, review_id):
        review = self.get_service().get_review(review_id)
        return envelope("Product review retrieved successfully", ProductReviewSerializer(review).data)

    @swagger_auto_schema(
        operation_summary="Update review",
        operation_description="Edit the comment text or rating. Replies cannot be edited.",
        tags=["Reviews"],
        request_body=ReviewUpdateRequestSerializer,
        responses={200: ProductReviewSerializer, 400: "Invalid input", 404: "Product review not found"},
    )
    def patch(self, request, review_id):
        arguments = self.get_validated_data(request, ReviewUpdateRequestSerializer, partial=True)
        review = self.get_service().update_review(review_id, **arguments)
        return envelope("Product review updated successfully!", ProductReviewSerializer(review).data)

    @swagger_auto_schema(
        operation_summary="Delete review",
        tags=["Reviews"],
        responses={200: "Deleted", 404: "Product review not found"},
    )
    def delete(self, request, review_id):
        deleted = self.get_service().delete_review(review_id)
        return envelope("Product review deleted successfully!", deleted_count=deleted)


class ReviewReactionView(ServiceAPIView):
    """Shared handler for the like, dislike and remove-reaction transitions."""

    service_class = ReviewService
    required_message = "Review ID and user UUID are required"
    transition = None
    success_message = ""

    def post(self, request, review_id):
        user_uuid = self.get_validated_data(request, ReactionRequestSerializer)["user_uuid"]
        review = getattr(self.get_service(), self.transition)(review_id, user_uuid)
        return envelope(self.success_message, ProductReviewSerializer(review).data)


class ReviewLikeView(ReviewReactionView):
    transition = "like"
    success_message = "Review liked successfully!"

    @swagger_auto_schema(
        operation_summary="Like review",
        tags=["Reviews"],
        request_body=ReactionRequestSerializer,
        responses={200: ProductReviewSerializer, 404: "Review or user not found", 409: "Already liked"},
    )
    def post(self, request, review_id):
        return super().post(request, review_id)


class ReviewDislikeView(ReviewReactionView):
    transition = "dislike"
    success_message = "Review disliked successfully!"

    @swagger_auto_schema(
        operation_summary="Dislike review",
        tags=["Reviews"],
        request_body=ReactionRequestSerializer,
        responses={200: ProductReviewSerializer, 404: "Review or user not found", 409: "Already disliked"},
    )
    def post(self, request, review_id):
        return super().post(request, review_id)


class ReviewRemoveReactionView(ReviewReactionView):
    transition = "remove_reaction"
    success_message = "Like/dislike removed successfully!"

    @swagger_auto_schema(
        operation_summary="Remove like or dislike",
        tags=["Reviews"],
        request_body=ReactionRequestSerializer,
        responses={200: ProductReviewSerializer, 400: "No reaction to remove", 404: "Review not found"},
    )
    def post(self, request, review_id):
        return super().post(request, review_id)


class ReviewReplyView(ServiceAPIView):
    service_class = ReviewService
    required_message = "Review ID, user UUID, and comment are required"

    @swagger_auto_schema(
        operation_summary="Reply to review",
        tags=["Reviews"],
        request_body=ReplyRequestSerializer,
        responses={201: ProductReviewSerializer, 400: "Invalid input", 404: "Review or user not found"},
    )
    def post(self, request, review_id):
        payload = self.get_validated_data(request, ReplyRequestSerializer)
        review = self.get_service().add_reply(review_id, payload["user_uuid"], payload["comment"])
        return envelope(
            "Reply added successfully!",
            ProductReviewSerializer(review).data,
            status=status.HTTP_201_CREATED,
        )


class ProductReviewListView(ServiceAPIView):
    service_class = ReviewService

    @swagger_auto_schema(
        operation_summary="Reviews of a product",
        operation_description="Sorted by newest (default), oldest, likes or dislikes. limit is capped at 50.",
        tags=["Reviews"],
        query_serializer=ReviewListQuerySerializer,
        responses={200: ProductReviewSerializer(many=True), 404: "Product not found"},
    )
    def get(self, request, product_id):
        params = self.get_validated_query(request, ReviewListQuerySerializer)
        reviews, page = self.get_service().list_by_product(
            product_id,
            sort_by=params["sortBy"],
            page=params["page"],
            limit=params["limit"],
        )
        return envelope(
            "Product reviews retrieved successfully",
            ProductReviewSerializer(reviews, many=True).data,
            pagination=page.to_dict(),
        )

    @swagger_auto_schema(
        operation_summary="Delete all reviews of a product",
        tags=["Reviews"],
        responses={200: "Deleted", 404: "Product not found"},
    )
    def delete(self, request, product_id):
        deleted = self.get_service().delete_all_for_product(product_id)
        return envelope(f"{deleted} product reviews deleted successfully!", deleted_count=deleted)


class ProductReviewStatsView(ServiceAPIView):
    service_class = ReviewService

    @swagger_auto_schema(
        operation_summary="Review statistics of a product",
        tags=["Reviews"],
        responses={200: "Totals, averages and the most liked review", 404: "Product not found"},
    )
    def get(self, request, product_id):
        stats = self.get_service().get_stats(product_id)
        return envelope("Review statistics retrieved successfully", stats.to_dict())


class ReviewBulkDeleteView(ServiceAPIView):
    service_class = ReviewService
    required_message = "Review IDs array is required and must not be empty"

    @swagger_auto_schema(
        operation_summary="Bulk delete reviews",
        operation_description="Nothing is deleted when any of the ids is unknown.",
        tags=["Reviews"],
        request_body=ReviewBulkDeleteRequestSerializer,
        responses={200: "Deleted", 400: "Invalid input", 404: "Reviews not found"},
    )
    def post(self, request):
        payload = self.get_validated_data(request, ReviewBulkDeleteRequestSerializer)
        deleted = self.get_service().bulk_delete(payload["review_ids"])
        return envelope(f"{deleted} reviews deleted successfully!", deleted_count=deleted)


class RecentReviewsView(ServiceAPIView):
    service_class = ReviewService

    @swagger_auto_schema(
        operation_summary="Most recent reviews",
        tags=["Reviews"],
        query_serializer=RecentReviewsQuerySerializer,
        responses={200: ProductReviewSerializer(many=True), 400: "Invalid limit or offset"},
    )
    def get(self, request):
        params = self.get_validated_query(request, RecentReviewsQuerySerializer)
        reviews, pagination = self.get_service().list_recent(limit=params["limit"], offset=params["offset"])
        return envelope(
            "Recent product reviews retrieved successfully",
            ProductReviewSerializer(reviews, many=True).data,
            pagination=pagination,
        )
