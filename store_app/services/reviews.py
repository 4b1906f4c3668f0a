from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple

from django.conf import settings
from django.db.models import Avg, Count, Q
from django.utils import timezone

from core.enums import ReactionState, ReviewSortOrder
from core.exceptions import ConflictError, NotFoundError, ValidationError
from core.schemas import PageInfo, Reply, ReviewStats
from store_app.common.decorators import translate_storage_errors
from store_app.models import Product, ProductReview

from .base import BaseService
from .identifiers import new_id

MIN_COMMENT_LENGTH = 10
MIN_REPLY_LENGTH = 5
DEFAULT_PAGE_SIZE = 10
RECENT_MAX_LIMIT = 100


def reaction_state(review: ProductReview, user_uuid: str) -> ReactionState:
    if user_uuid in (review.liked_by or []):
        return ReactionState.LIKED
    if user_uuid in (review.disliked_by or []):
        return ReactionState.DISLIKED
    return ReactionState.NONE


def apply_reaction(review: ProductReview, user_uuid: str, target: ReactionState) -> None:
    """Move ``user_uuid`` to ``target`` and re-derive both counters from the reactor lists."""

    liked = [uuid for uuid in review.liked_by or [] if uuid != user_uuid]
    disliked = [uuid for uuid in review.disliked_by or [] if uuid != user_uuid]
    if target is ReactionState.LIKED:
        liked.append(user_uuid)
    elif target is ReactionState.DISLIKED:
        disliked.append(user_uuid)

    review.liked_by = liked
    review.disliked_by = disliked
    review.likes = len(liked)
    review.dislikes = len(disliked)


def parse_replies(raw: Optional[Iterable[Dict[str, Any]]]) -> List[Reply]:
    return [Reply.from_mapping(entry) for entry in raw or []]


def _clean_comments(comments: str) -> str:
    text = str(comments or "").strip()
    if len(text) < MIN_COMMENT_LENGTH:
        raise ValidationError(f"Comments must be at least {MIN_COMMENT_LENGTH} characters long")
    return text


def _clean_rating(rating: Optional[int]) -> int:
    if rating is None:
        return 0
    if not 0 <= rating <= 5:
        raise ValidationError("Rating must be an integer between 0 and 5")
    return rating


class ReviewService(BaseService):
    """Reviews, the like/dislike state machine, replies and review statistics.

    Reaction and reply mutations lock the review row for the duration of the
    read-modify-write, so two calls for the same review are applied one after
    the other on databases with row locks.
    """

    @translate_storage_errors("User has already reviewed this product")
    def create_review(
        self,
        product_id: str,
        user_uuid: str,
        comments: str,
        replies: Optional[List[Dict[str, Any]]] = None,
        rating: Optional[int] = 0,
    ) -> ProductReview:
        if not product_id or not user_uuid or not comments:
            raise ValidationError("Product ID, user UUID, and comments are required")
        comments = _clean_comments(comments)
        parsed_replies = parse_replies(replies)
        rating = _clean_rating(rating)

        if not self.product_exists(product_id):
            raise NotFoundError("Product not found")
        if not self.user_exists(user_uuid):
            raise NotFoundError("User not found")
        if self._reviews().filter(product_id=product_id, user_id=user_uuid).exists():
            raise ConflictError("User has already reviewed this product")

        with self.atomic():
            review = self._reviews().create(
                review_id=new_id("REV"),
                product_id=product_id,
                user_id=user_uuid,
                comments=comments,
                rating=rating,
                replies=[reply.to_dict() for reply in parsed_replies],
            )
            self._refresh_product_rating([product_id])

        self.logger.info("Created review %s on %s by %s", review.review_id, product_id, user_uuid)
        return review

    def get_review(self, review_id: str) -> ProductReview:
        review = self._reviews().filter(review_id=review_id).first()
        if review is None:
            raise NotFoundError("Product review not found")
        return review

    @translate_storage_errors()
    def update_review(self, review_id: str, comments: Optional[str] = None, rating: Optional[int] = None) -> ProductReview:
        """Edit the comment text and/or rating. Replies are append-only."""

        changes: Dict[str, Any] = {}
        if comments is not None:
            changes["comments"] = _clean_comments(comments)
        if rating is not None:
            changes["rating"] = _clean_rating(rating)
        if not changes:
            raise ValidationError("At least one field to update is required.")

        with self.atomic():
            review = self._locked(review_id)
            for name, value in changes.items():
                setattr(review, name, value)
            review.save(using=self.using, update_fields=[*changes, "updated_at"])
            if "rating" in changes:
                self._refresh_product_rating([review.product_id])

        self.logger.info("Updated review %s fields=%s", review_id, sorted(changes))
        return review

    @translate_storage_errors()
    def delete_review(self, review_id: str) -> int:
        with self.atomic():
            review = self._reviews().filter(review_id=review_id).first()
            if review is None:
                raise NotFoundError("Product review not found")
            deleted, _ = self._reviews().filter(pk=review.pk).delete()
            self._refresh_product_rating([review.product_id])

        self.logger.info("Deleted review %s", review_id)
        return deleted

    @translate_storage_errors()
    def like(self, review_id: str, user_uuid: str) -> ProductReview:
        return self._react(review_id, user_uuid, ReactionState.LIKED)

    @translate_storage_errors()
    def dislike(self, review_id: str, user_uuid: str) -> ProductReview:
        return self._react(review_id, user_uuid, ReactionState.DISLIKED)

    @translate_storage_errors()
    def remove_reaction(self, review_id: str, user_uuid: str) -> ProductReview:
        if not review_id or not user_uuid:
            raise ValidationError("Review ID and user UUID are required")

        with self.atomic():
            review = self._locked(review_id)
            if reaction_state(review, user_uuid) is ReactionState.NONE:
                raise ValidationError("User has not liked or disliked this review")
            apply_reaction(review, user_uuid, ReactionState.NONE)
            review.save(using=self.using, update_fields=["liked_by", "disliked_by", "likes", "dislikes", "updated_at"])

        self.logger.info("Removed reaction of %s on review %s", user_uuid, review_id)
        return review

    @translate_storage_errors()
    def add_reply(self, review_id: str, user_uuid: str, comment: str) -> ProductReview:
        if not review_id or not user_uuid or not comment:
            raise ValidationError("Review ID, user UUID, and comment are required")
        comment = str(comment).strip()
        if len(comment) < MIN_REPLY_LENGTH:
            raise ValidationError(f"Reply comment must be at least {MIN_REPLY_LENGTH} characters long")

        with self.atomic():
            review = self._locked(review_id)
            if not self.user_exists(user_uuid):
                raise NotFoundError("User not found")
            reply = Reply(user_uuid=user_uuid, comment=comment, created_at=timezone.now().isoformat())
            review.replies = [*(review.replies or []), reply.to_dict()]
            review.save(using=self.using, update_fields=["replies", "updated_at"])

        self.logger.info("Added reply by %s to review %s", user_uuid, review_id)
        return review

    def get_stats(self, product_id: str) -> ReviewStats:
        if not self.product_exists(product_id):
            raise NotFoundError("Product not found")

        reviews = list(self._reviews().filter(product_id=product_id).order_by("created_at", "id"))
        stats = ReviewStats(total_reviews=len(reviews))
        if not reviews:
            return stats

        stats.total_likes = sum(review.likes for review in reviews)
        stats.total_dislikes = sum(review.dislikes for review in reviews)
        stats.total_replies = sum(len(review.replies or []) for review in reviews)
        stats.average_likes = round(stats.total_likes / stats.total_reviews, 2)
        stats.average_dislikes = round(stats.total_dislikes / stats.total_reviews, 2)

        # max() keeps the first review among equal like counts.
        top = max(reviews, key=lambda review: review.likes)
        stats.most_liked_review = {
            "review_id": top.review_id,
            "likes": top.likes,
            "comments": top.comments,
        }
        return stats

    def list_by_product(
        self,
        product_id: str,
        sort_by: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Tuple[List[ProductReview], PageInfo]:
        """One page of a product's reviews, sliced by the database."""

        page_number = 1 if page is None else page
        page_size = DEFAULT_PAGE_SIZE if limit is None else limit
        if page_number < 1:
            raise ValidationError("page must be a positive integer")
        if page_size < 1:
            raise ValidationError("limit must be a positive integer")
        page_size = min(page_size, settings.REVIEW_PAGE_SIZE_LIMIT)

        if not self.product_exists(product_id):
            raise NotFoundError("Product not found")

        order = ReviewSortOrder.from_string(sort_by or "")
        queryset = self._reviews().filter(product_id=product_id)
        total = queryset.count()
        offset = (page_number - 1) * page_size
        reviews = list(queryset.order_by(*order.ordering)[offset:offset + page_size])
        return reviews, PageInfo(page=page_number, limit=page_size, count=len(reviews), total=total)

    def list_recent(self, limit: int = DEFAULT_PAGE_SIZE, offset: int = 0) -> Tuple[List[ProductReview], Dict[str, int]]:
        if limit is None or not 1 <= limit <= RECENT_MAX_LIMIT:
            raise ValidationError(f"Limit must be a number between 1 and {RECENT_MAX_LIMIT}")
        if offset is None or offset < 0:
            raise ValidationError("Offset must be a non-negative number")

        reviews = list(
            self._reviews().order_by(*ReviewSortOrder.NEWEST.ordering)[offset:offset + limit]
        )
        return reviews, {"limit": limit, "offset": offset, "count": len(reviews)}

    @translate_storage_errors()
    def bulk_delete(self, review_ids: List[str]) -> int:
        """Delete every listed review, or none of them when any id is unknown."""

        if not review_ids:
            raise ValidationError("Review IDs array is required and must not be empty")
        if not all(isinstance(review_id, str) and review_id.strip() for review_id in review_ids):
            raise ValidationError("All review IDs must be non-empty strings")

        wanted = list(dict.fromkeys(review_ids))
        with self.atomic():
            found = dict(
                self._reviews().filter(review_id__in=wanted).values_list("review_id", "product_id")
            )
            missing = [review_id for review_id in wanted if review_id not in found]
            if missing:
                raise NotFoundError.for_ids("Reviews", missing)
            deleted, _ = self._reviews().filter(review_id__in=wanted).delete()
            self._refresh_product_rating(set(found.values()))

        self.logger.info("Bulk deleted %d reviews", deleted)
        return deleted

    @translate_storage_errors()
    def delete_all_for_product(self, product_id: str) -> int:
        if not product_id:
            raise ValidationError("Product ID is required")
        if not self.product_exists(product_id):
            raise NotFoundError("Product not found")

        with self.atomic():
            deleted, _ = self._reviews().filter(product_id=product_id).delete()
            self._refresh_product_rating([product_id])

        self.logger.info("Deleted %d reviews of %s", deleted, product_id)
        return deleted

    def _react(self, review_id: str, user_uuid: str, target: ReactionState) -> ProductReview:
        if not review_id or not user_uuid:
            raise ValidationError("Review ID and user UUID are required")

        with self.atomic():
            review = self._locked(review_id)
            if not self.user_exists(user_uuid):
                raise NotFoundError("User not found")
            if reaction_state(review, user_uuid) is target:
                raise ConflictError(f"User has already {target.value} this review")
            apply_reaction(review, user_uuid, target)
            review.save(using=self.using, update_fields=["liked_by", "disliked_by", "likes", "dislikes", "updated_at"])

        self.logger.info("User %s %s review %s", user_uuid, target.value, review_id)
        return review

    def _reviews(self):
        return ProductReview.objects.using(self.using)

    def _locked(self, review_id: str) -> ProductReview:
        review = self._reviews().select_for_update().filter(review_id=review_id).first()
        if review is None:
            raise NotFoundError("Product review not found")
        return review

    def _refresh_product_rating(self, product_ids: Iterable[str]) -> None:
        """Recompute ``review_count`` and the average of rated reviews per product."""

        for product_id in product_ids:
            summary = self._reviews().filter(product_id=product_id).aggregate(
                total=Count("id"),
                average=Avg("rating", filter=Q(rating__gt=0)),
            )
            average = Decimal(str(summary["average"] or 0)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
            Product.objects.using(self.using).filter(product_id=product_id).update(
                review_count=summary["total"],
                rating=average,
            )
