from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional


@dataclass(slots=True)
class ChildProduct:
    """One entry of a bundle's ``child_products`` list."""

    product_id: str
    quantity: int

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "ChildProduct":
        return cls(
            product_id=str(payload["product_id"]).strip(),
            quantity=int(payload["quantity"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"product_id": self.product_id, "quantity": self.quantity}


@dataclass(slots=True)
class Reply:
    """A reply appended to a review."""

    user_uuid: str
    comment: str
    created_at: str

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Reply":
        return cls(
            user_uuid=str(payload["user_uuid"]).strip(),
            comment=str(payload["comment"]).strip(),
            created_at=str(payload["created_at"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_uuid": self.user_uuid,
            "comment": self.comment,
            "created_at": self.created_at,
        }


@dataclass(slots=True)
class ReviewStats:
    """Aggregated review figures for a single product."""

    total_reviews: int = 0
    total_likes: int = 0
    total_dislikes: int = 0
    total_replies: int = 0
    average_likes: float = 0.0
    average_dislikes: float = 0.0
    most_liked_review: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_reviews": self.total_reviews,
            "total_likes": self.total_likes,
            "total_dislikes": self.total_dislikes,
            "total_replies": self.total_replies,
            "average_likes": self.average_likes,
            "average_dislikes": self.average_dislikes,
            "most_liked_review": dict(self.most_liked_review) if self.most_liked_review else None,
        }


@dataclass(slots=True)
class PageInfo:
    """Offset pagination metadata returned alongside a page of rows."""

    page: int
    limit: int
    count: int
    total: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def to_dict(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "limit": self.limit,
            "count": self.count,
            "total": self.total,
        }


def serialize_children(children: List[ChildProduct]) -> List[Dict[str, Any]]:
    return [child.to_dict() for child in children]
