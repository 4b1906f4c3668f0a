from enum import Enum


class ReviewSortOrder(Enum):
    """Supported orderings for review listings."""

    NEWEST = "newest"
    OLDEST = "oldest"
    LIKES = "likes"
    DISLIKES = "dislikes"

    @classmethod
    def from_string(cls, value: str) -> "ReviewSortOrder":
        """Unknown or empty values fall back to ``NEWEST``."""
        if not value:
            return cls.NEWEST
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.NEWEST

    @property
    def ordering(self) -> list:
        return {
            ReviewSortOrder.NEWEST: ["-created_at", "-id"],
            ReviewSortOrder.OLDEST: ["created_at", "id"],
            ReviewSortOrder.LIKES: ["-likes", "-created_at", "-id"],
            ReviewSortOrder.DISLIKES: ["-dislikes", "-created_at", "-id"],
        }[self]


class ReactionState(Enum):
    """Reaction of one user towards one review."""

    NONE = "none"
    LIKED = "liked"
    DISLIKED = "disliked"
