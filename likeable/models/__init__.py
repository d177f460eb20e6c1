from .like import Like
from .like_counter import LikeCounter
from .likeable import Likeable, LikeableManager, LikeableQuerySet

__all__ = [
    "Like",
    "LikeCounter",
    "Likeable",
    "LikeableManager",
    "LikeableQuerySet",
]
