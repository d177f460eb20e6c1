"""Abstract mixin giving any model like/unlike/count behaviour."""

from django.db import models

from likeable.conf import cleanup_types_default, remove_likes_on_delete_default
from likeable.constants import DEFAULT_TYPE


def _service():
    # Imported late: the service layer imports this package's models.
    from likeable.services.likes import LikeService
    return LikeService()


class LikeableQuerySet(models.QuerySet):
    """QuerySet adding the liked-by filter to likeable models."""

    def where_liked_by(self, actor=None, type=DEFAULT_TYPE, resolver=None):
        """Keep only rows the resolved user reacted to with this type."""
        return _service().where_liked_by(self, actor, type=type, resolver=resolver)


LikeableManager = models.Manager.from_queryset(LikeableQuerySet)


class Likeable(models.Model):
    """
    Mixin for models that users can like.

    Reactions and counters live in their own tables and point back at the
    host through (content type, primary key), so any model with an integer
    primary key can inherit from this.

    Class attributes (None means use the LIKEABLE_* setting):
    - remove_likes_on_delete: purge reactions when a row is deleted
    - likeable_cleanup_types: which reaction types that purge covers
    """
    remove_likes_on_delete = None
    likeable_cleanup_types = None

    objects = LikeableManager()

    class Meta:
        abstract = True

    @classmethod
    def should_remove_likes_on_delete(cls) -> bool:
        """Return whether deleting a row purges its reactions."""
        if cls.remove_likes_on_delete is None:
            return remove_likes_on_delete_default()
        return bool(cls.remove_likes_on_delete)

    @classmethod
    def cleanup_types(cls):
        """Return the reaction types purged on delete."""
        if cls.likeable_cleanup_types is None:
            return cleanup_types_default()
        return tuple(cls.likeable_cleanup_types)

    @property
    def likes(self):
        """All reactions on this row, of every type."""
        return _service().like_repo.for_target(self)

    def like_counter(self, type=DEFAULT_TYPE):
        """Return the counter row for this type, or None."""
        return _service().counter_repo.counter_for(self, type)

    @property
    def like_count(self) -> int:
        """Total of "like" reactions; other types need get_like_count."""
        return self.get_like_count(DEFAULT_TYPE)

    def get_like_count(self, type=DEFAULT_TYPE) -> int:
        return _service().count(self, type)

    def like(self, actor=None, type=DEFAULT_TYPE, resolver=None) -> bool:
        """
        Add a reaction of ``type`` from the resolved user.

        Example: book.like(user), book.like(None, "bookmark", resolver)
        """
        return _service().like(self, actor, type=type, resolver=resolver)

    def unlike(self, actor=None, type=DEFAULT_TYPE, resolver=None) -> bool:
        """Remove the resolved user's reaction of ``type``."""
        return _service().unlike(self, actor, type=type, resolver=resolver)

    def liked(self, actor=None, type=DEFAULT_TYPE, resolver=None) -> bool:
        """Return True if the resolved user reacted with ``type``."""
        return _service().liked(self, actor, type=type, resolver=resolver)

    @property
    def is_liked(self) -> bool:
        """Did the default-resolved user like this row."""
        return self.liked()

    def likers(self, type=DEFAULT_TYPE):
        return _service().likers(self, type)

    def remove_likes(self, type=DEFAULT_TYPE) -> None:
        """Delete reactions and the counter of ``type`` for this row."""
        _service().remove_likes(self, type)
