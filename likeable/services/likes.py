"""Service helpers for liking, unliking and querying likeable entities."""

import logging

from django.contrib.contenttypes.models import ContentType
from django.db import transaction

from likeable.constants import DEFAULT_TYPE
from likeable.repos.counter_repo import LikeCounterRepo
from likeable.repos.like_repo import LikeRepo
from likeable.resolvers import resolve_actor

logger = logging.getLogger(__name__)


class LikeService:
    """
    Drive the like and counter stores for any saved model instance.

    ``actor`` arguments accept a user, a guard name (str or None) resolved
    through ``resolver`` (falling back to LIKEABLE_USER_RESOLVER), or a
    falsy non-None value such as 0 meaning "no user". Likes and unlikes
    without a user only touch the counter.
    """

    def __init__(self, like_repo=None, counter_repo=None):
        self.like_repo = like_repo or LikeRepo()
        self.counter_repo = counter_repo or LikeCounterRepo(like_repo=self.like_repo)

    def like(self, target, actor=None, type=DEFAULT_TYPE, resolver=None) -> bool:
        """Record a reaction and bump the counter; return False on a repeat."""
        user = resolve_actor(actor, resolver)
        with transaction.atomic():
            if user is None:
                logger.debug("Anonymous %s on %s:%s", type, target.__class__.__name__, target.pk)
            elif not self.like_repo.add(target, user, type):
                return False
            self.counter_repo.increment(target, type)
        return True

    def unlike(self, target, actor=None, type=DEFAULT_TYPE, resolver=None) -> bool:
        """Retract a reaction and drop the counter; return False if none existed."""
        user = resolve_actor(actor, resolver)
        with transaction.atomic():
            if user is None:
                logger.debug("Anonymous un%s on %s:%s", type, target.__class__.__name__, target.pk)
                return self.counter_repo.decrement(target, type)
            if not self.like_repo.remove(target, user, type):
                return False
            self.counter_repo.decrement(target, type)
        return True

    def liked(self, target, actor=None, type=DEFAULT_TYPE, resolver=None) -> bool:
        """Return True if the resolved user has a reaction of this type."""
        user = resolve_actor(actor, resolver)
        if user is None:
            return False
        return self.like_repo.has_liked(target, user, type)

    def count(self, target, type=DEFAULT_TYPE) -> int:
        """Return the stored total for (target, type)."""
        return self.counter_repo.get(target, type)

    def likers(self, target, type=DEFAULT_TYPE):
        """Return the ids of users who reacted with this type."""
        return self.like_repo.liker_ids(target, type)

    def remove_likes(self, target, type=DEFAULT_TYPE) -> None:
        """Delete all reactions and the counter for (target, type)."""
        with transaction.atomic():
            removed = self.like_repo.remove_all(target, type)
            self.counter_repo.remove_all(target, type)
        logger.info(
            "Removed %s %s reactions from %s:%s",
            removed, type, target.__class__.__name__, target.pk,
        )

    def where_liked_by(self, queryset, actor=None, type=DEFAULT_TYPE, resolver=None):
        """Restrict a host queryset to rows the resolved user reacted to."""
        user = resolve_actor(actor, resolver)
        if user is None:
            return queryset.none()
        content_type = ContentType.objects.get_for_model(queryset.model)
        return queryset.filter(self.like_repo.liked_by(content_type, user, type))

    def rebuild(self, discriminator) -> int:
        """Recompute the counters of one content type from the likes table."""
        return self.counter_repo.rebuild(discriminator)
