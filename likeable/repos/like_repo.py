"""Repository for individual reactions (the likes table)."""

import logging
from typing import Set

from django.db import IntegrityError, transaction
from django.db.models import Count, Exists, OuterRef, QuerySet

from likeable.constants import DEFAULT_TYPE
from likeable.db_accessor import DB_Accessor
from likeable.models.like import Like
from likeable.targets import target_lookup

logger = logging.getLogger(__name__)


class LikeRepo(DB_Accessor):
    """Durable record of which user reacted with which type to which entity."""
    def __init__(self) -> None:
        """Initialise with the Like model."""
        super().__init__(Like)

    def add(self, target, user, type: str = DEFAULT_TYPE) -> bool:
        """
        Insert a reaction; return False when it already exists.

        The unique constraint decides: a racing duplicate insert is rolled
        back to a savepoint and reported as "already reacted".
        """
        lookup = target_lookup(target)
        if self.exists(user=user, type=type, **lookup):
            return False
        try:
            with transaction.atomic():
                self.create(user=user, type=type, **lookup)
        except IntegrityError:
            logger.debug(
                "Duplicate %s by user %s on %s:%s ignored",
                type, user.pk, lookup["content_type"].pk, lookup["object_id"],
            )
            return False
        return True

    def remove(self, target, user, type: str = DEFAULT_TYPE) -> bool:
        """Delete the matching reaction; return True if a row was deleted."""
        return self.delete(user=user, type=type, **target_lookup(target)) > 0

    def has_liked(self, target, user, type: str = DEFAULT_TYPE) -> bool:
        """Return True if user has a reaction of this type on target."""
        return self.exists(user=user, type=type, **target_lookup(target))

    def remove_all(self, target, type: str = DEFAULT_TYPE) -> int:
        """Delete every reaction of this type on target."""
        return self.delete(type=type, **target_lookup(target))

    def for_target(self, target) -> QuerySet:
        """Return all reactions on target, of every type."""
        return self.filter(**target_lookup(target))

    def liker_ids(self, target, type: str = DEFAULT_TYPE) -> Set[int]:
        """Return the ids of users holding a reaction of this type on target."""
        return set(
            self.filter(type=type, **target_lookup(target)).values_list("user_id", flat=True)
        )

    def liked_by(self, content_type, user, type: str = DEFAULT_TYPE) -> Exists:
        """
        Return an EXISTS expression for filtering host querysets.

        Correlates on the outer query's primary key, so it selects hosts
        without joining (and so without duplicating) rows.
        """
        return Exists(
            self.filter(
                content_type=content_type,
                object_id=OuterRef("pk"),
                user=user,
                type=type,
            )
        )

    def totals_for(self, content_type) -> QuerySet:
        """Return (object_id, type, total) rows grouped from the likes table."""
        return (
            self.filter(content_type=content_type)
            .values("object_id", "type")
            .annotate(total=Count("id"))
            .order_by("object_id", "type")
        )
