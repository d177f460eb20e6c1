"""Repository for denormalized reaction totals (the like_counters table)."""

import logging

from django.db import IntegrityError, transaction
from django.db.models import F

from likeable.constants import DEFAULT_TYPE
from likeable.db_accessor import DB_Accessor
from likeable.models.like_counter import LikeCounter
from likeable.repos.like_repo import LikeRepo
from likeable.targets import resolve_content_type, target_lookup

logger = logging.getLogger(__name__)


class LikeCounterRepo(DB_Accessor):
    """Keeps one running total per (entity, type)."""
    def __init__(self, like_repo=None) -> None:
        """Initialise with the LikeCounter model."""
        super().__init__(LikeCounter)
        self.like_repo = like_repo or LikeRepo()

    def get(self, target, type: str = DEFAULT_TYPE) -> int:
        """Return the stored total, or 0 when there is no counter row."""
        counter = self.first(type=type, **target_lookup(target))
        return counter.count if counter else 0

    def counter_for(self, target, type: str = DEFAULT_TYPE):
        """Return the counter row for (target, type), or None."""
        return self.first(type=type, **target_lookup(target))

    def increment(self, target, type: str = DEFAULT_TYPE) -> None:
        """
        Add one to the total, creating the row at 1 when missing.

        The add is a single UPDATE ... SET count = count + 1. If the row
        does not exist yet the create runs in a savepoint; losing that race
        to another request falls back to the UPDATE.
        """
        lookup = dict(type=type, **target_lookup(target))
        if self.update(lookup, count=F("count") + 1):
            return
        try:
            with transaction.atomic():
                self.create(count=1, **lookup)
            logger.debug("Created %s counter for %s:%s", type, lookup["content_type"].pk, lookup["object_id"])
        except IntegrityError:
            self.update(lookup, count=F("count") + 1)

    def decrement(self, target, type: str = DEFAULT_TYPE) -> bool:
        """
        Remove one from the total; delete the row when it reaches zero.

        Missing rows are left alone, so the total never goes negative.
        Returns False when there was no counter row to change.
        """
        lookup = dict(type=type, **target_lookup(target))
        with transaction.atomic():
            if self.update(dict(lookup, count__gt=1), count=F("count") - 1):
                return True
            deleted = self.delete(count__lte=1, **lookup)
        if deleted:
            logger.debug("Deleted %s counter for %s:%s", type, lookup["content_type"].pk, lookup["object_id"])
        else:
            logger.warning(
                "Decrement of %s counter for %s:%s with no counter row",
                type, lookup["content_type"].pk, lookup["object_id"],
            )
        return bool(deleted)

    def remove_all(self, target, type: str = DEFAULT_TYPE) -> int:
        """Delete the counter row for (target, type)."""
        return self.delete(type=type, **target_lookup(target))

    def rebuild(self, discriminator) -> int:
        """
        Recompute every counter of one content type from the likes table.

        Existing counters for the content type are replaced, not added to.
        Returns the number of counter rows written.
        """
        content_type = resolve_content_type(discriminator)
        with transaction.atomic():
            removed = self.delete(content_type=content_type)
            counters = [
                LikeCounter(
                    content_type=content_type,
                    object_id=row["object_id"],
                    type=row["type"],
                    count=row["total"],
                )
                for row in self.like_repo.totals_for(content_type)
            ]
            self.model.objects.bulk_create(counters)
        logger.info(
            "Rebuilt like counters for %s: removed %s, created %s",
            content_type, removed, len(counters),
        )
        return len(counters)
