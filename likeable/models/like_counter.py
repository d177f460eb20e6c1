"""Denormalized per-(entity, type) reaction totals."""

from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models

from likeable.constants import DEFAULT_TYPE, LIKE_COUNTERS_TABLE, TYPE_MAX_LENGTH


class LikeCounter(models.Model):
    """Running count of reactions of one type on one entity."""
    id = models.BigAutoField(primary_key=True)

    type = models.CharField(max_length=TYPE_MAX_LENGTH, default=DEFAULT_TYPE)

    content_type = models.ForeignKey(ContentType, on_delete=models.CASCADE)
    object_id = models.PositiveBigIntegerField()
    likeable = GenericForeignKey("content_type", "object_id")

    # kept in step with Like rows by LikeService; repair with rebuild
    count = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = LIKE_COUNTERS_TABLE
        constraints = [
            models.UniqueConstraint(
                fields=["object_id", "content_type", "type"],
                name="likeable_counts",
            ),
        ]

    def __str__(self) -> str:
        return f"LikeCounter({self.content_type_id}:{self.object_id}, type={self.type}, count={self.count})"
