from django.conf import settings
from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models

from likeable.constants import DEFAULT_TYPE, LIKES_TABLE, TYPE_MAX_LENGTH

"""
Like model

One row per (entity, user, type): "user U reacted with type T to entity E".

Key points:
- The entity is a polymorphic reference: `content_type` says which model the
  row points at and `object_id` holds that model's primary key.
- `type` distinguishes reaction kinds ("like", "bookmark", ...).
- A user has at most one reaction of a given type on a given entity; the
  unique constraint enforces it at the database level.
- Rows are removed with the user (CASCADE). Removing them with the entity is
  handled by the Likeable mixin, not by a foreign key.
"""

class Like(models.Model):
    """A single user's reaction of one type to one entity."""
    id = models.BigAutoField(primary_key=True)

    type = models.CharField(max_length=TYPE_MAX_LENGTH, default=DEFAULT_TYPE)

    content_type = models.ForeignKey(ContentType, on_delete=models.CASCADE)
    object_id = models.PositiveBigIntegerField()
    likeable = GenericForeignKey("content_type", "object_id")

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="likeable_likes",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = LIKES_TABLE
        constraints = [
            models.UniqueConstraint(
                fields=["object_id", "content_type", "user", "type"],
                name="likeable_likes_unique",
            ),
        ]
        indexes = [
            models.Index(fields=["content_type", "object_id", "type"], name="likes_target_type_idx"),
        ]

    def __str__(self) -> str:
        return f"Like(user={self.user_id}, {self.content_type_id}:{self.object_id}, type={self.type})"
