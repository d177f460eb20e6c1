from typing import Any, Mapping, Optional, Type
from django.db.models import Model, QuerySet


class DB_Accessor:
    """Generic data accessor to wrap basic queryset operations."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def filter(self, **lookup: Any) -> QuerySet:
        """Return a queryset of objects matching the lookup."""
        return self.model.objects.filter(**lookup)

    def exists(self, **lookup: Any) -> bool:
        """Return True if any object matches the lookup."""
        return self.model.objects.filter(**lookup).exists()

    def first(self, **lookup: Any) -> Optional[Model]:
        """Fetch the first object matching the lookup, or None."""
        return self.model.objects.filter(**lookup).first()

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def update(self, lookup: Mapping[str, Any], **data: Any) -> int:
        """Update objects matching lookup; return count updated."""
        return self.model.objects.filter(**lookup).update(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
