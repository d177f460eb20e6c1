"""Helpers for polymorphic (content type, object id) references."""

from typing import Any, Dict

from django.apps import apps
from django.contrib.contenttypes.models import ContentType
from django.db.models import Model


def target_lookup(target: Model) -> Dict[str, Any]:
    """Return the filter kwargs addressing rows that belong to ``target``."""
    if target.pk is None:
        raise ValueError(
            f"{target.__class__.__name__} must be saved before it can be liked."
        )
    return {
        "content_type": ContentType.objects.get_for_model(target),
        "object_id": target.pk,
    }


def resolve_content_type(discriminator) -> ContentType:
    """
    Turn a discriminator into a ContentType.

    Accepts a ContentType, a model class, a model instance or an
    ``"app_label.model"`` label. Unknown labels raise LookupError.
    """
    if isinstance(discriminator, ContentType):
        return discriminator
    if isinstance(discriminator, str):
        model = apps.get_model(discriminator)
        return ContentType.objects.get_for_model(model)
    if isinstance(discriminator, Model) or (
        isinstance(discriminator, type) and issubclass(discriminator, Model)
    ):
        return ContentType.objects.get_for_model(discriminator)
    raise TypeError(f"Cannot resolve a content type from {discriminator!r}.")
