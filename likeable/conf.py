"""Settings lookups for the likeable app, with package defaults."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from likeable.constants import DEFAULT_CLEANUP_TYPES


def remove_likes_on_delete_default() -> bool:
    """Return the global cascade-on-delete default (True unless disabled)."""
    return bool(getattr(settings, "LIKEABLE_REMOVE_LIKES_ON_DELETE", True))


def cleanup_types_default():
    """Return the reaction types purged when a host is deleted."""
    types = getattr(settings, "LIKEABLE_CLEANUP_TYPES", DEFAULT_CLEANUP_TYPES)
    if isinstance(types, str):
        return (types,)
    return tuple(types)


def default_resolver():
    """
    Return the configured default user resolver, or None.

    LIKEABLE_USER_RESOLVER may be a callable or a dotted path to one.
    """
    resolver = getattr(settings, "LIKEABLE_USER_RESOLVER", None)
    if resolver is None or callable(resolver):
        return resolver
    try:
        resolver = import_string(resolver)
    except ImportError as e:
        raise ImproperlyConfigured(
            f"LIKEABLE_USER_RESOLVER could not be imported: {e}"
        ) from e
    if not callable(resolver):
        raise ImproperlyConfigured("LIKEABLE_USER_RESOLVER must point to a callable.")
    return resolver
