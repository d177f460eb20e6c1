"""Shared constants for reaction types and table names."""

DEFAULT_TYPE = "like"

# Types purged from the stores when a host row is deleted, unless overridden.
DEFAULT_CLEANUP_TYPES = (DEFAULT_TYPE,)

TYPE_MAX_LENGTH = 50

LIKES_TABLE = "likes"
LIKE_COUNTERS_TABLE = "like_counters"
