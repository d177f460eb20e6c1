"""
User resolvers and actor resolution.

A resolver is any callable ``resolver(guard) -> user | None``. The likeable
operations never read the "current user" from ambient state: callers pass a
resolved user, or a guard name together with a resolver that knows how to
answer for that guard.
"""

from django.contrib.auth.base_user import AbstractBaseUser

from likeable.conf import default_resolver

DEFAULT_GUARD = "default"


def _authenticated(user):
    """Return user when it is an authenticated account, else None."""
    if user is None:
        return None
    if not getattr(user, "is_authenticated", False):
        return None
    return user


def request_resolver(request):
    """Build a resolver returning the authenticated user of a request."""

    def resolve(guard=None):
        return _authenticated(getattr(request, "user", None))

    return resolve


def static_resolver(user):
    """Build a resolver that always answers with ``user``."""

    def resolve(guard=None):
        return user

    return resolve


def guard_resolver(mapping):
    """
    Build a resolver dispatching on guard name.

    ``mapping`` maps guard names to resolvers; a None guard uses the
    ``"default"`` entry. Unknown guards resolve to no user.
    """

    def resolve(guard=None):
        inner = mapping.get(guard if guard is not None else DEFAULT_GUARD)
        if inner is None:
            return None
        return inner(guard)

    return resolve


def resolve_actor(actor, resolver=None):
    """
    Resolve an actor argument to an authenticated user or None.

    - user instances are used directly
    - a string or None is a guard name handed to the resolver (the
      configured LIKEABLE_USER_RESOLVER when none is passed)
    - anything else (0, False, ...) means no user
    """
    if isinstance(actor, AbstractBaseUser):
        return _authenticated(actor)
    if actor is None or isinstance(actor, str):
        resolver = resolver or default_resolver()
        if resolver is None:
            return None
        return _authenticated(resolver(actor))
    return None
