from faker import Faker
from django.contrib.auth import get_user_model
from django.contrib.contenttypes.models import ContentType

from likeable.models import Like, LikeCounter
from likeable.tests.testapp.models import Article, Book, Note

faker = Faker()
User = get_user_model()


def make_user(**kwargs):
    """Create and return a user with fake, unique credentials."""
    return User.objects.create_user(
        username=kwargs.pop("username", faker.unique.user_name()),
        email=kwargs.pop("email", faker.unique.email()),
        password=kwargs.pop("password", faker.password()),
        **kwargs,
    )


def make_users(count):
    return [make_user() for _ in range(count)]


def make_book(**extra):
    """Create and return a book with a fake name."""
    return Book.objects.create(name=extra.pop("name", faker.word()), **extra)


def make_article(**extra):
    return Article.objects.create(title=extra.pop("title", faker.sentence()), **extra)


def make_note(**extra):
    return Note.objects.create(text=extra.pop("text", faker.sentence()), **extra)


def count_likes(target, **lookup):
    """Count Like rows pointing at target."""
    return Like.objects.filter(
        content_type=ContentType.objects.get_for_model(target),
        object_id=target.pk,
        **lookup,
    ).count()


def counter_rows(target, **lookup):
    """Return LikeCounter rows pointing at target."""
    return LikeCounter.objects.filter(
        content_type=ContentType.objects.get_for_model(target),
        object_id=target.pk,
        **lookup,
    )
