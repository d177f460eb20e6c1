from django.contrib.contenttypes.models import ContentType
from django.core.management.base import BaseCommand, CommandError

from likeable.models import Like, LikeCounter
from likeable.repos.counter_repo import LikeCounterRepo
from likeable.targets import resolve_content_type

class Command(BaseCommand):
    """
    Management command to recompute like counters from the likes table.

    Counters drift when reactions are written or deleted without going
    through the likeable API (bulk deletes, user deletion, raw SQL). This
    command replaces the counter rows of each given model with totals
    counted from the likes table.

    Attributes:
        help (str): Short description displayed when running
            `python manage.py help rebuild_like_counters`.
    """

    help = 'Rebuilds like counters from recorded likes'

    def add_arguments(self, parser):
        """Accept model labels, or --all for every liked content type."""
        parser.add_argument(
            "labels",
            nargs="*",
            metavar="app_label.model",
            help="Models whose counters should be rebuilt.",
        )
        parser.add_argument(
            "--all",
            action="store_true",
            help="Rebuild counters for every content type present in the likes or like_counters table.",
        )

    def handle(self, *args, **options):
        """Rebuild each requested content type and report the totals."""
        content_types = self._content_types(options["labels"], options["all"])
        repo = LikeCounterRepo()
        for content_type in content_types:
            created = repo.rebuild(content_type)
            self.stdout.write(
                self.style.SUCCESS(f"Rebuilt {created} counters for {content_type.app_label}.{content_type.model}.")
            )

    def _content_types(self, labels, rebuild_all):
        if rebuild_all:
            if labels:
                raise CommandError("Pass model labels or --all, not both.")
            ids = set(Like.objects.values_list("content_type_id", flat=True).distinct())
            ids.update(LikeCounter.objects.values_list("content_type_id", flat=True).distinct())
            return list(ContentType.objects.filter(id__in=ids).order_by("app_label", "model"))
        if not labels:
            raise CommandError("Pass at least one app_label.model label, or --all.")
        try:
            return [resolve_content_type(label) for label in labels]
        except (LookupError, ValueError) as e:
            raise CommandError(str(e)) from e
