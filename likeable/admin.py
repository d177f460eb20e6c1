from django.contrib import admin, messages
from django.contrib.contenttypes.models import ContentType

from likeable.models import Like, LikeCounter
from likeable.repos.counter_repo import LikeCounterRepo


@admin.register(Like)
class LikeAdmin(admin.ModelAdmin):
    """Admin listing of individual reactions."""
    list_display = ('user', 'type', 'content_type', 'object_id', 'created_at')
    list_filter = ('type', 'content_type')
    search_fields = ('user__username',)
    raw_id_fields = ('user',)


@admin.register(LikeCounter)
class LikeCounterAdmin(admin.ModelAdmin):
    """Admin listing of counters with a rebuild action."""
    list_display = ('content_type', 'object_id', 'type', 'count')
    list_filter = ('type', 'content_type')
    actions = ['rebuild_counters']

    @admin.action(description='Rebuild counters for the selected content types')
    def rebuild_counters(self, request, queryset):
        """Recompute every counter of the content types in the selection."""
        repo = LikeCounterRepo()
        content_type_ids = set(queryset.values_list('content_type_id', flat=True))
        created = 0
        for content_type_id in content_type_ids:
            created += repo.rebuild(ContentType.objects.get_for_id(content_type_id))
        self.message_user(
            request,
            f"Rebuilt {created} counters across {len(content_type_ids)} content types.",
            messages.SUCCESS,
        )
