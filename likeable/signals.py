from django.db.models.signals import pre_delete
from django.dispatch import receiver

from likeable.models import Likeable


@receiver(pre_delete, dispatch_uid="likeable.remove_likes_on_delete")
def remove_likes_on_delete(sender, instance, **kwargs):
    """Purge reactions and counters of a likeable row being deleted."""
    if not isinstance(instance, Likeable):
        return
    if not sender.should_remove_likes_on_delete():
        return
    for reaction_type in sender.cleanup_types():
        instance.remove_likes(reaction_type)
