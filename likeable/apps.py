from django.apps import AppConfig

class LikeableConfig(AppConfig):
    """Django app config for likeable; loads signal handlers on ready."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'likeable'
    verbose_name = 'Likes'

    def ready(self):
        """Import signal modules to register handlers."""
        import likeable.signals
