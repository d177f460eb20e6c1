import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("contenttypes", "0002_remove_content_type_name"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Like",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("type", models.CharField(default="like", max_length=50)),
                ("object_id", models.PositiveBigIntegerField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("content_type", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="contenttypes.contenttype")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="likeable_likes", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "likes",
            },
        ),
        migrations.CreateModel(
            name="LikeCounter",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("type", models.CharField(default="like", max_length=50)),
                ("object_id", models.PositiveBigIntegerField()),
                ("count", models.PositiveIntegerField(default=0)),
                ("content_type", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="contenttypes.contenttype")),
            ],
            options={
                "db_table": "like_counters",
            },
        ),
        migrations.AddIndex(
            model_name="like",
            index=models.Index(fields=["content_type", "object_id", "type"], name="likes_target_type_idx"),
        ),
        migrations.AddConstraint(
            model_name="like",
            constraint=models.UniqueConstraint(fields=("object_id", "content_type", "user", "type"), name="likeable_likes_unique"),
        ),
        migrations.AddConstraint(
            model_name="likecounter",
            constraint=models.UniqueConstraint(fields=("object_id", "content_type", "type"), name="likeable_counts"),
        ),
    ]
