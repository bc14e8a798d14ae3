"""Create the Movie catalogue table."""

from __future__ import annotations

from django.db import migrations, models


class Migration(migrations.Migration):
    """Initial schema migration for movies.Movie."""

    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="Movie",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("year", models.PositiveIntegerField(db_index=True)),
                ("title", models.CharField(max_length=500)),
                ("studios", models.CharField(blank=True, default="", max_length=500)),
                ("producers", models.CharField(max_length=500)),
                ("winner", models.BooleanField(db_index=True, default=False)),
            ],
            options={
                "verbose_name": "Movie",
                "verbose_name_plural": "Movies",
                "ordering": ["year", "id"],
            },
        ),
    ]
