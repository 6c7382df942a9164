import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

import apps.query_filters.models.page


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Term",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "taxonomy",
                    models.CharField(
                        choices=[("category", "Category"), ("post_tag", "Tag")],
                        db_index=True,
                        default="category",
                        max_length=32,
                    ),
                ),
                ("name", models.CharField(max_length=200)),
                ("slug", models.SlugField(max_length=200)),
                (
                    "parent",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="children",
                        to="query_filters.term",
                    ),
                ),
            ],
            options={
                "ordering": ("taxonomy", "name", "pk"),
            },
        ),
        migrations.AddConstraint(
            model_name="term",
            constraint=models.UniqueConstraint(fields=("taxonomy", "slug"), name="unique_term_slug_per_taxonomy"),
        ),
        migrations.CreateModel(
            name="Post",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("slug", models.SlugField(max_length=255, unique=True)),
                ("published_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("terms", models.ManyToManyField(blank=True, related_name="posts", to="query_filters.term")),
            ],
            options={
                "ordering": ("-published_at", "-pk"),
            },
        ),
        migrations.CreateModel(
            name="Page",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("slug", models.SlugField(max_length=255, unique=True)),
                (
                    "blocks",
                    models.JSONField(
                        blank=True,
                        default=list,
                        validators=[apps.query_filters.models.page.validate_block_list],
                    ),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ("title",),
            },
        ),
    ]
