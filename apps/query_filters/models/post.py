"""Posts listed (and filtered) by listing blocks."""

from django.db import models
from django.utils import timezone

from apps.query_filters.models.term import Term


class Post(models.Model):
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    published_at = models.DateTimeField(default=timezone.now)
    terms = models.ManyToManyField(Term, related_name="posts", blank=True)

    class Meta:
        ordering = ("-published_at", "-pk")

    def __str__(self) -> str:
        return self.title
