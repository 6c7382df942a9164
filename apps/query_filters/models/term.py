"""Taxonomy terms (categories and tags) used to classify posts."""

from django.db import models


class TaxonomyChoices(models.TextChoices):
    """Term namespaces a filter control can target."""

    CATEGORY = "category", "Category"
    POST_TAG = "post_tag", "Tag"


HIERARCHICAL_TAXONOMIES = frozenset({TaxonomyChoices.CATEGORY.value})


def is_hierarchical(taxonomy: str) -> bool:
    return str(taxonomy) in HIERARCHICAL_TAXONOMIES


class Term(models.Model):
    """A single category or tag. Only hierarchical taxonomies use ``parent``."""

    taxonomy = models.CharField(
        max_length=32,
        choices=TaxonomyChoices.choices,
        default=TaxonomyChoices.CATEGORY,
        db_index=True,
    )
    name = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200)
    parent = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="children",
    )

    class Meta:
        ordering = ("taxonomy", "name", "pk")
        constraints = [
            models.UniqueConstraint(
                fields=("taxonomy", "slug"),
                name="unique_term_slug_per_taxonomy",
            ),
        ]

    def __str__(self) -> str:
        return self.name
