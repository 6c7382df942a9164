"""Pages persisted as a parsed block tree."""

from django.core.exceptions import ValidationError
from django.db import models


def validate_block_list(value) -> None:
    """Require the stored tree to be a list of block mappings."""

    if not isinstance(value, list):
        raise ValidationError("Page blocks must be a list.")
    for block in value:
        if not isinstance(block, dict) or "blockName" not in block:
            raise ValidationError("Each block must be an object with a 'blockName'.")


class Page(models.Model):
    """A page whose content is a list of parsed blocks.

    Each block is a mapping with ``blockName``, ``attrs`` and ``innerBlocks``.
    Listing blocks carry ``queryId``/``enhancedPagination`` in ``attrs`` and
    hold filter blocks somewhere below them.
    """

    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    blocks = models.JSONField(default=list, blank=True, validators=[validate_block_list])
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("title",)

    def __str__(self) -> str:
        return self.title
