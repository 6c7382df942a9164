from apps.query_filters.models.term import Term, TaxonomyChoices, is_hierarchical
from apps.query_filters.models.post import Post
from apps.query_filters.models.page import Page
__all__ = [
    "Term",
    "TaxonomyChoices",
    "is_hierarchical",
    "Post",
    "Page",
]
