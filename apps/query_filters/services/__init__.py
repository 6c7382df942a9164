"""Service layer for taxonomy filter operations."""

from .term_resolver import resolve_term_id, resolve_term_ids
from .child_terms import expand_terms
from .query_clauses import TaxonomyClause, apply_taxonomy_clauses, build_taxonomy_clauses
from .listing import build_list_clauses, filter_listing
from .url_params import read_selection, selection_target, write_url

__all__ = [
    "resolve_term_id",
    "resolve_term_ids",
    "expand_terms",
    "TaxonomyClause",
    "apply_taxonomy_clauses",
    "build_taxonomy_clauses",
    "build_list_clauses",
    "filter_listing",
    "read_selection",
    "selection_target",
    "write_url",
]
