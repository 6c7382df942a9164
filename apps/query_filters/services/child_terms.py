"""Compute the terms a filter control offers from its configured selection."""
from __future__ import annotations

import logging
from typing import Iterable, List

from apps.query_filters.configs import TermRecord
from apps.query_filters.services.term_catalog import NOT_LOADED, FetchResult, TermCatalog, TermQuery

log = logging.getLogger(__name__)


def expand_terms(
    selected_ids: Iterable[int],
    child_only: bool,
    catalog: TermCatalog,
    taxonomy: str,
) -> FetchResult:
    """Return the selected terms, or the direct children of each selected id.

    With ``child_only`` the per-parent results are concatenated in input order
    and not deduplicated. Any ``NOT_LOADED`` fetch makes the whole result
    ``NOT_LOADED``.
    """

    ids = list(selected_ids or ())

    if child_only:
        children: List[TermRecord] = []
        for term_id in ids:
            fetched = catalog.fetch(taxonomy, TermQuery.children_of(term_id))
            if fetched is NOT_LOADED:
                return NOT_LOADED
            children.extend(fetched)
        log.debug("Expanded %s parent(s) into %s child term(s)", len(ids), len(children))
        return children

    if not ids:
        return []
    fetched = catalog.fetch(taxonomy, TermQuery.ids(ids))
    if fetched is NOT_LOADED:
        return NOT_LOADED
    by_id = {record.id: record for record in fetched}
    return [by_id[term_id] for term_id in ids if term_id in by_id]


__all__ = ["expand_terms"]
