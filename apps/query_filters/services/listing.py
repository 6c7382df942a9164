"""Inject taxonomy filters into an interactive listing's query."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from django.db.models import QuerySet

from apps.query_filters import conf
from apps.query_filters.services.block_tree import ParsedBlock, find_blocks, named
from apps.query_filters.services.query_clauses import (
    TaxonomyClause,
    apply_taxonomy_clauses,
    build_taxonomy_clauses,
)
from apps.query_filters.services.url_params import list_region_id

log = logging.getLogger(__name__)


def _as_block(block: ParsedBlock | Mapping[str, Any]) -> ParsedBlock:
    return block if isinstance(block, ParsedBlock) else ParsedBlock(block)


def is_interactive(block: ParsedBlock | Mapping[str, Any]) -> bool:
    """True for a listing block with enhanced pagination and a query id."""

    block = _as_block(block)
    if block.name != conf.list_block_name():
        return False
    attrs = block.attrs
    return attrs.get("enhancedPagination") is True and attrs.get("queryId") is not None


def list_id_for(block: ParsedBlock | Mapping[str, Any]) -> Optional[str]:
    query_id = _as_block(block).attrs.get("queryId")
    return list_region_id(query_id) if query_id is not None else None


def find_filter_blocks(block: ParsedBlock | Mapping[str, Any]) -> List[ParsedBlock]:
    return find_blocks(_as_block(block), named(conf.filter_block_name()))


def collect_filter_instances(block: ParsedBlock | Mapping[str, Any]) -> Dict[Any, str]:
    """Map each nested filter's ``instanceId`` to its taxonomy."""

    instances: Dict[Any, str] = {}
    for filter_block in find_filter_blocks(block):
        attrs = filter_block.attrs
        if "instanceId" not in attrs or "selectedTaxonomyType" not in attrs:
            continue
        instances[attrs["instanceId"]] = attrs["selectedTaxonomyType"]
    return instances


def build_list_clauses(
    block: ParsedBlock | Mapping[str, Any],
    request_parameters: Mapping[str, Any] | None,
) -> List[TaxonomyClause]:
    """Clauses for ``block``; empty unless the listing is interactive."""

    if not is_interactive(block):
        return []
    list_id = list_id_for(block)
    instances = collect_filter_instances(block)
    clauses = build_taxonomy_clauses(list_id, instances, request_parameters)
    log.debug("Listing %s: %s filter instance(s), %s clause(s)", list_id, len(instances), len(clauses))
    return clauses


def filter_listing(
    block: ParsedBlock | Mapping[str, Any],
    queryset: QuerySet,
    request_parameters: Mapping[str, Any] | None,
) -> QuerySet:
    return apply_taxonomy_clauses(queryset, build_list_clauses(block, request_parameters))


def find_listing(blocks, query_id) -> Optional[ParsedBlock]:
    """Locate the listing block with ``queryId == query_id`` in a page tree."""

    root = ParsedBlock({"blockName": None, "innerBlocks": list(blocks or [])})
    for listing in find_blocks(root, named(conf.list_block_name())):
        if str(listing.attrs.get("queryId")) == str(query_id):
            return listing
    return None


__all__ = [
    "is_interactive",
    "list_id_for",
    "find_filter_blocks",
    "collect_filter_instances",
    "build_list_clauses",
    "filter_listing",
    "find_listing",
]
