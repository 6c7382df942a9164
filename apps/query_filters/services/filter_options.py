"""Server-side rendering data for a single filter control."""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Dict, List

from apps.query_filters.configs import FilterInstanceConfig
from apps.query_filters.models.term import is_hierarchical
from apps.query_filters.services.child_terms import expand_terms
from apps.query_filters.services.term_catalog import NOT_LOADED, FetchResult, TermCatalog, TermQuery
from apps.query_filters.services.url_params import term_parameter

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


def absint(value: Any) -> int:
    """Non-negative integer from the leading digits of ``value``, else 0."""

    if isinstance(value, int):
        return abs(value)
    match = _LEADING_INT.match(str(value or ""))
    return abs(int(match.group(0))) if match else 0


def checkbox_group_name(instance_id) -> str:
    return f"query-{instance_id}-term[]"


def filter_options(config: FilterInstanceConfig, catalog: TermCatalog) -> FetchResult:
    """Terms offered by the control described by ``config``.

    Child-only applies to hierarchical taxonomies and "all terms" to flat
    ones; otherwise the configured terms are offered, minus any that no
    longer exist.
    """

    taxonomy = config.taxonomy_type
    if config.child_only and is_hierarchical(taxonomy):
        return expand_terms(config.selected_term_ids, True, catalog, taxonomy)
    if config.include_all_terms and not is_hierarchical(taxonomy):
        return catalog.fetch(taxonomy, TermQuery.all())
    return expand_terms(config.selected_term_ids, False, catalog, taxonomy)


def selected_terms_from_params(params: Mapping[str, Any] | None, list_id: str, instance_id) -> List[int]:
    raw = (params or {}).get(term_parameter(list_id, instance_id))
    if not raw:
        return []
    return [absint(part) for part in str(raw).split(",")]


def render_filter_control(
    config: FilterInstanceConfig,
    catalog: TermCatalog,
    list_id: str,
    params: Mapping[str, Any] | None,
) -> Dict[str, Any]:
    """Everything a template needs to draw one filter control.

    While the catalog is loading ``options`` is ``None`` (not an empty list).
    """

    selected = selected_terms_from_params(params, list_id, config.instance_id)
    records = filter_options(config, catalog)
    if records is NOT_LOADED:
        options = None
    else:
        options = [
            {"id": record.id, "name": record.name, "selected": record.id in selected}
            for record in records
        ]
    return {
        "instance_id": config.instance_id,
        "taxonomy": config.taxonomy_type,
        "label": config.label,
        "input_type": config.input_type,
        "parameter": term_parameter(list_id, config.instance_id),
        "name": checkbox_group_name(config.instance_id) if config.multiple else None,
        "selected": selected,
        "options": options,
    }


__all__ = [
    "absint",
    "checkbox_group_name",
    "filter_options",
    "selected_terms_from_params",
    "render_filter_control",
]
