"""Turn filter query parameters into taxonomy clauses for a listing query."""
from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from django.db.models import QuerySet

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaxonomyClause:
    taxonomy: str
    terms: Tuple[str, ...]
    include_children: bool = False

    def as_dict(self) -> Dict[str, Any]:
        return {
            "taxonomy": self.taxonomy,
            "terms": list(self.terms),
            "include_children": self.include_children,
        }


def _normalize_instances(instance_configs: Mapping[Any, str]) -> Dict[int, str]:
    normalized: Dict[int, str] = {}
    for key, taxonomy in (instance_configs or {}).items():
        try:
            normalized[int(key)] = taxonomy
        except (TypeError, ValueError):
            continue
    return normalized


def term_parameter_pattern(list_id: str) -> re.Pattern:
    return re.compile(rf"^{re.escape(list_id)}-term-(?P<instance_id>\d+)$")


def build_taxonomy_clauses(
    list_id: str,
    instance_configs: Mapping[Any, str],
    request_parameters: Mapping[str, Any] | None,
) -> List[TaxonomyClause]:
    """Build one clause per filter parameter belonging to ``list_id``.

    Parameters for unknown instances or other listings are ignored. Term ids
    are passed through as strings without validation; the query engine
    decides what to do with ids that are not numeric.
    """

    instances = _normalize_instances(instance_configs)
    pattern = term_parameter_pattern(list_id)
    clauses: List[TaxonomyClause] = []
    if not request_parameters:
        return clauses

    for key, value in request_parameters.items():
        if not isinstance(key, str):
            continue
        match = pattern.match(key)
        if not match or not value:
            continue
        instance_id = int(match.group("instance_id"))
        taxonomy = instances.get(instance_id)
        if taxonomy is None:
            continue
        terms = tuple(str(value).split(","))
        clauses.append(TaxonomyClause(taxonomy=taxonomy, terms=terms))
        log.debug("Filter %s on %s adds %s terms %s", instance_id, list_id, taxonomy, terms)
    return clauses


def _valid_ids(terms: Sequence[str]) -> List[int]:
    ids = []
    for term in terms:
        token = str(term).strip()
        if token.isdigit():
            ids.append(int(token))
    return ids


def apply_taxonomy_clauses(
    queryset: QuerySet,
    clauses: Sequence[TaxonomyClause],
    *,
    field: str = "terms",
) -> QuerySet:
    """Restrict ``queryset`` to rows tagged with each clause's terms.

    Clauses are combined with AND; terms inside a clause with OR. Ids that are
    not numeric are ignored, and a clause left without ids matches nothing.
    """

    if not clauses:
        return queryset
    for clause in clauses:
        ids = _valid_ids(clause.terms)
        if not ids:
            log.debug("Clause on %s has no usable term ids: %s", clause.taxonomy, clause.terms)
            return queryset.none()
        queryset = queryset.filter(**{f"{field}__in": ids, f"{field}__taxonomy": clause.taxonomy})
    return queryset.distinct()


__all__ = [
    "TaxonomyClause",
    "term_parameter_pattern",
    "build_taxonomy_clauses",
    "apply_taxonomy_clauses",
]
