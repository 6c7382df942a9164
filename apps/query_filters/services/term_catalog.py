"""Term lookup capability injected into expansion and rendering.

``fetch`` returns either a list of :class:`TermRecord` or the ``NOT_LOADED``
sentinel. ``NOT_LOADED`` means the catalog cannot answer yet and is distinct
from an empty result; callers must not render options for it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple, Union

from apps.query_filters.configs import TermRecord
from apps.query_filters.models.term import Term


class _NotLoaded:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_LOADED"


NOT_LOADED = _NotLoaded()

FetchResult = Union[List[TermRecord], _NotLoaded]


@dataclass(frozen=True)
class TermQuery:
    """Criteria for a catalog fetch.

    ``include`` limits results to those ids, ``parent`` to direct children of
    one id. Neither set means every term of the taxonomy.
    """

    include: Optional[Tuple[int, ...]] = None
    parent: Optional[int] = None

    @classmethod
    def all(cls) -> "TermQuery":
        return cls()

    @classmethod
    def ids(cls, ids: Iterable[int]) -> "TermQuery":
        return cls(include=tuple(ids))

    @classmethod
    def children_of(cls, parent: int) -> "TermQuery":
        return cls(parent=parent)


class TermCatalog(Protocol):
    def fetch(self, taxonomy: str, query: TermQuery) -> FetchResult:
        ...


class ModelTermCatalog:
    """Catalog backed by the :class:`Term` table."""

    def fetch(self, taxonomy: str, query: TermQuery) -> FetchResult:
        qs = Term.objects.filter(taxonomy=taxonomy)
        if query.include is not None:
            qs = qs.filter(pk__in=list(query.include))
        if query.parent is not None:
            qs = qs.filter(parent_id=query.parent)
        return [TermRecord.from_model(term) for term in qs.order_by("name", "pk")]


class StaticTermCatalog:
    """In-memory catalog, e.g. for editor previews fed from an API payload.

    Pass ``terms=None`` to model a catalog that has not finished loading.
    """

    def __init__(self, terms: Optional[dict[str, Sequence[TermRecord]]] = None):
        self._terms = None if terms is None else {k: list(v) for k, v in terms.items()}
        self.calls: List[Tuple[str, TermQuery]] = []

    @property
    def loaded(self) -> bool:
        return self._terms is not None

    def fetch(self, taxonomy: str, query: TermQuery) -> FetchResult:
        self.calls.append((taxonomy, query))
        if self._terms is None:
            return NOT_LOADED
        records = self._terms.get(taxonomy, [])
        if query.include is not None:
            wanted = set(query.include)
            records = [r for r in records if r.id in wanted]
        if query.parent is not None:
            records = [r for r in records if r.parent_id == query.parent]
        return list(records)


__all__ = [
    "NOT_LOADED",
    "FetchResult",
    "TermQuery",
    "TermCatalog",
    "ModelTermCatalog",
    "StaticTermCatalog",
]
