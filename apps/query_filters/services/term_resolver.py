"""Map user-entered term labels to canonical term ids.

Tokens come from a multi-value token field: plain strings for freshly typed
labels, or ``{"id": ..., "value": ...}`` mappings for tokens that were already
resolved. Terms may be :class:`~apps.query_filters.configs.TermRecord`
instances or plain mappings.
"""
from __future__ import annotations

import html
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Sequence


def _field(term: Any, name: str) -> Any:
    if isinstance(term, Mapping):
        return term.get(name)
    return getattr(term, name, None)


def _token_id(token: Any) -> Any:
    if isinstance(token, Mapping):
        return token.get("id")
    if isinstance(token, str):
        return None
    return getattr(token, "id", None)


def _token_text(token: Any) -> str:
    if isinstance(token, Mapping):
        return str(token.get("value") or "")
    if isinstance(token, str):
        return token
    return str(getattr(token, "value", "") or "")


def resolve_term_id(terms: Sequence[Any], token: Any, name_field: str = "name") -> Optional[Any]:
    """Return the id for ``token`` or ``None`` when nothing matches.

    Exact (case-sensitive) name matches win. Otherwise the first term in
    catalog order whose lower-cased name equals the lower-cased token is used,
    since names are only unique per slug and may collide ignoring case.
    """

    token_id = _token_id(token)
    if token_id is not None:
        return token_id

    text = _token_text(token)
    for term in terms:
        if _field(term, name_field) == text:
            return _field(term, "id")

    lowered = text.lower()
    for term in terms:
        name = _field(term, name_field)
        if isinstance(name, str) and name.lower() == lowered:
            return _field(term, "id")
    return None


def resolve_term_ids(
    terms: Sequence[Any],
    tokens: Iterable[Any],
    name_field: str = "name",
) -> List[Any]:
    """Resolve every token, keeping unique ids in first-seen order."""

    ids: Dict[Any, None] = {}
    for token in tokens or ():
        term_id = resolve_term_id(terms, token, name_field)
        if term_id is None:
            continue
        ids.setdefault(term_id, None)
    return list(ids)


def token_values(
    terms: Sequence[Any],
    term_ids: Iterable[Any],
    name_field: str = "name",
) -> List[Dict[str, Any]]:
    """Turn stored ids back into ``{"id", "value"}`` tokens.

    Ids missing from ``terms`` (deleted since they were saved) are dropped.
    """

    by_id = {_field(term, "id"): term for term in terms}
    tokens = []
    for term_id in term_ids or ():
        term = by_id.get(term_id)
        if term is None:
            continue
        tokens.append({"id": term_id, "value": html.unescape(str(_field(term, name_field) or ""))})
    return tokens


def term_suggestions(terms: Sequence[Any], name_field: str = "name") -> List[str]:
    return [str(_field(term, name_field)) for term in terms]


__all__ = ["resolve_term_id", "resolve_term_ids", "token_values", "term_suggestions"]
