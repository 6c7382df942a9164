"""Query-string encoding of filter selections.

The wire contract is one parameter per filter instance,
``<list_id>-term-<instance_id>`` (comma-joined ids), plus the listing's page
parameter ``<list_id>-page``, which is reset to ``1`` on every filter change.
"""
from __future__ import annotations

from typing import Iterable, List, Tuple, Union
from urllib.parse import urlsplit, urlunsplit

from django.http import QueryDict

Selection = Union[str, List[str]]


def list_region_id(query_id) -> str:
    """Identifier of a listing block's router region, e.g. ``query-3``."""

    return f"query-{query_id}"


def term_parameter(list_id: str, instance_id) -> str:
    return f"{list_id}-term-{instance_id}"


def page_parameter(list_id: str) -> str:
    return f"{list_id}-page"


def join_selection(selection: Selection | None) -> str:
    if selection is None:
        return ""
    if isinstance(selection, (list, tuple)):
        return ",".join(str(value) for value in selection if str(value) != "")
    return str(selection)


def split_selection(raw: str | None) -> list[str]:
    return [part for part in (raw or "").split(",") if part]


def read_selection(url: str, list_id: str, instance_id, *, multiple: bool = False) -> Selection:
    """Read the selection for one filter instance from ``url``."""

    raw = QueryDict(urlsplit(url).query).get(term_parameter(list_id, instance_id), "")
    if multiple:
        return split_selection(raw)
    return raw


def write_url(url: str, updates: Iterable[Tuple[str, object]]) -> str:
    """Return ``url`` with each ``(key, value)`` applied in order.

    Updated keys are moved to the end of the query string in update order.
    An empty value removes the key. Other parameters keep their position.
    """

    parts = urlsplit(url)
    query = QueryDict(parts.query, mutable=True)
    for key, value in updates:
        query.pop(key, None)
        if value is None or value == "":
            continue
        query[key] = str(value)
    return urlunsplit(parts._replace(query=query.urlencode(safe=",")))


def selection_target(url: str, list_id: str, instance_id, selection: Selection | None) -> str:
    """Target URL after a filter change: new term value, first page."""

    return write_url(
        url,
        [
            (term_parameter(list_id, instance_id), join_selection(selection)),
            (page_parameter(list_id), "1"),
        ],
    )


__all__ = [
    "Selection",
    "list_region_id",
    "term_parameter",
    "page_parameter",
    "join_selection",
    "split_selection",
    "read_selection",
    "write_url",
    "selection_target",
]
