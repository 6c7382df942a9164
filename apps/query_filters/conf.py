"""App-level settings with project overrides."""
from __future__ import annotations

from django.conf import settings

DEFAULT_LIST_BLOCK = "core/query"
DEFAULT_FILTER_BLOCK = "ctlt/query-taxonomy-filter"
DEFAULT_PAGE_SIZE = 10


def list_block_name() -> str:
    return getattr(settings, "QUERY_FILTERS_LIST_BLOCK", DEFAULT_LIST_BLOCK)


def filter_block_name() -> str:
    return getattr(settings, "QUERY_FILTERS_FILTER_BLOCK", DEFAULT_FILTER_BLOCK)


def page_size() -> int:
    try:
        size = int(getattr(settings, "QUERY_FILTERS_PAGE_SIZE", DEFAULT_PAGE_SIZE))
    except (TypeError, ValueError):
        return DEFAULT_PAGE_SIZE
    return size if size > 0 else DEFAULT_PAGE_SIZE
