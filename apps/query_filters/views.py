"""JSON rendering of a page's listing blocks with their taxonomy filters."""

from __future__ import annotations

import logging

from django.core.paginator import Paginator
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404
from django.views import View

from apps.query_filters import conf
from apps.query_filters.configs import FilterInstanceConfig
from apps.query_filters.models import Page, Post
from apps.query_filters.services.filter_options import render_filter_control
from apps.query_filters.services.listing import (
    find_filter_blocks,
    find_listing,
    filter_listing,
    is_interactive,
)
from apps.query_filters.services.term_catalog import ModelTermCatalog
from apps.query_filters.services.url_params import list_region_id, page_parameter

log = logging.getLogger(__name__)


class ListingView(View):
    """Return the filter controls and current page of posts for one listing."""

    catalog_class = ModelTermCatalog

    def get(self, request, slug, query_id):
        page = get_object_or_404(Page, slug=slug)
        listing = find_listing(page.blocks, query_id)
        if listing is None:
            raise Http404(f"Listing {query_id} not found on page {slug}")

        list_id = list_region_id(query_id)
        catalog = self.catalog_class()

        queryset = Post.objects.prefetch_related("terms")
        interactive = is_interactive(listing)
        if interactive:
            queryset = filter_listing(listing, queryset, request.GET)

        filters = [
            render_filter_control(
                FilterInstanceConfig.from_attributes(block.attrs),
                catalog,
                list_id,
                request.GET,
            )
            for block in find_filter_blocks(listing)
        ]

        paginator = Paginator(queryset, conf.page_size())
        current = paginator.get_page(request.GET.get(page_parameter(list_id)))
        log.debug("Rendered %s page %s of %s", list_id, current.number, paginator.num_pages)

        return JsonResponse(
            {
                "list_id": list_id,
                "interactive": interactive,
                "filters": filters,
                "posts": [
                    {
                        "id": post.pk,
                        "title": post.title,
                        "slug": post.slug,
                        "terms": [term.pk for term in post.terms.all()],
                    }
                    for post in current.object_list
                ],
                "page": current.number,
                "num_pages": paginator.num_pages,
            }
        )
