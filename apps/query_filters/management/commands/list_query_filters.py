from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from apps.query_filters import conf
from apps.query_filters.models import Page
from apps.query_filters.services.block_tree import ParsedBlock, find_blocks, named
from apps.query_filters.services.listing import collect_filter_instances, is_interactive, list_id_for
from apps.query_filters.services.url_params import term_parameter


class Command(BaseCommand):
    help = "List the taxonomy filter instances of every listing on a page, with their URL parameters."

    def add_arguments(self, parser):
        parser.add_argument("slug", help="Page slug")

    def handle(self, *args, **options):
        try:
            page = Page.objects.get(slug=options["slug"])
        except Page.DoesNotExist as exc:
            raise CommandError(f"Page '{options['slug']}' does not exist") from exc

        root = ParsedBlock({"blockName": None, "innerBlocks": page.blocks or []})
        listings = find_blocks(root, named(conf.list_block_name()))
        if not listings:
            self.stdout.write(self.style.WARNING(f"No listings on page: {page.slug}"))
            return

        for listing in listings:
            list_id = list_id_for(listing) or "(no queryId)"
            if not is_interactive(listing):
                self.stdout.write(self.style.WARNING(f"{list_id}: enhanced pagination off, filters inactive"))
                continue
            instances = collect_filter_instances(listing)
            self.stdout.write(self.style.SUCCESS(f"{list_id}: {len(instances)} filter(s)"))
            for instance_id, taxonomy in instances.items():
                self.stdout.write(f"  {term_parameter(list_id, instance_id)} -> {taxonomy}")
