from django.test import SimpleTestCase, override_settings

from apps.query_filters.services.block_tree import ParsedBlock, find_blocks, named
from apps.query_filters.services.listing import (
    build_list_clauses,
    collect_filter_instances,
    find_listing,
    is_interactive,
    list_id_for,
)

FILTER = "ctlt/query-taxonomy-filter"


def filter_block(instance_id, taxonomy="category", **attrs):
    attrs = {"instanceId": instance_id, "selectedTaxonomyType": taxonomy, **attrs}
    return {"blockName": FILTER, "attrs": attrs, "innerBlocks": []}


def listing(query_id=1, enhanced=True, inner=None):
    attrs = {"queryId": query_id}
    if enhanced is not None:
        attrs["enhancedPagination"] = enhanced
    return {"blockName": "core/query", "attrs": attrs, "innerBlocks": inner or []}


class BlockTreeTests(SimpleTestCase):
    def test_finds_nested_blocks_in_document_order(self):
        tree = ParsedBlock(
            listing(
                inner=[
                    {"blockName": "core/group", "innerBlocks": [filter_block(1)]},
                    filter_block(2, "post_tag"),
                    {"blockName": "core/post-template", "innerBlocks": [{"blockName": "core/columns", "innerBlocks": [filter_block(3)]}]},
                ]
            )
        )
        found = find_blocks(tree, named(FILTER))
        self.assertEqual([b.attrs["instanceId"] for b in found], [1, 2, 3])

    def test_matching_block_subtree_is_not_searched(self):
        outer = filter_block(1)
        outer["innerBlocks"] = [filter_block(2)]
        found = find_blocks(ParsedBlock(listing(inner=[outer])), named(FILTER))
        self.assertEqual([b.attrs["instanceId"] for b in found], [1])

    def test_tolerates_missing_or_malformed_inner_blocks(self):
        tree = ParsedBlock({"blockName": "core/query", "innerBlocks": "oops"})
        self.assertEqual(find_blocks(tree, named(FILTER)), [])
        tree = ParsedBlock({"blockName": "core/query"})
        self.assertEqual(tree.children, [])
        self.assertEqual(tree.attrs, {})

    def test_works_with_any_node_type(self):
        class Node:
            def __init__(self, label, children=()):
                self.label = label
                self.children = list(children)

        root = Node("root", [Node("a", [Node("x")]), Node("x", [Node("x")])])
        found = find_blocks(root, lambda node: node.label == "x")
        self.assertEqual(len(found), 2)


class ListingHookTests(SimpleTestCase):
    def test_is_interactive_requires_enhanced_pagination_and_query_id(self):
        self.assertTrue(is_interactive(listing()))
        self.assertFalse(is_interactive(listing(enhanced=False)))
        self.assertFalse(is_interactive(listing(enhanced=None)))
        self.assertFalse(is_interactive(listing(enhanced="true")))
        self.assertFalse(is_interactive({"blockName": "core/query", "attrs": {"enhancedPagination": True}}))
        self.assertFalse(is_interactive({"blockName": "core/group", "attrs": {"enhancedPagination": True, "queryId": 1}}))

    def test_list_id(self):
        self.assertEqual(list_id_for(listing(query_id=5)), "query-5")

    def test_collect_filter_instances_skips_incomplete_blocks(self):
        block = listing(
            inner=[
                filter_block(1),
                filter_block(2, "post_tag"),
                {"blockName": FILTER, "attrs": {"instanceId": 3}},
                {"blockName": FILTER, "attrs": {"selectedTaxonomyType": "category"}},
            ]
        )
        self.assertEqual(collect_filter_instances(block), {1: "category", 2: "post_tag"})

    def test_build_list_clauses(self):
        block = listing(query_id=1, inner=[filter_block(2)])
        clauses = build_list_clauses(block, {"query-1-term-2": "7,9", "query-2-term-2": "1"})
        self.assertEqual([c.as_dict() for c in clauses], [
            {"taxonomy": "category", "terms": ["7", "9"], "include_children": False},
        ])

    def test_no_clauses_without_enhanced_pagination(self):
        block = listing(query_id=1, enhanced=False, inner=[filter_block(2)])
        self.assertEqual(build_list_clauses(block, {"query-1-term-2": "7"}), [])

    def test_find_listing_by_query_id(self):
        blocks = [
            {"blockName": "core/paragraph"},
            {"blockName": "core/group", "innerBlocks": [listing(query_id=3)]},
            listing(query_id=4),
        ]
        self.assertEqual(find_listing(blocks, "3").attrs["queryId"], 3)
        self.assertEqual(find_listing(blocks, 4).attrs["queryId"], 4)
        self.assertIsNone(find_listing(blocks, 9))

    @override_settings(QUERY_FILTERS_FILTER_BLOCK="acme/term-filter")
    def test_filter_block_name_is_configurable(self):
        custom = {"blockName": "acme/term-filter", "attrs": {"instanceId": 8, "selectedTaxonomyType": "post_tag"}}
        block = listing(inner=[custom, filter_block(1)])
        self.assertEqual(collect_filter_instances(block), {8: "post_tag"})
