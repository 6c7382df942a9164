from django.test import SimpleTestCase

from apps.query_filters.configs import TermRecord
from apps.query_filters.services.term_resolver import (
    resolve_term_id,
    resolve_term_ids,
    term_suggestions,
    token_values,
)


class ResolveTermIdTests(SimpleTestCase):
    def setUp(self):
        self.terms = [
            TermRecord(id=1, name="Red"),
            TermRecord(id=2, name="red"),
            TermRecord(id=3, name="Blue"),
        ]

    def test_token_with_id_is_returned_as_is(self):
        self.assertEqual(resolve_term_id(self.terms, {"id": 3, "value": "Blue"}), 3)

    def test_token_with_zero_id_is_returned_as_is(self):
        terms = [TermRecord(id=0, name="Uncategorized"), TermRecord(id=4, name="Zero")]
        self.assertEqual(resolve_term_id(terms, {"id": 0, "value": "Zero"}), 0)

    def test_exact_match_wins_over_case_insensitive(self):
        self.assertEqual(resolve_term_id(self.terms, "red"), 2)
        self.assertEqual(resolve_term_id(self.terms, "Red"), 1)

    def test_case_insensitive_fallback_uses_first_catalog_match(self):
        self.assertEqual(resolve_term_id(self.terms, "RED"), 1)

    def test_unknown_token_returns_none(self):
        self.assertIsNone(resolve_term_id(self.terms, "Green"))

    def test_resolving_returned_id_is_idempotent(self):
        for token in ("Red", "red", "RED", "blue"):
            term_id = resolve_term_id(self.terms, token)
            self.assertEqual(resolve_term_id(self.terms, {"id": term_id, "value": token}), term_id)

    def test_mapping_terms_and_custom_name_field(self):
        terms = [{"id": 7, "slug": "news"}, {"id": 8, "slug": "events"}]
        self.assertEqual(resolve_term_id(terms, "EVENTS", name_field="slug"), 8)

    def test_mapping_token_without_id_matches_on_value(self):
        self.assertEqual(resolve_term_id(self.terms, {"value": "blue"}), 3)


class ResolveTermIdsTests(SimpleTestCase):
    def setUp(self):
        self.terms = [TermRecord(id=1, name="Red"), TermRecord(id=2, name="red")]

    def test_deduplicates_and_keeps_first_seen_order(self):
        terms = [TermRecord(id=1, name="Red"), TermRecord(id=3, name="Blue")]
        self.assertEqual(resolve_term_ids(terms, ["Red", "red", "RED"]), [1])
        self.assertEqual(resolve_term_ids(terms, ["blue", "Red", {"id": 3, "value": "Blue"}]), [3, 1])

    def test_skips_unresolved_tokens(self):
        self.assertEqual(resolve_term_ids(self.terms, ["Nope", "red"]), [2])

    def test_empty_input(self):
        self.assertEqual(resolve_term_ids(self.terms, []), [])


class TokenValuesTests(SimpleTestCase):
    def test_drops_unknown_ids_and_decodes_entities(self):
        terms = [TermRecord(id=1, name="Arts &amp; Crafts"), TermRecord(id=2, name="News")]
        self.assertEqual(
            token_values(terms, [2, 99, 1]),
            [{"id": 2, "value": "News"}, {"id": 1, "value": "Arts & Crafts"}],
        )

    def test_suggestions_follow_catalog_order(self):
        terms = [TermRecord(id=2, name="News"), TermRecord(id=1, name="Blog")]
        self.assertEqual(term_suggestions(terms), ["News", "Blog"])
