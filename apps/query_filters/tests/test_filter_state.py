from django.test import SimpleTestCase

from apps.query_filters.services.filter_state import ChangeEvent, Control, FilterStateStore


def checkbox(value, checked=False, name="query-2-term[]"):
    return Control(value=value, tag="INPUT", type="checkbox", name=name, checked=checked)


class FilterStateStoreTests(SimpleTestCase):
    def test_defaults_depend_on_input_type(self):
        self.assertEqual(FilterStateStore("select").current_selection(), "")
        self.assertEqual(FilterStateStore("checkboxes").current_selection(), [])

    def test_select_change_uses_control_value(self):
        store = FilterStateStore("select")
        result = store.handle_change(ChangeEvent(target=Control(value="7")))
        self.assertEqual(result, "7")
        self.assertEqual(store.current_selection(), "7")

    def test_checkbox_change_rescans_whole_group(self):
        store = FilterStateStore("checkboxes")
        toggled = checkbox("9", checked=True)
        controls = [
            checkbox("7", checked=True),
            toggled,
            checkbox("11", checked=False),
            checkbox("5", checked=True, name="query-3-term[]"),
            Control(value="1"),
        ]
        store.handle_change(ChangeEvent(target=toggled, controls=controls))
        self.assertEqual(store.current_selection(), ["7", "9"])

    def test_unchecking_last_box_clears_selection(self):
        store = FilterStateStore("checkboxes", initial=["7"])
        toggled = checkbox("7", checked=False)
        store.handle_change(ChangeEvent(target=toggled, controls=[toggled]))
        self.assertEqual(store.current_selection(), [])

    def test_selection_is_copied_out(self):
        store = FilterStateStore("checkboxes", initial=[1, 2])
        selection = store.current_selection()
        selection.append("3")
        self.assertEqual(store.current_selection(), ["1", "2"])

    def test_hydrates_from_url(self):
        url = "https://example.com/news/?query-1-term-2=7,9&query-1-page=3"
        multi = FilterStateStore.from_url(url, "query-1", 2, "checkboxes")
        single = FilterStateStore.from_url(url, "query-1", 2, "select")
        self.assertEqual(multi.current_selection(), ["7", "9"])
        self.assertEqual(single.current_selection(), "7,9")
        self.assertFalse(multi.has_hydrated)

    def test_hydrated_flag_is_per_instance(self):
        first = FilterStateStore("select")
        second = FilterStateStore("select")
        first.mark_hydrated()
        self.assertTrue(first.has_hydrated)
        self.assertFalse(second.has_hydrated)
