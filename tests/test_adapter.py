from adapter import items_adapter
from conftest import make_widget


def _ids(entries):
    return [entry.id for entry in entries]


def test_single_catalog_item_without_selection():
    available, selected = items_adapter([make_widget(1, "A")], [], "")
    assert _ids(available) == ["1"]
    assert selected == []


def test_selected_items_are_removed_from_available():
    catalog = [make_widget(1, "A"), make_widget(2, "B")]
    available, selected = items_adapter(catalog, [make_widget(2, "B")], "")
    assert _ids(available) == ["1"]
    assert _ids(selected) == ["2"]


def test_available_and_selected_never_share_ids(widgets):
    selection = widgets[3:9]
    available, selected = items_adapter(widgets, selection, "")
    assert not set(_ids(available)) & set(_ids(selected))
    assert len(available) + len(selected) == len(widgets)


def test_collections_are_excluded_from_both_lists():
    catalog = [make_widget(1, "A"), make_widget(2, "Group", kind="widget_collection")]
    selection = [make_widget(3, "Other", kind="widget_collection"), make_widget(4, "D")]
    available, selected = items_adapter(catalog, selection, "")
    assert _ids(available) == ["1"]
    assert _ids(selected) == ["4"]


def test_items_without_id_are_dropped():
    catalog = [make_widget(0, "Zero"), {"embeddableType": "widget", "name": "No id"}, make_widget(5, "E")]
    available, _ = items_adapter(catalog, [], "")
    assert _ids(available) == ["5"]


def test_search_is_case_insensitive_substring_in_catalog_order():
    catalog = [make_widget(1, "Bob"), make_widget(2, "Alice"), make_widget(3, "Bobby")]
    available, _ = items_adapter(catalog, [], "bo")
    assert [entry.content["name"] for entry in available] == ["Bob", "Bobby"]


def test_search_keeps_unnamed_items_and_ignores_selected_list():
    catalog = [make_widget(1), make_widget(2, "Alice"), make_widget(3, "Bob")]
    available, selected = items_adapter(catalog, [make_widget(9, "Zed")], "bob")
    assert _ids(available) == ["1", "3"]
    assert _ids(selected) == ["9"]


def test_broader_search_keeps_narrower_matches():
    catalog = [make_widget(1, "Bob"), make_widget(2, "Alice"), make_widget(3, "Bobby")]
    narrow, _ = items_adapter(catalog, [], "bobb")
    broad, _ = items_adapter(catalog, [], "bo")
    everything, _ = items_adapter(catalog, [make_widget(2, "Alice")], "")
    assert set(_ids(narrow)) <= set(_ids(broad))
    assert _ids(everything) == ["1", "3"]


def test_selection_order_is_kept_and_ids_are_stringified():
    selection = [make_widget(7, "G"), make_widget(3, "C"), make_widget(5, "E")]
    _, selected = items_adapter([], selection, "")
    assert _ids(selected) == ["7", "3", "5"]
    assert selected[0].content is selection[0]
