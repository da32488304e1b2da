import tomllib

import pytest

import engine
import storage
from conftest import make_widget
from data import DragEvent, ListId, PageEvent, RefreshEvent, SearchEvent

WORKSPACE_TOML = """
[settings]
available_page_size = 5

[[catalog]]
id = 1
name = "Bob"
embeddableType = "widget"

[[catalog]]
id = 2
name = "Alice"
embeddableType = "widget"

[[selection]]
id = 2
name = "Alice"
embeddableType = "widget"

[[workspaces]]
id = "ABC"
name = "Sales"

[[events]]
type = "drag"
source = "available"
source_index = 0
destination = "selected"
destination_index = 1

[[events]]
type = "drag"
source = "selected"
source_index = 0

[[events]]
type = "page"
list = "selected"
page = 2

[[events]]
type = "search"
text = "bo"

[[events]]
type = "refresh"
selection = []
"""


def test_missing_file_gives_empty_workspace(tmp_path):
    workspace = storage.load(tmp_path / "missing.toml")
    assert workspace.catalog == []
    assert workspace.available_page_size == 10


def test_load_workspace(tmp_path):
    path = tmp_path / "workspace.toml"
    path.write_text(WORKSPACE_TOML)
    workspace = storage.load(path)
    assert [item["id"] for item in workspace.catalog] == [1, 2]
    assert workspace.available_page_size == 5
    assert workspace.selected_page_size == 10
    assert workspace.workspaces == [{"id": "ABC", "name": "Sales"}]
    assert workspace.events == [
        DragEvent(ListId.AVAILABLE, 0, ListId.SELECTED, 1),
        DragEvent(ListId.SELECTED, 0, None, 0),
        PageEvent(ListId.SELECTED, 2),
        SearchEvent("bo"),
        RefreshEvent(workspace.catalog, []),
    ]


def test_malformed_file_raises(tmp_path):
    path = tmp_path / "broken.toml"
    path.write_text("[[catalog]\nid = ")
    with pytest.raises(tomllib.TOMLDecodeError):
        storage.load(path)


def test_unknown_event_type_raises():
    with pytest.raises(ValueError, match="teleport"):
        storage.parse_event({"type": "teleport"}, storage.Workspace())


def test_dump_state_round_trips_through_toml():
    state = engine.initial_state([make_widget(1, "A"), make_widget(2, "B")], [make_widget(2, "B")])
    raw = tomllib.loads(storage.dump_state(state))
    assert raw["pagination"] == {"available_page": 1, "selected_page": 1}
    assert [item["id"] for item in raw["available"]] == [1]
    assert [item["name"] for item in raw["selected"]] == ["B"]
    assert raw["search"] == ""


def test_dump_state_skips_missing_values():
    state = engine.initial_state([make_widget(1, "A", platform=None)], [])
    raw = tomllib.loads(storage.dump_state(state))
    assert "platform" not in raw["available"][0]
