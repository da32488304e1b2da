"""Load a workspace (catalog, selection, settings, event script) from a TOML file."""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

from data import (
    DEFAULT_PAGE_SIZE, DragEvent, ListId, PageEvent, PickerState,
    RefreshEvent, SearchEvent
)

LOGGER = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".widget-picker.toml"


@dataclass
class Workspace:
    catalog: list[dict] = field(default_factory=list)
    selection: list[dict] = field(default_factory=list)
    workspaces: list[dict] = field(default_factory=list)
    available_page_size: int = DEFAULT_PAGE_SIZE
    selected_page_size: int = DEFAULT_PAGE_SIZE
    events: list = field(default_factory=list)


def load(path: Path = DEFAULT_PATH) -> Workspace:
    if not path.exists():
        LOGGER.debug("No workspace file at %s, starting empty", path)
        return Workspace()
    with path.open("rb") as f:
        raw = tomllib.load(f)
    settings = raw.get("settings", {})
    workspace = Workspace(
        catalog=raw.get("catalog", []),
        selection=raw.get("selection", []),
        workspaces=raw.get("workspaces", []),
        available_page_size=settings.get("available_page_size", DEFAULT_PAGE_SIZE),
        selected_page_size=settings.get("selected_page_size", DEFAULT_PAGE_SIZE),
    )
    workspace.events = [parse_event(e, workspace) for e in raw.get("events", [])]
    return workspace


def parse_event(raw: dict, workspace: Workspace):
    kind = raw.get("type")
    if kind == "drag":
        destination = raw.get("destination")
        return DragEvent(
            source=ListId(raw["source"]),
            source_index=raw.get("source_index", 0),
            destination=ListId(destination) if destination else None,
            destination_index=raw.get("destination_index", 0),
        )
    if kind == "page":
        return PageEvent(ListId(raw["list"]), raw["page"])
    if kind == "search":
        return SearchEvent(raw.get("text", ""))
    if kind == "refresh":
        return RefreshEvent(
            catalog=raw.get("catalog", workspace.catalog),
            selection=raw.get("selection", workspace.selection),
        )
    raise ValueError(f"Unknown event type: {kind!r}")


def _plain(content) -> dict:
    return {k: v for k, v in content.items() if v is not None}


def dump_state(state: PickerState) -> str:
    raw = {
        "search": state.search,
        "pagination": {
            "available_page": state.pagination.available_page,
            "selected_page": state.pagination.selected_page,
        },
        "available": [_plain(entry.content) for entry in state.available],
        "selected": [_plain(entry.content) for entry in state.selected],
    }
    return tomli_w.dumps(raw)
