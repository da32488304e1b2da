"""In-memory data model for the widget picker."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, NamedTuple

DEFAULT_PAGE_SIZE = 10


class EmbeddableType(str, Enum):
    WIDGET = "widget"
    WIDGET_COLLECTION = "widget_collection"


class ListId(str, Enum):
    AVAILABLE = "available"
    SELECTED = "selected"


@dataclass(frozen=True)
class Entry:
    id: str
    content: Mapping[str, Any]


@dataclass(frozen=True)
class Pagination:
    available_page: int = 1
    selected_page: int = 1

    def page(self, list_id: ListId) -> int:
        if list_id is ListId.AVAILABLE:
            return self.available_page
        return self.selected_page

    def with_page(self, list_id: ListId, page: int) -> "Pagination":
        if list_id is ListId.AVAILABLE:
            return Pagination(page, self.selected_page)
        return Pagination(self.available_page, page)


@dataclass(frozen=True)
class PickerState:
    available: tuple[Entry, ...] = ()
    selected: tuple[Entry, ...] = ()
    pagination: Pagination = field(default_factory=Pagination)
    search: str = ""
    available_page_size: int = DEFAULT_PAGE_SIZE
    selected_page_size: int = DEFAULT_PAGE_SIZE
    # Inputs seen at the last reconciliation, compared by value
    prev_catalog: list = field(default_factory=list, compare=False)
    prev_selection: list = field(default_factory=list, compare=False)
    prev_search: str = ""

    def entries(self, list_id: ListId) -> tuple[Entry, ...]:
        if list_id is ListId.AVAILABLE:
            return self.available
        return self.selected

    def page_size(self, list_id: ListId) -> int:
        if list_id is ListId.AVAILABLE:
            return self.available_page_size
        return self.selected_page_size

    def selected_content(self) -> list:
        return [entry.content for entry in self.selected]


class Transition(NamedTuple):
    state: PickerState
    # Selected list content to report upward, or None when nothing is reported
    reported: list | None = None


@dataclass(frozen=True)
class DragEvent:
    source: ListId
    source_index: int
    destination: ListId | None
    destination_index: int = 0


@dataclass(frozen=True)
class PageEvent:
    list_id: ListId
    page: int


@dataclass(frozen=True)
class SearchEvent:
    text: str


@dataclass(frozen=True)
class RefreshEvent:
    catalog: list
    selection: list
