"""State transitions for the two paginated lists.

Every function here is pure: it takes a ``PickerState`` and returns a
``Transition`` holding the next state and, when the selected list must be
reported upward, its content. Positions coming from the view are in-page
indices; they are turned into absolute list indices with ``page_offset``
and everything past that point works on absolute indices only.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import replace
from typing import Any, Iterable, Mapping

from adapter import items_adapter
from data import (
    DEFAULT_PAGE_SIZE,
    DragEvent,
    Entry,
    ListId,
    PageEvent,
    Pagination,
    PickerState,
    RefreshEvent,
    SearchEvent,
    Transition,
)

LOGGER = logging.getLogger(__name__)


# ------------------------------------------------------------------ #
# Construction and reconciliation                                      #
# ------------------------------------------------------------------ #

def initial_state(
    catalog: Iterable[Mapping[str, Any]],
    selection: Iterable[Mapping[str, Any]],
    available_page_size: int = DEFAULT_PAGE_SIZE,
    selected_page_size: int = DEFAULT_PAGE_SIZE,
) -> PickerState:
    catalog = list(catalog)
    selection = list(selection)
    available, selected = items_adapter(catalog, selection, "")
    return PickerState(
        available=tuple(available),
        selected=tuple(selected),
        pagination=Pagination(),
        search="",
        available_page_size=available_page_size,
        selected_page_size=selected_page_size,
        prev_catalog=copy.deepcopy(catalog),
        prev_selection=copy.deepcopy(selection),
        prev_search="",
    )


def refresh(
    state: PickerState,
    catalog: Iterable[Mapping[str, Any]],
    selection: Iterable[Mapping[str, Any]],
) -> Transition:
    """Rebuild both lists if the catalog, the selection or the search term changed.

    Inputs are compared by value against the ones seen at the previous
    rebuild. When the external selection is unchanged the current local
    selected list is fed back to the adapter, so a local reorder survives a
    catalog or search change.
    """
    catalog = list(catalog)
    selection = list(selection)
    catalog_changed = catalog != state.prev_catalog
    selection_changed = selection != state.prev_selection
    search_changed = state.search != state.prev_search
    if not (catalog_changed or selection_changed or search_changed):
        return Transition(state)

    source_selection = selection if selection_changed else state.selected_content()
    available, selected = items_adapter(catalog, source_selection, state.search)
    LOGGER.debug(
        "Rebuilt lists (catalog=%s, selection=%s, search=%s): %d available, %d selected",
        catalog_changed, selection_changed, search_changed, len(available), len(selected),
    )
    pagination = Pagination(
        available_page=1,
        selected_page=1 if selection_changed else state.pagination.selected_page,
    )
    new_state = replace(
        state,
        available=tuple(available),
        selected=tuple(selected),
        pagination=pagination,
        prev_catalog=copy.deepcopy(catalog),
        prev_selection=copy.deepcopy(selection),
        prev_search=state.search,
    )
    return Transition(new_state, new_state.selected_content())


def set_search(state: PickerState, text: str) -> Transition:
    if text == state.search:
        return Transition(state)
    return refresh(replace(state, search=text), state.prev_catalog, state.prev_selection)


def set_page(state: PickerState, list_id: ListId, page: int) -> Transition:
    if isinstance(page, bool) or not isinstance(page, int) or page < 1:
        LOGGER.debug("Ignoring invalid page %r for %s list", page, list_id.value)
        return Transition(state)
    if page == state.pagination.page(list_id):
        return Transition(state)
    return Transition(replace(state, pagination=state.pagination.with_page(list_id, page)))


# ------------------------------------------------------------------ #
# Index translation and page views                                     #
# ------------------------------------------------------------------ #

def page_offset(state: PickerState, list_id: ListId) -> int:
    """Absolute index of the first entry on the list's current page."""
    return (state.pagination.page(list_id) - 1) * state.page_size(list_id)


def visible_entries(state: PickerState, list_id: ListId) -> tuple[Entry, ...]:
    start = page_offset(state, list_id)
    return state.entries(list_id)[start:start + state.page_size(list_id)]


def range_label(state: PickerState, list_id: ListId) -> str:
    total = len(state.entries(list_id))
    shown = len(visible_entries(state, list_id))
    if not shown:
        return f"0-0 of {total} items"
    first = page_offset(state, list_id) + 1
    return f"{first}-{first + shown - 1} of {total} items"


# ------------------------------------------------------------------ #
# Reorder / move                                                       #
# ------------------------------------------------------------------ #

def _with_entries(state: PickerState, list_id: ListId, entries: list[Entry]) -> PickerState:
    if list_id is ListId.AVAILABLE:
        return replace(state, available=tuple(entries))
    return replace(state, selected=tuple(entries))


def shifted_pagination(
    pagination: Pagination, list_id: ListId, length: int, page_size: int
) -> Pagination:
    """Step a list's page back by one if its current page was just emptied."""
    page = pagination.page(list_id)
    if length > 0 and (page - 1) * page_size == length:
        LOGGER.debug("Page %d of %s list emptied, stepping back", page, list_id.value)
        return pagination.with_page(list_id, page - 1)
    return pagination


def reorder(state: PickerState, list_id: ListId, start: int, end: int) -> PickerState:
    entries = list(state.entries(list_id))
    removed = entries.pop(start)
    entries.insert(end, removed)
    return _with_entries(state, list_id, entries)


def move(
    state: PickerState, source: ListId, destination: ListId, start: int, end: int
) -> PickerState:
    source_entries = list(state.entries(source))
    destination_entries = list(state.entries(destination))
    removed = source_entries.pop(start)
    destination_entries.insert(end, removed)

    pagination = shifted_pagination(
        state.pagination, source, len(source_entries), state.page_size(source)
    )
    state = _with_entries(state, source, source_entries)
    state = _with_entries(state, destination, destination_entries)
    return replace(state, pagination=pagination)


def apply_drag(state: PickerState, event: DragEvent) -> Transition:
    if event.destination is None:
        return Transition(state)

    start = page_offset(state, event.source) + event.source_index
    if not 0 <= start < len(state.entries(event.source)):
        LOGGER.debug("Drag from %s position %d has no entry", event.source.value, start)
        return Transition(state)

    end = page_offset(state, event.destination) + event.destination_index
    if event.source is event.destination:
        new_state = reorder(state, event.source, start, end)
        if event.source is ListId.SELECTED:
            return Transition(new_state, new_state.selected_content())
        return Transition(new_state)

    new_state = move(state, event.source, event.destination, start, end)
    return Transition(new_state, new_state.selected_content())


def reduce(state: PickerState, event) -> Transition:
    if isinstance(event, DragEvent):
        return apply_drag(state, event)
    if isinstance(event, PageEvent):
        return set_page(state, event.list_id, event.page)
    if isinstance(event, SearchEvent):
        return set_search(state, event.text)
    if isinstance(event, RefreshEvent):
        return refresh(state, event.catalog, event.selection)
    raise TypeError(f"Unsupported event: {event!r}")
