"""Derive the available and selected entry lists from catalog, selection and search."""

from typing import Any, Iterable, Mapping

from data import EmbeddableType, Entry


def _is_single_widget(item: Mapping[str, Any]) -> bool:
    return bool(item.get("id")) and item.get("embeddableType") == EmbeddableType.WIDGET.value


def _matches_search(item: Mapping[str, Any], search: str) -> bool:
    name = item.get("name")
    if not name:
        # Unnamed items are never filtered out by the search box
        return True
    return search.lower() in str(name).lower()


def to_entry(item: Mapping[str, Any]) -> Entry:
    return Entry(id=str(item["id"]), content=item)


def items_adapter(
    catalog: Iterable[Mapping[str, Any]],
    selection: Iterable[Mapping[str, Any]],
    search: str = "",
) -> tuple[list[Entry], list[Entry]]:
    """Return ``(available, selected)`` entries.

    Only singular widgets with an id are kept in either list. The selected
    list follows the selection's order; the available list follows the
    catalog's order, minus anything already selected and anything whose name
    does not contain ``search`` (case-insensitive).
    """
    selected = [to_entry(item) for item in selection if _is_single_widget(item)]
    selected_ids = {entry.id for entry in selected}
    available = [
        to_entry(item)
        for item in catalog
        if _is_single_widget(item)
        and str(item["id"]) not in selected_ids
        and _matches_search(item, search)
    ]
    return available, selected
