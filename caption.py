"""Plain-text caption for a single widget row: title, description and tags."""

from typing import Any, Mapping, NamedTuple

from data import EmbeddableType


class Caption(NamedTuple):
    title: str
    description: str
    tags: list[str]


def _workspace_name(workspace_id: str | None, workspaces: list) -> str | None:
    if not workspace_id:
        return None
    for workspace in workspaces:
        if str(workspace.get("id", "")).upper() == workspace_id.upper():
            return workspace.get("name")
    return None


def _description(widget: Mapping[str, Any], workspaces: list) -> str:
    kind = widget.get("embeddableType")
    if kind == EmbeddableType.WIDGET.value:
        text = widget.get("platform") or ""
        name = _workspace_name(widget.get("workspaceId"), workspaces)
        if name:
            text += f" | workspace {name}"
        return text
    if kind == EmbeddableType.WIDGET_COLLECTION.value:
        children = [child.get("name") or "name not found" for child in widget.get("widgets") or []]
        if children:
            return "Collection of: " + ", ".join(children)
        return "Empty Collection"
    return "Unrecognized widget type"


def item_caption(widget: Mapping[str, Any] | None, workspaces: list) -> Caption | None:
    """Return the caption for ``widget``, or None when there is nothing to render."""
    if not widget:
        return None
    labels = widget.get("labels") or ""
    tags = [label.strip() for label in labels.split(",") if label.strip()]
    return Caption(
        title=str(widget.get("name") or ""),
        description=_description(widget, workspaces),
        tags=tags,
    )
