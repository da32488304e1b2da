"""Entry point: replay a workspace file's events and print the resulting lists."""

import logging
import sys
from pathlib import Path

from PySide6.QtCore import QCoreApplication

import storage
from caption import item_caption
from data import ListId
from picker import SelectionPicker


def _print_page(picker: SelectionPicker, list_id: ListId) -> None:
    print(f"== {list_id.value} ({picker.range_label(list_id)})")
    for entry in picker.visible(list_id):
        caption = item_caption(entry.content, picker.workspaces)
        if caption is None:
            continue
        line = f"  [{entry.id}] {caption.title}"
        if caption.description:
            line += f" - {caption.description}"
        if caption.tags:
            line += f" ({', '.join(caption.tags)})"
        print(line)


def main():
    args = sys.argv[1:]
    if "-v" in args:
        args.remove("-v")
        logging.basicConfig(level=logging.DEBUG)

    app = QCoreApplication(sys.argv)
    app.setApplicationName("WidgetPicker")

    path = Path(args[0]) if args else storage.DEFAULT_PATH
    workspace = storage.load(path)
    picker = SelectionPicker(
        workspace.catalog,
        workspace.selection,
        workspaces=workspace.workspaces,
        available_page_size=workspace.available_page_size,
        selected_page_size=workspace.selected_page_size,
    )
    for event in workspace.events:
        picker.dispatch(event)

    _print_page(picker, ListId.AVAILABLE)
    _print_page(picker, ListId.SELECTED)
    print()
    print(storage.dump_state(picker.state), end="")


if __name__ == "__main__":
    main()
