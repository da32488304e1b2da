"""SelectionPicker: the state container behind the two paired widget lists."""

import logging

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QUndoStack

import engine
from data import (
    DEFAULT_PAGE_SIZE, DragEvent, Entry, ListId, PageEvent, PickerState,
    RefreshEvent, SearchEvent, Transition
)
from undo_commands import command_for

LOGGER = logging.getLogger(__name__)


class SelectionPicker(QObject):
    """
    Holds the available/selected lists and their pagination.
    Every user action and external refresh goes through one of the public
    methods below and is processed to completion before returning.
    `selection_changed` carries the selected list content whenever it must
    be reported to the owner.
    """
    selection_changed = Signal(object)
    state_changed = Signal()

    def __init__(
        self,
        catalog: list,
        selection: list,
        workspaces: list | None = None,
        on_change_selected=None,
        available_page_size: int = DEFAULT_PAGE_SIZE,
        selected_page_size: int = DEFAULT_PAGE_SIZE,
        parent=None,
    ):
        super().__init__(parent)
        self._state = engine.initial_state(
            catalog, selection, available_page_size, selected_page_size
        )
        self._workspaces = list(workspaces or [])
        self._undo_stack = QUndoStack(self)
        if on_change_selected is not None:
            self.selection_changed.connect(on_change_selected)

    # ------------------------------------------------------------------ #
    # Read access                                                          #
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> PickerState:
        return self._state

    @property
    def available(self) -> tuple[Entry, ...]:
        return self._state.available

    @property
    def selected(self) -> tuple[Entry, ...]:
        return self._state.selected

    @property
    def workspaces(self) -> list:
        return self._workspaces

    @property
    def undo_stack(self) -> QUndoStack:
        return self._undo_stack

    def visible(self, list_id: ListId) -> tuple[Entry, ...]:
        return engine.visible_entries(self._state, list_id)

    def range_label(self, list_id: ListId) -> str:
        return engine.range_label(self._state, list_id)

    # ------------------------------------------------------------------ #
    # External inputs                                                      #
    # ------------------------------------------------------------------ #

    def refresh(self, catalog: list, selection: list) -> None:
        self._rebuild(engine.refresh(self._state, catalog, selection))

    def set_search(self, text: str) -> None:
        self._rebuild(engine.set_search(self._state, text))

    def set_page(self, list_id: ListId, page: int) -> None:
        self._apply(engine.set_page(self._state, list_id, page))

    # ------------------------------------------------------------------ #
    # User moves                                                           #
    # ------------------------------------------------------------------ #

    def drop(self, event: DragEvent) -> bool:
        """Apply a finished drag. Returns False when the drop changed nothing."""
        transition = engine.apply_drag(self._state, event)
        if transition.state is self._state:
            return False
        self._undo_stack.push(command_for(self, event, self._state, transition))
        return True

    def dispatch(self, event) -> None:
        if isinstance(event, DragEvent):
            self.drop(event)
        elif isinstance(event, PageEvent):
            self.set_page(event.list_id, event.page)
        elif isinstance(event, SearchEvent):
            self.set_search(event.text)
        elif isinstance(event, RefreshEvent):
            self.refresh(event.catalog, event.selection)
        else:
            raise TypeError(f"Unsupported event: {event!r}")

    def undo(self) -> None:
        self._undo_stack.undo()

    def redo(self) -> None:
        self._undo_stack.redo()

    # ------------------------------------------------------------------ #
    # Public API used by undo commands                                     #
    # ------------------------------------------------------------------ #

    def restore_state(self, state: PickerState, reported: list | None) -> None:
        self._apply(Transition(state, reported))

    # ------------------------------------------------------------------ #
    # Private helpers                                                      #
    # ------------------------------------------------------------------ #

    def _rebuild(self, transition: Transition) -> None:
        if transition.state is not self._state:
            # Recorded drag positions refer to the lists being replaced
            self._undo_stack.clear()
        self._apply(transition)

    def _apply(self, transition: Transition) -> None:
        if transition.state is self._state:
            return
        self._state = transition.state
        self.state_changed.emit()
        if transition.reported is not None:
            LOGGER.debug("Reporting %d selected items", len(transition.reported))
            self.selection_changed.emit(transition.reported)
