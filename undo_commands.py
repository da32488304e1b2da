"""QUndoCommand subclasses for reversible drag-and-drop operations."""

from PySide6.QtGui import QUndoCommand

from data import DragEvent, PickerState, Transition


class _DropCommand(QUndoCommand):
    def __init__(self, picker, text: str, before: PickerState, transition: Transition):
        super().__init__(text)
        self._picker = picker
        self._before = before
        self._after = transition.state
        self._reported = transition.reported

    def redo(self):
        self._picker.restore_state(self._after, self._reported)

    def undo(self):
        reported = None
        if self._before.selected != self._after.selected:
            reported = self._before.selected_content()
        self._picker.restore_state(self._before, reported)


class ReorderItemCommand(_DropCommand):
    def __init__(self, picker, before: PickerState, transition: Transition):
        super().__init__(picker, "Reorder item", before, transition)


class MoveItemBetweenListsCommand(_DropCommand):
    def __init__(self, picker, before: PickerState, transition: Transition):
        super().__init__(picker, "Move item between lists", before, transition)


def command_for(picker, event: DragEvent, before: PickerState, transition: Transition) -> QUndoCommand:
    if event.source is event.destination:
        return ReorderItemCommand(picker, before, transition)
    return MoveItemBetweenListsCommand(picker, before, transition)
