from typing import List, Optional
from PySide6.QtCore import QObject, Signal

from .command_interface import Command


class HistoryManager(QObject):
    """Менеджер истории команд для undo/redo.

    Stacks are updated before a command runs, so listeners notified
    from inside ``execute()``/``undo()`` already see the new history.
    A command that raises is put back where it was.
    """

    # Изменился один из стеков
    history_changed = Signal()

    def __init__(self, max_history: Optional[int] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        if max_history is not None and max_history <= 0:
            raise ValueError(f"max_history must be positive, got {max_history}")
        self.undo_stack: List[Command] = []
        self.redo_stack: List[Command] = []
        self.max_history = max_history

    def execute_command(self, command: Command):
        """Выполнить команду и добавить в историю."""
        self.undo_stack.append(command)

        # Очистить redo стек при новом действии
        previous_redo = self.redo_stack
        self.redo_stack = []

        # Ограничить размер истории
        dropped = None
        if self.max_history is not None and len(self.undo_stack) > self.max_history:
            dropped = self.undo_stack.pop(0)

        try:
            command.execute()
        except Exception:
            self.undo_stack.pop()
            if dropped is not None:
                self.undo_stack.insert(0, dropped)
            self.redo_stack = previous_redo
            raise

        self.history_changed.emit()

    def undo(self):
        """Отменить последнюю команду."""
        if not self.can_undo():
            return

        command = self.undo_stack.pop()
        self.redo_stack.append(command)
        try:
            command.undo()
        except Exception:
            self.redo_stack.pop()
            self.undo_stack.append(command)
            raise
        self.history_changed.emit()

    def redo(self):
        """Повторить отменённую команду."""
        if not self.can_redo():
            return

        command = self.redo_stack.pop()
        self.undo_stack.append(command)
        try:
            command.execute()
        except Exception:
            self.undo_stack.pop()
            self.redo_stack.append(command)
            raise
        self.history_changed.emit()

    def can_undo(self) -> bool:
        """Проверить, можно ли отменить."""
        return len(self.undo_stack) > 0

    def can_redo(self) -> bool:
        """Проверить, можно ли повторить."""
        return len(self.redo_stack) > 0

    def clear_history(self):
        """Очистить всю историю."""
        self.undo_stack.clear()
        self.redo_stack.clear()
        self.history_changed.emit()
