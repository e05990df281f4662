import threading
from contextlib import nullcontext
from typing import List, Optional

from models.config.app_settings import AccumulatorSettings
from models.domain.observable_accumulator import ObservableAccumulator
from models.domain.operation import Operation, OperationKind
from services.history import HistoryManager, OperationCommand


class AccumulatorController:
    """Контроллер аккумулятора с историей undo/redo.

    Value and both history stacks are one unit: with ``thread_safe``
    enabled every public call holds the same lock.
    """

    def __init__(self, settings: Optional[AccumulatorSettings] = None):
        self.settings = settings or AccumulatorSettings()

        # Модель и сервис истории
        self.accumulator = ObservableAccumulator(self.settings.initial_value)
        self.history_manager = HistoryManager(self.settings.max_history)

        self._lock = threading.RLock() if self.settings.thread_safe else nullcontext()

    def add(self, value: float) -> None:
        """Прибавить значение."""
        self._execute(OperationKind.ADD, value)

    def subtract(self, value: float) -> None:
        """Вычесть значение."""
        self._execute(OperationKind.SUBTRACT, value)

    def multiply(self, value: float) -> None:
        """Умножить на значение."""
        self._execute(OperationKind.MULTIPLY, value)

    def divide(self, value: float) -> None:
        """Разделить на значение. Ноль вызывает InvalidOperandError."""
        self._execute(OperationKind.DIVIDE, value)

    def _execute(self, kind: OperationKind, value: float) -> None:
        # Operation() validates before anything is touched
        operation = Operation(kind, float(value))
        with self._lock:
            command = OperationCommand(self.accumulator, operation)
            self.history_manager.execute_command(command)

    def undo(self) -> None:
        """Отменить последнюю операцию."""
        with self._lock:
            self.history_manager.undo()

    def redo(self) -> None:
        """Повторить отменённую операцию."""
        with self._lock:
            self.history_manager.redo()

    def can_undo(self) -> bool:
        """Есть ли операции для отмены."""
        with self._lock:
            return self.history_manager.can_undo()

    def can_redo(self) -> bool:
        """Есть ли операции для повтора."""
        with self._lock:
            return self.history_manager.can_redo()

    def get_current_value(self) -> float:
        """Получить текущее значение."""
        with self._lock:
            return self.accumulator.value

    def get_undo_history(self) -> List[Operation]:
        """Operations that can be undone, oldest first."""
        with self._lock:
            return [command.operation for command in self.history_manager.undo_stack]

    def get_redo_history(self) -> List[Operation]:
        """Operations that can be redone, oldest first."""
        with self._lock:
            return [command.operation for command in self.history_manager.redo_stack]

    def clear_history(self) -> None:
        """Очистить историю, не меняя значение."""
        with self._lock:
            self.history_manager.clear_history()

    def reset(self) -> None:
        """Очистить историю и вернуть начальное значение."""
        with self._lock:
            self.history_manager.clear_history()
            self.accumulator.value = self.settings.initial_value
