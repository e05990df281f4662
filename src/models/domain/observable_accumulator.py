"""
Observable Accumulator - reactive model for the running value.

Emits a signal every time the value changes so that views and
other listeners do not need to poll the controller.
"""

from typing import Optional
from PySide6.QtCore import QObject, Signal

from .operation import Operation


class ObservableAccumulator(QObject):
    """Reactive accumulator model that emits signals on value changes."""

    # Сигнал изменения текущего значения
    value_changed = Signal(float)

    def __init__(self, initial_value: float = 0.0, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._value = float(initial_value)

    @property
    def value(self) -> float:
        """Get current value."""
        return self._value

    @value.setter
    def value(self, new_value: float) -> None:
        """Set value and emit signal."""
        self._value = float(new_value)
        self.value_changed.emit(self._value)

    def apply(self, operation: Operation) -> None:
        """Apply operation's forward formula."""
        self.value = operation.apply(self._value)

    def revert(self, operation: Operation) -> None:
        """Apply operation's inverse formula."""
        self.value = operation.revert(self._value)
