from abc import ABC, abstractmethod

from models.domain.observable_accumulator import ObservableAccumulator
from models.domain.operation import Operation


class Command(ABC):
    """Обратимая команда с текстовым описанием для истории."""

    def __init__(self, description: str = ""):
        self.description: str = description

    @abstractmethod
    def execute(self) -> None:
        """Выполнить команду."""

    @abstractmethod
    def undo(self) -> None:
        """Отменить команду."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"


class OperationCommand(Command):
    """Команда арифметической операции над аккумулятором."""

    def __init__(self, accumulator: ObservableAccumulator, operation: Operation):
        super().__init__(operation.description)
        self.accumulator = accumulator
        self.operation = operation

    def execute(self) -> None:
        """Применить операцию."""
        self.accumulator.apply(self.operation)

    def undo(self) -> None:
        """Применить обратную операцию."""
        self.accumulator.revert(self.operation)
