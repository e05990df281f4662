"""
Operation - immutable record of one arithmetic step.

An operation is a tagged variant: its kind plus the operand. Forward and
inverse application are dispatched on the kind, so there is no class per
arithmetic operation.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .errors import InvalidOperandError


class OperationKind(Enum):
    """Вид арифметической операции."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


@dataclass(frozen=True)
class Operation:
    """Арифметическая операция с операндом."""

    kind: OperationKind
    operand: float

    def __post_init__(self):
        # Деление на ноль отклоняется до любого изменения состояния
        if self.kind is OperationKind.DIVIDE and self.operand == 0:
            raise InvalidOperandError(self.kind, self.operand)

    @property
    def description(self) -> str:
        return f"{self.kind.value.capitalize()} {self.operand:g}"

    def apply(self, value: float) -> float:
        """Применить операцию к значению."""
        return apply_forward(self, value)

    def revert(self, value: float) -> float:
        """Отменить операцию для значения."""
        return apply_inverse(self, value)

    def to_dict(self) -> Dict[str, Any]:
        """Конвертировать в словарь."""
        return {
            "kind": self.kind.value,
            "operand": self.operand
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Operation':
        """Создать из словаря."""
        return cls(
            kind=OperationKind(data["kind"]),
            operand=float(data["operand"])
        )


def apply_forward(operation: Operation, value: float) -> float:
    """Return ``value`` with the operation applied."""
    kind = operation.kind
    operand = operation.operand
    if kind is OperationKind.ADD:
        return value + operand
    if kind is OperationKind.SUBTRACT:
        return value - operand
    if kind is OperationKind.MULTIPLY:
        return value * operand
    if kind is OperationKind.DIVIDE:
        return value / operand
    raise ValueError(f"Unknown operation kind: {kind}")


def _ieee_divide(value: float, divisor: float) -> float:
    if divisor == 0:
        if value == 0 or math.isnan(value):
            return math.nan
        return math.copysign(math.inf, value) * math.copysign(1.0, divisor)
    return value / divisor


def apply_inverse(operation: Operation, value: float) -> float:
    """Return ``value`` with the operation reverted."""
    kind = operation.kind
    operand = operation.operand
    if kind is OperationKind.ADD:
        return value - operand
    if kind is OperationKind.SUBTRACT:
        return value + operand
    if kind is OperationKind.MULTIPLY:
        # x * 0 не восстанавливается: результат inf/nan, без исключения
        return _ieee_divide(value, operand)
    if kind is OperationKind.DIVIDE:
        return value * operand
    raise ValueError(f"Unknown operation kind: {kind}")
