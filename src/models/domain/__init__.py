"""Domain models - модели данных аккумулятора."""

from .errors import InvalidOperandError
from .operation import Operation, OperationKind, apply_forward, apply_inverse
from .observable_accumulator import ObservableAccumulator

__all__ = [
    'InvalidOperandError',
    'Operation',
    'OperationKind',
    'apply_forward',
    'apply_inverse',
    'ObservableAccumulator'
]
