"""Controllers - связующее звено между моделями и сервисами."""

from .accumulator_controller import AccumulatorController

__all__ = [
    'AccumulatorController'
]
