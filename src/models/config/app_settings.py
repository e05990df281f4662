from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class AccumulatorSettings:
    """Модель настроек аккумулятора."""

    # Начальное значение
    initial_value: float = 0.0

    # Ограничение истории (None - без ограничения)
    max_history: Optional[int] = None

    # Блокировка для доступа из нескольких потоков
    thread_safe: bool = True

    def __post_init__(self):
        if isinstance(self.initial_value, bool):
            raise ValueError(f"initial_value must be a number, got {self.initial_value!r}")
        # float() сам выбрасывает ValueError/TypeError для нечисловых строк
        self.initial_value = float(self.initial_value)

        if self.max_history is not None:
            if isinstance(self.max_history, bool) or not isinstance(self.max_history, int):
                raise ValueError(f"max_history must be an integer or None, got {self.max_history!r}")
            if self.max_history <= 0:
                raise ValueError(f"max_history must be positive, got {self.max_history}")

        if not isinstance(self.thread_safe, bool):
            raise ValueError(f"thread_safe must be a boolean, got {self.thread_safe!r}")

    def to_dict(self) -> Dict:
        """Конвертировать в словарь."""
        return {
            'initial_value': self.initial_value,
            'max_history': self.max_history,
            'thread_safe': self.thread_safe,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'AccumulatorSettings':
        """Создать из словаря. Некорректные значения вызывают ValueError."""
        return cls(
            initial_value=data.get('initial_value', cls.initial_value),
            max_history=data.get('max_history', cls.max_history),
            thread_safe=data.get('thread_safe', cls.thread_safe),
        )
