"""Domain errors for the accumulator."""


class InvalidOperandError(ValueError):
    """Операнд не допускается для данной операции (деление на ноль)."""

    def __init__(self, kind, operand: float):
        self.kind = kind
        self.operand = operand
        super().__init__(f"Invalid operand {operand!r} for {kind.value}")
