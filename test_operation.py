#!/usr/bin/env python3
"""
Тест арифметических операций: прямые и обратные формулы.
"""

import math
import os
import sys
import unittest

# Добавляем src в путь для импортов
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from models.domain.errors import InvalidOperandError
from models.domain.operation import Operation, OperationKind, apply_forward, apply_inverse


class TestOperation(unittest.TestCase):
    """Тесты для Operation."""

    def test_forward_formulas(self):
        self.assertEqual(apply_forward(Operation(OperationKind.ADD, 3.0), 10.0), 13.0)
        self.assertEqual(apply_forward(Operation(OperationKind.SUBTRACT, 3.0), 10.0), 7.0)
        self.assertEqual(apply_forward(Operation(OperationKind.MULTIPLY, 3.0), 10.0), 30.0)
        self.assertEqual(apply_forward(Operation(OperationKind.DIVIDE, 4.0), 10.0), 2.5)

    def test_inverse_formulas(self):
        self.assertEqual(apply_inverse(Operation(OperationKind.ADD, 3.0), 13.0), 10.0)
        self.assertEqual(apply_inverse(Operation(OperationKind.SUBTRACT, 3.0), 7.0), 10.0)
        self.assertEqual(apply_inverse(Operation(OperationKind.MULTIPLY, 3.0), 30.0), 10.0)
        self.assertEqual(apply_inverse(Operation(OperationKind.DIVIDE, 4.0), 2.5), 10.0)

    def test_apply_and_revert_methods(self):
        operation = Operation(OperationKind.MULTIPLY, 2.0)
        self.assertEqual(operation.apply(5.0), 10.0)
        self.assertEqual(operation.revert(10.0), 5.0)

    def test_divide_by_zero_rejected(self):
        with self.assertRaises(InvalidOperandError) as ctx:
            Operation(OperationKind.DIVIDE, 0.0)
        self.assertIs(ctx.exception.kind, OperationKind.DIVIDE)
        self.assertEqual(ctx.exception.operand, 0.0)

    def test_invalid_operand_is_value_error(self):
        with self.assertRaises(ValueError):
            Operation(OperationKind.DIVIDE, -0.0)

    def test_zero_operand_allowed_for_other_kinds(self):
        for kind in (OperationKind.ADD, OperationKind.SUBTRACT, OperationKind.MULTIPLY):
            Operation(kind, 0.0)

    def test_negative_and_fractional_operands(self):
        self.assertEqual(Operation(OperationKind.DIVIDE, -0.5).apply(3.0), -6.0)
        self.assertEqual(Operation(OperationKind.ADD, -1.25).apply(1.0), -0.25)

    def test_multiply_by_zero_revert_does_not_raise(self):
        operation = Operation(OperationKind.MULTIPLY, 0.0)
        self.assertTrue(math.isnan(operation.revert(0.0)))
        self.assertEqual(operation.revert(5.0), math.inf)
        self.assertEqual(operation.revert(-5.0), -math.inf)

    def test_operation_is_immutable(self):
        operation = Operation(OperationKind.ADD, 1.0)
        with self.assertRaises(AttributeError):
            operation.operand = 2.0

    def test_description(self):
        self.assertEqual(Operation(OperationKind.ADD, 8.0).description, "Add 8")
        self.assertEqual(Operation(OperationKind.DIVIDE, 0.5).description, "Divide 0.5")

    def test_dict_conversion(self):
        operation = Operation(OperationKind.SUBTRACT, 5.0)
        data = operation.to_dict()
        self.assertEqual(data, {"kind": "subtract", "operand": 5.0})
        self.assertEqual(Operation.from_dict(data), operation)

    def test_from_dict_rejects_zero_divisor(self):
        with self.assertRaises(InvalidOperandError):
            Operation.from_dict({"kind": "divide", "operand": 0})


if __name__ == '__main__':
    unittest.main()
