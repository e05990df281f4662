#!/usr/bin/env python3
"""
Accumulator - undo/redo demo
Main entry point
"""

import sys
import os

# Добавить src в путь для импортов
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from controllers.accumulator_controller import AccumulatorController
from models.config.app_settings import AccumulatorSettings
from services.serialization import get_settings_manager


def run_steps(controller: AccumulatorController, steps):
    """Выполнить шаги и напечатать значение после каждого."""
    for name, *args in steps:
        getattr(controller, name)(*args)
        label = f"{name}({', '.join(str(a) for a in args)})"
        print(f"  {label:<14} -> {controller.get_current_value()}")


def main():
    """Запуск демонстрации."""
    settings = get_settings_manager().load_or_default()

    print("Scenario 1")
    controller = AccumulatorController(settings)
    print(f"  start          -> {controller.get_current_value()}")
    run_steps(controller, [
        ("add", 8),
        ("undo",),
        ("redo",),
        ("undo",),
    ])

    print("Scenario 2")
    controller = AccumulatorController(AccumulatorSettings(
        initial_value=10.0,
        max_history=settings.max_history,
        thread_safe=settings.thread_safe,
    ))
    print(f"  start          -> {controller.get_current_value()}")
    run_steps(controller, [
        ("multiply", 2),
        ("subtract", 5),
        ("undo",),
        ("undo",),
        ("redo",),
    ])


if __name__ == "__main__":
    main()
