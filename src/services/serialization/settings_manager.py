"""
Settings Manager - сервис для загрузки и сохранения настроек аккумулятора.

Отвечает за сериализацию/десериализацию настроек в JSON формате.
"""

import json
import os
from typing import Optional

from models.config.app_settings import AccumulatorSettings


# Global instance
_settings_manager: Optional['SettingsManager'] = None


def get_settings_manager() -> 'SettingsManager':
    """Get or create global SettingsManager instance."""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager


class SettingsManager:
    """Сервис для загрузки и сохранения настроек."""

    def __init__(self, config_path: str = "accumulator.json"):
        self.config_path = config_path

    def load_settings(self) -> Optional[AccumulatorSettings]:
        """Загрузить настройки из файла."""
        if not os.path.exists(self.config_path):
            return None

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            return AccumulatorSettings.from_dict(data)

        except (OSError, ValueError, TypeError, AttributeError) as e:
            print(f"Error loading settings: {e}")
            return None

    def load_or_default(self) -> AccumulatorSettings:
        """Загрузить настройки или вернуть значения по умолчанию."""
        return self.load_settings() or AccumulatorSettings()

    def save_settings(self, settings: AccumulatorSettings) -> bool:
        """Сохранить настройки в файл."""
        try:
            data = settings.to_dict()

            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=4, ensure_ascii=False)
            return True

        except (OSError, TypeError) as e:
            print(f"Error saving settings: {e}")
            return False
