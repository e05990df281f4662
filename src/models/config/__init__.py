"""Config models - настройки приложения."""

from .app_settings import AccumulatorSettings

__all__ = ['AccumulatorSettings']
