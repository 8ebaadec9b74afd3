"""Configuración de la aplicación."""

from gastos_tracker.config.settings import Settings, get_settings, settings


__all__ = ["Settings", "get_settings", "settings"]
