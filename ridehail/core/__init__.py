"""
Core package: settings, security, encryption and shared dependencies.
"""
from ridehail.core.config import settings, get_settings

__all__ = ["settings", "get_settings"]
