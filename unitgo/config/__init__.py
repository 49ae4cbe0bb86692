"""
UnitGo Configuration
====================

- settings: YAML preference store (precision, data size mode, theme)
- validator: ConfigurationError and settings validation
"""

from .validator import ConfigurationError, validate_settings
from .settings import Settings, load_settings, save_settings, update_settings

__all__ = [
    'ConfigurationError',
    'validate_settings',
    'Settings',
    'load_settings',
    'save_settings',
    'update_settings',
]
