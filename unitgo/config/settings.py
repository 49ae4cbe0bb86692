"""
Preference Store
================

Persists the user's display preferences as YAML.

    precision: 6
    data_size_mode: si      # si | binary
    theme: system           # light | dark | system

Stored keys override the defaults, so a partial file is fine. A missing or
unreadable file falls back to the defaults.

Usage:
    from unitgo.config.settings import load_settings, update_settings

    settings = load_settings('settings.yaml')
    settings = update_settings('settings.yaml', precision=4)
"""

import logging
from dataclasses import dataclass, asdict, fields, replace
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from unitgo.config.validator import validate_settings
from unitgo.formatter import DEFAULT_PRECISION

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class Settings:
    """User preferences pushed into the engine at startup."""
    precision: int = DEFAULT_PRECISION
    data_size_mode: str = 'si'
    theme: str = 'system'

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


SETTING_KEYS = [f.name for f in fields(Settings)]


def _read_stored(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}

    try:
        with open(path) as f:
            stored = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not read settings from {path}: {e}")
        return {}

    if not isinstance(stored, dict):
        logger.warning(f"Ignoring settings in {path}: expected a mapping")
        return {}

    return {k: v for k, v in stored.items() if k in SETTING_KEYS}


def load_settings(path: PathLike) -> Settings:
    """
    Load preferences, merged over the defaults.

    Raises:
        ConfigurationError: If a stored value is invalid
    """
    path = Path(path)
    settings = Settings(**_read_stored(path))
    validate_settings(settings, path)
    return settings


def save_settings(settings: Settings, path: PathLike) -> None:
    """Validate and write preferences."""
    path = Path(path)
    validate_settings(settings, path)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        yaml.safe_dump(settings.to_dict(), f, default_flow_style=False, sort_keys=False)


def update_settings(path: PathLike, **changes: Any) -> Settings:
    """
    Merge changes into the stored preferences and write them back.

    Returns:
        The merged Settings
    """
    unknown = [k for k in changes if k not in SETTING_KEYS]
    if unknown:
        raise TypeError(f"Unknown setting(s): {', '.join(unknown)}")

    path = Path(path)
    current = Settings(**_read_stored(path))
    updated = replace(current, **changes)
    save_settings(updated, path)
    return updated
