"""
UnitGo Settings Validator

Usage:
    from unitgo.config.validator import ConfigurationError, validate_settings

    validate_settings(settings, settings_path)
"""

from pathlib import Path
from typing import List, Optional

from unitgo.units import DataSizeMode


class ConfigurationError(Exception):
    """
    Raised when stored preferences hold values the engine cannot use.

    The message names every offending field and the accepted values, so it
    can be shown to the user as-is.
    """
    pass


VALID_THEMES = ['light', 'dark', 'system']
VALID_DATA_SIZE_MODES = [mode.value for mode in DataSizeMode]


def find_problems(settings) -> List[str]:
    """Return one line per invalid field (empty when valid)."""
    problems = []

    precision = settings.precision
    if isinstance(precision, bool) or not isinstance(precision, int):
        problems.append(f"precision: expected an integer, got {precision!r}")

    if settings.data_size_mode not in VALID_DATA_SIZE_MODES:
        problems.append(
            f"data_size_mode: expected one of {VALID_DATA_SIZE_MODES}, "
            f"got {settings.data_size_mode!r}"
        )

    if settings.theme not in VALID_THEMES:
        problems.append(f"theme: expected one of {VALID_THEMES}, got {settings.theme!r}")

    return problems


def validate_settings(settings, settings_path: Optional[Path] = None) -> None:
    """
    Validate a Settings instance.

    Args:
        settings: Settings to check
        settings_path: File the settings came from (for the error message)

    Raises:
        ConfigurationError: If any field is invalid
    """
    problems = find_problems(settings)
    if not problems:
        return

    location = f"File: {settings_path}\n" if settings_path else ""
    raise ConfigurationError(
        f"\n{'='*60}\n"
        f"CONFIGURATION ERROR: Invalid settings\n"
        f"{'='*60}\n"
        f"{location}"
        f"{''.join(f'  - {p}' + chr(10) for p in problems)}"
        f"{'='*60}"
    )
