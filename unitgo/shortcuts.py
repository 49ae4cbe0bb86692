"""
Quick Conversions
=================

Common everyday conversions offered as one-click examples.
"""

from dataclasses import dataclass
from typing import List, Optional

from unitgo.engine import ConversionEngine, ConversionResult
from unitgo.units import Category


@dataclass(frozen=True)
class Shortcut:
    label: str
    description: str
    from_unit: str
    to_unit: str
    category: Category
    value: float


SHORTCUTS: List[Shortcut] = [
    Shortcut("Room Temperature", "20°C to Fahrenheit", "c", "f", Category.TEMPERATURE, 20),
    Shortcut("Human Height", "6 feet to centimeters", "ft_in", "cm", Category.LENGTH, 6),
    Shortcut("Cooking Cup", "1 cup to milliliters", "cup", "ml", Category.VOLUME, 1),
    Shortcut("Car Speed", "60 mph to km/h", "mph", "kmh", Category.SPEED, 60),
    Shortcut("Body Weight", "150 lbs to kilograms", "lb", "kg", Category.WEIGHT, 150),
    Shortcut("File Size", "1 GB to megabytes", "gb", "mb", Category.DATA, 1),
]


def find_shortcut(label: str) -> Optional[Shortcut]:
    """Look up a shortcut by label (case-insensitive)."""
    wanted = label.strip().lower()
    for shortcut in SHORTCUTS:
        if shortcut.label.lower() == wanted:
            return shortcut
    return None


def run_shortcut(engine: ConversionEngine, shortcut: Shortcut) -> Optional[ConversionResult]:
    """Execute a shortcut, routing composite units to convert_composite."""
    source = engine.get_unit(shortcut.from_unit)
    target = engine.get_unit(shortcut.to_unit)
    if source is None or target is None:
        return None

    if source.is_composite or target.is_composite:
        return engine.convert_composite([shortcut.value], shortcut.from_unit, shortcut.to_unit)
    return engine.convert(shortcut.value, shortcut.from_unit, shortcut.to_unit)
