"""
UnitGo - Measurement Unit Converter
===================================

Converts values between units of the same category by routing through
each category's implicit base unit.

Architecture:
    - units: unit catalog, categories, conversion formulas
    - registry: id -> unit lookup, data-size regeneration
    - engine: pairwise, composite, and batch conversion
    - formatter: display strings at a configurable precision
    - config/: YAML preference store
    - history: recent conversions

Usage:
    from unitgo import ConversionEngine

    engine = ConversionEngine()
    engine.convert(0, 'c', 'f').formatted   # '32'
"""

__version__ = "1.0.0"

from .units import Category, DataSizeMode, Unit
from .engine import ConversionEngine, ConversionResult, EngineConfig, apply_settings
from .formatter import format_number
from .registry import RegistryError, UnitRegistry

__all__ = [
    'Category',
    'DataSizeMode',
    'Unit',
    'ConversionEngine',
    'ConversionResult',
    'EngineConfig',
    'apply_settings',
    'format_number',
    'RegistryError',
    'UnitRegistry',
    '__version__',
]
