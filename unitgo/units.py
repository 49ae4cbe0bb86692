"""
UnitGo Unit Catalog
===================

Every unit the converter knows about, grouped into closed categories.

Each category has one implicit base unit: the unit whose formula is the
identity. Every other unit carries a formula relative to that base, so a
conversion is always value -> base -> target and adding a unit never needs
new pairwise formulas.

Usage:
    >>> from unitgo.units import STANDARD_UNITS, data_units, DataSizeMode
    >>> [u.id for u in data_units(DataSizeMode.BINARY)]
    ['b', 'kb', 'mb', 'gb', 'tb']
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple
import math


# =============================================================================
# CATEGORIES
# =============================================================================

class Category(Enum):
    """Closed set of commensurable quantities, in display order."""
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    VOLUME = "volume"
    AREA = "area"
    SPEED = "speed"
    TIME = "time"
    DATA = "data"
    ENERGY = "energy"
    POWER = "power"
    PRESSURE = "pressure"
    FORCE = "force"
    DENSITY = "density"
    ANGLE = "angle"
    FUEL = "fuel"


# Display buckets for category pickers
EVERYDAY_CATEGORIES = [
    Category.LENGTH,
    Category.WEIGHT,
    Category.TEMPERATURE,
    Category.VOLUME,
    Category.AREA,
    Category.SPEED,
    Category.TIME,
]

TECHNICAL_CATEGORIES = [
    Category.ENERGY,
    Category.POWER,
    Category.PRESSURE,
    Category.FORCE,
    Category.DENSITY,
    Category.ANGLE,
    Category.FUEL,
    Category.DATA,
]


class DataSizeMode(Enum):
    """Radix used between data-size steps."""
    SI = "si"
    BINARY = "binary"

    @property
    def multiplier(self) -> int:
        return 1024 if self is DataSizeMode.BINARY else 1000


# =============================================================================
# FORMULAS
# =============================================================================

class FormulaKind(Enum):
    LINEAR = "linear"      # base = v * scale
    AFFINE = "affine"      # base = (v - offset) * scale
    INVERSE = "inverse"    # base = numerator / v (self-inverse)


@dataclass(frozen=True)
class Formula:
    """
    Tagged conversion rule between a unit and its category base.

    LINEAR and AFFINE are inverted algebraically. INVERSE is its own
    inverse, which is what the reciprocal fuel-economy units need
    (L/100km <-> mpg).
    """
    kind: FormulaKind
    scale: float = 1.0
    offset: float = 0.0

    def to_base(self, value: float) -> float:
        if self.kind is FormulaKind.LINEAR:
            return value * self.scale
        if self.kind is FormulaKind.AFFINE:
            return (value - self.offset) * self.scale
        return _reciprocal(self.scale, value)

    def from_base(self, value: float) -> float:
        if self.kind is FormulaKind.LINEAR:
            return value / self.scale
        if self.kind is FormulaKind.AFFINE:
            return value / self.scale + self.offset
        return _reciprocal(self.scale, value)

    @property
    def is_identity(self) -> bool:
        return self.kind is not FormulaKind.INVERSE and self.scale == 1.0 and self.offset == 0.0


def _reciprocal(numerator: float, value: float) -> float:
    # IEEE semantics: n / 0 is a signed infinity, not an exception
    if value == 0:
        return math.copysign(math.inf, numerator) * math.copysign(1.0, value)
    return numerator / value


def linear(scale: float) -> Formula:
    return Formula(FormulaKind.LINEAR, scale)


def affine(scale: float, offset: float) -> Formula:
    return Formula(FormulaKind.AFFINE, scale, offset)


def inverse(numerator: float) -> Formula:
    return Formula(FormulaKind.INVERSE, numerator)


IDENTITY = linear(1.0)


# =============================================================================
# UNIT DEFINITIONS
# =============================================================================

@dataclass(frozen=True)
class CompositeComponent:
    """One number of a multi-number unit (e.g. the feet in feet & inches)."""
    name: str
    symbol: str
    placeholder: str
    factor: float          # base units per one of this component
    mark: str = ""         # suffix used when displaying the component


@dataclass(frozen=True)
class Unit:
    """Definition of a single unit"""
    id: str
    name: str
    symbol: str
    category: Category
    formula: Formula = IDENTITY
    components: Tuple[CompositeComponent, ...] = field(default=())

    @property
    def is_composite(self) -> bool:
        return bool(self.components)

    def to_base(self, value: float) -> float:
        return self.formula.to_base(value)

    def from_base(self, value: float) -> float:
        return self.formula.from_base(value)


# Master unit table (data units are generated per radix, see data_units)
STANDARD_UNITS: List[Unit] = []


def define_unit(unit_id: str, name: str, symbol: str, category: Category,
                formula: Formula = IDENTITY,
                components: Tuple[CompositeComponent, ...] = ()) -> Unit:
    """Add a unit to the standard table"""
    unit = Unit(unit_id, name, symbol, category, formula, tuple(components))
    STANDARD_UNITS.append(unit)
    return unit


FOOT = 0.3048
INCH = 0.0254

# -----------------------------------------------------------------------------
# LENGTH (base: meter)
# -----------------------------------------------------------------------------
define_unit("mm", "Millimeter", "mm", Category.LENGTH, linear(1e-3))
define_unit("cm", "Centimeter", "cm", Category.LENGTH, linear(1e-2))
define_unit("m", "Meter", "m", Category.LENGTH)
define_unit("km", "Kilometer", "km", Category.LENGTH, linear(1000.0))
define_unit("in", "Inch", "in", Category.LENGTH, linear(INCH))
define_unit("ft", "Foot", "ft", Category.LENGTH, linear(FOOT))
define_unit("ft_in", "Feet & Inches", "ft in", Category.LENGTH, linear(FOOT), components=(
    CompositeComponent("feet", "ft", "Feet", FOOT, "'"),
    CompositeComponent("inches", "in", "Inches", INCH, '"'),
))
define_unit("yd", "Yard", "yd", Category.LENGTH, linear(0.9144))
define_unit("mi", "Mile", "mi", Category.LENGTH, linear(1609.344))
define_unit("μm", "Micrometer", "μm", Category.LENGTH, linear(1e-6))
define_unit("nm", "Nanometer", "nm", Category.LENGTH, linear(1e-9))
define_unit("nmi", "Nautical Mile", "nmi", Category.LENGTH, linear(1852.0))
define_unit("dm", "Decimeter", "dm", Category.LENGTH, linear(0.1))

# -----------------------------------------------------------------------------
# WEIGHT (base: kilogram)
# -----------------------------------------------------------------------------
define_unit("mg", "Milligram", "mg", Category.WEIGHT, linear(1e-6))
define_unit("g", "Gram", "g", Category.WEIGHT, linear(1e-3))
define_unit("kg", "Kilogram", "kg", Category.WEIGHT)
define_unit("oz", "Ounce", "oz", Category.WEIGHT, linear(0.0283495))
define_unit("lb", "Pound", "lb", Category.WEIGHT, linear(0.453592))
define_unit("ton", "Metric Ton", "t", Category.WEIGHT, linear(1000.0))
define_unit("stone", "Stone", "st", Category.WEIGHT, linear(6.35029))
define_unit("grain", "Grain", "gr", Category.WEIGHT, linear(6.47989e-5))
define_unit("carat", "Carat", "ct", Category.WEIGHT, linear(2e-4))
define_unit("troy_oz", "Troy Ounce", "oz t", Category.WEIGHT, linear(0.0311035))

# -----------------------------------------------------------------------------
# TEMPERATURE (base: Celsius, with offsets)
# -----------------------------------------------------------------------------
define_unit("c", "Celsius", "°C", Category.TEMPERATURE)
define_unit("f", "Fahrenheit", "°F", Category.TEMPERATURE, affine(5 / 9, 32.0))
define_unit("k", "Kelvin", "K", Category.TEMPERATURE, affine(1.0, 273.15))

# -----------------------------------------------------------------------------
# VOLUME (base: liter)
# -----------------------------------------------------------------------------
define_unit("ml", "Milliliter", "ml", Category.VOLUME, linear(1e-3))
define_unit("l", "Liter", "L", Category.VOLUME)
define_unit("cup", "Cup (US)", "cup", Category.VOLUME, linear(0.236588))
define_unit("pint", "Pint (US)", "pt", Category.VOLUME, linear(0.473176))
define_unit("quart", "Quart (US)", "qt", Category.VOLUME, linear(0.946353))
define_unit("gallon", "Gallon (US)", "gal", Category.VOLUME, linear(3.78541))
define_unit("floz", "Fluid Ounce (US)", "fl oz", Category.VOLUME, linear(0.0295735))
define_unit("tbsp", "Tablespoon", "tbsp", Category.VOLUME, linear(0.0147868))
define_unit("tsp", "Teaspoon", "tsp", Category.VOLUME, linear(0.00492892))
define_unit("m3", "Cubic Meter", "m³", Category.VOLUME, linear(1000.0))
define_unit("cm3", "Cubic Centimeter", "cm³", Category.VOLUME, linear(1e-3))
define_unit("ft3", "Cubic Foot", "ft³", Category.VOLUME, linear(28.3168))
define_unit("in3", "Cubic Inch", "in³", Category.VOLUME, linear(0.0163871))
define_unit("barrel", "Barrel (US)", "bbl", Category.VOLUME, linear(158.987))

# -----------------------------------------------------------------------------
# TIME (base: second)
# -----------------------------------------------------------------------------
define_unit("s", "Second", "s", Category.TIME)
define_unit("min", "Minute", "min", Category.TIME, linear(60.0))
define_unit("h", "Hour", "h", Category.TIME, linear(3600.0))
define_unit("d", "Day", "d", Category.TIME, linear(86400.0))
define_unit("wk", "Week", "wk", Category.TIME, linear(604800.0))
define_unit("mo", "Month (30d)", "mo", Category.TIME, linear(2592000.0))
define_unit("yr", "Year (365d)", "yr", Category.TIME, linear(31536000.0))

# -----------------------------------------------------------------------------
# AREA (base: square meter)
# -----------------------------------------------------------------------------
define_unit("m2", "Square Meter", "m²", Category.AREA)
define_unit("cm2", "Square Centimeter", "cm²", Category.AREA, linear(1e-4))
define_unit("km2", "Square Kilometer", "km²", Category.AREA, linear(1e6))
define_unit("in2", "Square Inch", "in²", Category.AREA, linear(6.4516e-4))
define_unit("ft2", "Square Foot", "ft²", Category.AREA, linear(0.092903))
define_unit("yd2", "Square Yard", "yd²", Category.AREA, linear(0.836127))
define_unit("acre", "Acre", "ac", Category.AREA, linear(4046.86))
define_unit("hectare", "Hectare", "ha", Category.AREA, linear(10000.0))

# -----------------------------------------------------------------------------
# SPEED (base: meter per second)
# -----------------------------------------------------------------------------
define_unit("mps", "Meter per Second", "m/s", Category.SPEED)
define_unit("kmh", "Kilometer per Hour", "km/h", Category.SPEED, linear(1 / 3.6))
define_unit("mph", "Mile per Hour", "mph", Category.SPEED, linear(0.44704))
define_unit("fps", "Foot per Second", "ft/s", Category.SPEED, linear(FOOT))
define_unit("knot", "Knot", "kn", Category.SPEED, linear(0.514444))

# -----------------------------------------------------------------------------
# PRESSURE (base: pascal)
# -----------------------------------------------------------------------------
define_unit("pa", "Pascal", "Pa", Category.PRESSURE)
define_unit("bar", "Bar", "bar", Category.PRESSURE, linear(1e5))
define_unit("psi", "PSI", "psi", Category.PRESSURE, linear(6894.76))
define_unit("atm", "Atmosphere", "atm", Category.PRESSURE, linear(101325.0))

# -----------------------------------------------------------------------------
# ENERGY (base: joule)
# -----------------------------------------------------------------------------
define_unit("j", "Joule", "J", Category.ENERGY)
define_unit("cal", "Calorie", "cal", Category.ENERGY, linear(4.184))
define_unit("kwh", "Kilowatt Hour", "kWh", Category.ENERGY, linear(3.6e6))
define_unit("btu", "BTU", "BTU", Category.ENERGY, linear(1055.06))

# -----------------------------------------------------------------------------
# POWER (base: watt)
# -----------------------------------------------------------------------------
define_unit("w", "Watt", "W", Category.POWER)
define_unit("kw", "Kilowatt", "kW", Category.POWER, linear(1000.0))
define_unit("hp", "Horsepower", "hp", Category.POWER, linear(745.7))

# -----------------------------------------------------------------------------
# FORCE (base: newton)
# -----------------------------------------------------------------------------
define_unit("n", "Newton", "N", Category.FORCE)
define_unit("lbf", "Pound-force", "lbf", Category.FORCE, linear(4.44822))
define_unit("kgf", "Kilogram-force", "kgf", Category.FORCE, linear(9.80665))

# -----------------------------------------------------------------------------
# DENSITY (base: kilogram per cubic meter)
# -----------------------------------------------------------------------------
define_unit("kg_m3", "Kilogram per Cubic Meter", "kg/m³", Category.DENSITY)
define_unit("g_cm3", "Gram per Cubic Centimeter", "g/cm³", Category.DENSITY, linear(1000.0))
define_unit("lb_ft3", "Pound per Cubic Foot", "lb/ft³", Category.DENSITY, linear(16.0185))

# -----------------------------------------------------------------------------
# ANGLE (base: radian)
# -----------------------------------------------------------------------------
define_unit("rad", "Radian", "rad", Category.ANGLE)
define_unit("deg", "Degree", "°", Category.ANGLE, linear(math.pi / 180))
define_unit("grad", "Gradian", "grad", Category.ANGLE, linear(math.pi / 200))

# -----------------------------------------------------------------------------
# FUEL ECONOMY (base: liter per 100 km, reciprocal scales)
# -----------------------------------------------------------------------------
define_unit("l_100km", "Liter per 100 km", "L/100km", Category.FUEL)
define_unit("mpg_us", "Miles per Gallon (US)", "mpg", Category.FUEL, inverse(235.215))
define_unit("mpg_uk", "Miles per Gallon (UK)", "mpg", Category.FUEL, inverse(282.481))
define_unit("km_l", "Kilometer per Liter", "km/L", Category.FUEL, inverse(100.0))


# -----------------------------------------------------------------------------
# DATA SIZE (base: byte, radix depends on DataSizeMode)
# -----------------------------------------------------------------------------

DATA_STEPS = [
    ("b", "Byte", "B"),
    ("kb", "Kilobyte", "KB"),
    ("mb", "Megabyte", "MB"),
    ("gb", "Gigabyte", "GB"),
    ("tb", "Terabyte", "TB"),
]


def data_units(mode: DataSizeMode) -> List[Unit]:
    """Build the data-size units for one radix (byte is step 0)."""
    multiplier = mode.multiplier
    units = []
    for step, (unit_id, name, symbol) in enumerate(DATA_STEPS):
        # integer powers keep 1024**n exact
        formula = linear(float(multiplier ** step)) if step else IDENTITY
        units.append(Unit(unit_id, name, symbol, Category.DATA, formula))
    return units


__all__ = [
    'Category', 'DataSizeMode', 'EVERYDAY_CATEGORIES', 'TECHNICAL_CATEGORIES',
    'Formula', 'FormulaKind', 'linear', 'affine', 'inverse', 'IDENTITY',
    'CompositeComponent', 'Unit', 'STANDARD_UNITS', 'define_unit', 'data_units',
    'DATA_STEPS',
]
