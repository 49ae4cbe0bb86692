"""
UnitGo Conversion Engine
========================

Pairwise, composite, and batch conversion on top of a UnitRegistry.

Every conversion is routed through the category's implicit base unit:

    value --from.to_base--> base --to.from_base--> result

Expected invalid input (unknown ids, mixed categories, NaN/inf values,
wrong composite arity) yields None. The engine never raises for it.

Usage:
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()
    engine.convert(100, 'cm', 'm').formatted          # '1'
    engine.convert_composite([6, 0], 'ft_in', 'cm')   # 182.88 cm
    engine.convert_to_multiple(1, 'km', ['m', 'mi'])
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from unitgo.formatter import DEFAULT_PRECISION, clamp_precision, format_number
from unitgo.registry import UnitRegistry
from unitgo.units import Category, DataSizeMode, Unit

logger = logging.getLogger(__name__)


# =============================================================================
# VALUE OBJECTS
# =============================================================================

@dataclass(frozen=True)
class ConversionResult:
    """Result of one conversion."""
    value: float
    unit: Unit
    formatted: str


@dataclass
class EngineConfig:
    """Process-wide display settings."""
    precision: int = DEFAULT_PRECISION
    data_size_mode: DataSizeMode = DataSizeMode.SI

    def __post_init__(self):
        self.precision = clamp_precision(self.precision)
        self.data_size_mode = DataSizeMode(self.data_size_mode)


# =============================================================================
# ENGINE
# =============================================================================

class ConversionEngine:
    """
    Configuration and registry for unit conversion.

    Built once at startup and handed to whatever needs conversions. Not
    thread-safe: set_data_size_mode rebuilds registry entries, so callers in
    a threaded host must serialize it against reads.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.registry = UnitRegistry(self.config.data_size_mode)

    @classmethod
    def from_settings(cls, settings) -> 'ConversionEngine':
        """Build an engine from stored preferences (see unitgo.config.settings)."""
        return cls(EngineConfig(settings.precision, DataSizeMode(settings.data_size_mode)))

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def precision(self) -> int:
        return self.config.precision

    @property
    def data_size_mode(self) -> DataSizeMode:
        return self.config.data_size_mode

    def set_precision(self, precision: int) -> None:
        self.config.precision = clamp_precision(precision)

    def set_data_size_mode(self, mode: Union[DataSizeMode, str]) -> None:
        """Switch SI/binary radix and regenerate the data units."""
        mode = DataSizeMode(mode)
        self.config.data_size_mode = mode
        self.registry.set_data_size_mode(mode)

    # -------------------------------------------------------------------------
    # Registry passthrough
    # -------------------------------------------------------------------------

    def get_unit(self, unit_id: str) -> Optional[Unit]:
        return self.registry.get_unit(unit_id)

    def get_units_by_category(self, category: Union[Category, str]) -> List[Unit]:
        return self.registry.get_units_by_category(Category(category))

    def get_all_categories(self) -> List[Category]:
        return self.registry.get_all_categories()

    def search(self, query: str) -> List[Unit]:
        return self.registry.search(query)

    def format(self, value: float) -> str:
        return format_number(value, self.config.precision)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def _resolve_pair(self, from_id: str, to_id: str):
        from_unit = self.registry.get_unit(from_id)
        to_unit = self.registry.get_unit(to_id)

        if from_unit is None or to_unit is None:
            logger.debug(f"Unknown unit in {from_id} -> {to_id}")
            return None
        if from_unit.category != to_unit.category:
            logger.debug(
                f"Category mismatch: {from_id} ({from_unit.category.value}) "
                f"-> {to_id} ({to_unit.category.value})"
            )
            return None
        return from_unit, to_unit

    def convert(self, value: float, from_id: str, to_id: str) -> Optional[ConversionResult]:
        """
        Convert a single value between two units of the same category.

        Args:
            value: Number in the source unit
            from_id: Source unit id
            to_id: Target unit id

        Returns:
            ConversionResult, or None if the ids are unknown, the categories
            differ, or the value (or result) is not finite
        """
        pair = self._resolve_pair(from_id, to_id)
        if pair is None:
            return None
        from_unit, to_unit = pair

        if not _is_finite(value):
            logger.debug(f"Rejected non-finite value {value!r}")
            return None

        result = to_unit.from_base(from_unit.to_base(value))
        if not math.isfinite(result):
            logger.debug(f"{value} {from_id} -> {to_id} has no finite result")
            return None

        return ConversionResult(result, to_unit, self.format(result))

    def convert_composite(self, values: Sequence[float], from_id: str,
                          to_id: str) -> Optional[ConversionResult]:
        """
        Convert into or out of a multi-number unit (e.g. feet & inches).

        From a composite unit, one number per component is read (missing
        ones count as 0) and summed with each component's factor.

        Into a composite unit, exactly one value is accepted. The result's
        value is the total in the finest component (total inches) and the
        formatted string shows each component with its mark (5' 10.5").

        Composite -> composite is not supported and returns None.
        """
        pair = self._resolve_pair(from_id, to_id)
        if pair is None:
            return None
        from_unit, to_unit = pair

        if from_unit.is_composite and to_unit.is_composite:
            logger.debug(f"Composite -> composite ({from_id} -> {to_id}) is not supported")
            return None

        if from_unit.is_composite:
            return self._from_composite(values, from_unit, to_unit)

        if to_unit.is_composite:
            if len(values) != 1:
                logger.debug(f"Conversion into {to_id} takes one value, got {len(values)}")
                return None
            return self._to_composite(values[0], from_unit, to_unit)

        return None

    def _from_composite(self, values: Sequence[float], from_unit: Unit,
                        to_unit: Unit) -> Optional[ConversionResult]:
        parts = list(values[:len(from_unit.components)])
        parts += [0.0] * (len(from_unit.components) - len(parts))

        if not all(_is_finite(v) for v in parts):
            logger.debug(f"Rejected non-finite components {parts!r}")
            return None

        base = sum(v * c.factor for v, c in zip(parts, from_unit.components))
        result = to_unit.from_base(base)
        if not math.isfinite(result):
            return None

        return ConversionResult(result, to_unit, self.format(result))

    def _to_composite(self, value: float, from_unit: Unit,
                      to_unit: Unit) -> Optional[ConversionResult]:
        if not _is_finite(value):
            logger.debug(f"Rejected non-finite value {value!r}")
            return None

        components = to_unit.components
        finest = components[-1]
        total = from_unit.to_base(value) / finest.factor
        if not math.isfinite(total):
            return None

        # snap to the display precision so 11.999999999999998 in reads as 1' 0"
        remaining = round(total, self.precision)
        pieces = []
        for component in components[:-1]:
            # round away float noise in e.g. 0.3048 / 0.0254
            ratio = round(component.factor / finest.factor, 9)
            count, remaining = divmod(remaining, ratio)
            pieces.append(f"{int(count)}{component.mark}")
        pieces.append(f"{self.format(remaining)}{finest.mark}")

        return ConversionResult(total, to_unit, " ".join(pieces))

    def convert_to_multiple(self, value: float, from_id: str,
                            to_ids: Sequence[str]) -> List[ConversionResult]:
        """
        Convert one value into several targets, in the given order.

        Targets that cannot be converted are left out.
        """
        results = []
        for to_id in to_ids:
            result = self.convert(value, from_id, to_id)
            if result is not None:
                results.append(result)
        return results


def _is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except (TypeError, OverflowError):
        return False


def apply_settings(engine: ConversionEngine, settings) -> None:
    """Push stored preferences into a running engine."""
    engine.set_precision(settings.precision)
    if DataSizeMode(settings.data_size_mode) != engine.data_size_mode:
        engine.set_data_size_mode(settings.data_size_mode)
