"""
Unit Registry
=============

Owns the id -> Unit mapping and answers category-scoped queries.

Insertion order is significant: consumers pick the "first two units" of a
category as defaults, so every query preserves registration order.
"""

import logging
from typing import Dict, Iterable, List, Optional

from unitgo.units import Category, DataSizeMode, Unit, STANDARD_UNITS, data_units

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """
    Raised when the unit table breaks one of its own invariants.

    This is a programming error (a bad unit definition), never a
    consequence of user input.
    """
    pass


class UnitRegistry:
    """
    Registry of unit definitions.

    Usage:
        registry = UnitRegistry()
        registry.get_unit('cm')
        registry.get_units_by_category(Category.LENGTH)
        registry.set_data_size_mode(DataSizeMode.BINARY)
    """

    def __init__(self, data_size_mode: DataSizeMode = DataSizeMode.SI,
                 units: Optional[Iterable[Unit]] = None):
        self._units: Dict[str, Unit] = {}
        self.data_size_mode = data_size_mode

        for unit in (STANDARD_UNITS if units is None else units):
            self.add_unit(unit)
        for unit in data_units(data_size_mode):
            self.add_unit(unit)

    def add_unit(self, unit: Unit) -> None:
        """Register a unit. Re-adding an id replaces it in place."""
        existing = self._units.get(unit.id)
        if existing is not None and existing.category != unit.category:
            raise RegistryError(
                f"Unit '{unit.id}' cannot move from {existing.category.value} "
                f"to {unit.category.value}"
            )
        self._units[unit.id] = unit

    def get_unit(self, unit_id: str) -> Optional[Unit]:
        return self._units.get(unit_id)

    def get_units_by_category(self, category: Category) -> List[Unit]:
        return [unit for unit in self._units.values() if unit.category == category]

    def get_base_unit(self, category: Category) -> Optional[Unit]:
        """The category's identity unit, or None for an empty category."""
        for unit in self.get_units_by_category(category):
            if unit.formula.is_identity:
                return unit
        return None

    @staticmethod
    def get_all_categories() -> List[Category]:
        return list(Category)

    def set_data_size_mode(self, mode: DataSizeMode) -> None:
        """
        Regenerate every data unit for a new radix.

        Ids shared by the old and new set keep their position in the
        registration order; ids that disappear are dropped. No other
        category is touched.
        """
        fresh = data_units(mode)
        fresh_ids = {unit.id for unit in fresh}

        for unit in self.get_units_by_category(Category.DATA):
            if unit.id not in fresh_ids:
                del self._units[unit.id]
        for unit in fresh:
            self._units[unit.id] = unit

        self.data_size_mode = mode
        logger.info(f"Data units regenerated for {mode.value} (radix {mode.multiplier})")

    def search(self, query: str) -> List[Unit]:
        """Case-insensitive substring match on name, symbol, or category."""
        if not query.strip():
            return []
        needle = query.lower()

        matches = []
        for category in self.get_all_categories():
            for unit in self.get_units_by_category(category):
                if (needle in unit.name.lower()
                        or needle in unit.symbol.lower()
                        or needle in category.value):
                    matches.append(unit)
        return matches

    def validate(self) -> None:
        """
        Check the table invariants.

        Every category needs exactly one identity (base) unit, and composite
        components must be finite positive factors ordered coarsest first.

        Raises:
            RegistryError: On the first violated invariant
        """
        for category in self.get_all_categories():
            units = self.get_units_by_category(category)
            bases = [u.id for u in units if u.formula.is_identity]
            if len(bases) != 1:
                raise RegistryError(
                    f"Category '{category.value}' needs exactly one base unit, found {bases or 'none'}"
                )

        for unit in self._units.values():
            if not unit.is_composite:
                continue
            factors = [c.factor for c in unit.components]
            if any(f <= 0 for f in factors):
                raise RegistryError(f"Composite unit '{unit.id}' has a non-positive factor")
            if factors != sorted(factors, reverse=True):
                raise RegistryError(f"Composite unit '{unit.id}' components must go coarsest first")

    def __contains__(self, unit_id: str) -> bool:
        return unit_id in self._units

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self):
        return iter(self._units.values())
