"""
UnitGo Command Line

Usage:
    python -m unitgo.run 100 --from cm --to in
    python -m unitgo.run 5 11 --from ft_in --to cm
    python -m unitgo.run 180 --from cm --to ft_in
    python -m unitgo.run 1 --from gb --to mb --to kb --data-mode binary
    python -m unitgo.run --list length
    python -m unitgo.run --search gallon
    python -m unitgo.run --shortcut "Car Speed"
    python -m unitgo.run --recent --history recents.json
"""

import argparse
import logging
import sys
from typing import List, Optional

from unitgo.config import ConfigurationError, load_settings
from unitgo.engine import ConversionEngine, ConversionResult, EngineConfig
from unitgo.history import HistoryStore
from unitgo.shortcuts import SHORTCUTS, find_shortcut, run_shortcut
from unitgo.units import Category, EVERYDAY_CATEGORIES, TECHNICAL_CATEGORIES, Unit


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="unitgo", description="UnitGo unit converter")
    parser.add_argument("values", nargs="*", type=float, help="Value(s) to convert")
    parser.add_argument("--from", dest="from_unit", help="Source unit id")
    parser.add_argument("--to", dest="to_units", action="append", default=[],
                        help="Target unit id (repeat for batch conversion)")

    parser.add_argument("--categories", action="store_true", help="List categories")
    parser.add_argument("--list", metavar="CATEGORY", help="List units in a category")
    parser.add_argument("--search", metavar="QUERY", help="Search units by name or symbol")
    parser.add_argument("--shortcuts", action="store_true", help="List quick conversions")
    parser.add_argument("--shortcut", metavar="LABEL", help="Run a quick conversion")
    parser.add_argument("--recent", action="store_true", help="Show recent conversions")

    parser.add_argument("--settings", help="Path to settings YAML")
    parser.add_argument("--precision", type=int, help="Decimal digits (1-15)")
    parser.add_argument("--data-mode", choices=["si", "binary"], help="Data size radix")
    parser.add_argument("--history", help="Path to recent conversions JSON")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def build_engine(args) -> ConversionEngine:
    if args.settings:
        engine = ConversionEngine.from_settings(load_settings(args.settings))
    else:
        engine = ConversionEngine(EngineConfig())

    if args.precision is not None:
        engine.set_precision(args.precision)
    if args.data_mode:
        engine.set_data_size_mode(args.data_mode)
    return engine


def print_categories() -> None:
    print("Everyday:  " + ", ".join(c.value for c in EVERYDAY_CATEGORIES))
    print("Technical: " + ", ".join(c.value for c in TECHNICAL_CATEGORIES))


def print_units(units) -> None:
    for unit in units:
        marker = " (composite)" if unit.is_composite else ""
        print(f"  {unit.id:10} {unit.symbol:8} {unit.name}{marker}")


def describe(values: List[float], source, result: ConversionResult) -> str:
    shown = " ".join(f"{v:g}" for v in values)
    if result.unit.is_composite:
        return f"{shown} {source.symbol} = {result.formatted}"
    return f"{shown} {source.symbol} = {result.formatted} {result.unit.symbol}"


def convert(engine: ConversionEngine, values: List[float], from_id: str,
            to_ids: List[str]) -> List[ConversionResult]:
    """Single, composite, or batch conversion depending on the arguments."""
    source = engine.get_unit(from_id)
    if source is None:
        return []

    if len(to_ids) == 1:
        target = engine.get_unit(to_ids[0])
        if target is not None and (source.is_composite or target.is_composite):
            result = engine.convert_composite(values, from_id, to_ids[0])
        elif len(values) == 1:
            result = engine.convert(values[0], from_id, to_ids[0])
        else:
            result = None
        return [result] if result else []

    if source.is_composite:
        # batch works on a plain number: expand into the base unit first
        base = engine.registry.get_base_unit(source.category)
        expanded = engine.convert_composite(values, from_id, base.id)
        if expanded is None:
            return []
        return engine.convert_to_multiple(expanded.value, base.id, to_ids)

    if len(values) != 1:
        return []
    return engine.convert_to_multiple(values[0], from_id, to_ids)


def recorded_value(source: Unit, values: List[float]) -> float:
    """History keeps one number per entry: composites as a finest-component total (feet*12 + inches)."""
    if not source.is_composite:
        return values[0]
    finest = source.components[-1]
    return sum(v * c.factor for v, c in zip(values, source.components)) / finest.factor


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(message)s')

    try:
        engine = build_engine(args)
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return 1

    history = HistoryStore(args.history) if args.history else None

    if args.categories:
        print_categories()
        return 0

    if args.list:
        try:
            category = Category(args.list.lower())
        except ValueError:
            parser.error(f"Unknown category: {args.list}")
        print_units(engine.get_units_by_category(category))
        return 0

    if args.search is not None:
        units = engine.search(args.search)
        if not units:
            print(f'No units found matching "{args.search}"')
        print_units(units)
        return 0

    if args.shortcuts:
        for shortcut in SHORTCUTS:
            print(f"  {shortcut.label:18} {shortcut.description}")
        return 0

    if args.recent:
        entries = history.recents() if history else []
        if not entries:
            print("No recent conversions yet.")
        for entry in entries:
            print(f"  {entry.value:g} {entry.from_unit_id} -> {entry.result:.2f} {entry.to_unit_id}")
        return 0

    if args.shortcut:
        shortcut = find_shortcut(args.shortcut)
        if shortcut is None:
            parser.error(f"Unknown shortcut: {args.shortcut}")
        values, from_id = [float(shortcut.value)], shortcut.from_unit
        results = [r for r in [run_shortcut(engine, shortcut)] if r]
    else:
        if not args.values or not args.from_unit or not args.to_units:
            parser.error("VALUE, --from and --to are required")
        values, from_id = args.values, args.from_unit
        results = convert(engine, values, from_id, args.to_units)

    if not results:
        print(f"Cannot convert from '{from_id}' with the given values and targets", file=sys.stderr)
        return 1

    source = engine.get_unit(from_id)
    for result in results:
        print(describe(values, source, result))
        if history is not None:
            history.add(from_id, result.unit.id, recorded_value(source, values), result.value)

    return 0


if __name__ == "__main__":
    sys.exit(main())
