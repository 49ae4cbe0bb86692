"""
Test Conversion Engine
======================
"""

import math

import pytest


def test_convert_metric_length():
    """100 cm is one meter."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()
    result = engine.convert(100, 'cm', 'm')

    assert result is not None
    assert result.value == pytest.approx(1.0)
    assert result.formatted == '1'
    assert result.unit.id == 'm'


def test_temperature_symmetry():
    """Freezing point maps exactly between Celsius and Fahrenheit."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()

    assert engine.convert(0, 'c', 'f').formatted == '32'
    assert engine.convert(32, 'f', 'c').formatted == '0'
    assert engine.convert(100, 'c', 'k').formatted == '373.15'


def test_conversion_symmetry():
    """Converting there and back returns the original value."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()
    pairs = [('mi', 'km'), ('lb', 'g'), ('f', 'k'), ('mpg_us', 'km_l'), ('acre', 'ft2')]

    for a, b in pairs:
        there = engine.convert(37.5, a, b)
        back = engine.convert(there.value, b, a)
        assert back.value == pytest.approx(37.5, rel=1e-12), (a, b)


def test_category_guard():
    """Length cannot be converted to weight."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()

    for value in [0, 1, -5.5, 1e9]:
        assert engine.convert(value, 'm', 'kg') is None


def test_unknown_units_return_none():
    """Unresolvable ids never raise."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()

    assert engine.convert(1, 'furlong', 'm') is None
    assert engine.convert(1, 'm', 'furlong') is None
    assert engine.convert_composite([1], 'm', 'nope') is None


def test_non_finite_input_rejected():
    """NaN and infinity yield no result."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()

    assert engine.convert(float('nan'), 'm', 'cm') is None
    assert engine.convert(float('inf'), 'm', 'cm') is None
    assert engine.convert(float('-inf'), 'm', 'cm') is None
    assert engine.convert(10 ** 400, 'm', 'cm') is None
    assert engine.convert_composite([10 ** 400], 'cm', 'ft_in') is None
    assert engine.convert_composite([10 ** 400, 0], 'ft_in', 'cm') is None
    assert engine.convert_to_multiple(10 ** 400, 'm', ['cm', 'km']) == []


def test_reciprocal_zero_has_no_result():
    """0 mpg has no finite L/100km equivalent."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()

    assert engine.convert(0, 'mpg_us', 'l_100km') is None
    assert engine.convert(10, 'l_100km', 'mpg_us').value == pytest.approx(23.5215)


def test_precision_clamp():
    """Precision is clamped into [1, 15]."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()

    engine.set_precision(0)
    assert engine.precision == 1
    assert engine.convert(1, 'in', 'cm').formatted == '2.5'

    engine.set_precision(20)
    assert engine.precision == 15

    engine.set_precision(3)
    assert engine.convert(1, 'mi', 'km').formatted == '1.609'


def test_data_radix_switch():
    """GB -> MB follows the configured radix."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()
    assert engine.convert(1, 'gb', 'mb').formatted == '1000'

    engine.set_data_size_mode('binary')
    assert engine.convert(1, 'gb', 'mb').formatted == '1024'

    engine.set_data_size_mode('si')
    assert engine.convert(1, 'gb', 'mb').formatted == '1000'


def test_data_radix_switch_leaves_other_units():
    """Regenerating data units touches nothing else and adds no duplicates."""
    from unitgo.engine import ConversionEngine
    from unitgo.units import Category, DataSizeMode

    engine = ConversionEngine()
    before = [u.id for u in engine.registry]
    length = engine.get_unit('cm')

    engine.set_data_size_mode(DataSizeMode.BINARY)

    assert [u.id for u in engine.registry] == before
    assert engine.get_unit('cm') is length
    assert len(engine.get_units_by_category(Category.DATA)) == 5
    assert engine.data_size_mode is DataSizeMode.BINARY


def test_invalid_data_mode_raises():
    """An unknown radix is a programming error."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()

    with pytest.raises(ValueError):
        engine.set_data_size_mode('octal')


def test_composite_from_feet_inches():
    """6 ft 0 in is 182.88 cm."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()
    result = engine.convert_composite([6, 0], 'ft_in', 'cm')

    assert result.value == pytest.approx(182.88)
    assert result.formatted == '182.88'


def test_composite_missing_components_default_to_zero():
    """A lone feet value means zero inches."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()

    assert engine.convert_composite([6], 'ft_in', 'cm').formatted == '182.88'
    assert engine.convert_composite([], 'ft_in', 'cm').formatted == '0'
    assert engine.convert_composite([5, 6], 'ft_in', 'in').formatted == '66'


def test_composite_rejects_non_finite_component():
    """Any NaN component yields no result."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()

    assert engine.convert_composite([5, float('nan')], 'ft_in', 'cm') is None
    assert engine.convert_composite([float('inf')], 'cm', 'ft_in') is None


def test_composite_decomposition():
    """177.8 cm renders as 5 feet 10 inches."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()
    result = engine.convert_composite([177.8], 'cm', 'ft_in')

    assert result.formatted == '5\' 10"'
    assert result.value == pytest.approx(70.0)
    assert result.unit.id == 'ft_in'


def test_composite_decomposition_fractional_inches():
    """Fractional inches go through the formatter."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()
    result = engine.convert_composite([70.5], 'in', 'ft_in')

    assert result.formatted == '5\' 10.5"'
    assert result.value == pytest.approx(70.5)


def test_composite_decomposition_at_whole_feet():
    """Exact feet carry over cleanly instead of leaving float dust."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()

    twelve_inches = engine.convert_composite([12], 'in', 'ft_in')
    assert twelve_inches.formatted == '1\' 0"'
    assert twelve_inches.value == pytest.approx(12.0)

    one_foot = engine.convert_composite([1], 'ft', 'ft_in')
    assert one_foot.formatted == '1\' 0"'

    assert engine.convert_composite([6], 'ft', 'ft_in').formatted == '6\' 0"'
    assert engine.convert_composite([11], 'in', 'ft_in').formatted == '0\' 11"'


def test_composite_decomposition_negative():
    """Negative lengths floor the feet so feet * 12 + inches is the total."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()
    result = engine.convert_composite([-6], 'in', 'ft_in')

    assert result.formatted == '-1\' 6"'
    assert result.value == pytest.approx(-6.0)


def test_composite_arity():
    """Converting into a composite unit takes exactly one value."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()

    assert engine.convert_composite([1, 2], 'm', 'ft_in') is None
    assert engine.convert_composite([], 'm', 'ft_in') is None


def test_composite_needs_a_composite_side():
    """Plain pairs and cross-category pairs are not composite conversions."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()

    assert engine.convert_composite([1], 'm', 'cm') is None
    assert engine.convert_composite([1, 2], 'ft_in', 'kg') is None


def test_composite_to_composite_unsupported():
    """Two composite units in one category are not converted."""
    from unitgo.engine import ConversionEngine
    from unitgo.units import Category, CompositeComponent, Unit, linear

    engine = ConversionEngine()
    engine.registry.add_unit(Unit(
        'yd_ft', 'Yards & Feet', 'yd ft', Category.LENGTH, linear(0.9144),
        components=(
            CompositeComponent('yards', 'yd', 'Yards', 0.9144, 'yd'),
            CompositeComponent('feet', 'ft', 'Feet', 0.3048, 'ft'),
        ),
    ))

    assert engine.convert_composite([1, 1], 'ft_in', 'yd_ft') is None
    assert engine.convert_composite([4.0], 'ft', 'yd_ft').formatted == '1yd 1ft'


def test_batch_preserves_order_and_omits_failures():
    """Batch keeps caller order and drops unconvertible targets."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()
    results = engine.convert_to_multiple(1, 'km', ['mi', 'kg', 'm', 'bogus', 'cm'])

    assert [r.unit.id for r in results] == ['mi', 'm', 'cm']
    assert results[1].formatted == '1000'


def test_batch_unknown_source():
    """Unknown source gives an empty batch."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()

    assert engine.convert_to_multiple(100, 'unknownUnit', ['cm', 'm']) == []


def test_large_and_small_results_use_exponent():
    """Formatter switches notation on the result."""
    from unitgo.engine import ConversionEngine

    engine = ConversionEngine()

    assert engine.convert(5, 'km', 'mm').formatted == '5.00000e+6'
    assert engine.convert(1, 'mg', 'kg').formatted == '1.00000e-6'


def test_from_settings_and_apply_settings():
    """Stored preferences configure the engine."""
    from unitgo.config.settings import Settings
    from unitgo.engine import ConversionEngine, apply_settings
    from unitgo.units import DataSizeMode

    engine = ConversionEngine.from_settings(Settings(precision=2, data_size_mode='binary'))
    assert engine.precision == 2
    assert engine.convert(1, 'kb', 'b').formatted == '1024'

    apply_settings(engine, Settings(precision=40, data_size_mode='si'))
    assert engine.precision == 15
    assert engine.data_size_mode is DataSizeMode.SI
    assert engine.convert(1, 'kb', 'b').formatted == '1000'


def test_results_are_immutable():
    """ConversionResult is a frozen value object."""
    from dataclasses import FrozenInstanceError
    from unitgo.engine import ConversionEngine

    result = ConversionEngine().convert(1, 'h', 'min')

    assert result.formatted == '60'
    with pytest.raises(FrozenInstanceError):
        result.value = math.pi


def test_shortcuts_all_convert():
    """Every quick conversion produces a result."""
    from unitgo.engine import ConversionEngine
    from unitgo.shortcuts import SHORTCUTS, find_shortcut, run_shortcut

    engine = ConversionEngine()

    for shortcut in SHORTCUTS:
        assert run_shortcut(engine, shortcut) is not None, shortcut.label

    assert run_shortcut(engine, find_shortcut('room temperature')).formatted == '68'
    assert run_shortcut(engine, find_shortcut('Human Height')).formatted == '182.88'
    assert find_shortcut('teleport') is None


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
