"""
Numeric Formatter
=================

Renders conversion results for display.

    0                      -> "0"
    |v| >= 1e6             -> exponential, precision - 1 mantissa digits
    0 < |v| < 0.001        -> exponential, precision - 1 mantissa digits
    otherwise              -> rounded to precision decimals, trailing zeros dropped

Exponents are written without zero padding and with an explicit sign
("1.23457e+6"), the same shape browsers produce. Both branches round the
exact binary value half-up.
"""

from decimal import Decimal, ROUND_HALF_UP

MIN_PRECISION = 1
MAX_PRECISION = 15
DEFAULT_PRECISION = 6

EXPONENTIAL_ABOVE = 1e6
EXPONENTIAL_BELOW = 1e-3


def clamp_precision(precision: int) -> int:
    """Clamp a requested precision into [1, 15]."""
    return max(MIN_PRECISION, min(MAX_PRECISION, int(precision)))


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Format a value at a given decimal precision.

    Args:
        value: Finite number to render
        precision: Decimal digits, clamped into [1, 15]

    Returns:
        Display string
    """
    precision = clamp_precision(precision)

    if value == 0:
        return "0"

    magnitude = abs(value)
    if magnitude >= EXPONENTIAL_ABOVE or magnitude < EXPONENTIAL_BELOW:
        return _exponential(value, precision - 1)

    return _fixed(value, precision)


def _exponential(value: float, digits: int) -> str:
    exact = Decimal(value)
    exponent = exact.adjusted()
    mantissa = _round_half_up(exact.scaleb(-exponent), digits)
    if abs(mantissa) >= 10:
        # 9.99995 -> 10.0000 moves into the next decade
        exponent += 1
        mantissa = _round_half_up(exact.scaleb(-exponent), digits)
    return f"{mantissa}e{exponent:+d}"


def _round_half_up(number: Decimal, digits: int) -> Decimal:
    return number.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


def _fixed(value: float, precision: int) -> str:
    # Exact binary value rounded half-up, then the shortest float text
    rounded = _round_half_up(Decimal(value), precision)
    number = float(rounded)
    if number == 0:
        return "0"

    text = repr(number)
    if text.endswith(".0"):
        text = text[:-2]
    return text
