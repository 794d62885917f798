# Formatter.py
"""
Renders a computed float as the string shown on the result line.

NORM  plain decimal, 10 significant digits, scientific outside [1e-10, 1e10]
FIX   fixed point with N decimals
SCI   mantissa with N decimals and a power of ten:  1.23E4
ENG   like SCI, exponent restricted to multiples of 3:  12.3E3
"""
import math
from decimal import Decimal

from .config_manager import DisplayMode, clamp_decimals

ERROR_TOKEN = "MATH ERROR"
EPSILON = 1e-10
SIGNIFICANT_DIGITS = 10
NORM_UPPER_LIMIT = 1e10
NORM_LOWER_LIMIT = 1e-10


def _strip_zeros(mantissa):
    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")
    return mantissa


def _negative_zero(text):
    # "-0.00" -> "0.00"
    if text.startswith("-") and not any(c in "123456789" for c in text):
        return text[1:]
    return text


def format_fixed(value, decimals):
    return _negative_zero(f"{value:.{decimals}f}")


def format_scientific(value, decimals, strip=False):
    mantissa, exponent = f"{value:.{decimals}e}".split("e")
    if strip:
        mantissa = _strip_zeros(mantissa)
    return f"{mantissa}E{int(exponent)}"


def format_engineering(value, decimals):
    exponent = math.floor(math.log10(abs(value)))
    exponent = exponent - (exponent % 3)
    mantissa = round(value / 10 ** exponent, decimals)

    # Rounding (or log10 imprecision) can push the mantissa out of [1, 1000)
    if abs(mantissa) >= 1000:
        exponent += 3
        mantissa = round(value / 10 ** exponent, decimals)
    elif abs(mantissa) < 1:
        exponent -= 3
        mantissa = round(value / 10 ** exponent, decimals)

    return f"{mantissa:.{decimals}f}E{exponent}"


def format_normal(value):
    if abs(value) > NORM_UPPER_LIMIT or abs(value) < NORM_LOWER_LIMIT:
        return format_scientific(value, SIGNIFICANT_DIGITS - 1, strip=True)

    # Round to 10 significant digits, then print without exponent
    rounded = Decimal(f"{value:.{SIGNIFICANT_DIGITS}g}")
    text = format(rounded, "f")
    return _negative_zero(_strip_zeros(text))


def format_number(value, mode=DisplayMode.NORM, fix_decimals=2):
    """Render value for display according to mode."""
    if value is None or not math.isfinite(value):
        return ERROR_TOKEN

    if abs(value) < EPSILON:
        return "0"

    decimals = clamp_decimals(fix_decimals)

    if mode == DisplayMode.FIX:
        return format_fixed(value, decimals)
    elif mode == DisplayMode.SCI:
        return format_scientific(value, decimals)
    elif mode == DisplayMode.ENG:
        return format_engineering(value, decimals)
    return format_normal(value)
