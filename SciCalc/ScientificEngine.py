# ScientificEngine
"""
Numeric helpers used by the evaluator: constants, angle-unit conversion,
factorial and the combinatorial functions.

Every helper works on plain floats and raises the calculator's own error
types (see error.py) when an argument is outside its domain.
"""
import math

from . import error as E
from .config_manager import AngleMode


EPSILON = 1e-10
MAX_FACTORIAL = 170

CONSTANTS = {
    "π": math.pi,
    "e": math.e,
}


def constant_value(name):
    try:
        return CONSTANTS[name]
    except KeyError:
        raise E.SyntaxError(f"Unknown constant: {name}", code="3004")


def is_near_zero(value):
    return abs(value) < EPSILON


def is_integer(value):
    return float(value).is_integer()


# -----------------------------
# Angle conversion
# -----------------------------

def deg_to_rad(degrees):
    return degrees * (math.pi / 180)


def rad_to_deg(radians):
    return radians * (180 / math.pi)


def grad_to_rad(gradians):
    return gradians * (math.pi / 200)


def rad_to_grad(radians):
    return radians * (200 / math.pi)


def to_radians(value, angle_mode):
    """Convert value from the active angle unit to radians."""
    if angle_mode == AngleMode.DEG:
        return deg_to_rad(value)
    elif angle_mode == AngleMode.GRAD:
        return grad_to_rad(value)
    return value


def from_radians(value, angle_mode):
    """Convert a radian value back to the active angle unit."""
    if angle_mode == AngleMode.DEG:
        return rad_to_deg(value)
    elif angle_mode == AngleMode.GRAD:
        return rad_to_grad(value)
    return value


# -----------------------------
# Factorial / combinatorics
# -----------------------------

def factorial(n):
    """n! as a float, computed as an iterative product.

    Raises DomainError for negative or non-integral n and Overflow above 170,
    where the result no longer fits into a float.
    """
    if n < 0 or not is_integer(n):
        raise E.DomainError(f"Factorial of {n}", code="2004")
    if n > MAX_FACTORIAL:
        raise E.Overflow(f"Factorial of {n}", code="3027")

    result = 1.0
    for i in range(2, int(n) + 1):
        result *= i
    return result


def _check_combinatorial(n, r):
    if n < 0 or r < 0 or not is_integer(n) or not is_integer(r):
        raise E.DomainError(f"Invalid arguments: n={n}, r={r}", code="2005")
    return int(n), int(r)


def combination(n, r):
    """nCr via the multiplicative form over min(r, n - r) factors."""
    n, r = _check_combinatorial(n, r)
    if r > n:
        return 0.0
    if r == 0 or r == n:
        return 1.0

    r = min(r, n - r)
    result = 1.0
    for i in range(r):
        result *= (n - i) / (i + 1)
        if math.isinf(result):
            break

    if not math.isfinite(result):
        raise E.Overflow(f"{n} nCr {r}", code="3026")
    # Absorb the drift from the repeated divisions
    return float(round(result))


def permutation(n, r):
    """nPr = n * (n-1) * ... * (n-r+1)."""
    n, r = _check_combinatorial(n, r)
    if r > n:
        return 0.0

    result = 1.0
    for i in range(r):
        result *= n - i
        if math.isinf(result):
            break
    if not math.isfinite(result):
        raise E.Overflow(f"{n} nPr {r}", code="3026")
    return result
