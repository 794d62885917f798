# Evaluator.py
"""
Postfix evaluation with an operand stack.

Each operator/function pops its operands, applies the matching operation from
the tables below and pushes the result. Domain problems are raised as the
calculator's typed errors (error.py); nothing here touches shared state.
"""
import logging
import math

from . import error as E
from . import ScientificEngine
from .Tokenizer import TokenType
from .config_manager import AngleMode

logger = logging.getLogger(__name__)


# -----------------------------
# Binary operations: f(left, right)
# -----------------------------

def divide(left, right):
    if ScientificEngine.is_near_zero(right):
        raise E.DivideByZero(f"{left} / {right}", code="3003")
    return left / right


def modulo(left, right):
    if ScientificEngine.is_near_zero(right):
        raise E.DivideByZero(f"{left} % {right}", code="3005")
    # Truncated remainder: the result takes the sign of the dividend
    return math.fmod(left, right)


def power(base, exponent):
    try:
        result = math.pow(base, exponent)
    except OverflowError:
        raise E.Overflow(f"{base} ^ {exponent}", code="3026")
    except ValueError:
        if base == 0:
            # 0 ^ negative: a pole, not a missing real value
            raise E.Overflow(f"{base} ^ {exponent}", code="3026")
        raise E.DomainError(f"{base} ^ {exponent}", code="2006")

    if not math.isfinite(result):
        raise E.Overflow(f"{base} ^ {exponent}", code="3026")
    return result


BINARY_OPERATIONS = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": divide,
    "%": modulo,
    "^": power,
    "nCr": ScientificEngine.combination,
    "nPr": ScientificEngine.permutation,
}


# -----------------------------
# Unary operations: f(value, angle_mode)
# -----------------------------

def _trig(function):
    def apply(value, angle_mode):
        return function(ScientificEngine.to_radians(value, angle_mode))
    return apply


def _inverse_trig(function, bounded):
    def apply(value, angle_mode):
        if bounded and abs(value) > 1:
            raise E.DomainError(f"{function.__name__}({value})", code="2001")
        return ScientificEngine.from_radians(function(value), angle_mode)
    return apply


def log10(value, angle_mode):
    if value <= 0:
        raise E.DomainError(f"log({value})", code="2002")
    return math.log10(value)


def ln(value, angle_mode):
    if value <= 0:
        raise E.DomainError(f"ln({value})", code="2002")
    return math.log(value)


def sqrt(value, angle_mode):
    if value < 0:
        raise E.DomainError(f"sqrt({value})", code="2003")
    return math.sqrt(value)


UNARY_OPERATIONS = {
    "sin": _trig(math.sin),
    "cos": _trig(math.cos),
    "tan": _trig(math.tan),
    "asin": _inverse_trig(math.asin, bounded=True),
    "acos": _inverse_trig(math.acos, bounded=True),
    "atan": _inverse_trig(math.atan, bounded=False),
    "log": log10,
    "ln": ln,
    "sqrt": sqrt,
    "abs": lambda value, angle_mode: abs(value),
    "neg": lambda value, angle_mode: -value,
    "!": lambda value, angle_mode: ScientificEngine.factorial(value),
}


def arity(symbol):
    """Number of operands symbol consumes, or 0 if it is not a known operation."""
    if symbol in UNARY_OPERATIONS:
        return 1
    if symbol in BINARY_OPERATIONS:
        return 2
    return 0


def apply_operation(symbol, stack, angle_mode):
    """Pop the operands of symbol from stack, apply it and push the result."""
    needed = arity(symbol)
    if needed == 0:
        raise E.SyntaxError(f"Invalid operator: {symbol}", code="3004")
    if len(stack) < needed:
        raise E.SyntaxError(f"Missing operand for '{symbol}'", code="3001")

    if needed == 1:
        value = stack.pop()
        result = UNARY_OPERATIONS[symbol](value, angle_mode)
    else:
        right = stack.pop()
        left = stack.pop()
        result = BINARY_OPERATIONS[symbol](left, right)

    if not math.isfinite(result):
        raise E.Overflow(f"Result of '{symbol}' is {result}", code="3026")
    stack.append(result)


def evaluate(postfix, angle_mode=AngleMode.DEG):
    """Evaluate a postfix token list and return the result as a float."""
    stack = []

    for token in postfix:
        if token.type == TokenType.NUMBER:
            value = float(token.value)
            if not math.isfinite(value):
                raise E.Overflow(f"Number too big: {token.value}", code="3026")
            stack.append(value)
        elif token.type == TokenType.CONSTANT:
            stack.append(ScientificEngine.constant_value(token.value))
        elif token.type == TokenType.LEFT_PAREN:
            raise E.SyntaxError("Unclosed '('", code="3009")
        elif token.type == TokenType.RIGHT_PAREN:
            raise E.SyntaxError("Unopened ')'", code="3010")
        else:
            apply_operation(token.value, stack, angle_mode)

    if len(stack) != 1:
        raise E.SyntaxError(f"{len(stack)} values left after evaluation", code="3002")

    result = stack[0]
    logger.debug("Result: %r", result)
    return result
