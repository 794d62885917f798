# Tokenizer.py
"""
Lexer for calculator input.

Turns the text on the entry line into a flat list of tagged tokens. Calculator
glyphs (×, ÷, −, √, sin⁻¹, π, ...) and their ASCII spellings map to the same
tokens, so nothing downstream has to look at raw characters again.

Characters that belong to no lexeme (spaces, stray letters) are dropped.
"""
import logging
from collections import namedtuple
from decimal import Decimal
from enum import Enum

from . import error as E

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"
    CONSTANT = "constant"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"


class Token(namedtuple("Token", ["type", "value"])):
    """Immutable (type, value) pair. NUMBER values are Decimals, the rest strings."""
    __slots__ = ()

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Number({self.value})"
        return f"{self.type.name.title().replace('_', '')}({self.value!r})"


def Number(value):
    return Token(TokenType.NUMBER, Decimal(str(value)))

def Operator(symbol):
    return Token(TokenType.OPERATOR, symbol)

def Function(name):
    return Token(TokenType.FUNCTION, name)

def Constant(name):
    return Token(TokenType.CONSTANT, name)

LEFT_PAREN = Token(TokenType.LEFT_PAREN, "(")
RIGHT_PAREN = Token(TokenType.RIGHT_PAREN, ")")


UNARY_FUNCTIONS = ["sin", "cos", "tan", "asin", "acos", "atan", "log", "ln", "sqrt", "abs"]
DIGITS = "0123456789"

# Spelling -> tokens it stands for. Matched longest first.
LEXEMES = {
    "+": [Operator("+")],
    "-": [Operator("-")],
    "−": [Operator("-")],
    "–": [Operator("-")],
    "⁻": [Operator("-")],
    "(-)": [Operator("-")],
    "*": [Operator("*")],
    "×": [Operator("*")],
    "·": [Operator("*")],
    "/": [Operator("/")],
    "÷": [Operator("/")],
    "%": [Operator("%")],
    "^": [Operator("^")],
    "!": [Operator("!")],
    "nCr": [Operator("nCr")],
    "nPr": [Operator("nPr")],
    "x²": [Operator("^"), Number(2)],
    "²": [Operator("^"), Number(2)],
    "(": [LEFT_PAREN],
    "{": [LEFT_PAREN],
    ")": [RIGHT_PAREN],
    "}": [RIGHT_PAREN],
    "sin⁻¹": [Function("asin")],
    "cos⁻¹": [Function("acos")],
    "tan⁻¹": [Function("atan")],
    "√": [Function("sqrt")],
    "π": [Constant("π")],
    "pi": [Constant("π")],
    "e": [Constant("e")],
}
for name in UNARY_FUNCTIONS:
    LEXEMES[name] = [Function(name)]

_SPELLINGS = sorted(LEXEMES, key=len, reverse=True)

EXPONENT_MARKERS = ["EE", "E", "ᴇ"]


def _read_number(problem, b):
    """Read a number literal starting at index b; return (token, next_index) or (None, b + 1)."""
    str_number = ""
    hat_schon_komma = False  # Only one dot allowed in a numeric literal

    while b < len(problem) and (problem[b] in DIGITS or problem[b] == "."):
        if problem[b] == ".":
            if hat_schon_komma:
                raise E.SyntaxError(f"Double decimal point in: {str_number}.", code="3008")
            hat_schon_komma = True
        str_number += problem[b]
        b += 1

    if str_number == ".":
        # A lone '.' is not a number; drop it like any other stray character
        return None, b

    # Scientific notation: 1.5E-3, 2EE4, 3ᴇ2
    for marker in EXPONENT_MARKERS:
        if problem.startswith(marker, b):
            exponent_start = b + len(marker)
            e = exponent_start
            sign = ""
            if e < len(problem) and problem[e] in "+-−–⁻":
                sign = "" if problem[e] == "+" else "-"
                e += 1
            digits_start = e
            while e < len(problem) and problem[e] in DIGITS:
                e += 1
            if e > digits_start:
                str_number += "E" + sign + problem[digits_start:e]
                b = e
            break

    return Token(TokenType.NUMBER, Decimal(str_number)), b


def tokenize(problem):
    """Convert a raw input string into a list of Tokens."""
    full_problem = []
    b = 0

    while b < len(problem):
        current_char = problem[b]

        # --- Numbers: digits and decimal separator ---
        if current_char in DIGITS or current_char == ".":
            token, b = _read_number(problem, b)
            if token is not None:
                full_problem.append(token)
            continue

        # --- Operators, parentheses, functions, constants ---
        for spelling in _SPELLINGS:
            if problem.startswith(spelling, b):
                full_problem.extend(LEXEMES[spelling])
                b += len(spelling)
                break
        else:
            if not current_char.isspace():
                logger.warning("Ignoring unrecognized character %r at position %d", current_char, b)
            b += 1

    logger.debug("Tokens: %s", full_problem)
    return full_problem
