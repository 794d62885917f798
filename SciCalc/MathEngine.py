# MathEngine.py
"""""
Core calculation engine for the scientific calculator.

Pipeline
--------
1) Tokenizer: converts a raw input string into a flat list of tagged tokens.
2) PostfixConverter: reorders the tokens into postfix order (shunting-yard).
3) Evaluator: walks the postfix list with an operand stack.
4) Formatter: renders the float according to the display mode.

The engine keeps no state between calls. Angle mode, display mode and the
number of decimals arrive with every call as an EngineConfig.
"""""

import logging

from . import error as E
from . import Evaluator
from . import Formatter
from . import PostfixConverter
from . import Tokenizer
from .config_manager import EngineConfig

logger = logging.getLogger(__name__)


class CalculationResult:
    """Outcome of one evaluation: a finite number with its display string, or a typed error."""

    __slots__ = ("display_string", "numeric_value", "error_kind", "error_message", "error_code")

    def __init__(self, display_string, numeric_value=None, error_kind=None, error_message=None,
                 error_code=None):
        object.__setattr__(self, "display_string", display_string)
        object.__setattr__(self, "numeric_value", numeric_value)
        object.__setattr__(self, "error_kind", error_kind)
        object.__setattr__(self, "error_message", error_message)
        object.__setattr__(self, "error_code", error_code)

    def __setattr__(self, name, value):
        raise AttributeError("CalculationResult is immutable")

    @classmethod
    def success(cls, value, display_string):
        return cls(display_string, numeric_value=value)

    @classmethod
    def failure(cls, error):
        return cls(error.kind.value, error_kind=error.kind, error_message=error.message,
                   error_code=error.code)

    @property
    def ok(self):
        return self.error_kind is None

    def __repr__(self):
        if self.ok:
            return f"CalculationResult({self.display_string!r}, value={self.numeric_value!r})"
        return f"CalculationResult({self.error_kind.name}, code={self.error_code}, message={self.error_message!r})"


def compute(problem, config=None):
    """Run tokenizer -> converter -> evaluator and return the float result.

    An expression without any tokens (empty, whitespace, only unknown characters)
    is zero.
    """
    config = config or EngineConfig()
    tokens = Tokenizer.tokenize(problem)
    if not tokens:
        return 0.0
    postfix = PostfixConverter.to_postfix(tokens)
    return Evaluator.evaluate(postfix, config.angle_mode)


def calculate(problem, config=None):
    """Main API: evaluate problem and return its display string.

    Raises the typed MathError (with the equation attached) on failure.
    """
    config = config or EngineConfig()
    try:
        value = compute(problem, config)
    except E.MathError as e:
        # Re-raise our domain errors after attaching the source equation
        e.equation = problem
        raise e
    return Formatter.format_number(value, config.display_mode, config.fix_decimals)


def evaluate_expression(raw_text, config=None):
    """Evaluate raw_text and return a CalculationResult; never raises a MathError."""
    config = config or EngineConfig()
    try:
        value = compute(raw_text, config)
    except E.MathError as e:
        e.equation = raw_text
        logger.info("%s (%s) in %r: %s", e.kind.value, e.code, raw_text, e.message)
        return CalculationResult.failure(e)

    display_string = Formatter.format_number(value, config.display_mode, config.fix_decimals)
    return CalculationResult.success(value, display_string)


def test_main():
    """Simple REPL-like runner for manual testing of the engine."""
    print("Enter the problem: ")
    problem = input()
    print(evaluate_expression(problem))


if __name__ == "__main__":
    test_main()
