from enum import Enum


class ErrorKind(Enum):
    """The four terminal error kinds; the value is the token shown on the display."""
    SYNTAX = "SYNTAX ERROR"
    DOMAIN = "DOMAIN ERROR"
    DIVIDE_BY_ZERO = "DIVIDE BY ZERO"
    OVERFLOW = "OVERFLOW"


class MathError(Exception):
    kind = None

    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation


class SyntaxError(MathError):
    kind = ErrorKind.SYNTAX

class DomainError(MathError):
    kind = ErrorKind.DOMAIN

class DivideByZero(MathError):
    kind = ErrorKind.DIVIDE_BY_ZERO

class Overflow(MathError):
    kind = ErrorKind.OVERFLOW


class InputError(Exception):
    """Raised by the calculator state for edits it refuses (e.g. entry too long)."""
    def __init__(self, message, code="4001"):
        super().__init__(message)
        self.message = message
        self.code = code



#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Category
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "2001" : "Inverse sine/cosine needs a value between -1 and 1.",
    "2002" : "Logarithm of a non-positive number.",
    "2003" : "Square root of a negative number.",
    "2004" : "Factorial needs a non-negative integer.",
    "2005" : "nCr/nPr need non-negative integers.",
    "2006" : "Power is not a real number.",

    "3001" : "Missing operand for: ", # + operator
    "3002" : "Incomplete expression.",
    "3003" : "Division by Zero",
    "3004" : "Invalid Operator: ", # + operator
    "3005" : "Modulo by Zero",
    "3008" : "More than one '.' in one number.",
    "3009" : "Missing ')'. ",
    "3010" : "Missing '('. ",
    "3026" : "Number too big.",
    "3027" : "Factorial argument above 170.",

    "4001" : "Expression too long.",

    "5001" : "Invalid setting value: ", # + setting
    "5002" : "Settings could not be saved: ", # + file

    "9999" : "Unexpected Error: " #+error
}
