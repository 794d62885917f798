# PostfixConverter.py
"""
Infix -> postfix (reverse Polish) conversion with the shunting-yard algorithm.

The converter never raises. Unbalanced parentheses are left in the output
queue, where the evaluator reports them as a syntax error.

Two rewrites happen before the shunting-yard pass:
  - implicit multiplication: '2π', '3(4)', '2sin(30)' get an explicit '*'
  - unary sign: '-' where an operand is expected becomes 'neg', '+' is dropped
"""
import logging

from .Tokenizer import TokenType, Operator

logger = logging.getLogger(__name__)

LEFT = "left"
RIGHT = "right"

NEGATION = "neg"

# symbol -> (rank, associativity); higher rank binds tighter
PRECEDENCE = {
    "+": (1, LEFT),
    "-": (1, LEFT),
    "*": (2, LEFT),
    "/": (2, LEFT),
    "%": (2, LEFT),
    "^": (3, RIGHT),
    NEGATION: (3, RIGHT),
    "!": (4, LEFT),
    "nCr": (4, LEFT),
    "nPr": (4, LEFT),
    "sin": (5, LEFT),
    "cos": (5, LEFT),
    "tan": (5, LEFT),
    "asin": (5, LEFT),
    "acos": (5, LEFT),
    "atan": (5, LEFT),
    "log": (5, LEFT),
    "ln": (5, LEFT),
    "sqrt": (5, LEFT),
    "abs": (5, LEFT),
}

PREFIX_OPERATORS = [NEGATION]

# Unknown symbols still get queued; the evaluator rejects them
UNKNOWN = (0, LEFT)


def ends_value(token):
    """True if token can close an operand (number, constant, ')' or postfix '!')."""
    return (token.type in (TokenType.NUMBER, TokenType.CONSTANT, TokenType.RIGHT_PAREN)
            or (token.type == TokenType.OPERATOR and token.value == "!"))


def starts_value(token):
    return token.type in (TokenType.NUMBER, TokenType.CONSTANT, TokenType.FUNCTION, TokenType.LEFT_PAREN)


def insert_implicit_multiplication(tokens):
    """Return a copy of tokens with '*' between adjacent operands, e.g. 2π -> 2 * π.

    Two plain numbers next to each other ('2 3') are left alone.
    """
    result = []
    for token in tokens:
        if result:
            previous = result[-1]
            both_numbers = previous.type == TokenType.NUMBER and token.type == TokenType.NUMBER
            if ends_value(previous) and starts_value(token) and not both_numbers:
                result.append(Operator("*"))
        result.append(token)
    return result


def resolve_unary_signs(tokens):
    """Rewrite '-' in operand position as the prefix operator 'neg' and drop unary '+'."""
    result = []
    expect_operand = True

    for token in tokens:
        if token.type == TokenType.OPERATOR and token.value in ("+", "-") and expect_operand:
            if token.value == "-":
                result.append(Operator(NEGATION))
            continue

        result.append(token)
        if token.type in (TokenType.NUMBER, TokenType.CONSTANT, TokenType.RIGHT_PAREN):
            expect_operand = False
        elif token.type == TokenType.OPERATOR and token.value == "!":
            expect_operand = False
        else:
            # '(', function names and all other operators
            expect_operand = True

    return result


def to_postfix(tokens):
    """Reorder an infix token list into postfix order."""
    tokens = resolve_unary_signs(insert_implicit_multiplication(tokens))
    output = []
    operators = []

    for token in tokens:
        if token.type in (TokenType.NUMBER, TokenType.CONSTANT):
            output.append(token)

        elif token.type == TokenType.FUNCTION or token.type == TokenType.LEFT_PAREN:
            operators.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            while operators and operators[-1].type != TokenType.LEFT_PAREN:
                output.append(operators.pop())

            if not operators:
                # No matching '(': hand the ')' on so evaluation fails
                output.append(token)
                continue
            operators.pop()

            # Bind a function to its parenthesized argument
            if operators and operators[-1].type == TokenType.FUNCTION:
                output.append(operators.pop())

        elif token.value in PREFIX_OPERATORS:
            operators.append(token)

        else:
            rank, associativity = PRECEDENCE.get(token.value, UNKNOWN)
            while operators and operators[-1].type != TokenType.LEFT_PAREN:
                top_rank = PRECEDENCE.get(operators[-1].value, UNKNOWN)[0]
                if top_rank > rank or (top_rank == rank and associativity == LEFT):
                    output.append(operators.pop())
                else:
                    break
            operators.append(token)

    while operators:
        output.append(operators.pop())

    logger.debug("Postfix: %s", output)
    return output
