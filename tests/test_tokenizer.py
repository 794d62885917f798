from decimal import Decimal

import pytest

from SciCalc import error as E
from SciCalc.Tokenizer import (
    tokenize, Token, TokenType, Number, Operator, Function, Constant, LEFT_PAREN, RIGHT_PAREN,
)


def test_empty_input_gives_no_tokens():
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_numbers_and_operators():
    assert tokenize("12.5+3") == [Number("12.5"), Operator("+"), Number(3)]


def test_leading_decimal_point():
    assert tokenize(".5") == [Number("0.5")]


def test_glyphs_match_ascii_operators():
    assert tokenize("2 × 3 ÷ 4 − 1") == tokenize("2*3/4-1")


def test_longest_name_wins():
    assert tokenize("asin(1)")[0] == Function("asin")
    assert tokenize("acos(1)")[0] == Function("acos")
    assert tokenize("sin(1)")[0] == Function("sin")


def test_inverse_trig_and_root_glyphs():
    assert tokenize("sin⁻¹(1)")[0] == Function("asin")
    assert tokenize("tan⁻¹(1)")[0] == Function("atan")
    assert tokenize("√(4)") == [Function("sqrt"), LEFT_PAREN, Number(4), RIGHT_PAREN]


def test_constants():
    assert tokenize("π") == [Constant("π")]
    assert tokenize("pi") == [Constant("π")]
    assert tokenize("e") == [Constant("e")]


def test_combinatorial_operators():
    assert tokenize("5nCr2") == [Number(5), Operator("nCr"), Number(2)]
    assert tokenize("5 nPr 2") == [Number(5), Operator("nPr"), Number(2)]


def test_calculator_spellings():
    assert tokenize("3²") == [Number(3), Operator("^"), Number(2)]
    assert tokenize("(-)5") == [Operator("-"), Number(5)]
    assert tokenize("⁻5") == [Operator("-"), Number(5)]
    assert tokenize("{2}") == [LEFT_PAREN, Number(2), RIGHT_PAREN]


def test_scientific_notation_marker():
    assert tokenize("1.5E-3") == [Token(TokenType.NUMBER, Decimal("1.5E-3"))]
    assert tokenize("1.5E-3")[0].value == Decimal("0.0015")
    assert tokenize("2EE4")[0].value == Decimal("20000")
    assert tokenize("3E+2")[0].value == Decimal("300")


def test_marker_without_exponent_is_dropped():
    assert tokenize("1E") == [Number(1)]


def test_unrecognized_characters_are_dropped():
    assert tokenize("2 @ 3#") == [Number(2), Number(3)]
    assert tokenize("?#@") == []


def test_double_decimal_point_is_a_syntax_error():
    with pytest.raises(E.SyntaxError) as excinfo:
        tokenize("1.2.3")
    assert excinfo.value.code == "3008"


def test_tokens_are_immutable():
    token = tokenize("7")[0]
    with pytest.raises(AttributeError):
        token.value = Decimal(8)


def test_superscript_digits_are_not_number_digits():
    assert tokenize("12²") == [Number(12), Operator("^"), Number(2)]
    assert tokenize("x²") == [Operator("^"), Number(2)]
    assert tokenize("2¹") == [Number(2)]


def test_exponent_sign_glyphs():
    assert tokenize("2E⁻3")[0].value == Decimal("0.002")
    assert tokenize("2E−3")[0].value == Decimal("0.002")
    assert tokenize("2E–3")[0].value == Decimal("0.002")
    assert tokenize("2E⁻3") == tokenize("2E-3")
