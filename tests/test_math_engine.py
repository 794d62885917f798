import pytest

from SciCalc import error as E
from SciCalc import MathEngine
from SciCalc.MathEngine import evaluate_expression, calculate
from SciCalc.config_manager import AngleMode, DisplayMode, EngineConfig


def test_successful_result():
    result = evaluate_expression("2 + 3 × 4")
    assert result.ok
    assert result.display_string == "14"
    assert result.numeric_value == 14
    assert result.error_kind is None


@pytest.mark.parametrize("raw_text", ["", "   ", "@#$"])
def test_empty_input_is_zero(raw_text):
    result = evaluate_expression(raw_text)
    assert result.ok
    assert result.display_string == "0"
    assert result.numeric_value == 0


@pytest.mark.parametrize("raw_text,kind", [
    ("2 +", E.ErrorKind.SYNTAX),
    ("(1 + 2", E.ErrorKind.SYNTAX),
    ("1..5", E.ErrorKind.SYNTAX),
    ("√(-4)", E.ErrorKind.DOMAIN),
    ("log(0)", E.ErrorKind.DOMAIN),
    ("7 ÷ 0", E.ErrorKind.DIVIDE_BY_ZERO),
    ("200!", E.ErrorKind.OVERFLOW),
    ("10^400", E.ErrorKind.OVERFLOW),
])
def test_errors_are_typed(raw_text, kind):
    result = evaluate_expression(raw_text)
    assert not result.ok
    assert result.error_kind == kind
    assert result.display_string == kind.value
    assert result.numeric_value is None
    assert result.error_code in E.ERROR_MESSAGES


def test_angle_mode_from_config():
    assert evaluate_expression("sin(30)").display_string == "0.5"
    rad = EngineConfig(angle_mode=AngleMode.RAD)
    assert evaluate_expression("sin(π ÷ 2)", rad).display_string == "1"
    grad = EngineConfig(angle_mode=AngleMode.GRAD)
    assert evaluate_expression("cos(200)", grad).display_string == "-1"


def test_display_mode_from_config():
    fix = EngineConfig(display_mode=DisplayMode.FIX, fix_decimals=4)
    assert evaluate_expression("1 ÷ 3", fix).display_string == "0.3333"
    sci = EngineConfig(display_mode=DisplayMode.SCI, fix_decimals=2)
    assert evaluate_expression("12345", sci).display_string == "1.23E4"


@pytest.mark.parametrize("glyphs,ascii_text", [
    ("6 × 7", "6*7"),
    ("8 ÷ 2 − 1", "8/2-1"),
    ("√(9)", "sqrt(9)"),
    ("sin⁻¹(1)", "asin(1)"),
    ("2π", "2*pi"),
])
def test_glyphs_and_ascii_agree(glyphs, ascii_text):
    assert evaluate_expression(glyphs).display_string == evaluate_expression(ascii_text).display_string


def test_scientific_notation_input():
    assert evaluate_expression("1E3").display_string == "1000"
    assert evaluate_expression("2.5E-3").display_string == "0.0025"


def test_calculate_raises_with_equation():
    assert calculate("2^10") == "1024"
    with pytest.raises(E.DivideByZero) as excinfo:
        calculate("1/0")
    assert excinfo.value.equation == "1/0"
    assert excinfo.value.kind == E.ErrorKind.DIVIDE_BY_ZERO


def test_result_is_immutable():
    result = evaluate_expression("1 + 1")
    with pytest.raises(AttributeError):
        result.display_string = "3"


def test_compute_returns_raw_float():
    assert MathEngine.compute("1 ÷ 4") == 0.25


def test_squared_glyph():
    assert evaluate_expression("3²").display_string == "9"
    assert evaluate_expression("(1 + 1)²").display_string == "4"
