"""
Tests for the documented example snippets.
"""
import pytest

from core.domain.arithmetic import add, divide
from core.domain.calculator import Calculator
from core.domain.greeting import greet
from core.domain.language import Language


def test_add_integers():
    assert add(2, 3) == 5


def test_add_floats():
    assert add(0.5, 0.25) == pytest.approx(0.75)


def test_divide_returns_float():
    result = divide(4, 2)
    assert result == 2.0
    assert isinstance(result, float)


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError, match="Cannot divide by zero."):
        divide(4, 0)


def test_greet_without_name():
    assert greet(None) == "Hello, there!"
    assert greet() == "Hello, there!"


def test_greet_with_name_strips_whitespace():
    assert greet("  Ada ") == "Hello, Ada!"


@pytest.mark.parametrize("name", ["", "   "])
def test_greet_blank_name_raises(name):
    with pytest.raises(ValueError):
        greet(name)


def test_greet_spanish():
    assert greet(None, language=Language.SPANISH) == "¡Hola!"
    assert greet("Ada", language="es") == "¡Hola, Ada!"


def test_calculator_records_last_result():
    calc = Calculator()
    assert calc.last_result is None

    assert calc.add(2, 3) == 5
    assert calc.last_result == 5

    assert calc.subtract(5, 3) == 2
    assert calc.last_result == 2


def test_docstrings_use_rest_fields():
    for func in (add, divide, greet, Calculator.add, Calculator.subtract):
        doc = func.__doc__
        assert ":param a:" in doc or ":param name:" in doc
        assert ":return:" in doc
        assert ":rtype:" in doc
    assert ":raises ZeroDivisionError:" in divide.__doc__
    assert ":raises ValueError:" in greet.__doc__
    assert ":ivar last_result:" in Calculator.__doc__
