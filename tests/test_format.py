"""Tests del formateo y lectura de números del display."""

import pytest

from calculadora.core.calculator import format_number, parse_number


# --- Enteros ---

@pytest.mark.parametrize("number, expected", [
    (5.0, "5"),
    (0.0, "0"),
    (-0.0, "0"),
    (-42.0, "-42"),
    (1234567890.0, "1234567890"),
    (1e20, "100000000000000000000"),
])
def test_integral_numbers(number, expected):
    assert format_number(number) == expected


# --- Decimales ---

@pytest.mark.parametrize("number, expected", [
    (0.1 + 0.2, "0.3"),
    (0.5, "0.5"),
    (-1.5, "-1.5"),
    (2 / 3, "0.66666667"),
    (3.1400000, "3.14"),
    (12.345678, "12.345678"),
    (0.000001234, "0.000001234"),
    (1.2345678e-7, "0.00000012345678"),
    (123456789.5, "123456790"),
    (2.99999999999, "3"),
])
def test_fractional_numbers(number, expected):
    assert format_number(number) == expected


def test_never_scientific_notation():
    for number in (1e-9, 1.5e-12, 98765432.1, -4.2e-6):
        assert "e" not in format_number(number).lower()


def test_custom_significant_digits():
    assert format_number(2 / 3, significant_digits=3) == "0.667"


# --- Lectura ---

@pytest.mark.parametrize("text, expected", [
    ("0", 0.0),
    ("5.", 5.0),
    ("-12.5", -12.5),
    ("0.05", 0.05),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["Error", "Erreur", ".", "-", "", "inf", "nan"])
def test_parse_number_rejects_non_numbers(text):
    assert parse_number(text) is None
