# tests/test_coercion.py
# Purpose:
# Raw form text → clamped numbers (decimal comma, blanks, minimums).
import pytest

from pietro_backend.app.dough.coercion import normalize_input_value, to_number_value, format_grams

@pytest.mark.parametrize("raw,expected", [
    ("", ""),
    ("   ", ""),
    ("2,8", "2.8"),
    ("62", "62"),
    ("62.0", "62"),
    ("abc", ""),
    ("inf", ""),
    ("-3", "0"),
])
def test_normalize_input_value(raw, expected):
    assert normalize_input_value(raw) == expected

def test_normalize_respects_minimum():
    assert normalize_input_value("0", minimum=1) == "1"

def test_to_number_value():
    assert to_number_value("2,8") == pytest.approx(2.8)
    assert to_number_value("nan") == 0
    assert to_number_value("", 1) == 1
    assert to_number_value(None, 1) == 1
    assert to_number_value(-5) == 0
    assert to_number_value(3) == 3.0

def test_format_grams_one_decimal():
    assert format_grams(371.2574) == "371.3"
    assert format_grams(0) == "0.0"
