"""Tests de operaciones, formateo, historial, botonera y modo tonto."""

import math
import random

import pytest

from core.dumb_mode import DumbMode
from core.formatting import format_number, parse_number
from core.history import History
from core.layout import ButtonLayout, default_rows
from core.operations import Operation


# --- Operaciones ---

@pytest.mark.parametrize("operation, a, b, expected", [
    (Operation.ADD, 2, 3, 5),
    (Operation.SUBTRACT, 2, 3, -1),
    (Operation.MULTIPLY, 4, 2.5, 10),
    (Operation.DIVIDE, 15, 4, 3.75),
    (Operation.DIVIDE, 6, 0, 0),
])
def test_apply(operation, a, b, expected):
    assert operation.apply(a, b) == pytest.approx(expected)


@pytest.mark.parametrize("symbol, operation", [
    ("+", Operation.ADD),
    ("-", Operation.SUBTRACT),
    ("−", Operation.SUBTRACT),
    ("×", Operation.MULTIPLY),
    ("*", Operation.MULTIPLY),
    ("x", Operation.MULTIPLY),
    ("÷", Operation.DIVIDE),
    ("/", Operation.DIVIDE),
])
def test_from_symbol(symbol, operation):
    assert Operation.from_symbol(symbol) is operation


def test_from_symbol_unknown():
    assert Operation.from_symbol("%") is None
    assert Operation.from_symbol("=") is None


def test_symbols_shown_in_history():
    assert [op.symbol for op in Operation] == ["+", "-", "×", "÷"]


# --- Formateo ---

@pytest.mark.parametrize("value, expected", [
    (8.0, "8"),
    (2.5, "2,5"),
    (0.1 + 0.2, "0,3"),
    (1 / 3, "0,3333333333"),
    (-0.0, "0"),
    (-1e-12, "0"),
    (-2.25, "-2,25"),
    (1e16, "10000000000000000"),
    (math.inf, "∞"),
    (-math.inf, "-∞"),
    (math.nan, "NaN"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize("value, expected", [
    (3.7037036703703704e19, "37037036703703704000"),
    (-3.7037036703703704e19, "-37037036703703704000"),
    (1e15 + 0.5, "1000000000000000,5"),
    (1.2345e22, "12345000000000000000000"),
])
def test_format_large_numbers_without_binary_noise(value, expected):
    assert format_number(value) == expected


def test_format_large_number_respects_fraction_digits():
    assert format_number(1e15 + 0.5, max_fraction_digits=0) == "1000000000000000"


def test_format_number_custom_separator_and_digits():
    assert format_number(3.14159, decimal_separator=".") == "3.14159"
    assert format_number(3.14159, max_fraction_digits=2) == "3,14"
    assert format_number(2.5, max_fraction_digits=0) == "2"


@pytest.mark.parametrize("text, expected", [
    ("2,5", 2.5),
    ("0,", 0.0),
    ("42", 42.0),
    ("-3", -3.0),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "∞", "1,2,3", "inf", "nan"])
def test_parse_number_rejects_invalid(text):
    assert parse_number(text) is None


# --- Historial ---

def test_history_append_and_order():
    history = History()
    assert history.append("5 + 3", "8") == "5 + 3 = 8"
    history.append("8 × 2", "16")
    assert history.entries == ("5 + 3 = 8", "8 × 2 = 16")
    assert list(history) == ["5 + 3 = 8", "8 × 2 = 16"]
    assert len(history) == 2


def test_history_last():
    history = History()
    for i in range(5):
        history.append(f"{i} + 0", str(i))
    assert history.last(2) == ("3 + 0 = 3", "4 + 0 = 4")
    assert history.last(0) == ()
    assert len(history.last(50)) == 5


def test_history_clear():
    history = History()
    history.append("1 + 1", "2")
    history.clear()
    assert history.entries == ()


# --- Botonera ---

def test_default_layout():
    layout = ButtonLayout()
    assert layout.rows == [
        ["7", "8", "9", "÷"],
        ["4", "5", "6", "×"],
        ["1", "2", "3", "-"],
        ["0", ",", "=", "+"],
    ]
    assert layout.is_default
    assert layout.token_at(3, 1) == ","
    assert layout.token_at(4, 0) is None
    assert layout.token_at(0, -1) is None


def test_layout_uses_configured_separator():
    layout = ButtonLayout(".")
    assert layout.token_at(3, 1) == "."
    assert default_rows(".")[3][1] == "."


def test_shuffle_keeps_all_buttons_and_reset_restores():
    layout = ButtonLayout()
    original = sorted(layout.tokens())
    layout.shuffle(random.Random(7))
    assert sorted(layout.tokens()) == original
    assert len(layout.rows) == 4
    assert all(len(row) == 4 for row in layout.rows)
    assert not layout.is_default
    layout.reset()
    assert layout.is_default


def test_shuffle_is_deterministic_with_seed():
    a, b = ButtonLayout(), ButtonLayout()
    a.shuffle(random.Random(42))
    b.shuffle(random.Random(42))
    assert a.rows == b.rows


# --- Modo tonto ---

def test_zero_probability_never_distorts():
    dumb = DumbMode(random.Random(3), error_probability=0.0, enabled=True)
    assert all(dumb.distort(8.0) == 8.0 for _ in range(200))


@pytest.mark.parametrize("value", [8.0, 0.0, -2.5])
def test_full_probability_always_distorts(value):
    dumb = DumbMode(random.Random(5), error_probability=1.0, enabled=True)
    assert all(dumb.distort(value) != value for _ in range(200))


def test_distort_is_deterministic_with_seed():
    a = DumbMode(random.Random(99), error_probability=0.5)
    b = DumbMode(random.Random(99), error_probability=0.5)
    assert [a.distort(10.0) for _ in range(50)] == [b.distort(10.0) for _ in range(50)]


def test_dumb_mode_toggle_and_shuffle():
    dumb = DumbMode(random.Random(0))
    assert dumb.enabled is False
    assert dumb.toggle() is True
    layout = ButtonLayout()
    dumb.shuffle(layout)
    assert sorted(layout.tokens()) == sorted(ButtonLayout().tokens())
