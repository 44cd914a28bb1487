"""
Construction input coercion
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import pytest
import torch

from tinyfloat import (
    EPSILON,
    MISSING,
    NEGATIVE_INFINITY,
    POSITIVE_INFINITY,
    ZERO,
    TinyFloat,
    is_nan,
    parse_float,
    string_to_number,
    to_number,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("42", 42.0),
        ("  12.7abc", 12.7),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("1e", 1.0),
        ("-.5e-1x", -0.05),
        ("+Infinity", math.inf),
        ("-Infinity and beyond", -math.inf),
        (b"42", 42.0),
    ],
)
def test_parse_float(text, expected):
    assert parse_float(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "infinity", "-", ".", "e5", "nan", "\u0665", "\uff15"])
def test_parse_float_no_literal(text):
    assert math.isnan(parse_float(text))


def test_to_number_dispatch():
    assert to_number(True) == 1
    assert to_number(False) == 0
    assert to_number(None) == 0
    assert math.isnan(to_number())
    assert math.isnan(to_number(MISSING))
    assert to_number(7) == 7
    assert to_number(-2.5) == -2.5
    assert to_number("3.25") == 3.25


def test_to_number_unwraps_boxed_numbers():
    assert to_number(Fraction(15, 2)) == 7.5
    assert to_number(Decimal("3.9")) == 3.9
    assert to_number(torch.tensor(5)) == 5
    assert to_number(torch.tensor(2.5)) == 2.5
    assert to_number(TinyFloat(20)) == 20.0


def test_to_number_objects_without_numeric_value():
    assert math.isnan(to_number(object()))
    assert math.isnan(to_number([1]))
    assert math.isnan(to_number(torch.tensor([1.0, 2.0])))


def test_construct_from_inputs():
    assert TinyFloat(True) is EPSILON
    assert TinyFloat(False) is ZERO
    assert TinyFloat(None) is ZERO
    assert TinyFloat("  12.7abc") is TinyFloat(12)
    assert TinyFloat("Infinity") is POSITIVE_INFINITY
    assert TinyFloat("-1e6") is NEGATIVE_INFINITY
    assert TinyFloat(Fraction(15, 2)) is TinyFloat(7)
    assert TinyFloat(Decimal("3.9")) is TinyFloat(3)
    assert TinyFloat(torch.tensor(20.5)) is TinyFloat(20)
    assert float(TinyFloat("12")) == 12


def test_construct_rejects_non_ascii_digits():
    assert is_nan(TinyFloat("\u0665"))
    assert is_nan(TinyFloat("\uff15"))
    # construction reads a leading literal, unlike equality
    assert TinyFloat(" 5 apples") is TinyFloat(5)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", 0),
        ("  \t", 0),
        (" 42 ", 42.0),
        ("-1.5e2", -150.0),
        (".5", 0.5),
        ("-Infinity", -math.inf),
        ("0x10", 16),
        ("0XfF", 255),
        ("0o17", 15),
        ("0b101", 5),
        (b"7", 7.0),
    ],
)
def test_string_to_number(text, expected):
    assert string_to_number(text) == expected


@pytest.mark.parametrize("text", ["5 apples", "abc", "1e", "-0x10", "0x", "0b102", "\u0665", "Infinityx", "1 2"])
def test_string_to_number_rejects_partial(text):
    assert math.isnan(string_to_number(text))
