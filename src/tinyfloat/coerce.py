"""Coercion of construction inputs into a plain int or float."""

from __future__ import annotations

import math
import operator
import re


class _Missing:
    """No argument given (an undefined value); coerces to NaN."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "MISSING"

    def __bool__(self):
        return False


MISSING = _Missing()

# Leading decimal literal, read leniently:
# "  -12.5e3xyz" -> -12.5e3, ".5" -> .5, "Infinity" -> inf
_DECIMAL = r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
_FLOAT_PREFIX = re.compile(r"\s*(" + _DECIMAL + ")")

# Whole-string numeric literal: decimal, or unsigned 0x / 0o / 0b integer
_NUMBER = re.compile(_DECIMAL)
_RADIX_NUMBER = re.compile(r"0(?:[xX]([0-9a-fA-F]+)|[oO]([0-7]+)|[bB]([01]+))")


def parse_float(text: str | bytes) -> float:
    """Parse the longest leading decimal literal of ``text``; NaN if there is none."""
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("latin-1")
    m = _FLOAT_PREFIX.match(text)
    if m is None:
        return math.nan
    return float(m.group(1))


def string_to_number(text: str | bytes) -> int | float:
    """Read all of ``text`` as a number, the way loose equality does.

    Surrounding whitespace is ignored and an empty string is 0. Anything
    other than one complete decimal, Infinity or 0x/0o/0b literal is NaN.
    """
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("latin-1")
    text = text.strip()
    if not text:
        return 0
    if _NUMBER.fullmatch(text):
        return float(text)
    m = _RADIX_NUMBER.fullmatch(text)
    if m is None:
        return math.nan
    hex_digits, oct_digits, bin_digits = m.groups()
    if hex_digits is not None:
        return int(hex_digits, 16)
    if oct_digits is not None:
        return int(oct_digits, 8)
    return int(bin_digits, 2)


def _unwrap(value: object) -> int | float:
    # Boxed numbers: numpy/torch scalars, Decimal, Fraction, TinyFloat, ...
    if hasattr(type(value), "__index__"):
        try:
            return operator.index(value)
        except (TypeError, ValueError, RuntimeError):
            pass
    if hasattr(type(value), "__float__"):
        try:
            return float(value)
        except (TypeError, ValueError, OverflowError, RuntimeError):
            return math.nan
    return math.nan


def to_number(value: object = MISSING) -> int | float:
    """Coerce any construction input into an int or float.

    Dispatch order: bool, None, missing, str/bytes, int/float, then any
    other object through its own ``__index__``/``__float__``. Inputs with
    no numeric reading become NaN.
    """
    if isinstance(value, bool):
        return 1 if value else 0
    if value is None:
        return 0
    if value is MISSING:
        return math.nan
    if isinstance(value, (str, bytes, bytearray)):
        return parse_float(value)
    if type(value) in (int, float):
        return value
    return to_number(_unwrap(value))
