"""Scalar encode/decode between real numbers and tiny float bytes."""

from __future__ import annotations

import math
from typing import Callable

from .constants import (
    EXPONENT_BIAS,
    EXPONENT_RESERVED,
    MANTISSA_MASK,
    MAX_MAGNITUDE,
    SUBNORMAL_LIMIT,
)
from .layout import (
    NaN,
    Infinity,
    Normalized,
    Subnormal,
    Zero,
    compose,
    pack,
    unpack,
)

# (mantissa bit, power offset below the leading power of two)
MANTISSA_STEPS = ((0x4, 1), (0x2, 2), (0x1, 3))

# Rotation value used when no NaN payload source is supplied (byte 0x79)
DEFAULT_NAN_COUNTER = 1


def truncate(value) -> int | float:
    """Truncate toward zero. NaN and infinities pass through as floats.

    Accepts any real number: ints, floats, numpy scalars, Decimal, Fraction.
    """
    if isinstance(value, int):
        return int(value)
    try:
        finite = math.isfinite(value)
    except OverflowError:
        # finite but beyond float range, e.g. a huge Fraction
        finite = True
    if not finite:
        return float(value)
    if hasattr(type(value), "__trunc__"):
        return math.trunc(value)
    return math.trunc(float(value))


def encode(value, next_nan: Callable[[], int] | None = None) -> int:
    """Encode a real number into a tiny float byte.

    The value is truncated toward zero, then mapped by this policy (first
    match wins): zero, saturation to infinity above MAX_MAGNITUDE, NaN,
    subnormal integers below 8, normalized with a greedy 3-bit mantissa.

    ``next_nan`` supplies the 4-bit NaN rotation value (sign bit + payload)
    and is only called for NaN input.
    """
    t = truncate(value)
    if t == 0:
        return pack(Zero())

    sign = 1 if t < 0 else 0
    if abs(t) > MAX_MAGNITUDE:
        return pack(Infinity(sign=sign))

    if math.isnan(t):
        counter = next_nan() if next_nan is not None else DEFAULT_NAN_COUNTER
        return compose(counter >> 3, EXPONENT_RESERVED, counter & MANTISSA_MASK)

    magnitude = abs(t)
    if magnitude < SUBNORMAL_LIMIT:
        return pack(Subnormal(magnitude=magnitude, sign=sign))

    # floor(log2(magnitude)), exact for ints
    raw_exponent = magnitude.bit_length() - 1
    exponent = max(raw_exponent + EXPONENT_BIAS, 0)
    remainder = magnitude - (1 << raw_exponent)
    mantissa = 0
    for bit, offset in MANTISSA_STEPS:
        power = 1 << (raw_exponent - offset)
        if remainder >= power:
            mantissa |= bit
            remainder -= power
    # anything left in remainder is dropped (truncation, not rounding)
    return pack(Normalized(exponent=exponent, mantissa=mantissa, sign=sign))


def decode(byte: int) -> float:
    """Decode a tiny float byte into a float. Exact; every byte has a value."""
    code = unpack(byte)
    if isinstance(code, NaN):
        return math.nan
    if isinstance(code, Infinity):
        return -math.inf if code.sign else math.inf

    if isinstance(code, Normalized):
        real_exponent = code.exponent - EXPONENT_BIAS
        value = 2.0 ** real_exponent
        for bit, offset in MANTISSA_STEPS:
            if code.mantissa & bit:
                value += 2.0 ** (real_exponent - offset)
    elif isinstance(code, Subnormal):
        value = float(code.magnitude)
    else:
        value = 0.0

    return -value if code.sign else value


def format_value(x: float) -> str:
    """Decimal text of a decoded value ("5", "-Infinity", "NaN")."""
    x = float(x)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "-Infinity" if x < 0 else "Infinity"
    if x.is_integer():
        return str(int(x))
    return repr(x)
