"""Tagged view of the tiny float byte space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .constants import (
    SIGN_MASK,
    EXPONENT_MASK,
    MANTISSA_MASK,
    SIGN_SHIFT,
    EXPONENT_SHIFT,
    EXPONENT_RESERVED,
    CODE_COUNT,
)


@dataclass(frozen=True)
class Zero:
    sign: int = 0


@dataclass(frozen=True)
class Subnormal:
    magnitude: int
    sign: int = 0


@dataclass(frozen=True)
class Normalized:
    exponent: int
    mantissa: int
    sign: int = 0


@dataclass(frozen=True)
class Infinity:
    sign: int = 0


@dataclass(frozen=True)
class NaN:
    payload: int
    sign: int = 0


Code = Union[Zero, Subnormal, Normalized, Infinity, NaN]


def check_byte(byte: int) -> int:
    if isinstance(byte, bool) or not isinstance(byte, int):
        raise ValueError(f"Tiny float code must be an int, got {type(byte).__name__}")
    if not 0 <= byte < CODE_COUNT:
        raise ValueError(f"Tiny float code out of range: {byte}")
    return byte


def fields(byte: int) -> tuple[int, int, int]:
    """Split a byte into (sign, exponent, mantissa)."""
    return (
        (byte & SIGN_MASK) >> SIGN_SHIFT,
        (byte & EXPONENT_MASK) >> EXPONENT_SHIFT,
        byte & MANTISSA_MASK,
    )


def compose(sign: int, exponent: int, mantissa: int) -> int:
    return (sign << SIGN_SHIFT) | (exponent << EXPONENT_SHIFT) | mantissa


def canonical(byte: int) -> int:
    """Collapse both zero codes onto 0x00; other codes are returned as is."""
    if isinstance(unpack(byte), Zero):
        return 0
    return byte


def is_nan_code(byte: int) -> bool:
    _, exponent, mantissa = fields(byte)
    return exponent == EXPONENT_RESERVED and mantissa != 0


def unpack(byte: int) -> Code:
    sign, exponent, mantissa = fields(check_byte(byte))
    if exponent == EXPONENT_RESERVED:
        if mantissa:
            return NaN(payload=mantissa, sign=sign)
        return Infinity(sign=sign)
    if exponent == 0:
        if mantissa == 0:
            return Zero(sign=sign)
        return Subnormal(magnitude=mantissa, sign=sign)
    return Normalized(exponent=exponent, mantissa=mantissa, sign=sign)


def pack(code: Code) -> int:
    if isinstance(code, Zero):
        return compose(code.sign, 0, 0)
    if isinstance(code, Subnormal):
        return compose(code.sign, 0, code.magnitude)
    if isinstance(code, Normalized):
        return compose(code.sign, code.exponent, code.mantissa)
    if isinstance(code, Infinity):
        return compose(code.sign, EXPONENT_RESERVED, 0)
    if isinstance(code, NaN):
        return compose(code.sign, EXPONENT_RESERVED, code.payload)
    raise ValueError(f"Unknown tiny float code: {code!r}")
