"""Tiny float format configuration and factory."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .codec import decode
from .coerce import MISSING
from .constants import (
    MAX_EXPONENT_SIZE_SIGNED,
    MAX_EXPONENT_SIZE_UNSIGNED,
    REFERENCE_EXPONENT_BIAS,
    REFERENCE_EXPONENT_SIZE,
    REFERENCE_SIGNED,
)
from .errors import InvalidExponentConfig, InvalidSignedFlag
from .value import REGISTRY, TinyFloat

logger = logging.getLogger(__name__)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class TinyFloatFormat:
    """Validated format parameters.

    Only (signed=True, exponent_size=4, exponent_bias=-2) describes the
    layout the codec implements; other valid parameters are accepted but
    encode and decode still use that fixed layout.
    """

    signed: bool = REFERENCE_SIGNED
    exponent_size: int = REFERENCE_EXPONENT_SIZE
    exponent_bias: int = REFERENCE_EXPONENT_BIAS

    def __post_init__(self):
        if not isinstance(self.signed, bool):
            raise InvalidSignedFlag(f"signed must be a bool, got {self.signed!r}")
        limit = MAX_EXPONENT_SIZE_SIGNED if self.signed else MAX_EXPONENT_SIZE_UNSIGNED
        if not _is_int(self.exponent_size) or not 1 <= self.exponent_size <= limit:
            raise InvalidExponentConfig(
                f"exponent_size must be an int in [1, {limit}], got {self.exponent_size!r}"
            )
        if not _is_int(self.exponent_bias):
            raise InvalidExponentConfig(f"exponent_bias must be an int, got {self.exponent_bias!r}")

    @property
    def mantissa_size(self) -> int:
        return 8 - int(self.signed) - self.exponent_size

    @property
    def is_reference(self) -> bool:
        return (self.signed, self.exponent_size, self.exponent_bias) == (
            REFERENCE_SIGNED,
            REFERENCE_EXPONENT_SIZE,
            REFERENCE_EXPONENT_BIAS,
        )

    def encode(self, value: object = MISSING) -> int:
        return REGISTRY.encode(value)

    def decode(self, byte: int) -> float:
        return decode(byte)

    def value(self, value: object = MISSING) -> TinyFloat:
        return TinyFloat(value)

    def from_byte(self, byte: int) -> TinyFloat:
        return TinyFloat.from_byte(byte)


TINYFLOAT_FORMAT = TinyFloatFormat()


def tiny_float_format(signed: bool, exponent_size: int, exponent_bias: int) -> TinyFloatFormat:
    """Validate a format configuration and return its codec.

    Raises InvalidSignedFlag / InvalidExponentConfig for bad parameters.
    """
    fmt = TinyFloatFormat(signed=signed, exponent_size=exponent_size, exponent_bias=exponent_bias)
    if fmt.is_reference:
        return TINYFLOAT_FORMAT
    logger.warning(
        "Format (signed=%s, exponent_size=%d, exponent_bias=%d) uses the fixed "
        "1-4-3 bias -2 layout",
        signed,
        exponent_size,
        exponent_bias,
    )
    return fmt
