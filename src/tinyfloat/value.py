"""Immutable tiny float value type, predicates and named constants."""

from __future__ import annotations

import math
import numbers

from .codec import decode, format_value
from .coerce import MISSING, string_to_number, to_number
from .constants import (
    EXPONENT_RESERVED,
    MAX_MAGNITUDE,
    MAX_SAFE_MAGNITUDE,
)
from .layout import Code, canonical, fields, unpack
from .registry import ValueRegistry


class TinyFloat:
    """An 8-bit float (1 sign, 4 exponent, 3 mantissa bits, bias -2).

    ``TinyFloat(x)`` never builds a new object directly: it goes through the
    process-wide registry, so equal non-NaN values are the same instance.
    NaN is never identical or equal to anything, itself included; test for it
    with :func:`is_nan`.
    """

    __slots__ = ("_byte",)

    def __new__(cls, value: object = MISSING):
        return REGISTRY.construct(value)

    @classmethod
    def _create(cls, byte: int) -> TinyFloat:
        self = object.__new__(cls)
        object.__setattr__(self, "_byte", byte)
        return self

    @classmethod
    def from_byte(cls, byte: int) -> TinyFloat:
        """The value for a raw code; negative zero (0x80) gives ZERO."""
        return REGISTRY.from_byte(canonical(byte))

    @classmethod
    def nan(cls) -> TinyFloat:
        """A fresh NaN, with the next payload in the rotation."""
        return REGISTRY.construct(math.nan)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self).from_byte, (self._byte,))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    @property
    def byte(self) -> int:
        return self._byte

    @property
    def sign(self) -> int:
        return fields(self._byte)[0]

    @property
    def exponent(self) -> int:
        return fields(self._byte)[1]

    @property
    def mantissa(self) -> int:
        return fields(self._byte)[2]

    @property
    def code(self) -> Code:
        return unpack(self._byte)

    def value_of(self) -> float:
        return decode(self._byte)

    def __float__(self) -> float:
        return self.value_of()

    def __str__(self) -> str:
        return format_value(self.value_of())

    def __repr__(self) -> str:
        return f"TinyFloat({self})"

    def __abs__(self) -> TinyFloat:
        if self.sign:
            return TinyFloat(-self.value_of())
        return self

    def equals(self, other: object) -> bool:
        """Value equality.

        Against another TinyFloat this is identity (values are interned) and
        is False whenever either side is NaN. Against anything else the
        decoded value is compared loosely: bools count as 1/0, a string must
        be one whole numeric literal (empty means 0), None never matches.
        """
        if isinstance(other, TinyFloat):
            return not is_nan(self) and not is_nan(other) and self is other
        if other is None or other is MISSING:
            return False
        if isinstance(other, (str, bytes, bytearray)):
            return self.value_of() == string_to_number(other)
        return self.value_of() == to_number(other)

    def identical_to(self, other: object) -> bool:
        if not isinstance(other, TinyFloat):
            return False
        return self.equals(other)

    def __eq__(self, other):
        if isinstance(other, (TinyFloat, numbers.Real)):
            return self.equals(other)
        return NotImplemented

    def __hash__(self):
        if is_nan(self):
            return object.__hash__(self)
        return hash(self.value_of())


REGISTRY: ValueRegistry[TinyFloat] = ValueRegistry(TinyFloat._create)


def is_nan(value: TinyFloat) -> bool:
    return value.exponent == EXPONENT_RESERVED and value.mantissa != 0


def is_finite(value: TinyFloat) -> bool:
    return not is_nan(value) and value.exponent != EXPONENT_RESERVED


def is_integer(value: TinyFloat) -> bool:
    # every finite code decodes to an integer
    return is_finite(value)


def is_safe_integer(value: TinyFloat) -> bool:
    return abs(float(value)) <= MAX_SAFE_MAGNITUDE


def nan() -> TinyFloat:
    return TinyFloat.nan()


ZERO = TinyFloat(0)
EPSILON = TinyFloat(1)
POSITIVE_INFINITY = TinyFloat(math.inf)
NEGATIVE_INFINITY = TinyFloat(-math.inf)
MAX_VALUE = TinyFloat(MAX_MAGNITUDE)
MIN_VALUE = TinyFloat(1)
MAX_SAFE_INTEGER = TinyFloat(MAX_SAFE_MAGNITUDE)
MIN_SAFE_INTEGER = TinyFloat(-MAX_SAFE_MAGNITUDE)

TinyFloat.ZERO = ZERO
TinyFloat.EPSILON = EPSILON
TinyFloat.POSITIVE_INFINITY = POSITIVE_INFINITY
TinyFloat.NEGATIVE_INFINITY = NEGATIVE_INFINITY
TinyFloat.MAX_VALUE = MAX_VALUE
TinyFloat.MIN_VALUE = MIN_VALUE
TinyFloat.MAX_SAFE_INTEGER = MAX_SAFE_INTEGER
TinyFloat.MIN_SAFE_INTEGER = MIN_SAFE_INTEGER
