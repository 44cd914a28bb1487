"""Tiny float: an 8-bit floating-point format (1 sign, 4 exponent, 3 mantissa bits, bias -2)."""

from .constants import (
    EXPONENT_BIAS,
    MAX_MAGNITUDE,
    MAX_SAFE_MAGNITUDE,
)
from .codec import encode, decode, truncate, format_value
from .coerce import MISSING, to_number, parse_float, string_to_number
from .errors import FormatConfigError, InvalidSignedFlag, InvalidExponentConfig
from .registry import ValueRegistry
from .value import (
    TinyFloat,
    REGISTRY,
    is_nan,
    is_finite,
    is_integer,
    is_safe_integer,
    nan,
    ZERO,
    EPSILON,
    POSITIVE_INFINITY,
    NEGATIVE_INFINITY,
    MAX_VALUE,
    MIN_VALUE,
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
)
from .format import TinyFloatFormat, TINYFLOAT_FORMAT, tiny_float_format
from .tensor import encode_tensor, decode_tensor, quantize_tinyfloat, DECODE_TABLE
from .metrics import tensor_stats, error_metrics, code_class_counts

__all__ = [
    "TinyFloat",
    "TinyFloatFormat",
    "TINYFLOAT_FORMAT",
    "tiny_float_format",
    "ValueRegistry",
    "REGISTRY",
    "MISSING",
    "EXPONENT_BIAS",
    "MAX_MAGNITUDE",
    "MAX_SAFE_MAGNITUDE",
    "encode",
    "decode",
    "truncate",
    "format_value",
    "to_number",
    "parse_float",
    "string_to_number",
    "is_nan",
    "is_finite",
    "is_integer",
    "is_safe_integer",
    "nan",
    "ZERO",
    "EPSILON",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    "MAX_VALUE",
    "MIN_VALUE",
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    "FormatConfigError",
    "InvalidSignedFlag",
    "InvalidExponentConfig",
    "encode_tensor",
    "decode_tensor",
    "quantize_tinyfloat",
    "DECODE_TABLE",
    "tensor_stats",
    "error_metrics",
    "code_class_counts",
]
