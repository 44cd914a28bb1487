"""Vectorised tiny float encode/decode for torch tensors."""

from __future__ import annotations

import torch

from .codec import MANTISSA_STEPS, decode
from .constants import (
    CODE_COUNT,
    EXPONENT_BIAS,
    EXPONENT_RESERVED,
    EXPONENT_SHIFT,
    MANTISSA_MASK,
    MAX_MAGNITUDE,
    SIGN_SHIFT,
    SUBNORMAL_LIMIT,
)
from .value import REGISTRY

# Decoded value of every code, indexed by byte (NaN codes decode to nan)
DECODE_TABLE = torch.tensor([decode(b) for b in range(CODE_COUNT)], dtype=torch.float32)


def encode_tensor(x: torch.Tensor) -> torch.Tensor:
    """Encode a real tensor to tiny float codes (uint8, same shape).

    Same policy as the scalar encoder: truncate toward zero, then zero,
    saturation to infinity, NaN, subnormal, normalized. NaN elements take
    successive payloads from the process-wide rotation in flattened order.
    """
    if x.is_complex():
        raise ValueError("Tiny float encoding expects a real tensor.")
    t = torch.trunc(x.to(torch.float64))
    a = t.abs()
    sign = (t < 0).to(torch.int64) << SIGN_SHIFT

    is_zero = t == 0
    is_nan = torch.isnan(t)
    is_inf = a > MAX_MAGNITUDE
    is_sub = (a < SUBNORMAL_LIMIT) & ~is_zero

    # Normalized path; other lanes get a harmless stand-in magnitude
    special = is_zero | is_nan | is_inf | is_sub
    mag = torch.where(special, torch.full_like(a, SUBNORMAL_LIMIT), a)
    _, exp = torch.frexp(mag)  # mag = m * 2**exp, m in [0.5, 1)
    raw = exp.to(torch.int64) - 1
    remainder = mag - torch.exp2(raw.to(torch.float64))

    mantissa = torch.zeros_like(raw)
    for bit, offset in MANTISSA_STEPS:
        power = torch.exp2((raw - offset).to(torch.float64))
        take = remainder >= power
        mantissa = mantissa + take.to(torch.int64) * bit
        remainder = torch.where(take, remainder - power, remainder)

    exponent = torch.clamp(raw + EXPONENT_BIAS, min=0)
    out = sign | (exponent << EXPONENT_SHIFT) | mantissa

    sub_mag = torch.where(is_sub, a, torch.zeros_like(a)).to(torch.int64)
    out = torch.where(is_sub, sign | sub_mag, out)
    out = torch.where(is_inf, sign | (EXPONENT_RESERVED << EXPONENT_SHIFT), out)
    out = torch.where(is_zero, torch.zeros_like(out), out)

    n_nan = int(is_nan.sum().item())
    if n_nan:
        counters = torch.tensor(
            [REGISTRY.next_nan_payload() for _ in range(n_nan)],
            dtype=torch.int64,
            device=out.device,
        )
        out[is_nan] = ((counters >> 3) << SIGN_SHIFT) | (EXPONENT_RESERVED << EXPONENT_SHIFT) | (counters & MANTISSA_MASK)

    return out.to(torch.uint8)


def decode_tensor(q: torch.Tensor) -> torch.Tensor:
    """Decode tiny float codes to float32 values (exact)."""
    if q.is_floating_point() or q.is_complex():
        raise ValueError("Tiny float codes must be an integer tensor.")
    idx = q.to(torch.int64)
    if q.dtype != torch.uint8 and idx.numel() and (idx.min() < 0 or idx.max() >= CODE_COUNT):
        raise ValueError("Tiny float codes must be in [0, 255].")
    return DECODE_TABLE.to(q.device)[idx]


def quantize_tinyfloat(x: torch.Tensor) -> torch.Tensor:
    """Round-trip through the tiny float format (fake quantization).

    Returns values representable in the format, in x's dtype when x is
    floating point, float32 otherwise.
    """
    out = decode_tensor(encode_tensor(x))
    if x.is_floating_point():
        return out.to(x.dtype)
    return out
