"""Metrics for tiny float round-trip error and code usage."""

from __future__ import annotations

import torch

from .constants import EXPONENT_MASK, EXPONENT_RESERVED, EXPONENT_SHIFT, MANTISSA_MASK


def tensor_stats(x: torch.Tensor) -> dict:
    x = x.detach().float()
    finite = x[torch.isfinite(x)]
    abs_x = finite.abs()
    if finite.numel() == 0:
        return {"count": x.numel(), "finite": 0}
    return {
        "count": x.numel(),
        "finite": finite.numel(),
        "mean": finite.mean().item(),
        "min": finite.min().item(),
        "max": finite.max().item(),
        "mean_abs": abs_x.mean().item(),
        "max_abs": abs_x.max().item(),
    }


def error_metrics(x: torch.Tensor, x_hat: torch.Tensor) -> dict:
    """Error of x_hat against x over elements finite in both.

    Saturated (infinite) and NaN elements are reported as counts.
    """
    x = x.detach().double()
    x_hat = x_hat.detach().double()
    mask = torch.isfinite(x) & torch.isfinite(x_hat)
    diff = x[mask] - x_hat[mask]
    out = {
        "count": x.numel(),
        "compared": int(mask.sum().item()),
        "saturated": int((torch.isfinite(x) & torch.isinf(x_hat)).sum().item()),
        "nan": int(torch.isnan(x_hat).sum().item()),
    }
    if diff.numel() == 0:
        return out
    out.update(
        {
            "mse": torch.mean(diff ** 2).item(),
            "mae": torch.mean(diff.abs()).item(),
            "max_abs": diff.abs().max().item(),
            "rel_l2": (diff.norm() / (x[mask].norm() + 1e-12)).item(),
            "exact": int((diff == 0).sum().item()),
        }
    )
    return out


def code_class_counts(q: torch.Tensor) -> dict:
    """Count codes per class: zero, subnormal, normalized, infinity, nan."""
    q = q.to(torch.int64)
    exponent = (q & EXPONENT_MASK) >> EXPONENT_SHIFT
    mantissa = q & MANTISSA_MASK
    reserved = exponent == EXPONENT_RESERVED
    return {
        "zero": int(((exponent == 0) & (mantissa == 0)).sum().item()),
        "subnormal": int(((exponent == 0) & (mantissa != 0)).sum().item()),
        "normalized": int(((exponent != 0) & ~reserved).sum().item()),
        "infinity": int((reserved & (mantissa == 0)).sum().item()),
        "nan": int((reserved & (mantissa != 0)).sum().item()),
    }
