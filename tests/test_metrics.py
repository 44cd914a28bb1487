"""
Round-trip metrics
"""

from __future__ import annotations

import math

import torch

from tinyfloat import code_class_counts, error_metrics, tensor_stats


def test_code_class_counts_all_codes():
    counts = code_class_counts(torch.arange(256, dtype=torch.uint8))
    assert counts == {
        "zero": 2,
        "subnormal": 14,
        "normalized": 224,
        "infinity": 2,
        "nan": 14,
    }


def test_error_metrics_skips_non_finite():
    x = torch.tensor([1.0, 20.0, 200000.0, math.nan])
    x_hat = torch.tensor([1.0, 16.0, math.inf, math.nan])
    m = error_metrics(x, x_hat)
    assert m["count"] == 4
    assert m["compared"] == 2
    assert m["saturated"] == 1
    assert m["nan"] == 1
    assert m["exact"] == 1
    assert m["max_abs"] == 4.0
    assert m["mae"] == 2.0


def test_error_metrics_nothing_to_compare():
    m = error_metrics(torch.tensor([math.nan]), torch.tensor([math.nan]))
    assert m["compared"] == 0
    assert "mse" not in m


def test_tensor_stats():
    s = tensor_stats(torch.tensor([-4.0, 2.0, math.inf]))
    assert s["count"] == 3
    assert s["finite"] == 2
    assert s["min"] == -4.0
    assert s["max_abs"] == 4.0
    assert tensor_stats(torch.tensor([math.nan])) == {"count": 1, "finite": 0}
