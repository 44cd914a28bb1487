from __future__ import annotations

import argparse
import json

import matplotlib.pyplot as plt
import torch
from tqdm import trange

from _path import ROOT
from tinyfloat import (
    code_class_counts,
    decode_tensor,
    encode_tensor,
    error_metrics,
    tensor_stats,
)


def make_data(n: int, scale: float, outlier_every: int, seed: int) -> torch.Tensor:
    gen = torch.Generator().manual_seed(seed)
    # Log-uniform magnitudes cover the subnormal and normalized domains
    log_mag = torch.rand(n, generator=gen, dtype=torch.float64) * scale
    sign = torch.where(torch.rand(n, generator=gen) < 0.5, -1.0, 1.0).to(torch.float64)
    x = sign * torch.exp2(log_mag)
    # Outliers past MAX_VALUE exercise saturation
    x[::outlier_every] *= 4.0
    return x


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--samples", type=int, default=65536)
    parser.add_argument("--trials", type=int, default=4)
    parser.add_argument("--scale", type=float, default=17.5, help="max log2 magnitude")
    parser.add_argument("--outlier-every", type=int, default=1024)
    args = parser.parse_args()

    out_dir = ROOT / "reports"
    out_dir.mkdir(parents=True, exist_ok=True)

    report = {}
    rel_errors = []
    for trial in trange(args.trials, desc="roundtrip"):
        x = make_data(args.samples, args.scale, args.outlier_every, seed=trial)
        q = encode_tensor(x)
        x_hat = decode_tensor(q).double()

        finite = torch.isfinite(x_hat) & (x.abs() >= 1)
        rel_errors.append(((x[finite] - x_hat[finite]).abs() / x[finite].abs()).numpy())

        report[f"trial_{trial}"] = {
            "input": tensor_stats(x),
            "error": error_metrics(x, x_hat),
            "codes": code_class_counts(q),
        }

    fig, ax = plt.subplots(figsize=(8, 5))
    for i, rel in enumerate(rel_errors):
        ax.hist(rel, bins=120, alpha=0.4, label=f"trial {i}", density=True)
    ax.set_title("Tiny Float Round-Trip Relative Error")
    ax.set_xlabel("|x - x̂| / |x|")
    ax.set_ylabel("Density")
    ax.legend()

    fig.tight_layout()
    fig.savefig(out_dir / "tinyfloat_roundtrip.png", dpi=160)

    with (out_dir / "tinyfloat_roundtrip.json").open("w") as f:
        json.dump(report, f, indent=2)

    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
