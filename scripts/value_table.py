from __future__ import annotations

import matplotlib.pyplot as plt
import pandas as pd

from _path import ROOT
from tinyfloat import TinyFloat, format_value, is_finite, is_nan, is_safe_integer
from tinyfloat.layout import fields, unpack


def main():
    reports = ROOT / "reports"
    reports.mkdir(parents=True, exist_ok=True)

    rows = []
    for byte in range(256):
        v = TinyFloat.from_byte(byte)
        sign, exponent, mantissa = fields(byte)
        rows.append(
            {
                "Code": f"0x{byte:02x}",
                "Sign": sign,
                "Exponent": exponent,
                "Mantissa": mantissa,
                "Class": type(unpack(byte)).__name__,
                "Value": format_value(float(v)),
                "Finite": is_finite(v),
                "NaN": is_nan(v),
                "Safe": is_safe_integer(v),
            }
        )

    df = pd.DataFrame(rows)
    (reports / "tinyfloat_codes.md").write_text(df.to_markdown(index=False))

    # Decoded value per code for the positive half
    pos = df[(df["Sign"] == 0) & df["Finite"]]
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.semilogy(pos.index, pos["Value"].astype(float).clip(lower=0.5), ".", color="#2a6d62")
    ax.set_title("Tiny Float Positive Codes")
    ax.set_xlabel("Code")
    ax.set_ylabel("Decoded value (0 shown at 0.5)")
    fig.tight_layout()
    fig.savefig(reports / "tinyfloat_codes.png", dpi=160)

    print(df.groupby("Class").size().to_string())


if __name__ == "__main__":
    main()
