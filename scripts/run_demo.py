#!/usr/bin/env python
"""
Yields Demo Script

This script demonstrates the curve workflow:
1. Build flat and step curves
2. Bootstrap curves from forward rates and par yields
3. Combine curves (spread over a base curve)
4. Tabulate rates, discount and accumulation factors
5. Optionally export the tables to CSV

Usage:
    python run_demo.py [--output-dir OUTPUT_DIR] [--verbose]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from yields import (
    AbstractYield,
    Constant,
    Step,
    Forward,
    Par,
    curve_table,
    forward_rates,
    par_yields,
)

GRID = [0.5, 1, 2, 3, 5, 7, 10]

SAMPLE_FORWARDS = [0.0410, 0.0395, 0.0380, 0.0385, 0.0390, 0.0400, 0.0405,
                   0.0410, 0.0415, 0.0420]

SAMPLE_PARS = [0.0420, 0.0405, 0.0398, 0.0396, 0.0397, 0.0400, 0.0403,
               0.0406, 0.0409, 0.0412]


def build_curves() -> Dict[str, AbstractYield]:
    """Build the sample curves."""
    base = Par(SAMPLE_PARS)
    return {
        "constant": Constant(0.04),
        "step": Step([0.042, 0.040, 0.039], [1, 3, 10]),
        "forward": Forward(SAMPLE_FORWARDS),
        "par": base,
        "par_plus_spread": base + Constant(0.0125),
    }


def print_section(title: str) -> None:
    print()
    print("=" * 60)
    print(title)
    print("=" * 60)


def run(output_dir: Optional[Path] = None) -> List[str]:
    """Run the demo, returning the paths of any CSV files written."""
    curves = build_curves()
    created = []

    for name, curve in curves.items():
        print_section(f"{name}: {curve!r}")
        table = curve_table(curve, GRID)
        print(table.to_string(float_format=lambda x: f"{x:.6f}"))

        if output_dir is not None:
            output_dir.mkdir(parents=True, exist_ok=True)
            path = output_dir / f"{name}_curve.csv"
            table.to_csv(path)
            created.append(str(path))

    print_section("Round trips")
    fwd = curves["forward"]
    implied = forward_rates(fwd, range(1, len(SAMPLE_FORWARDS) + 1))
    par = curves["par"]
    repriced = par_yields(par, par.maturities)
    checks = pd.DataFrame({
        "input_forward": SAMPLE_FORWARDS,
        "implied_forward": implied,
        "input_par": SAMPLE_PARS,
        "repriced_par": repriced,
        "spot": par.spot_rates,
    }, index=pd.Index(par.maturities, name="time"))
    print(checks.to_string(float_format=lambda x: f"{x:.8f}"))

    return created


def main():
    parser = argparse.ArgumentParser(description="Yield curve demo")
    parser.add_argument("--output-dir", type=Path, default=None,
                        help="Directory for CSV output")
    parser.add_argument("--verbose", action="store_true",
                        help="Show bootstrap debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )

    created = run(args.output_dir)
    for path in created:
        print(f"Wrote {path}")


if __name__ == "__main__":
    main()
