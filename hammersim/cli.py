"""Командная строка: «отправка формы» -> расчёт -> график.

    python scripts/run_estimator.py --diameter 4 --flowRate 100 --pipeLength 100 \
        --wallThickness 0.25 --closureTime 100 --output out/transient.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from hammersim.chart import ChartData, ChartHandle, render_chart
from hammersim.core.validation import InvalidInputError
from hammersim.form import FORM_FIELDS, default_form, parse_form
from hammersim.simulator import SimulationResult, simulate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate water hammer pressure transient after valve closure",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default pipe (4 in, 100 GPM, 100 ft, 0.25 in wall, 100 ms closure), save chart
  python scripts/run_estimator.py --output out/transient.png

  # Slow closure, print first 10 samples
  python scripts/run_estimator.py --closureTime 2000 --table 10
        """,
    )

    defaults = default_form()
    for f in FORM_FIELDS:
        parser.add_argument(
            f"--{f.name}",
            type=str,
            default=defaults[f.name],
            help=f"{f.label}, {f.unit} (default: {defaults[f.name]})",
        )

    parser.add_argument("--output", type=str, default=None, help="Save chart as PNG to this path")
    parser.add_argument("--show", action="store_true", help="Open an interactive chart window")
    parser.add_argument("--table", type=int, default=0, help="Print the first N samples (default: 0)")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser


def print_summary(result: SimulationResult) -> None:
    d = result.derived
    print(f"\n{'='*70}")
    print("Water Hammer Transient Estimate")
    print(f"{'='*70}")
    print(f"Flow area:           {d.area_m2:.6f} m^2")
    print(f"Flow velocity:       {d.velocity_m_s:.4f} m/s")
    print(f"Wave speed:          {d.speed_of_sound_m_s:.1f} m/s")
    print(f"Effective factor:    {d.effective_factor:.3f}")
    print(f"Pressure spike:      {d.delta_p_psi:.2f} psi ({d.delta_p_pa / 1e3:.1f} kPa)")
    print(f"Oscillation freq.:   {d.frequency_hz:.3f} Hz")
    print(f"Samples:             {len(result.series)}")
    print(f"{'='*70}\n")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO)

    if args.table < 0:
        print("Error: --table must be >= 0", file=sys.stderr)
        return 2

    try:
        inputs = parse_form({f.name: getattr(args, f.name) for f in FORM_FIELDS})
    except InvalidInputError as e:
        print(f"Error: invalid input: {e}", file=sys.stderr)
        return 2

    result = simulate(inputs)
    logger.info("Simulated %d samples, spike %.2f psi", len(result.series), result.derived.delta_p_psi)

    if not args.quiet:
        print_summary(result)

    if args.table:
        print(result.series.to_frame().head(args.table).to_string(index=False))

    if not (args.output or args.show):
        return 0

    handle: ChartHandle = render_chart(ChartData.from_result(result))
    with handle:
        if args.output:
            handle.save(args.output)
        if args.show:
            handle.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
