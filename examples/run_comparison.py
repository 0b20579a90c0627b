from __future__ import annotations

import logging

from windrank.catalog import REFERENCE_DESIGNS
from windrank.config import EvaluationConfig
from windrank.log import setup_logging
from windrank.plots import plot_power_curves
from windrank.ranking import peak_winner, summarize
from windrank.tables import comparison_frame, summary_frame


def main() -> None:
    setup_logging(logging.INFO)

    cfg = EvaluationConfig()
    result = summarize(REFERENCE_DESIGNS, cfg)

    print(comparison_frame(result.evaluations).round(2))
    print()
    print(summary_frame(result).round(2))

    top = result.headline
    print(f"\nHeadline winner: {top.design.name} ({top.final.electrical_kw:.1f} kW at {top.final.speed_kmh:g} km/h)")
    best = peak_winner(result.evaluations)
    if best is not top:
        print(f"By true peak the winner is {best.design.name}")

    plot_power_curves(result.evaluations)


if __name__ == "__main__":
    main()
