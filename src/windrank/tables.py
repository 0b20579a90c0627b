from __future__ import annotations

from dataclasses import asdict
from typing import Sequence
import pandas as pd

from .engine import DesignEvaluation, OutputRow
from .ranking import RankingResult, peak_of


def outputs_frame(rows: Sequence[OutputRow]) -> pd.DataFrame:
    """One row per speed point, columns named after OutputRow fields."""
    return pd.DataFrame([asdict(r) for r in rows])


def comparison_frame(evaluations: Sequence[DesignEvaluation]) -> pd.DataFrame:
    """
    Electrical kW per design (rows) and speed point (columns), plus the
    peak kW and the speed it occurs at.
    """
    records = []
    for ev in evaluations:
        rec: dict = {"design": ev.design.name}
        for row in ev.outputs:
            rec[f"{row.speed_kmh:g} km/h"] = row.electrical_kw
        best = peak_of(ev.outputs)
        rec["best_kw"] = best.electrical_kw
        rec["best_speed_kmh"] = best.speed_kmh
        records.append(rec)
    return pd.DataFrame(records).set_index("design")


def summary_frame(result: RankingResult) -> pd.DataFrame:
    records = []
    for ev, peak in zip(result.evaluations, result.peaks):
        records.append(
            {
                "design": ev.design.name,
                "swept_area_m2": ev.swept_area,
                "stages": ev.design.stage_count,
                "final_kw": ev.final.electrical_kw,
                "peak_kw": peak.electrical_kw,
                "peak_speed_kmh": peak.speed_kmh,
                "headline": ev is result.headline,
            }
        )
    return pd.DataFrame(records)
