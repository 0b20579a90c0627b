from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence
import logging

from .config import EvaluationConfig
from .design import DesignParameters
from .engine import DesignEvaluation, OutputRow, evaluate_designs
from .errors import EmptyInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankingResult:
    evaluations: tuple[DesignEvaluation, ...]
    peaks: tuple[OutputRow, ...]        # max electrical_kw row, aligned with evaluations
    headline: DesignEvaluation          # winner at the final speed point


def peak_of(rows: Sequence[OutputRow]) -> OutputRow:
    """
    Row with the highest electrical power.
    Ties keep the earliest row (left fold from the first element).
    """
    rows = list(rows)
    if not rows:
        raise EmptyInputError("no output rows to take a peak from")
    best = rows[0]
    for row in rows[1:]:
        if row.electrical_kw > best.electrical_kw:
            best = row
    return best


def headline_winner(evaluations: Sequence[DesignEvaluation]) -> DesignEvaluation:
    """
    Winner by the electrical power of each design's *final* speed-point row.

    This is not the same as comparing true peaks (see peak_winner): a design
    whose best output sits at an interior speed point is judged only by its
    last row here. Ties keep the earliest design.
    """
    evaluations = list(evaluations)
    if not evaluations:
        raise EmptyInputError("no designs to rank")
    best = evaluations[0]
    for ev in evaluations[1:]:
        if ev.final.electrical_kw > best.final.electrical_kw:
            best = ev
    return best


def peak_winner(evaluations: Sequence[DesignEvaluation]) -> DesignEvaluation:
    """Winner by each design's peak row. Ties keep the earliest design."""
    evaluations = list(evaluations)
    if not evaluations:
        raise EmptyInputError("no designs to rank")
    best = evaluations[0]
    best_kw = peak_of(best.outputs).electrical_kw
    for ev in evaluations[1:]:
        kw = peak_of(ev.outputs).electrical_kw
        if kw > best_kw:
            best, best_kw = ev, kw
    return best


def rank_designs(
    designs: Iterable[DesignParameters],
    cfg: EvaluationConfig = EvaluationConfig(),
) -> DesignParameters:
    """Best design by final speed-point electrical output (headline policy)."""
    return headline_winner(evaluate_designs(designs, cfg)).design


def summarize(
    designs: Iterable[DesignParameters],
    cfg: EvaluationConfig = EvaluationConfig(),
) -> RankingResult:
    evaluations = tuple(evaluate_designs(designs, cfg))
    peaks = tuple(peak_of(ev.outputs) for ev in evaluations)
    headline = headline_winner(evaluations)
    logger.info(
        "Headline winner: %s (%.2f kW at %g km/h)",
        headline.design.name,
        headline.final.electrical_kw,
        headline.final.speed_kmh,
    )
    return RankingResult(evaluations=evaluations, peaks=peaks, headline=headline)
