from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence
import logging
import numpy as np

from .area import resolve_area
from .config import AIR_DENSITY, SPEED_POINTS_KMH, EvaluationConfig
from .design import DesignParameters, validate_design
from .errors import EmptyInputError, InvalidSpeedPointError
from .performance import kmh_to_ms, mechanical_power_kw, rotor_speed_rpm, torque_nm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputRow:
    speed_kmh: float
    wind_ms: float
    rpm: float
    mechanical_kw: float
    electrical_kw: float
    torque_nm: float


@dataclass(frozen=True)
class DesignEvaluation:
    design: DesignParameters
    swept_area: float                   # m^2, as resolved for this design
    outputs: tuple[OutputRow, ...]

    @property
    def final(self) -> OutputRow:
        """Row of the last speed point (highest wind for the default set)."""
        return self.outputs[-1]


def _check_speed_points(speed_points_kmh: Sequence[float]) -> tuple[float, ...]:
    points = tuple(speed_points_kmh)
    if not points:
        raise EmptyInputError("speed-point set is empty")
    for s in points:
        if not np.isfinite(float(s)) or float(s) < 0.0:
            raise InvalidSpeedPointError(f"speed point must be finite and >= 0 km/h, got {s!r}")
    return points


def _evaluate(
    design: DesignParameters,
    speed_points_kmh: Sequence[float],
    air_density: float,
) -> tuple[float, list[OutputRow]]:
    validate_design(design)
    points = _check_speed_points(speed_points_kmh)
    area = resolve_area(design)

    rows = []
    for speed_kmh in points:
        wind_ms = kmh_to_ms(speed_kmh)
        rpm = rotor_speed_rpm(wind_ms, design.rotor_diameter, design.tip_speed_ratio)
        mech_kw = mechanical_power_kw(air_density, area, design.power_coefficient, wind_ms) * design.stage_count
        elec_kw = mech_kw * design.generator_efficiency
        rows.append(
            OutputRow(
                speed_kmh=speed_kmh,
                wind_ms=wind_ms,
                rpm=rpm,
                mechanical_kw=mech_kw,
                electrical_kw=elec_kw,
                torque_nm=torque_nm(mech_kw, rpm),
            )
        )

    logger.debug("Evaluated %s at %d speed points (area %.3f m^2)", design.name, len(rows), area)
    return area, rows


def compute_outputs(
    design: DesignParameters,
    speed_points_kmh: Sequence[float] = SPEED_POINTS_KMH,
    air_density: float = AIR_DENSITY,
) -> list[OutputRow]:
    """
    Evaluate one design at every speed point, in input order.

    The design is validated and the capture area resolved once up front, so
    an invalid design never yields partial rows. Mechanical power scales
    linearly with stage_count (independent identical units).
    """
    _, rows = _evaluate(design, speed_points_kmh, air_density)
    return rows


def evaluate_design(design: DesignParameters, cfg: EvaluationConfig = EvaluationConfig()) -> DesignEvaluation:
    area, rows = _evaluate(design, cfg.speed_points_kmh, cfg.air_density)
    return DesignEvaluation(design=design, swept_area=area, outputs=tuple(rows))


def evaluate_designs(
    designs: Iterable[DesignParameters],
    cfg: EvaluationConfig = EvaluationConfig(),
) -> list[DesignEvaluation]:
    designs = list(designs)
    if not designs:
        raise EmptyInputError("design list is empty")
    # all designs are checked before any is evaluated
    for d in designs:
        validate_design(d)
    _check_speed_points(cfg.speed_points_kmh)
    return [evaluate_design(d, cfg) for d in designs]
