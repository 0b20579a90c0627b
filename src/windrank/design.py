from __future__ import annotations
from dataclasses import dataclass
import numbers
import numpy as np

from .errors import InvalidDesignError


@dataclass(frozen=True)
class DesignParameters:
    rotor_diameter: float               # m
    power_coefficient: float            # Cp, (0, 1]
    generator_efficiency: float         # (0, 1]
    tip_speed_ratio: float              # blade tip speed / wind speed
    stage_count: int = 1                # power units summed linearly
    effective_area: float | None = None # m^2, overrides the rotor disk
    name: str = "design"
    title: str = ""


def _finite(x) -> bool:
    return bool(np.isfinite(float(x)))


def validate_design(d: DesignParameters) -> DesignParameters:
    """
    Bounds check, run before any performance formula touches the design.
    Returns the design unchanged so it can be used inline.
    """
    for field in ("rotor_diameter", "power_coefficient", "generator_efficiency", "tip_speed_ratio"):
        value = getattr(d, field)
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidDesignError(d.name, field, f"must be a number, got {value!r}")
        if not _finite(value):
            raise InvalidDesignError(d.name, field, f"must be finite, got {value!r}")

    if d.rotor_diameter <= 0.0:
        raise InvalidDesignError(d.name, "rotor_diameter", f"must be > 0, got {d.rotor_diameter}")
    if not 0.0 < d.power_coefficient <= 1.0:
        raise InvalidDesignError(d.name, "power_coefficient", f"must be in (0, 1], got {d.power_coefficient}")
    if not 0.0 < d.generator_efficiency <= 1.0:
        raise InvalidDesignError(d.name, "generator_efficiency", f"must be in (0, 1], got {d.generator_efficiency}")
    if d.tip_speed_ratio <= 0.0:
        raise InvalidDesignError(d.name, "tip_speed_ratio", f"must be > 0, got {d.tip_speed_ratio}")

    if isinstance(d.stage_count, bool) or not isinstance(d.stage_count, numbers.Integral):
        raise InvalidDesignError(d.name, "stage_count", f"must be an integer, got {d.stage_count!r}")
    if d.stage_count < 1:
        raise InvalidDesignError(d.name, "stage_count", f"must be >= 1, got {d.stage_count}")

    if d.effective_area is not None:
        if isinstance(d.effective_area, bool) or not isinstance(d.effective_area, numbers.Real):
            raise InvalidDesignError(d.name, "effective_area", f"must be a number, got {d.effective_area!r}")
        if not _finite(d.effective_area) or d.effective_area <= 0.0:
            raise InvalidDesignError(d.name, "effective_area", f"must be finite and > 0, got {d.effective_area}")

    return d
