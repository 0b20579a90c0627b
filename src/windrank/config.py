from __future__ import annotations
from dataclasses import dataclass

AIR_DENSITY = 1.225                     # kg/m^3, sea-level dry air
SPEED_POINTS_KMH = (18.0, 28.0, 36.0, 45.0)


@dataclass(frozen=True)
class EvaluationConfig:
    air_density: float = AIR_DENSITY
    speed_points_kmh: tuple[float, ...] = SPEED_POINTS_KMH
