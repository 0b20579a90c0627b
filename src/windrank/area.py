from __future__ import annotations
import numpy as np

from .design import DesignParameters
from .errors import InvalidDesignError


def rotor_swept_area(diameter: float) -> float:
    radius = float(diameter) / 2.0
    return float(np.pi * radius * radius)


def resolve_area(d: DesignParameters) -> float:
    """
    Capture area used for the power formula (m^2).

    An explicit effective_area wins (stacked or multi-rotor layouts whose
    capture area is not a single disk); otherwise the rotor disk area.
    """
    if d.effective_area is not None:
        area = float(d.effective_area)
        if np.isfinite(area) and area > 0.0:
            return area
        raise InvalidDesignError(d.name, "effective_area", f"must be finite and > 0, got {d.effective_area}")

    area = rotor_swept_area(d.rotor_diameter)
    if not (np.isfinite(area) and area > 0.0):
        raise InvalidDesignError(d.name, "rotor_diameter", f"gives no usable swept area ({d.rotor_diameter})")
    return area
