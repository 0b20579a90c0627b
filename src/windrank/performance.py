from __future__ import annotations
import numpy as np

from .errors import InvalidDesignError


def kmh_to_ms(speed_kmh: float) -> float:
    return float(speed_kmh) / 3.6


def rotor_speed_rpm(wind_ms: float, diameter: float, tsr: float) -> float:
    """
    Rotor speed (rpm) holding the tip-speed ratio fixed:
    tip speed = v * TSR, one revolution = pi * D.
    """
    if not diameter > 0.0:
        raise InvalidDesignError("<unnamed>", "rotor_diameter", f"must be > 0, got {diameter}")
    tip_speed = float(wind_ms) * float(tsr)
    circumference = np.pi * float(diameter)
    revolutions_per_second = tip_speed / circumference
    return float(revolutions_per_second * 60.0)


def mechanical_power_kw(air_density: float, area: float, cp: float, wind_ms: float) -> float:
    """P = 1/2 rho A Cp v^3, in kW."""
    v = float(wind_ms)
    # v*v*v overflows to inf where v**3 would raise
    return float(0.5 * air_density * area * cp * (v * v * v) / 1000.0)


def torque_nm(mechanical_kw: float, rpm: float) -> float:
    # Standstill has no defined torque from P / omega; report 0.
    if rpm == 0:
        return 0.0
    omega = 2.0 * np.pi * float(rpm) / 60.0  # rad/s
    return float(mechanical_kw * 1000.0 / omega)
