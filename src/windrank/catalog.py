from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping
import json

from .area import rotor_swept_area
from .design import DesignParameters, validate_design
from .errors import InvalidDesignError

# Reference concepts

AXIAL_FLUX = DesignParameters(
    name="axial-flux",
    title="12-rotor dual axial-flux generator",
    rotor_diameter=2.6,
    power_coefficient=0.48,
    generator_efficiency=0.92,
    tip_speed_ratio=7.0,
)

# Four stacked 1.6 m rotors. The effective area already covers all four disks
# and stage_count multiplies again, as the concept was published.
DUAL_STAGE = DesignParameters(
    name="dual-stage",
    title="Multi-rotor flux-switching tower",
    rotor_diameter=1.6,
    power_coefficient=0.46,
    generator_efficiency=0.90,
    tip_speed_ratio=6.0,
    stage_count=4,
    effective_area=rotor_swept_area(1.6) * 4,
)

SUPERCONDUCTOR = DesignParameters(
    name="superconductor",
    title="Superconducting vertical-axis linear generator loop",
    rotor_diameter=3.0,
    power_coefficient=0.41,
    generator_efficiency=0.95,
    tip_speed_ratio=4.0,
    stage_count=2,
)

REFERENCE_DESIGNS = (AXIAL_FLUX, DUAL_STAGE, SUPERCONDUCTOR)


# record key -> DesignParameters field; camelCase keys come from the web page data
_KEY_ALIASES = {
    "rotorDiameter": "rotor_diameter",
    "cp": "power_coefficient",
    "powerCoefficient": "power_coefficient",
    "generatorEfficiency": "generator_efficiency",
    "tsr": "tip_speed_ratio",
    "tipSpeedRatio": "tip_speed_ratio",
    "stages": "stage_count",
    "stageCount": "stage_count",
    "effectiveArea": "effective_area",
    "id": "name",
}

_REQUIRED = ("rotor_diameter", "power_coefficient", "generator_efficiency", "tip_speed_ratio")
_FIELDS = set(_REQUIRED) | {"stage_count", "effective_area", "name", "title"}


def design_from_record(record: Mapping[str, Any]) -> DesignParameters:
    """
    Build a validated design from a plain mapping (e.g. parsed JSON).
    Unknown keys such as prose or diagram references are ignored.
    """
    kw: dict[str, Any] = {}
    for key, value in record.items():
        field = _KEY_ALIASES.get(key, key)
        if field in _FIELDS:
            kw[field] = value

    name = str(kw.get("name", "design"))
    for field in _REQUIRED:
        if field not in kw:
            raise InvalidDesignError(name, field, "is missing")

    if "name" in kw:
        kw["name"] = name
    return validate_design(DesignParameters(**kw))


def load_designs(path: str | Path) -> list[DesignParameters]:
    """Read a JSON list of design records (or {"designs": [...]})."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, Mapping):
        data = data.get("designs", [])
    return [design_from_record(r) for r in data]
