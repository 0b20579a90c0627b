from dataclasses import replace

import numpy as np
import pytest

from windrank.catalog import AXIAL_FLUX, REFERENCE_DESIGNS
from windrank.config import SPEED_POINTS_KMH, EvaluationConfig
from windrank.design import DesignParameters, validate_design
from windrank.engine import compute_outputs, evaluate_design, evaluate_designs
from windrank.errors import EmptyInputError, InvalidDesignError, InvalidSpeedPointError


def test_reference_case_at_36_kmh():
    (row,) = compute_outputs(AXIAL_FLUX, [36])

    assert row.speed_kmh == 36
    assert row.wind_ms == pytest.approx(10.0)
    assert row.mechanical_kw == pytest.approx(1.561, rel=5e-3)
    assert row.electrical_kw == pytest.approx(1.436, rel=5e-3)
    assert row.rpm == pytest.approx(514.3, rel=5e-3)
    assert row.torque_nm == pytest.approx(28.98, rel=5e-3)


def test_rows_follow_default_speed_points():
    rows = compute_outputs(AXIAL_FLUX)
    assert [r.speed_kmh for r in rows] == list(SPEED_POINTS_KMH)


def test_order_preserved_for_unsorted_points():
    points = [45, 18, 36, 0, 28]
    rows = compute_outputs(AXIAL_FLUX, points)
    assert [r.speed_kmh for r in rows] == points


def test_outputs_increase_with_wind_speed():
    for d in REFERENCE_DESIGNS:
        rows = compute_outputs(d)
        mech = np.array([r.mechanical_kw for r in rows])
        elec = np.array([r.electrical_kw for r in rows])
        rpm = np.array([r.rpm for r in rows])
        assert (np.diff(mech) > 0).all()
        assert (np.diff(elec) > 0).all()
        assert (np.diff(rpm) > 0).all()


def test_electrical_is_mechanical_times_efficiency():
    for d in REFERENCE_DESIGNS:
        for r in compute_outputs(d):
            assert r.electrical_kw == pytest.approx(r.mechanical_kw * d.generator_efficiency, rel=1e-12)


def test_torque_identity_on_rows():
    for d in REFERENCE_DESIGNS:
        for r in compute_outputs(d):
            omega = 2.0 * np.pi * r.rpm / 60.0
            assert np.isclose(r.torque_nm * omega, r.mechanical_kw * 1000.0, rtol=1e-9)


def test_zero_wind_gives_zero_rpm_and_torque():
    row = compute_outputs(AXIAL_FLUX, [0])[0]
    assert row.wind_ms == 0.0
    assert row.rpm == 0.0
    assert row.torque_nm == 0.0
    assert row.mechanical_kw == 0.0
    assert np.isfinite(row.torque_nm)


def test_stage_count_scales_mechanical_power():
    single = replace(AXIAL_FLUX, effective_area=4.0)
    triple = replace(single, stage_count=3)

    for r1, r3 in zip(compute_outputs(single), compute_outputs(triple)):
        assert r3.mechanical_kw == pytest.approx(3.0 * r1.mechanical_kw, rel=1e-12)
        assert r3.rpm == r1.rpm


def test_effective_area_used_verbatim():
    a = replace(AXIAL_FLUX, effective_area=10.0)
    b = replace(a, rotor_diameter=9.0)
    # rpm depends on diameter, power does not once the area is fixed
    assert [r.mechanical_kw for r in compute_outputs(a)] == [r.mechanical_kw for r in compute_outputs(b)]
    assert evaluate_design(b).swept_area == 10.0


def test_air_density_is_passed_through():
    rows_std = compute_outputs(AXIAL_FLUX, [36])
    rows_thin = compute_outputs(AXIAL_FLUX, [36], air_density=1.0)
    assert rows_thin[0].mechanical_kw == pytest.approx(rows_std[0].mechanical_kw / 1.225)


@pytest.mark.parametrize(
    "field, value",
    [
        ("rotor_diameter", 0.0),
        ("rotor_diameter", -2.0),
        ("power_coefficient", 0.0),
        ("power_coefficient", 1.2),
        ("generator_efficiency", 0.0),
        ("generator_efficiency", 1.01),
        ("tip_speed_ratio", 0.0),
        ("stage_count", 0),
        ("stage_count", 1.5),
        ("effective_area", 0.0),
        ("effective_area", -3.0),
        ("rotor_diameter", float("nan")),
        ("tip_speed_ratio", float("inf")),
    ],
)
def test_invalid_design_is_rejected(field, value):
    bad = replace(AXIAL_FLUX, **{field: value})
    with pytest.raises(InvalidDesignError) as exc:
        compute_outputs(bad)
    assert exc.value.field == field
    assert exc.value.design == "axial-flux"
    assert "axial-flux" in str(exc.value)


def test_bounds_are_inclusive_at_one():
    d = DesignParameters(rotor_diameter=1.0, power_coefficient=1.0, generator_efficiency=1.0, tip_speed_ratio=1.0)
    assert validate_design(d) is d


def test_empty_speed_points():
    with pytest.raises(EmptyInputError):
        compute_outputs(AXIAL_FLUX, [])


def test_bad_speed_points():
    with pytest.raises(InvalidSpeedPointError):
        compute_outputs(AXIAL_FLUX, [18, -5])
    with pytest.raises(InvalidSpeedPointError):
        compute_outputs(AXIAL_FLUX, [float("nan")])


def test_evaluate_designs_rejects_empty_and_bad_batches():
    with pytest.raises(EmptyInputError):
        evaluate_designs([])

    bad = replace(AXIAL_FLUX, name="broken", power_coefficient=2.0)
    with pytest.raises(InvalidDesignError) as exc:
        evaluate_designs([AXIAL_FLUX, bad])
    assert exc.value.design == "broken"


def test_evaluate_designs_uses_config():
    cfg = EvaluationConfig(speed_points_kmh=(10.0, 20.0))
    evs = evaluate_designs(REFERENCE_DESIGNS, cfg)
    assert [ev.design.name for ev in evs] == ["axial-flux", "dual-stage", "superconductor"]
    for ev in evs:
        assert [r.speed_kmh for r in ev.outputs] == [10.0, 20.0]
        assert ev.final is ev.outputs[-1]


def test_huge_finite_speed_gives_inf_power_not_an_error():
    (row,) = compute_outputs(AXIAL_FLUX, [1e110])
    assert np.isfinite(row.rpm)
    assert row.mechanical_kw == float("inf")
    assert row.electrical_kw == float("inf")
    assert row.torque_nm == float("inf")


def test_numpy_scalars_are_valid_design_values():
    d = DesignParameters(
        rotor_diameter=np.float32(2.6),
        power_coefficient=np.float64(0.48),
        generator_efficiency=np.float32(0.92),
        tip_speed_ratio=np.int64(7),
        stage_count=np.int64(2),
        effective_area=np.float32(5.0),
    )
    assert validate_design(d) is d
    rows = compute_outputs(d)
    assert len(rows) == 4
    assert all(np.isfinite(r.electrical_kw) for r in rows)


def test_evaluate_design_resolves_area_once(monkeypatch):
    import windrank.engine as engine

    calls = []
    real = engine.resolve_area

    def counting(d):
        calls.append(d)
        return real(d)

    monkeypatch.setattr(engine, "resolve_area", counting)
    ev = evaluate_design(AXIAL_FLUX)
    assert len(calls) == 1
    assert ev.swept_area == pytest.approx(np.pi * 1.3 ** 2)
