from __future__ import annotations

from windrank.catalog import AXIAL_FLUX
from windrank.engine import evaluate_design
from windrank.log import setup_logging
from windrank.plots import plot_rpm_torque
from windrank.ranking import peak_of
from windrank.tables import outputs_frame


def main() -> None:
    setup_logging()

    ev = evaluate_design(AXIAL_FLUX)

    print(f"{AXIAL_FLUX.name}: swept area {ev.swept_area:.3f} m^2")
    print(outputs_frame(ev.outputs).round(3))

    peak = peak_of(ev.outputs)
    print(f"Peak: {peak.electrical_kw:.2f} kW at {peak.speed_kmh:g} km/h")

    plot_rpm_torque(ev)


if __name__ == "__main__":
    main()
