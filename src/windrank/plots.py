from __future__ import annotations
from typing import Sequence
import matplotlib.pyplot as plt

from .engine import DesignEvaluation


def plot_power_curves(evaluations: Sequence[DesignEvaluation], show: bool = True):
    fig = plt.figure()
    for ev in evaluations:
        speeds = [r.speed_kmh for r in ev.outputs]
        plt.plot(speeds, [r.electrical_kw for r in ev.outputs], marker="o", label=ev.design.name)
    plt.xlabel("Wind speed (km/h)")
    plt.ylabel("Electrical power (kW)")
    plt.title("Electrical output vs wind speed")
    plt.legend()
    plt.grid(True)

    if show:
        plt.show()
    return fig


def plot_rpm_torque(ev: DesignEvaluation, show: bool = True):
    speeds = [r.speed_kmh for r in ev.outputs]

    fig, ax1 = plt.subplots()
    ax1.plot(speeds, [r.rpm for r in ev.outputs], marker="o", label="rpm")
    ax1.set_xlabel("Wind speed (km/h)")
    ax1.set_ylabel("Rotor speed (rpm)")
    ax1.grid(True)

    ax2 = ax1.twinx()
    ax2.plot(speeds, [r.torque_nm for r in ev.outputs], linestyle="--", marker="s", color="tab:orange", label="torque")
    ax2.set_ylabel("Shaft torque (N·m)")

    ax1.set_title(f"{ev.design.name}: rotor speed and torque")
    fig.tight_layout()

    if show:
        plt.show()
    return fig
