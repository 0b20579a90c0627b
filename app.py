from __future__ import annotations

from pathlib import Path
import sys

# --- MUST come before importing windrank ---
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from dataclasses import replace

import streamlit as st
import plotly.graph_objects as go

from windrank.catalog import REFERENCE_DESIGNS
from windrank.config import AIR_DENSITY, EvaluationConfig
from windrank.errors import WindRankError
from windrank.log import setup_logging
from windrank.ranking import peak_of, peak_winner, summarize
from windrank.tables import comparison_frame, outputs_frame, summary_frame

setup_logging()

st.set_page_config(page_title="Wind generator showdown", layout="wide")
st.title("🌬️ Wind generator showdown — which concept gives the most kW?")
st.caption(f"P = ½ · ρ · A · Cp · v³ with ρ = {AIR_DENSITY} kg/m³ for every design")

with st.expander("Model assumptions / notes"):
    st.markdown(
        """
- Ideal conditions: fixed Cp and TSR, no CFD or blade-element modelling.
- Multi-stage designs add mechanical output linearly across stages.
- Torque is reported as 0 at standstill.
        """
    )

# -------------------------
# Sidebar controls
# -------------------------
designs = []
with st.sidebar:
    st.header("Designs")
    for base in REFERENCE_DESIGNS:
        with st.expander(base.title or base.name):
            D = st.slider("Rotor diameter (m)", 0.5, 6.0, float(base.rotor_diameter), 0.1, key=f"{base.name}-D")
            cp = st.slider("Cp", 0.05, 0.59, float(base.power_coefficient), 0.01, key=f"{base.name}-cp")
            eta = st.slider("Generator efficiency", 0.5, 1.0, float(base.generator_efficiency), 0.01, key=f"{base.name}-eta")
            tsr = st.slider("TSR", 1.0, 12.0, float(base.tip_speed_ratio), 0.5, key=f"{base.name}-tsr")
            stages = st.number_input("Stages", 1, 8, int(base.stage_count), key=f"{base.name}-stages")
        designs.append(
            replace(
                base,
                rotor_diameter=D,
                power_coefficient=cp,
                generator_efficiency=eta,
                tip_speed_ratio=tsr,
                stage_count=int(stages),
            )
        )

cfg = EvaluationConfig()

try:
    result = summarize(designs, cfg)
except WindRankError as exc:
    st.error(str(exc))
    st.stop()

# -------------------------
# Headline
# -------------------------
top = result.headline
st.subheader(f"Winner at {top.final.speed_kmh:g} km/h: {top.design.title or top.design.name}")
st.write(f"{top.final.electrical_kw:.1f} kW electrical, {top.final.rpm:.0f} rpm, {top.final.torque_nm:.1f} N·m")

by_peak = peak_winner(result.evaluations)
if by_peak is not top:
    st.warning(
        f"Ranking by true peak picks {by_peak.design.name} instead; "
        "the headline compares the last speed point only."
    )

# -------------------------
# Design cards
# -------------------------
cols = st.columns(len(result.evaluations))
for col, ev in zip(cols, result.evaluations):
    with col:
        st.markdown(f"**{ev.design.title or ev.design.name}**")
        st.metric(f"Output ({ev.final.speed_kmh:g} km/h)", f"{ev.final.electrical_kw:.1f} kW")
        st.caption(f"Swept area {ev.swept_area:.2f} m² · {ev.design.stage_count} stage(s)")
        st.dataframe(outputs_frame(ev.outputs), hide_index=True, use_container_width=True)

# -------------------------
# Comparison
# -------------------------
st.subheader("Comparison")
df_cmp = comparison_frame(result.evaluations)
st.dataframe(df_cmp, use_container_width=True)

fig = go.Figure()
for ev in result.evaluations:
    fig.add_trace(go.Scatter(
        x=[r.speed_kmh for r in ev.outputs],
        y=[r.electrical_kw for r in ev.outputs],
        mode="lines+markers",
        name=ev.design.name,
    ))
fig.update_layout(
    title="Electrical output vs wind speed",
    xaxis_title="Wind speed (km/h)",
    yaxis_title="Electrical power (kW)",
    template="plotly_white",
)
st.plotly_chart(fig, use_container_width=True)

st.download_button(
    "⬇ Download comparison CSV",
    data=df_cmp.to_csv().encode("utf-8"),
    file_name="windrank_comparison.csv",
    mime="text/csv",
)

with st.expander("Ranking summary"):
    st.dataframe(summary_frame(result), hide_index=True, use_container_width=True)

# -------------------------
# Worked example (first design, 36 km/h)
# -------------------------
ref = result.evaluations[0]
rows = [r for r in ref.outputs if r.speed_kmh == 36] or [peak_of(ref.outputs)]
r = rows[0]
st.subheader(f"How the numbers are computed: {ref.design.name} at {r.speed_kmh:g} km/h")
st.markdown(
    "\n".join([
        f"1. **Conversion:** {r.speed_kmh:g} km/h ≈ {r.wind_ms:.2f} m/s",
        f"2. **Rotor area:** A ≈ {ref.swept_area:.2f} m²",
        f"3. **Mechanical power:** ½ · {cfg.air_density} · A · {ref.design.power_coefficient} · v³ "
        f"× {ref.design.stage_count} ≈ {r.mechanical_kw:.1f} kW",
        f"4. **Electrical output:** η = {ref.design.generator_efficiency:.0%} → {r.electrical_kw:.1f} kW",
        f"5. **Rotor speed:** TSR {ref.design.tip_speed_ratio:g} → {r.rpm:.0f} rpm, torque {r.torque_nm:.1f} N·m",
    ])
)

st.caption(
    "All results assume ideal conditions. Run detailed FEM and CFD before building a prototype."
)
