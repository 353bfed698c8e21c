# pages/03_Distribution.py
import streamlit as st
import pandas as pd
import altair as alt

from table_profiler import ColumnType, build_histogram, classify_columns
from table_profiler.histogram import numeric_values

st.set_page_config(page_title="Distribution", layout="wide")
st.title("Distribution")
st.markdown(
    """
This page shows **how values are spread** in your numeric columns.
Use it to spot **typical ranges**, **gaps** and **outliers**.
"""
)

# Guard
if st.session_state.get("table") is None:
    st.warning("No dataset loaded. Please go to Home and upload a CSV first.")
    st.stop()

table = st.session_state["table"]

# Okabe–Ito palette (same across the app)
OKI = {
    "blue": "#0072B2",
    "sky": "#56B4E9",
    "orange": "#E69F00",
    "vermillion": "#D55E00",
    "purple": "#CC79A7",
    "green": "#009E73",
    "yellow": "#F0E442",
    "black": "#000000",
}

# Only columns classified as numeric get a histogram
types = classify_columns(table)
num_cols = [c for c, t in types.items() if t is ColumnType.NUMERIC]

with st.sidebar:
    st.subheader("Display options")
    sel_num = st.multiselect("Numeric columns", options=num_cols, default=num_cols[:3])
    bins = st.slider("Bins", 4, 60, 16)
    logy = st.checkbox("Log Y-axis", value=False,
                       help="Helpful when counts vary a lot between bins.")

if not num_cols or not sel_num:
    st.info("No numeric columns found or selected.")
    st.stop()

# Short histogram explainer
st.markdown(
    "**What a histogram shows:** bars count how many rows fall into each value range (bin). "
    "Tall bars = common ranges; tiny bars = rare ranges. Every bin has the same width, "
    "running from the smallest to the largest value."
)
st.caption("💡 Tip: Use the sidebar to change the number of bins.")

for col in sel_num:
    hist_bins = build_histogram(table, col, bins)
    if not hist_bins:
        st.warning(f"‘{col}’ has no valid numeric values.")
        continue

    st.subheader(f"{col}")

    values = pd.Series(numeric_values(table, col))
    stats = values.describe(percentiles=[.05, .25, .5, .75, .95]).to_frame(name=col)
    st.dataframe(stats.T, use_container_width=True)

    hist_df = pd.DataFrame([b.to_dict() for b in hist_bins])
    hist_df["Range"] = [
        f"{lo:,.4g} – {hi:,.4g}" for lo, hi in zip(hist_df["lower_bound"], hist_df["upper_bound"])
    ]
    y_scale = alt.Scale(type="symlog") if logy else alt.Undefined

    hist = (
        alt.Chart(hist_df)
        .mark_bar(color=OKI["sky"])  # bars = sky
        .encode(
            x=alt.X("lower_bound:Q", title=col),
            x2="upper_bound:Q",
            y=alt.Y("count:Q", title="Count", scale=y_scale),
            tooltip=["Range", "count"]
        )
        .properties(title=f"Histogram: {col}")
    )
    st.altair_chart(hist, use_container_width=True)

    skipped = len(table) - len(values)
    if skipped:
        st.caption(f"{skipped:,} blank or non-numeric cells are left out of this chart.")

# --- Light CSS polish (keeps your theme) ---
PRIMARY = "#2E86DE"
st.markdown(f"""
<style>
h1, h2, h3 {{ color: #111111; }}
.stButton>button {{
  background:{PRIMARY}; color:white; border-radius:12px; border:0; padding:0.6rem 1rem;
}}
.stButton>button:hover {{ filter: brightness(0.92); }}
.block-container {{ padding-top: 2rem; }}
</style>
""", unsafe_allow_html=True)
