# pages/01_Completeness.py
# Import relevant libraries
import streamlit as st
import pandas as pd
import plotly.express as px

from table_profiler import count_nulls

st.set_page_config(page_title="Completeness", layout="wide")
st.title("Completeness")
st.markdown(
    """
This page shows **what’s missing and where**.
Use it to spot columns with gaps before you rely on them.
💡Tip: Sort the table by Missing % to focus on trouble spots.
"""
)

# Guard: dataset must exist
if st.session_state.get("table") is None:
    st.warning("No dataset loaded. Please go to Home and upload a CSV first.")
    st.stop()

table = st.session_state["table"]

# Colour constants
OKABE_ITO = {
    "blue": "#0072B2",
    "sky": "#56B4E9",
    "orange": "#E69F00",
    "vermillion": "#D55E00",
    "purple": "#CC79A7",
    "green": "#009E73",
    "yellow": "#F0E442",
    "black": "#000000"
}
COLOR_BANDS = {
    "0% (None)": "#EAEAEA",              # neutral grey for zero missing
    "Low (≤5%)": OKABE_ITO["sky"],
    "Moderate (5–20%)": OKABE_ITO["orange"],
    "High (20–50%)": OKABE_ITO["vermillion"],
    "Severe (>50%)": OKABE_ITO["purple"],
}
def _band(p):
    if p == 0: return "0% (None)"
    if p <= 5: return "Low (≤5%)"
    if p <= 20: return "Moderate (5–20%)"
    if p <= 50: return "High (20–50%)"
    return "Severe (>50%)"

# Column-level missingness (Plotly bar)
st.subheader("Missingness by column")
st.markdown(
    "This chart shows **how much data is missing in each column** as a percentage, so you can quickly spot the worst-affected columns."
)

# Worst columns first (display order only)
miss_tbl = pd.DataFrame([n.to_dict() for n in count_nulls(table)],
                        columns=["column", "null_count", "null_percent"])
miss_tbl = miss_tbl.rename(columns={"column": "Column", "null_count": "Missing", "null_percent": "Missing %"})
miss_tbl = miss_tbl.sort_values("Missing %", ascending=False, kind="stable", ignore_index=True)
miss_tbl["Missing %"] = miss_tbl["Missing %"].round(2)
miss_tbl["Band"] = miss_tbl["Missing %"].apply(_band)

if miss_tbl.empty:
    st.info("The dataset has no columns to check.")
    st.stop()

# Plot with Okabe–Ito bands and % labels
fig = px.bar(
    miss_tbl,
    x="Column",
    y="Missing %",
    color="Band",
    color_discrete_map=COLOR_BANDS,
    hover_data=["Missing"],
    title="Missing % per column"
)
fig.update_traces(texttemplate="%{y:.1f}%", textposition="outside", cliponaxis=False)
fig.update_layout(
    xaxis_tickangle=-45,
    uniformtext_minsize=10, uniformtext_mode="hide",
    legend_title_text="Missingness band"
)
st.plotly_chart(fig, use_container_width=True)

st.dataframe(miss_tbl, use_container_width=True)
st.caption(
    f"Percentages are out of **{len(table):,}** rows. "
    "Blank text, NA markers and unreadable numbers all count as missing."
)

# Download the summary
csv_bytes = miss_tbl.to_csv(index=False).encode("utf-8")
st.download_button("Download missingness summary (CSV)",
                   data=csv_bytes, file_name="missingness_by_column.csv")

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
