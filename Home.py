# ---------------- Home.py ----------------
# Import relevant libraries
import html
import logging

import streamlit as st
import pandas as pd
import plotly.express as px

from table_profiler import IngestError, overview, profile_table
from table_profiler.ingest import read_csv_table

logging.basicConfig(level=logging.INFO)

# Page config & title
st.set_page_config(page_title="Data Profiling Tool", layout="wide")
st.title("Data Profiling Tool")

st.markdown(
    """
Welcome to this data-profiling tool.
Upload a CSV to explore **completeness**, **cardinality** and **distribution**.

Use the **menu on the left** to switch between checks.
💡 Tip: Start by uploading a tidy CSV.
"""
)

FRIENDLY_TYPE = {
    "numeric": "Number",
    "date": "Date/Time",
    "string": "Text",
    "empty": "Empty",
}

TYPE_EXPLAINER = {
    "Number": "More than 90% of filled cells are numbers (e.g., 1, 42, -7.5).",
    "Date/Time": "More than 80% of filled cells are dates or times (e.g., 2020-12-31).",
    "Text": "Words, labels or codes, or a mix that is neither mostly numbers nor dates.",
    "Empty": "Every cell in the column is blank."
}

# ---------- Global CSS (polish) ----------
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

# ---------- Persist dataset across pages ----------
# A new upload replaces the table; every page recomputes its profile from it.
for key in ("table", "df", "filename"):
    st.session_state.setdefault(key, None)
st.session_state.setdefault("dropped_cols", 0)

# ---------- Uploader ----------
uploaded_file = st.file_uploader("Upload a CSV", type=["csv"], key="uploader")
st.caption("Note: Refresh webpage to clear CSV upload")

# If a new file is uploaded, parse and store in session
if uploaded_file is not None:
    try:
        table, df_new, dropped_cols_new = read_csv_table(uploaded_file.getvalue())
    except IngestError as e:
        st.error(f"Could not read this file: {e}")
        st.stop()
    st.session_state["table"] = table
    st.session_state["df"] = df_new
    st.session_state["dropped_cols"] = dropped_cols_new
    st.session_state["filename"] = uploaded_file.name

# ---------- Main content ----------
if st.session_state["table"] is None:
    st.info("Upload a CSV to enable the pages.")
    st.stop()

table = st.session_state["table"]
df = st.session_state["df"]
dropped_cols = st.session_state.get("dropped_cols", 0)

st.success(f"Dataset loaded: {st.session_state.get('filename', '(in memory)')}")

st.markdown(
    "Below is a **quick snapshot** of your dataset, showing the **first few rows**, "
    "its **size**, **columns**, and a **brief profiling summary** to help you get familiar "
    "with the data before running the checks."
)
st.dataframe(df.head())
st.write("Columns:", list(table.columns))
if dropped_cols:
    st.caption(f"Parsed with delimiter detection. Dropped {dropped_cols} empty/unnamed columns.")

profiles = profile_table(table)
summary_info = overview(table, profiles=profiles)

# ---- Headline numbers ----
c1, c2, c3, c4 = st.columns(4)
c1.metric("Rows", f"{summary_info.total_rows:,}")
c2.metric("Columns", f"{summary_info.total_columns:,}")
c3.metric("Missing cells", f"{summary_info.total_nulls:,}")
c4.metric("Duplicate rows", f"{summary_info.duplicate_rows:,}")

# ---- Profiling summary ----
st.subheader("Profiling summary")
st.markdown(
    "This table shows each column’s **inferred type** (number, date, text or empty), the **number of distinct values** "
    "(blank counts as one), the **number of missing values**, and a few **example values** to help spot issues quickly."
)
summary = pd.DataFrame({
    "Data Type": [FRIENDLY_TYPE[p.inferred_type.value] for p in profiles],
    "Distinct Values": [p.distinct_count for p in profiles],
    "Missing Values": [p.null_count for p in profiles],
    "Repeated Values": [p.repeated_value_count for p in profiles],
    "Examples": [", ".join(html.escape(v) for v in p.sample_values) for p in profiles],
}, index=[html.escape(p.name) for p in profiles])

# Add hover-tooltips for the user-friendly types
summary["Data Type"] = summary["Data Type"].apply(
    lambda nice: f"<abbr title='{TYPE_EXPLAINER.get(nice, 'No description')}'>{nice}</abbr>"
)
st.markdown(summary.to_html(escape=False), unsafe_allow_html=True)
st.caption(
    "Note: Repeated values counts filled cells that repeat a value seen earlier in the same column."
)

# ---- Type mix ----
st.subheader("Column types")
types_df = pd.DataFrame({
    "Type": [FRIENDLY_TYPE[t] for t in summary_info.type_distribution],
    "Columns": list(summary_info.type_distribution.values()),
})
fig = px.pie(types_df, names="Type", values="Columns", title="Columns by inferred type")
st.plotly_chart(fig, use_container_width=True)

# Run:
# 1) pip install -e .
# 2) streamlit run Home.py
