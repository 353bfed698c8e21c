# pages/02_Cardinality.py
import streamlit as st
import pandas as pd
import plotly.express as px

from table_profiler import count_distinct, count_nulls, duplicate_row_indices, find_duplicates, value_counts

st.set_page_config(page_title="Cardinality", layout="wide")
st.title("Cardinality")
st.markdown(
    """
This page looks at **how varied each column is**.
**Cardinality** tells you **how many different values** a column has — lots of different values looks like an ID, while just a few repeating values looks like a category.

Use it to spot **IDs/keys** (lots of different values), **categories/labels** (few repeating values), and **duplicates**.
"""
)

# Guard: dataset must exist
if st.session_state.get("table") is None:
    st.warning("No dataset loaded. Please go to Home and upload a CSV first.")
    st.stop()

table = st.session_state["table"]
df = st.session_state["df"]
n_rows = len(table)

# ---- Palette (Okabe–Ito bands for distinct ratio) ----
OKABE_ITO = {
    "blue": "#0072B2",
    "sky": "#56B4E9",
    "orange": "#E69F00",
    "vermillion": "#D55E00",
    "purple": "#CC79A7",
    "green": "#009E73",
    "yellow": "#F0E442",
    "black": "#000000",
}

def band_distinct_ratio(r):
    if r >= 0.90: return "High (key-like)"
    if r >= 0.10: return "Medium"
    return "Low (category-like)"

# Same hues as Completeness bands
CARD_COLOR_MAP = {
    "High (key-like)": OKABE_ITO["vermillion"],
    "Medium": OKABE_ITO["orange"],
    "Low (category-like)": OKABE_ITO["sky"],
}
BAND_ORDER = ["High (key-like)", "Medium", "Low (category-like)"]

# --- Column cardinality (table + bar) ---
st.subheader("Column cardinality")

# 1) Build the summary table
card = pd.DataFrame({
    "Column": list(table.columns),
    "Distinct": [d.distinct_count for d in count_distinct(table)],
    "Missing": [n.null_count for n in count_nulls(table)],
})
card["Distinct ratio"] = (card["Distinct"] / max(n_rows, 1)).round(4)
card["Band"] = card["Distinct ratio"].apply(band_distinct_ratio)
card = card.sort_values(by=["Distinct ratio", "Distinct"], ascending=[False, False], ignore_index=True)

# 2) Bar chart (first)
card["Distinct_label"] = card["Distinct"].map(lambda x: f"{x:,}")
fig = px.bar(
    card,
    x="Column", y="Distinct",
    color="Band",
    color_discrete_map=CARD_COLOR_MAP,
    category_orders={"Band": BAND_ORDER},
    hover_data=["Distinct ratio", "Missing"],
    title="Distinct count per column",
    text="Distinct_label"
)
fig.update_traces(textposition="outside", cliponaxis=False)
fig.update_layout(
    xaxis_tickangle=-45,
    legend_title_text="Distinctness band",
    uniformtext_minsize=8, uniformtext_mode="hide",
    yaxis_title="Distinct values",
)
st.plotly_chart(fig, use_container_width=True)
st.markdown("The bar chart above shows a quick view of how varied each column is.")

# 3) Table (under the chart)
st.markdown("The table below shows more detail of each column's cardinality.")
st.dataframe(card[["Column", "Distinct", "Missing", "Distinct ratio", "Band"]], use_container_width=True)

# 4) Definitions under the table
st.markdown(
    """
  **Definitions:**
- **Distinct values**: how many **different** values a column has. Blank cells count together as **one** value, and `1` and `1.0` are the same number.
- **Missing values**: how many rows are **blank** in that column.
- **Distinct ratio**: Distinct values ÷ Total rows — close to **1.0** looks like an **ID/key**; near **0** looks like a **category/label**.
"""
)
st.caption("💡 Tip: Very high ratios (≈1.0) often mean identifiers; very low ratios suggest categories or fixed pick-lists.")

# --- Duplicate rows ---
st.subheader("Duplicate rows")

dups = find_duplicates(table)
st.markdown(
    f"Duplicate rows (excluding first occurrence): "
    f"<span style='color:#D55E00; font-weight:700;'>{dups.duplicate_row_count}</span>"
    f" / {dups.total_row_count}",
    unsafe_allow_html=True
)

if dups.duplicate_row_count > 0:
    dup_positions = duplicate_row_indices(table)
    with st.expander("Preview duplicate rows"):
        preview = df.iloc[dup_positions[:50]]
        st.dataframe(preview, use_container_width=True)
        st.caption("Showing up to the first 50 duplicate rows (excluding the first occurrence).")

    dup_csv = df.iloc[dup_positions].to_csv(index=False).encode("utf-8")
    st.download_button("Download duplicate rows (CSV)", dup_csv, file_name="duplicate_rows.csv")
else:
    st.info("No exact duplicate rows found.")

# --- Value-frequency explorer ---
st.subheader("Column value frequency explorer")
st.markdown("Pick a column to see which values appear most often (helps confirm categories or spot odd codes).")
col_select = st.selectbox("Choose a column", options=list(table.columns))

if col_select:
    vc = pd.DataFrame([v.to_dict() for v in value_counts(table, col_select, limit=50)],
                      columns=["value", "count"])
    vc = vc.rename(columns={"value": col_select, "count": "Count"})
    vc["Share of rows (%)"] = (vc["Count"] / max(n_rows, 1) * 100).round(2)

    # Table first
    st.dataframe(vc, use_container_width=True)


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
