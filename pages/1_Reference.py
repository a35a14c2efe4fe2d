"""Conversion Reference Page.

Show a value in every unit of a category and plot a unit pair over a range.
"""

import streamlit as st
from unit_converter.config import CONVERSION_MODES, DEFAULT_MODE
from unit_converter.engine import convert, convert_all
from unit_converter.errors import ConversionError
from unit_converter.registry import get_category, list_categories
from pages.components.charts import create_conversion_curve, create_conversion_table

st.set_page_config(page_title="Reference | Unit Converter", page_icon="📚", layout="wide")
st.title("📚 Conversion Reference")

mode_descriptions = {
    "compat": "Same results as the converter form",
    "physical": "Source unit converted to the base unit first",
}

col1, col2, col3, col4 = st.columns(4)
with col1:
    category = st.selectbox(
        "Unit Type",
        list_categories(),
        format_func=lambda name: get_category(name).label,
    )
units = list(get_category(category).units)
with col2:
    from_unit = st.selectbox("From", units)
with col3:
    value = st.number_input("Value", value=1.0)
with col4:
    mode = st.selectbox("Mode", CONVERSION_MODES, index=CONVERSION_MODES.index(DEFAULT_MODE))
    st.caption(mode_descriptions.get(mode, ""))

try:
    results = convert_all(category, from_unit, value, mode)
except ConversionError as e:
    st.error(f"❌ {e}")
    st.stop()

st.markdown(f"### {value:g} {from_unit} in every {category} unit")
st.dataframe(create_conversion_table(results), hide_index=True, width="stretch")

st.divider()
st.markdown("### Conversion Curve")

col1, col2, col3 = st.columns(3)
with col1:
    to_unit = st.selectbox("To", units, index=min(1, len(units) - 1))
with col2:
    start = st.number_input("Start", value=0.0)
with col3:
    stop = st.number_input("Stop", value=100.0)

steps = 20
if stop <= start:
    st.warning("⚠️ Stop must be greater than start")
else:
    inputs = [start + (stop - start) * i / steps for i in range(steps + 1)]
    try:
        outputs = [convert(category, from_unit, to_unit, v, mode) for v in inputs]
    except ConversionError as e:
        st.error(f"❌ {e}")
    else:
        fig = create_conversion_curve(inputs, outputs, from_unit, to_unit)
        st.plotly_chart(fig, width="stretch")
