"""Streamlit frontend for the Unit Converter.

Main entry point for the multi-page Streamlit application.
"""

import logging

import streamlit as st

from unit_converter.config import LOG_FORMAT, LOG_LEVEL
from unit_converter.form import ConverterForm
from unit_converter.registry import get_category, list_categories
from pages.components.result_card import render_result_card

st.set_page_config(
    page_title="Unit Converter",
    page_icon="📏",
    layout="centered",
)

# Configure logging once per session
if 'logging_configured' not in st.session_state:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    st.session_state.logging_configured = True

if 'converter_form' not in st.session_state:
    st.session_state.converter_form = ConverterForm()

form = st.session_state.converter_form


# Widget callbacks keep the form model in sync before the script reruns.
# Widgets take their defaults from the form, so dropping a widget's state
# makes it show the form's value again.

def _forget_widgets(*keys):
    for key in keys:
        st.session_state.pop(key, None)


def _on_category_change():
    form.select_category(st.session_state.category_select)
    _forget_widgets("from_select", "to_select")


def _on_from_change():
    form.set_from_unit(st.session_state.from_select)


def _on_to_change():
    form.set_to_unit(st.session_state.to_select)


def _on_value_change():
    form.set_value(st.session_state.value_input)


def _on_convert():
    notification = form.submit()
    icon = "✅" if notification.ok else "⚠️"
    st.session_state.pending_toast = (notification.message, icon)


def _on_reset():
    form.reset()
    _forget_widgets("category_select", "from_select", "to_select", "value_input")


def _unit_index(units, unit):
    return units.index(unit) if unit in units else None


st.title("📏 Unit Converter")

categories = list_categories()
st.selectbox(
    "Unit Type",
    categories,
    index=categories.index(form.category),
    format_func=lambda name: get_category(name).label,
    key="category_select",
    on_change=_on_category_change,
)

units = form.unit_options()
col1, col2 = st.columns(2)
with col1:
    st.selectbox(
        "From",
        units,
        index=_unit_index(units, form.from_unit),
        placeholder="From unit",
        key="from_select",
        on_change=_on_from_change,
    )
with col2:
    st.selectbox(
        "To",
        units,
        index=_unit_index(units, form.to_unit),
        placeholder="To unit",
        key="to_select",
        on_change=_on_to_change,
    )

st.number_input(
    "Value",
    value=form.value,
    placeholder="Enter value",
    key="value_input",
    on_change=_on_value_change,
)

col1, col2 = st.columns([4, 1])
with col1:
    st.button("Convert", type="primary", width="stretch", key="convert_button", on_click=_on_convert)
with col2:
    st.button("↺ Reset", width="stretch", key="reset_button", on_click=_on_reset)

if 'pending_toast' in st.session_state:
    message, icon = st.session_state.pop('pending_toast')
    st.toast(message, icon=icon)

if form.result is not None:
    render_result_card(form.result)

st.markdown("---")
st.caption("💡 **Tip:** See the **Reference** page for a value in every unit of a category.")
