"""Result display components for Streamlit pages."""

import streamlit as st
from unit_converter.models import ConversionResult


def render_result_card(result: ConversionResult, title: str = "Converted Result"):
    """Render the converted value with its unit label.

    Args:
        result: ConversionResult to display
        title: Card title (default "Converted Result")
    """
    with st.container(border=True):
        st.markdown(f"#### {title}")
        st.markdown(f"Result: **:blue[{result.display_value}]** {result.unit}")
        if result.request is not None:
            req = result.request
            st.caption(f"{req.value:g} {req.from_unit} → {result.unit} ({req.category})")
